"""회원 SQLAlchemy ORM 모델 정의.

Member SQLAlchemy ORM model definition.

Tables:
    - member: 회원 (Shop members with an embedded address)
"""

import uuid

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, composite, mapped_column, relationship

from app.database import Base
from app.models.address import Address, address_columns


class Member(Base):
    """회원 모델 — 주문을 하는 사용자.

    Member model — a customer who places orders.
    Identity is the id; the name is unique by business rule (checked in MemberService).

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 회원 이름 (Member name)
        address: 내장 주소 값 (Embedded address value)

    Relationships:
        orders: 회원의 주문 목록 (Orders placed by this member, read side only)
    """

    __tablename__ = "member"

    # 회원 고유 식별자 — Member unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 회원 이름 — Member display name (required)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # 주소 — city/street/zipcode 세 컬럼에 매핑 (Mapped onto three columns)
    address: Mapped[Address] = composite(Address, *address_columns())

    # 관계 — 주문은 Order.member가 외래키를 가짐 (Order owns the foreign key)
    orders = relationship("Order", back_populates="member")
