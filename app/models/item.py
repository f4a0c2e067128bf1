"""상품 SQLAlchemy ORM 모델 정의 — 단일 테이블 상속.

Item SQLAlchemy ORM model definitions using single-table inheritance.
Book, Album, and Movie share the ``item`` table and are told apart
by the ``dtype`` discriminator column.

Tables:
    - item: 상품 (Catalog items: B=Book, A=Album, M=Movie)
"""

import uuid

from sqlalchemy import CheckConstraint, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.utils.exceptions import NotEnoughStockError


class Item(Base):
    """상품 모델 — 재고를 가진 판매 상품의 공통 부모.

    Common parent of all sellable items. Never instantiated directly.

    Invariant: stock_quantity >= 0 at all times.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        dtype: 하위 타입 구분자 (Subtype discriminator)
        name: 상품명 (Item name)
        price: 가격 (Unit price)
        stock_quantity: 재고 수량 (Units in stock)
    """

    __tablename__ = "item"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 하위 타입 구분자 — Discriminator ("B", "A", "M")
    dtype: Mapped[str] = mapped_column(String(31), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint("stock_quantity >= 0", name="ck_item_stock_non_negative"),
    )
    __mapper_args__ = {"polymorphic_on": "dtype"}

    def add_stock(self, quantity: int) -> None:
        """재고를 늘립니다 (Increase stock by quantity)."""
        self.stock_quantity += quantity

    def remove_stock(self, quantity: int) -> None:
        """재고를 줄입니다. 부족하면 재고를 건드리지 않고 예외를 던집니다.

        Decrease stock by quantity.

        Raises:
            NotEnoughStockError: 남은 재고보다 많이 요청한 경우
                                 (Requested more than what is in stock)
        """
        rest_stock: int = self.stock_quantity - quantity
        if rest_stock < 0:
            raise NotEnoughStockError("need more stock")
        self.stock_quantity = rest_stock


class Book(Item):
    """도서 (Book)."""

    author: Mapped[str | None] = mapped_column(String(255), nullable=True)
    isbn: Mapped[str | None] = mapped_column(String(50), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "B"}


class Album(Item):
    """앨범 (Album)."""

    artist: Mapped[str | None] = mapped_column(String(255), nullable=True)
    etc: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "A"}


class Movie(Item):
    """영화 (Movie)."""

    director: Mapped[str | None] = mapped_column(String(255), nullable=True)
    actor: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "M"}
