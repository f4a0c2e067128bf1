"""주소 값 타입 — 회원과 배송에 내장되는 composite 값 객체.

Address value type embedded into Member and Delivery rows
as three columns (city, street, zipcode) via SQLAlchemy ``composite``.
"""

from dataclasses import dataclass

from sqlalchemy import String
from sqlalchemy.orm import MappedColumn, mapped_column


@dataclass(frozen=True)
class Address:
    """주소 값 객체 — 불변, 식별자 없음.

    Immutable address value object. Two addresses with the same fields are equal.

    Attributes:
        city: 도시 (City)
        street: 거리 (Street)
        zipcode: 우편번호 (Zip code)
    """

    city: str | None = None
    street: str | None = None
    zipcode: str | None = None

    def is_empty(self) -> bool:
        """모든 필드가 비어 있는지 확인합니다 (True when every field is None)."""
        return self.city is None and self.street is None and self.zipcode is None


def address_columns() -> tuple[MappedColumn, MappedColumn, MappedColumn]:
    """주소 composite에 사용할 세 컬럼을 생성합니다.

    Build the three nullable columns backing an Address composite.
    A fresh set is needed per mapped class.
    """
    return (
        mapped_column("city", String(100), nullable=True),
        mapped_column("street", String(255), nullable=True),
        mapped_column("zipcode", String(20), nullable=True),
    )
