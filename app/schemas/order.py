"""주문 관련 Pydantic 스키마 정의.

Order-related Pydantic schema definitions.
Covers the order search criteria and the order summary shapes returned
by the four /simple-orders API versions.
"""

import uuid
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator

from app.schemas.member import AddressSchema, MemberEntityResponse, coerce_address


# === 검색 조건 (Search criteria) ===

class OrderSearch(BaseModel):
    """주문 검색 조건 — 모든 필드는 선택이며 AND로 결합됩니다.

    Order search criteria. Every field is optional; given fields are combined with AND.

    Attributes:
        member_name: 회원 이름 부분 일치 (Substring of the member name)
        order_status: 주문 상태 (ORDER or CANCEL)
    """

    member_name: str | None = None  # 회원 이름 부분 일치 (Member name contains)
    order_status: Literal["ORDER", "CANCEL"] | None = None  # 주문 상태 (Order status)


# === V1: 엔티티 형태 응답 (Entity-shaped response) ===

class ItemEntityResponse(BaseModel):
    """상품 엔티티 형태 응답 — 컬럼을 그대로 노출합니다.

    Item exposed column-for-column from the shared item table.
    """

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    dtype: str
    name: str
    price: int
    stock_quantity: int


class OrderItemEntityResponse(BaseModel):
    """주문 상품 엔티티 형태 응답 (Order line exposed as-is)."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    order_price: int
    count: int
    item: ItemEntityResponse


class DeliveryEntityResponse(BaseModel):
    """배송 엔티티 형태 응답 (Delivery exposed as-is)."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    address: AddressSchema | None
    status: str

    @field_validator("address", mode="before")
    @classmethod
    def empty_address_to_none(cls, value: Any) -> Any:
        return coerce_address(value)


class OrderEntityResponse(BaseModel):
    """주문 엔티티 형태 응답 — 연관 엔티티 전체가 노출됩니다.

    Whole order graph exposed as-is, including member, delivery,
    and order lines. Every schema change in the models leaks into the API.
    """

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    member: MemberEntityResponse
    delivery: DeliveryEntityResponse
    order_items: list[OrderItemEntityResponse]
    order_date: datetime
    status: str
    total_price: int


# === V2, V3: 엔티티 → DTO 변환 (Entity to DTO) ===

class SimpleOrderDto(BaseModel):
    """주문 요약 DTO — 엔티티를 조회한 뒤 변환합니다.

    Order summary built from a loaded Order entity.

    Attributes:
        order_id: 주문 UUID (Order identifier)
        name: 회원 이름 (Member name)
        order_date: 주문 일시 (Order timestamp)
        order_status: 주문 상태 (ORDER or CANCEL)
        address: 배송지 (Delivery address)
    """

    order_id: str
    name: str
    order_date: datetime
    order_status: str
    address: AddressSchema | None


# === V4: 쿼리에서 DTO로 바로 조회 (Query-level projection) ===

class OrderSimpleQueryDto(BaseModel):
    """주문 요약 DTO — 쿼리 결과 컬럼에서 바로 생성합니다.

    Order summary built straight from selected columns, no entity involved.
    """

    order_id: str
    name: str
    order_date: datetime
    order_status: str
    address: AddressSchema | None
