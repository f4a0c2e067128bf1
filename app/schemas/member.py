"""회원 관련 Pydantic 요청/응답 스키마 정의.

Member Pydantic request/response schema definitions.
V1 endpoints bind the entity-shaped schemas; V2 endpoints use dedicated DTOs
so that the API contract survives changes to the Member model.
"""

import uuid
from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, StringConstraints, field_validator

from app.models.address import Address

T = TypeVar("T")

# 회원 이름 — 앞뒤 공백 제거 후 비어 있으면 안 됨 (Stripped, must not be blank)
MemberName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


# === 주소 (Address) ===

class AddressSchema(BaseModel):
    """주소 스키마 (Address value in requests and responses)."""

    model_config = ConfigDict(from_attributes=True)

    city: str | None = None  # 도시 (City)
    street: str | None = None  # 거리 (Street)
    zipcode: str | None = None  # 우편번호 (Zip code)

    def to_value(self) -> Address:
        """주소 값 객체로 변환합니다 (Convert to the Address value object)."""
        return Address(city=self.city, street=self.street, zipcode=self.zipcode)


def address_schema(address: Address | None) -> AddressSchema | None:
    """주소 값 객체를 스키마로 변환합니다. 비어 있으면 None.

    Convert an Address value to its schema; an empty address becomes None.
    """
    if address is None or address.is_empty():
        return None
    return AddressSchema(city=address.city, street=address.street, zipcode=address.zipcode)


def coerce_address(value: Any) -> Any:
    """엔티티에서 읽은 주소 값을 address_schema로 변환합니다 (field validator용).

    Before-validator for entity-shaped responses: an Address read from a
    model goes through address_schema so an empty address becomes None.
    """
    if isinstance(value, Address):
        return address_schema(value)
    return value


# === V1: 엔티티 형태 (Entity-shaped) ===

class MemberEntityRequest(BaseModel):
    """회원 엔티티를 그대로 바인딩하는 요청 스키마.

    Request body mirroring the Member entity column-for-column.
    Validation rules for the API end up living on the entity shape.

    Attributes:
        name: 회원 이름, 비어 있으면 안 됨 (Member name, must not be empty)
        address: 주소 (Address, optional)
    """

    name: MemberName
    address: AddressSchema | None = None


class MemberEntityResponse(BaseModel):
    """회원 엔티티를 그대로 노출하는 응답 스키마 (Member exposed as-is)."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    address: AddressSchema | None

    @field_validator("address", mode="before")
    @classmethod
    def empty_address_to_none(cls, value: Any) -> Any:
        return coerce_address(value)


# === V2: 전용 DTO (Dedicated DTOs) ===

class CreateMemberRequest(BaseModel):
    """회원 등록 요청 DTO.

    Attributes:
        name: 회원 이름 (Member name)
    """

    name: MemberName


class CreateMemberResponse(BaseModel):
    """회원 등록 응답 DTO (Identifier of the new member)."""

    id: str


class UpdateMemberRequest(BaseModel):
    """회원 수정 요청 DTO — 이름만 변경합니다 (Partial update: name only)."""

    name: MemberName


class UpdateMemberResponse(BaseModel):
    """회원 수정 응답 DTO."""

    id: str
    name: str


class MemberDto(BaseModel):
    """회원 목록 항목 DTO — 필요한 필드만 노출합니다 (Only what the client needs)."""

    name: str


class Result(BaseModel, Generic[T]):
    """목록 응답 래퍼 — 컬렉션을 바로 반환하지 않고 객체로 감쌉니다.

    Wrapper object for list responses so fields (e.g. count) can be added
    later without breaking clients.
    """

    data: T
