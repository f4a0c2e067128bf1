"""회원 REST API 라우터 — V1(엔티티 바인딩)과 V2(DTO) 엔드포인트.

Member REST API Router — V1 endpoints bind and return entity-shaped
schemas; V2 endpoints use dedicated request/response DTOs.

V1 문제점 (Why V1 is kept only as a counter-example):
    - API 검증 규칙이 엔티티 형태에 붙는다 (Validation rules live on the entity shape)
    - 엔티티가 바뀌면 API 스펙이 바뀐다 (Model changes leak into the API contract)
    - 컬렉션을 바로 반환하면 응답에 필드를 추가하기 어렵다
      (A bare list response cannot grow extra fields later)
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db, transaction
from app.models.address import Address
from app.models.member import Member
from app.schemas.member import (
    CreateMemberRequest,
    CreateMemberResponse,
    MemberDto,
    MemberEntityRequest,
    MemberEntityResponse,
    Result,
    UpdateMemberRequest,
    UpdateMemberResponse,
)
from app.services.member_service import member_service

router: APIRouter = APIRouter()


@router.post("/api/v1/members", response_model=CreateMemberResponse)
async def save_member_v1(
    data: MemberEntityRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CreateMemberResponse:
    """회원 등록 V1 — 요청 본문을 엔티티 형태로 받습니다.

    Sign up with a body shaped like the Member entity.
    """
    member = Member(
        name=data.name,
        address=data.address.to_value() if data.address is not None else Address(),
    )
    async with transaction(db):
        member_id: UUID = await member_service.join(db, member)
    return CreateMemberResponse(id=str(member_id))


@router.post("/api/v2/members", response_model=CreateMemberResponse)
async def save_member_v2(
    data: CreateMemberRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CreateMemberResponse:
    """회원 등록 V2 — 전용 요청 DTO를 사용합니다.

    Sign up with a dedicated request DTO; the API contract no longer
    follows the Member model.
    """
    member = Member(name=data.name, address=Address())
    async with transaction(db):
        member_id: UUID = await member_service.join(db, member)
    return CreateMemberResponse(id=str(member_id))


@router.patch("/api/v2/members/{member_id}", response_model=UpdateMemberResponse)
async def update_member_v2(
    member_id: UUID,
    data: UpdateMemberRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UpdateMemberResponse:
    """회원 이름 부분 수정 — 변경 감지로 반영합니다.

    Partially update a member (name only) through dirty checking,
    then read the member back for the response.
    """
    async with transaction(db):
        await member_service.update(db, member_id, data.name)
    member: Member = await member_service.find_one(db, member_id)
    return UpdateMemberResponse(id=str(member.id), name=member.name)


@router.get("/api/v1/members", response_model=list[MemberEntityResponse])
async def members_v1(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[MemberEntityResponse]:
    """회원 목록 V1 — 엔티티 필드를 모두 노출하고 목록을 그대로 반환합니다.

    List members exposing every entity column, as a bare list.
    """
    members: list[Member] = await member_service.find_members(db)
    return [MemberEntityResponse.model_validate(m) for m in members]


@router.get("/api/v2/members", response_model=Result[list[MemberDto]])
async def members_v2(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Result[list[MemberDto]]:
    """회원 목록 V2 — 필요한 필드만 DTO로 만들어 래퍼 객체에 담습니다.

    List members as DTOs wrapped in a result object.
    """
    members: list[Member] = await member_service.find_members(db)
    return Result[list[MemberDto]](data=[MemberDto(name=m.name) for m in members])
