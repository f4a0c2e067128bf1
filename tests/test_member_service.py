"""회원 서비스 테스트 — 회원 가입, 중복 검증, 조회, 이름 수정.

Member service tests — Signup, duplicate check, lookup, and name update.
"""

import uuid

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Address, Member
from app.repositories.member_repository import member_repository
from app.services.member_service import member_service
from app.utils.exceptions import DuplicateError, NotFoundError


class TestMemberJoin:
    """회원 가입 테스트."""

    async def test_join(self, db: AsyncSession):
        """회원 가입 후 ID로 같은 회원을 조회할 수 있음."""
        member = Member(name="kim", address=Address())

        save_id = await member_service.join(db, member)

        assert save_id == member.id
        assert await member_repository.get_by_id(db, save_id) is member

    async def test_join_duplicate_name(self, db: AsyncSession):
        """같은 이름으로 두 번 가입하면 두 번째는 실패."""
        member1 = Member(name="kim", address=Address())
        member2 = Member(name="kim", address=Address())

        first_id = await member_service.join(db, member1)

        with pytest.raises(DuplicateError) as exc_info:
            await member_service.join(db, member2)
        assert exc_info.value.status_code == 409
        assert "already exists" in exc_info.value.detail

        # 첫 번째 회원은 그대로 조회됨
        found = await member_service.find_one(db, first_id)
        assert found.name == "kim"
        assert len(await member_repository.find_by_name(db, "kim")) == 1


class TestMemberQuery:
    """회원 조회/수정 테스트."""

    async def test_find_members(self, db: AsyncSession):
        """전체 회원은 이름순."""
        await member_service.join(db, Member(name="lee", address=Address()))
        await member_service.join(db, Member(name="kim", address=Address()))

        members = await member_service.find_members(db)

        assert [m.name for m in members] == ["kim", "lee"]

    async def test_find_one_missing(self, db: AsyncSession):
        """없는 회원 조회 시 NotFoundError."""
        with pytest.raises(NotFoundError):
            await member_service.find_one(db, uuid.uuid4())

    async def test_update_name(self, db: AsyncSession, member: Member):
        """이름 변경이 변경 감지로 반영됨."""
        member_id = member.id
        await member_service.update(db, member_id, "new name")
        await db.commit()

        # 만료 후 속성 접근은 동기 로드가 되므로 ID를 미리 보관 — Keep the id; expired attributes cannot be read
        db.expire_all()
        found = await member_service.find_one(db, member_id)
        assert found.name == "new name"

    async def test_update_missing(self, db: AsyncSession):
        """없는 회원 수정 시 NotFoundError."""
        with pytest.raises(NotFoundError):
            await member_service.update(db, uuid.uuid4(), "x")
