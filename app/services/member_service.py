"""회원 서비스 — 회원 가입, 조회, 수정 비즈니스 로직.

Member Service — Business logic for signup, lookup, and name update.
Services flush but never commit; the calling router owns the transaction.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.member import Member
from app.repositories.member_repository import member_repository
from app.utils.exceptions import DuplicateError, NotFoundError


class MemberService:
    """회원 관련 비즈니스 로직을 처리하는 서비스.

    Service handling member business logic.
    """

    async def join(self, db: AsyncSession, member: Member) -> UUID:
        """회원 가입 — 같은 이름의 회원이 있으면 거부합니다.

        Sign up a member. Member names are unique.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member: 저장할 회원 엔티티 (Member entity to persist)

        Returns:
            UUID: 새 회원 ID (New member id)

        Raises:
            DuplicateError: 같은 이름의 회원이 이미 존재할 때
                            (A member with the same name already exists)
        """
        await self._validate_duplicate_member(db, member)
        await member_repository.save(db, member)
        return member.id

    async def _validate_duplicate_member(self, db: AsyncSession, member: Member) -> None:
        # 중복 회원 검증 — Reject duplicate names
        exists: bool = await member_repository.exists(db, {"name": member.name})
        if exists:
            raise DuplicateError("Member already exists")

    async def find_members(self, db: AsyncSession) -> list[Member]:
        """전체 회원을 조회합니다 (All members)."""
        return await member_repository.find_all(db)

    async def find_one(self, db: AsyncSession, member_id: UUID) -> Member:
        """회원 한 명을 조회합니다.

        Raises:
            NotFoundError: 회원을 찾을 수 없을 때 (Member not found)
        """
        member: Member | None = await member_repository.get_by_id(db, member_id)
        if member is None:
            raise NotFoundError("Member not found")
        return member

    async def update(self, db: AsyncSession, member_id: UUID, name: str) -> Member:
        """회원 이름을 변경합니다. 변경 감지로 반영됩니다.

        Change the member's name. The loaded entity is mutated and flushed;
        there is no explicit save call.

        Raises:
            NotFoundError: 회원을 찾을 수 없을 때 (Member not found)
        """
        member: Member = await self.find_one(db, member_id)
        member.name = name
        await db.flush()
        return member


# 싱글턴 인스턴스 — Singleton instance
member_service: MemberService = MemberService()
