"""상품 레포지토리 — 상품 CRUD.

Item Repository — Persistence for catalog items (all subtypes).
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.item import Item
from app.repositories.base import BaseRepository


class ItemRepository(BaseRepository[Item]):
    """상품 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the item table.
    Queries against Item return the concrete subtype (Book, Album, Movie).
    """

    def __init__(self) -> None:
        super().__init__(Item)

    async def find_all(self, db: AsyncSession) -> list[Item]:
        """모든 상품을 이름순으로 조회합니다 (All items ordered by name)."""
        return list(await self.get_all(db, order_by=Item.name))


# 싱글턴 인스턴스 — Singleton instance
item_repository: ItemRepository = ItemRepository()
