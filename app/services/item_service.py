"""상품 서비스 — 상품 등록, 수정, 조회.

Item Service — Register, update and look up catalog items.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.item import Item
from app.repositories.item_repository import item_repository
from app.utils.exceptions import NotFoundError


class ItemService:
    """상품 관련 비즈니스 로직을 처리하는 서비스.

    Service handling item business logic.
    """

    async def save_item(self, db: AsyncSession, item: Item) -> UUID:
        """상품을 저장하고 ID를 반환합니다 (Persist an item, return its id)."""
        await item_repository.save(db, item)
        return item.id

    async def update_item(
        self,
        db: AsyncSession,
        item_id: UUID,
        name: str,
        price: int,
        stock_quantity: int,
    ) -> Item:
        """상품 정보를 수정합니다. 조회한 엔티티를 변경하면 flush 시 반영됩니다.

        Update name, price and stock of an item through dirty checking.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            item_id: 상품 ID (Item UUID)
            name: 상품명 (New name)
            price: 가격 (New price)
            stock_quantity: 재고 수량 (New stock quantity)

        Returns:
            Item: 수정된 상품 (Updated item)

        Raises:
            NotFoundError: 상품을 찾을 수 없을 때 (Item not found)
        """
        item: Item = await self.find_one(db, item_id)
        item.name = name
        item.price = price
        item.stock_quantity = stock_quantity
        await db.flush()
        return item

    async def find_items(self, db: AsyncSession) -> list[Item]:
        """전체 상품을 조회합니다 (All items)."""
        return await item_repository.find_all(db)

    async def find_one(self, db: AsyncSession, item_id: UUID) -> Item:
        """상품 하나를 조회합니다.

        Raises:
            NotFoundError: 상품을 찾을 수 없을 때 (Item not found)
        """
        item: Item | None = await item_repository.get_by_id(db, item_id)
        if item is None:
            raise NotFoundError("Item not found")
        return item


# 싱글턴 인스턴스 — Singleton instance
item_service: ItemService = ItemService()
