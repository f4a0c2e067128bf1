"""주문 서비스 — 주문 생성, 취소, 검색 비즈니스 로직.

Order Service — Business logic for placing, cancelling, and searching orders.
Also builds the order summaries served by the /simple-orders API versions.

Services flush but never commit; the calling router wraps each mutating
call in ``transaction(db)`` so a failure leaves no partial state behind.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.item import Item
from app.models.member import Member
from app.models.order import DELIVERY_STATUS_READY, Delivery, Order, OrderItem
from app.repositories.item_repository import item_repository
from app.repositories.member_repository import member_repository
from app.repositories.order_repository import order_repository
from app.repositories.order_simple_query_repository import order_simple_query_repository
from app.schemas.member import address_schema
from app.schemas.order import (
    OrderEntityResponse,
    OrderSearch,
    OrderSimpleQueryDto,
    SimpleOrderDto,
)
from app.utils.exceptions import BadRequestError, NotFoundError


class OrderService:
    """주문 관련 비즈니스 로직을 처리하는 서비스.

    Service handling order business logic.
    """

    def _to_simple_dto(self, order: Order) -> SimpleOrderDto:
        """주문 엔티티를 요약 DTO로 변환합니다. member와 delivery가 로드되어 있어야 합니다.

        Convert an Order whose member and delivery are loaded to a SimpleOrderDto.
        """
        return SimpleOrderDto(
            order_id=str(order.id),
            name=order.member.name,
            order_date=order.order_date,
            order_status=order.status,
            address=address_schema(order.delivery.address),
        )

    # ------------------------------------------------------------------
    # 주문 생성 / 취소 — Place / cancel
    # ------------------------------------------------------------------

    async def order(
        self,
        db: AsyncSession,
        member_id: UUID,
        item_id: UUID,
        count: int,
    ) -> UUID:
        """주문을 생성합니다.

        Place an order of ``count`` units of one item for one member.
        The delivery address is copied from the member; the stock is
        decremented when the order item is built.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            member_id: 주문 회원 ID (Ordering member UUID)
            item_id: 상품 ID (Item UUID)
            count: 주문 수량 (Quantity, must be positive)

        Returns:
            UUID: 생성된 주문 ID (New order id)

        Raises:
            BadRequestError: 수량이 1 미만일 때 (Count below 1)
            NotFoundError: 회원 또는 상품을 찾을 수 없을 때 (Member or item not found)
            NotEnoughStockError: 재고 부족 (Not enough stock)
        """
        if count < 1:
            raise BadRequestError("Order count must be at least 1")

        # 엔티티 조회 — Load member and item
        member: Member | None = await member_repository.get_by_id(db, member_id)
        if member is None:
            raise NotFoundError("Member not found")
        item: Item | None = await item_repository.get_by_id(db, item_id)
        if item is None:
            raise NotFoundError("Item not found")

        # 배송정보 생성 — Delivery takes a copy of the member's address
        delivery = Delivery(address=member.address, status=DELIVERY_STATUS_READY)

        # 주문상품 생성 — Stock is checked and decremented here
        order_item: OrderItem = OrderItem.create_order_item(item, item.price, count)

        # 주문 생성 — Build the aggregate; delivery and order items cascade on save
        order: Order = Order.create_order(member, delivery, order_item)

        await order_repository.save(db, order)
        return order.id

    async def cancel_order(self, db: AsyncSession, order_id: UUID) -> Order:
        """주문을 취소하고 재고를 복원합니다.

        Cancel an order and restore stock of its items.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            order_id: 주문 ID (Order UUID)

        Returns:
            Order: 취소된 주문 (Cancelled order)

        Raises:
            NotFoundError: 주문을 찾을 수 없을 때 (Order not found)
            IllegalStateError: 취소할 수 없는 주문 (Order cannot be cancelled)
        """
        order: Order = await self.find_one(db, order_id)
        order.cancel()
        await db.flush()
        return order

    # ------------------------------------------------------------------
    # 조회 — Queries
    # ------------------------------------------------------------------

    async def find_one(self, db: AsyncSession, order_id: UUID) -> Order:
        """주문 하나를 연관 엔티티와 함께 조회합니다.

        Raises:
            NotFoundError: 주문을 찾을 수 없을 때 (Order not found)
        """
        order: Order | None = await order_repository.get_detail(db, order_id)
        if order is None:
            raise NotFoundError("Order not found")
        return order

    async def find_orders(self, db: AsyncSession, order_search: OrderSearch) -> list[Order]:
        """검색 조건으로 주문을 조회합니다. 화면 표시에 필요한 연관 엔티티를 함께 로드합니다.

        Search orders with member, delivery and order items loaded for display.
        """
        return await order_repository.find_all_by_criteria(db, order_search, load_details=True)

    # ------------------------------------------------------------------
    # 주문 요약 — Order summaries (/simple-orders v1..v4)
    # ------------------------------------------------------------------

    async def find_order_entities(self, db: AsyncSession) -> list[OrderEntityResponse]:
        """V1: 주문 엔티티 그래프를 그대로 노출합니다.

        Return the whole entity graph. Every association the serializer
        reaches is force-loaded first, row by row.
        """
        orders: list[Order] = await order_repository.find_all_by_criteria(db, OrderSearch())
        for order in orders:
            # 연관 엔티티 강제 초기화 — Force-load each association explicitly
            await order.awaitable_attrs.member
            await order.awaitable_attrs.delivery
            for order_item in await order.awaitable_attrs.order_items:
                await order_item.awaitable_attrs.item
        return [OrderEntityResponse.model_validate(order) for order in orders]

    async def find_simple_orders(self, db: AsyncSession) -> list[SimpleOrderDto]:
        """V2: 주문을 조회한 뒤 행마다 회원과 배송을 따로 로드합니다 (1 + N 쿼리).

        Load orders, then fetch member and delivery per row (1 + N round trips).
        """
        orders: list[Order] = await order_repository.find_all_by_criteria(db, OrderSearch())
        result: list[SimpleOrderDto] = []
        for order in orders:
            await order.awaitable_attrs.member
            await order.awaitable_attrs.delivery
            result.append(self._to_simple_dto(order))
        return result

    async def find_simple_orders_fetch_join(self, db: AsyncSession) -> list[SimpleOrderDto]:
        """V3: 페치 조인으로 한 번에 로드한 뒤 DTO로 변환합니다.

        Load orders with member and delivery in one query, then map to DTOs.
        """
        orders: list[Order] = await order_repository.find_all_with_member_delivery(db)
        return [self._to_simple_dto(order) for order in orders]

    async def find_order_dtos(self, db: AsyncSession) -> list[OrderSimpleQueryDto]:
        """V4: 쿼리에서 DTO로 바로 조회합니다 (Project straight into DTOs)."""
        return await order_simple_query_repository.find_order_dtos(db)


# 싱글턴 인스턴스 — Singleton instance
order_service: OrderService = OrderService()
