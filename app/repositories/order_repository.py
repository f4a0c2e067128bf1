"""주문 레포지토리 — 주문 저장, 상세 조회, 동적 검색, 페치 조인.

Order Repository — Persistence, detail loading, criteria search,
and the fetch-join query for orders.

Associations are never lazy-loaded implicitly: each query states which
relationships it loads, and callers only touch those.
"""

from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager, joinedload, selectinload

from app.config import settings
from app.models.member import Member
from app.models.order import Order, OrderItem
from app.repositories.base import BaseRepository
from app.schemas.order import OrderSearch


class OrderRepository(BaseRepository[Order]):
    """주문 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the orders table.
    """

    def __init__(self) -> None:
        super().__init__(Order)

    async def get_detail(
        self,
        db: AsyncSession,
        order_id: UUID,
    ) -> Order | None:
        """주문을 회원, 배송, 주문 상품, 상품과 함께 조회합니다.

        Retrieve an order with member, delivery, order items and
        each order item's Item loaded, which is what Order.cancel needs.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            order_id: 주문 ID (Order UUID)

        Returns:
            Order | None: 연관 엔티티가 로드된 주문 또는 None
                          (Order with associations loaded, or None)
        """
        query: Select = (
            select(Order)
            .options(
                joinedload(Order.member),
                joinedload(Order.delivery),
                selectinload(Order.order_items).selectinload(OrderItem.item),
            )
            .where(Order.id == order_id)
        )
        result = await db.execute(query)
        return result.unique().scalar_one_or_none()

    async def find_all_by_criteria(
        self,
        db: AsyncSession,
        order_search: OrderSearch,
        load_details: bool = False,
    ) -> list[Order]:
        """검색 조건으로 주문을 조회합니다.

        Search orders by member name (substring) and status; absent criteria
        are ignored. Results are capped at settings.ORDER_SEARCH_LIMIT.

        Without load_details only the order columns are loaded; callers must
        fetch member/delivery themselves (one round trip per row).

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            order_search: 검색 조건 (Search criteria)
            load_details: 회원/배송/주문상품까지 함께 로드할지 여부
                          (Also load member, delivery, order items and items)

        Returns:
            list[Order]: 주문 목록, 주문 일시순 (Orders ordered by order date)
        """
        query: Select = select(Order).join(Order.member)

        # 주문 상태 검색 — Status filter
        if order_search.order_status is not None:
            query = query.where(Order.status == order_search.order_status)

        # 회원 이름 검색 — Member name filter (contains)
        if order_search.member_name:
            query = query.where(Member.name.contains(order_search.member_name, autoescape=True))

        if load_details:
            query = query.options(
                contains_eager(Order.member),
                joinedload(Order.delivery),
                selectinload(Order.order_items).selectinload(OrderItem.item),
            )

        query = query.order_by(Order.order_date).limit(settings.ORDER_SEARCH_LIMIT)
        result = await db.execute(query)
        return list(result.unique().scalars().all())

    async def find_all_with_member_delivery(self, db: AsyncSession) -> list[Order]:
        """회원과 배송을 페치 조인으로 한 번에 조회합니다.

        Load orders together with member and delivery in a single query.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            list[Order]: 회원/배송이 로드된 주문 목록 (Orders with member and delivery)
        """
        query: Select = (
            select(Order)
            .join(Order.member)
            .join(Order.delivery)
            .options(contains_eager(Order.member), contains_eager(Order.delivery))
            .order_by(Order.order_date)
        )
        result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instance
order_repository: OrderRepository = OrderRepository()
