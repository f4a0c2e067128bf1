"""주문 요약 조회 전용 레포지토리 — 쿼리에서 DTO로 바로 조회.

Order summary query repository — Projects query columns straight into
OrderSimpleQueryDto. Kept apart from OrderRepository because it is shaped
by one API response rather than by the Order entity.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.address import Address
from app.models.member import Member
from app.models.order import Delivery, Order
from app.schemas.member import address_schema
from app.schemas.order import OrderSimpleQueryDto


class OrderSimpleQueryRepository:
    """주문 요약 DTO 조회 레포지토리.

    Repository returning OrderSimpleQueryDto rows from a single query
    that selects only the five summary fields.
    """

    async def find_order_dtos(self, db: AsyncSession) -> list[OrderSimpleQueryDto]:
        """주문 요약 목록을 한 번의 쿼리로 조회합니다.

        Retrieve order summaries with one query selecting only the needed columns.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            list[OrderSimpleQueryDto]: 주문 요약 목록, 주문 일시순
                                       (Order summaries ordered by order date)
        """
        delivery_columns = Delivery.__table__.c
        query: Select = (
            select(
                Order.id,
                Member.name,
                Order.order_date,
                Order.status,
                delivery_columns.city,
                delivery_columns.street,
                delivery_columns.zipcode,
            )
            .join(Order.member)
            .join(Order.delivery)
            .order_by(Order.order_date)
        )
        result = await db.execute(query)
        return [
            OrderSimpleQueryDto(
                order_id=str(order_id),
                name=name,
                order_date=order_date,
                order_status=status,
                address=address_schema(Address(city=city, street=street, zipcode=zipcode)),
            )
            for order_id, name, order_date, status, city, street, zipcode in result.all()
        ]


# 싱글턴 인스턴스 — Singleton instance
order_simple_query_repository: OrderSimpleQueryRepository = OrderSimpleQueryRepository()
