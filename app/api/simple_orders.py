"""주문 요약 REST API 라우터 — 다대일/일대일 연관 조회 최적화 단계별 버전.

Order summary REST API Router — Four versions of the same read endpoint,
showing how the *-to-one associations (Order → Member, Order → Delivery)
are loaded.

    - V1: 엔티티 직접 노출 (Entity graph exposed as-is; do not use)
    - V2: 엔티티 조회 후 DTO 변환, 행마다 연관 로드 (DTOs, 1 + N queries)
    - V3: 페치 조인 후 DTO 변환 (DTOs, one fetch-join query)
    - V4: 쿼리에서 DTO로 바로 조회 (Projection straight into DTOs; least reusable)
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.order import OrderEntityResponse, OrderSimpleQueryDto, SimpleOrderDto
from app.services.order_service import order_service

router: APIRouter = APIRouter()


@router.get("/api/v1/simple-orders", response_model=list[OrderEntityResponse])
async def orders_v1(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderEntityResponse]:
    """V1. 주문 엔티티 그래프를 그대로 반환합니다.

    Return the order entities with every association force-loaded.
    """
    return await order_service.find_order_entities(db)


@router.get("/api/v2/simple-orders", response_model=list[SimpleOrderDto])
async def orders_v2(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[SimpleOrderDto]:
    """V2. 엔티티를 DTO로 변환합니다 — 주문 1번 + 회원 N번 + 배송 N번 조회.

    Map entities to DTOs; member and delivery are fetched per order.
    """
    return await order_service.find_simple_orders(db)


@router.get("/api/v3/simple-orders", response_model=list[SimpleOrderDto])
async def orders_v3(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[SimpleOrderDto]:
    """V3. 페치 조인으로 쿼리 1번에 로드한 뒤 DTO로 변환합니다.

    Map entities loaded with a single fetch-join query to DTOs.
    """
    return await order_service.find_simple_orders_fetch_join(db)


@router.get("/api/v4/simple-orders", response_model=list[OrderSimpleQueryDto])
async def orders_v4(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderSimpleQueryDto]:
    """V4. 필요한 컬럼만 선택해 DTO로 바로 조회합니다.

    Select only the summary columns and build DTOs directly.
    """
    return await order_service.find_order_dtos(db)
