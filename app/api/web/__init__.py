"""서버 렌더링 화면 라우터 패키지 — 모든 HTML 화면 통합.

Server-rendered page router package — Aggregates every HTML page router
into a single router for inclusion in the FastAPI application.

Included routers:
    - home: 홈 (Home page)
    - members: 회원 가입/목록 (Member signup and list)
    - items: 상품 등록/목록/수정 (Item registration, list, edit)
    - orders: 상품 주문/주문 내역/취소 (Order form, order list, cancel)
"""

from fastapi import APIRouter

from app.api.web.home import router as home_router
from app.api.web.members import router as members_router
from app.api.web.items import router as items_router
from app.api.web.orders import router as orders_router

web_router: APIRouter = APIRouter()

web_router.include_router(home_router, tags=["Web: Home"])
web_router.include_router(members_router, tags=["Web: Members"])
web_router.include_router(items_router, tags=["Web: Items"])
web_router.include_router(orders_router, tags=["Web: Orders"])
