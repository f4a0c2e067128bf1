"""홈 페이지 — 회원/상품/주문 화면 링크.

Home page with links to the member, item, and order pages.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from app.api.web.layout import render

router: APIRouter = APIRouter()

HOME_BODY = """<h2>HELLO SHOP</h2>
<p>
<a class="btn" href="/members/new">회원 가입</a>
<a class="btn" href="/members">회원 목록</a>
<a class="btn" href="/items/new">상품 등록</a>
<a class="btn" href="/items">상품 목록</a>
<a class="btn" href="/order">상품 주문</a>
<a class="btn" href="/orders">주문 내역</a>
</p>"""


@router.get("/", response_class=HTMLResponse)
async def home() -> HTMLResponse:
    """홈 화면을 반환합니다."""
    return render("Hello Shop", HOME_BODY)
