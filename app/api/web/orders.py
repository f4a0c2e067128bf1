"""주문 화면 — 상품 주문 폼, 주문 내역 검색, 주문 취소.

Order pages — Order form, order list with search, and cancellation.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Form, Query
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.web.layout import error_message, esc, render
from app.database import get_db, transaction
from app.models.item import Item
from app.models.member import Member
from app.models.order import ORDER_STATUS_CANCEL, ORDER_STATUS_ORDER, Order
from app.schemas.order import OrderSearch
from app.services.item_service import item_service
from app.services.member_service import member_service
from app.services.order_service import order_service
from app.utils.exceptions import BadRequestError

router: APIRouter = APIRouter()


async def _order_form(db: AsyncSession, message: str | None = None) -> str:
    members: list[Member] = await member_service.find_members(db)
    items: list[Item] = await item_service.find_items(db)
    member_options: str = "".join(
        f'<option value="{esc(m.id)}">{esc(m.name)}</option>' for m in members
    )
    item_options: str = "".join(
        f'<option value="{esc(i.id)}">{esc(i.name)}</option>' for i in items
    )
    return f"""<h2>상품 주문</h2>
{error_message(message)}
<form method="post" action="/order">
<label>주문회원</label>
<select name="member_id"><option value="">회원선택</option>{member_options}</select>
<label>상품명</label>
<select name="item_id"><option value="">상품선택</option>{item_options}</select>
<label>주문수량</label>
<input name="count" type="number" min="1" required placeholder="주문 수량을 입력하세요">
<button type="submit">Submit</button>
</form>"""


@router.get("/order", response_class=HTMLResponse)
async def create_form(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> HTMLResponse:
    """주문 폼을 회원/상품 선택 목록과 함께 반환합니다."""
    return render("상품 주문", await _order_form(db))


@router.post("/order", response_model=None)
async def order(
    db: Annotated[AsyncSession, Depends(get_db)],
    member_id: UUID = Form(...),
    item_id: UUID = Form(...),
    count: int = Form(...),
) -> HTMLResponse | RedirectResponse:
    """주문을 생성하고 주문 내역으로 이동합니다.

    Place the order and redirect to the order list. Stock shortage or
    an invalid count re-renders the form with the reason; nothing is saved.
    """
    try:
        async with transaction(db):
            await order_service.order(db, member_id, item_id, count)
    except BadRequestError as exc:
        return render("상품 주문", await _order_form(db, exc.detail), status_code=exc.status_code)
    return RedirectResponse("/orders", status_code=303)


def _order_row(order: Order) -> str:
    # 주문 상품은 현재 주문당 1건 — One order line per order placed from this page
    first = order.order_items[0] if order.order_items else None
    cancel_button: str = ""
    if order.status == ORDER_STATUS_ORDER:
        cancel_button = (
            f'<form method="post" action="/orders/{esc(order.id)}/cancel">'
            f'<button class="btn-danger" type="submit">CANCEL</button></form>'
        )
    return (
        f"<tr><td>{esc(order.id)}</td><td>{esc(order.member.name)}</td>"
        f"<td>{esc(first.item.name if first else None)}</td>"
        f"<td>{esc(first.order_price if first else None)}</td>"
        f"<td>{esc(first.count if first else None)}</td>"
        f"<td>{esc(order.status)}</td>"
        f"<td>{esc(order.order_date.strftime('%Y-%m-%d %H:%M'))}</td>"
        f"<td>{cancel_button}</td></tr>"
    )


@router.get("/orders", response_class=HTMLResponse)
async def order_list(
    db: Annotated[AsyncSession, Depends(get_db)],
    member_name: str | None = Query(None),
    order_status: str | None = Query(None),
) -> HTMLResponse:
    """주문 내역을 검색 조건과 함께 반환합니다.

    Order list filtered by member name and status. An empty or unknown
    status value means "any status".
    """
    status_filter: str | None = order_status if order_status in (ORDER_STATUS_ORDER, ORDER_STATUS_CANCEL) else None
    order_search = OrderSearch(member_name=member_name or None, order_status=status_filter)
    orders: list[Order] = await order_service.find_orders(db, order_search)

    status_options: str = "".join(
        f'<option value="{s}"{" selected" if s == status_filter else ""}>{s}</option>'
        for s in (ORDER_STATUS_ORDER, ORDER_STATUS_CANCEL)
    )
    rows: str = "".join(_order_row(o) for o in orders)
    body: str = f"""<h2>주문 내역</h2>
<form class="inline" method="get" action="/orders">
<input name="member_name" value="{esc(member_name)}" placeholder="회원명">
<select name="order_status"><option value="">주문상태</option>{status_options}</select>
<button type="submit">검색</button>
</form>
<table>
<thead><tr><th>#</th><th>회원명</th><th>대표상품 이름</th><th>대표상품 주문가격</th>
<th>대표상품 주문수량</th><th>상태</th><th>일시</th><th></th></tr></thead>
<tbody>{rows}</tbody>
</table>"""
    return render("주문 내역", body)


@router.post("/orders/{order_id}/cancel", response_class=RedirectResponse)
async def cancel_order(
    order_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RedirectResponse:
    """주문을 취소하고 주문 내역으로 이동합니다."""
    async with transaction(db):
        await order_service.cancel_order(db, order_id)
    return RedirectResponse("/orders", status_code=303)
