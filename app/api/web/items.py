"""상품 화면 — 도서 등록, 상품 목록, 상품 수정.

Item pages — Book registration, item list, and item edit form.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Form
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.web.layout import esc, render
from app.database import get_db, transaction
from app.models.item import Book, Item
from app.services.item_service import item_service

router: APIRouter = APIRouter()

BOOK_FORM = """<h2>상품 등록</h2>
<form method="post" action="/items/new">
<label>상품명</label>
<input name="name" required placeholder="이름을 입력하세요">
<label>가격</label>
<input name="price" type="number" min="0" required placeholder="가격을 입력하세요">
<label>수량</label>
<input name="stock_quantity" type="number" min="0" required placeholder="수량을 입력하세요">
<label>저자</label>
<input name="author" placeholder="저자를 입력하세요">
<label>ISBN</label>
<input name="isbn" placeholder="ISBN을 입력하세요">
<button type="submit">Submit</button>
</form>"""


@router.get("/items/new", response_class=HTMLResponse)
async def create_form() -> HTMLResponse:
    """도서 등록 폼을 반환합니다."""
    return render("상품 등록", BOOK_FORM)


@router.post("/items/new", response_class=RedirectResponse)
async def create(
    db: Annotated[AsyncSession, Depends(get_db)],
    name: str = Form(..., min_length=1),
    price: int = Form(..., ge=0),
    stock_quantity: int = Form(..., ge=0),
    author: str = Form(""),
    isbn: str = Form(""),
) -> RedirectResponse:
    """도서를 등록하고 상품 목록으로 이동합니다.

    Register a book and redirect to the item list.
    """
    book = Book(
        name=name,
        price=price,
        stock_quantity=stock_quantity,
        author=author or None,
        isbn=isbn or None,
    )
    async with transaction(db):
        await item_service.save_item(db, book)
    return RedirectResponse("/items", status_code=303)


@router.get("/items", response_class=HTMLResponse)
async def item_list(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> HTMLResponse:
    """상품 목록을 반환합니다."""
    items: list[Item] = await item_service.find_items(db)
    rows: str = "".join(
        f"<tr><td>{esc(i.id)}</td><td>{esc(i.name)}</td><td>{esc(i.price)}</td>"
        f"<td>{esc(i.stock_quantity)}</td>"
        f'<td><a class="btn" href="/items/{esc(i.id)}/edit">수정</a></td></tr>'
        for i in items
    )
    body: str = f"""<h2>상품 목록</h2>
<table>
<thead><tr><th>#</th><th>상품명</th><th>가격</th><th>재고수량</th><th></th></tr></thead>
<tbody>{rows}</tbody>
</table>"""
    return render("상품 목록", body)


@router.get("/items/{item_id}/edit", response_class=HTMLResponse)
async def update_item_form(
    item_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> HTMLResponse:
    """상품 수정 폼을 반환합니다."""
    item: Item = await item_service.find_one(db, item_id)
    body: str = f"""<h2>상품 수정</h2>
<form method="post" action="/items/{esc(item.id)}/edit">
<label>상품명</label>
<input name="name" required value="{esc(item.name)}">
<label>가격</label>
<input name="price" type="number" min="0" required value="{esc(item.price)}">
<label>수량</label>
<input name="stock_quantity" type="number" min="0" required value="{esc(item.stock_quantity)}">
<button type="submit">Submit</button>
</form>"""
    return render("상품 수정", body)


@router.post("/items/{item_id}/edit", response_class=RedirectResponse)
async def update_item(
    item_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    name: str = Form(..., min_length=1),
    price: int = Form(..., ge=0),
    stock_quantity: int = Form(..., ge=0),
) -> RedirectResponse:
    """상품을 수정하고 상품 목록으로 이동합니다.

    Update the item through the service (dirty checking) and redirect.
    """
    async with transaction(db):
        await item_service.update_item(db, item_id, name, price, stock_quantity)
    return RedirectResponse("/items", status_code=303)
