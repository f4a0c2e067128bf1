"""화면 테스트 — 회원 가입, 상품 등록/수정, 상품 주문, 주문 내역/취소.

Server-rendered page tests — Member signup, item registration and edit,
order form, order list and cancellation.
Requests that fail roll the shared session back, so fixtures are refreshed
before their attributes are read again.
"""

import uuid

from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Book, Item, Member, Order
from app.services.order_service import order_service
from tests.conftest import create_member


async def _count(db: AsyncSession, model: type) -> int:
    return (await db.execute(select(func.count()).select_from(model))).scalar() or 0


class TestHome:
    """홈 화면 테스트."""

    async def test_home(self, client: AsyncClient):
        """홈 화면에 메뉴 링크가 있음."""
        res = await client.get("/")
        assert res.status_code == 200
        assert "HELLO SHOP" in res.text
        assert 'href="/members/new"' in res.text
        assert 'href="/orders"' in res.text


class TestMemberPages:
    """회원 화면 테스트."""

    async def test_create_form(self, client: AsyncClient):
        """회원 가입 폼."""
        res = await client.get("/members/new")
        assert res.status_code == 200
        assert 'name="zipcode"' in res.text

    async def test_create_member(self, client: AsyncClient, db: AsyncSession):
        """가입 후 홈으로 이동, 회원 목록에 표시."""
        res = await client.post("/members/new", data={
            "name": "userA", "city": "서울", "street": "1", "zipcode": "1111",
        })
        assert res.status_code == 303
        assert res.headers["location"] == "/"
        assert await _count(db, Member) == 1

        listing = await client.get("/members")
        assert "userA" in listing.text
        assert "1111" in listing.text

    async def test_create_member_empty_name(self, client: AsyncClient, db: AsyncSession):
        """이름이 비면 폼을 다시 보여주고 저장하지 않음."""
        res = await client.post("/members/new", data={"name": "  ", "city": "서울"})
        assert res.status_code == 400
        assert "회원 이름은 필수 입니다" in res.text
        assert 'value="서울"' in res.text
        assert await _count(db, Member) == 0

    async def test_create_member_duplicate(self, client: AsyncClient, db: AsyncSession, member: Member):
        """중복 이름이면 409로 폼을 다시 보여줌."""
        res = await client.post("/members/new", data={"name": "회원1"})
        assert res.status_code == 409
        assert "Member already exists" in res.text
        assert await _count(db, Member) == 1


class TestItemPages:
    """상품 화면 테스트."""

    async def test_create_book(self, client: AsyncClient, db: AsyncSession):
        """도서 등록 후 상품 목록으로 이동."""
        res = await client.post("/items/new", data={
            "name": "JPA1", "price": "10000", "stock_quantity": "100",
            "author": "kim", "isbn": "1234",
        })
        assert res.status_code == 303
        assert res.headers["location"] == "/items"

        book = (await db.execute(select(Book))).scalar_one()
        assert book.name == "JPA1"
        assert book.dtype == "B"
        assert book.author == "kim"

        listing = await client.get("/items")
        assert "JPA1" in listing.text
        assert f"/items/{book.id}/edit" in listing.text

    async def test_create_book_negative_price(self, client: AsyncClient, db: AsyncSession):
        """음수 가격은 422."""
        res = await client.post("/items/new", data={
            "name": "JPA1", "price": "-1", "stock_quantity": "1",
        })
        assert res.status_code == 422
        assert await _count(db, Item) == 0

    async def test_edit_item(self, client: AsyncClient, book: Book):
        """수정 폼에 현재 값, 제출 시 변경 반영."""
        form = await client.get(f"/items/{book.id}/edit")
        assert form.status_code == 200
        assert 'value="test"' in form.text

        res = await client.post(f"/items/{book.id}/edit", data={
            "name": "test2", "price": "12000", "stock_quantity": "7",
        })
        assert res.status_code == 303
        assert book.name == "test2"
        assert book.price == 12000
        assert book.stock_quantity == 7

    async def test_edit_missing_item(self, client: AsyncClient):
        """없는 상품 수정 폼은 404."""
        res = await client.get(f"/items/{uuid.uuid4()}/edit")
        assert res.status_code == 404


class TestOrderPages:
    """주문 화면 테스트."""

    async def test_order_form(self, client: AsyncClient, member: Member, book: Book):
        """주문 폼에 회원과 상품 선택 목록."""
        res = await client.get("/order")
        assert res.status_code == 200
        assert f'value="{member.id}"' in res.text
        assert f'value="{book.id}"' in res.text

    async def test_order(self, client: AsyncClient, db: AsyncSession, member: Member, book: Book):
        """주문 후 주문 내역으로 이동, 재고 차감."""
        res = await client.post("/order", data={
            "member_id": str(member.id), "item_id": str(book.id), "count": "2",
        })
        assert res.status_code == 303
        assert res.headers["location"] == "/orders"
        assert book.stock_quantity == 8
        assert await _count(db, Order) == 1

    async def test_order_not_enough_stock(self, client: AsyncClient, db: AsyncSession, member: Member, book: Book):
        """재고 초과 주문은 사유와 함께 폼을 다시 보여주고 아무것도 저장하지 않음."""
        book_id = book.id
        res = await client.post("/order", data={
            "member_id": str(member.id), "item_id": str(book_id), "count": "11",
        })
        assert res.status_code == 400
        assert "need more stock" in res.text

        await db.refresh(book)
        assert book.stock_quantity == 10
        assert await _count(db, Order) == 0

    async def test_order_list_and_search(self, client: AsyncClient, db: AsyncSession, book: Book):
        """회원 이름과 주문 상태로 주문 내역 검색."""
        kim = await create_member(db, "kim")
        lee = await create_member(db, "lee")
        await order_service.order(db, kim.id, book.id, 1)
        lee_order = await order_service.order(db, lee.id, book.id, 1)
        await order_service.cancel_order(db, lee_order)
        await db.commit()

        everything = await client.get("/orders")
        assert "<td>kim</td>" in everything.text
        assert "<td>lee</td>" in everything.text

        by_name = await client.get("/orders", params={"member_name": "ki"})
        assert "<td>kim</td>" in by_name.text
        assert "<td>lee</td>" not in by_name.text

        cancelled = await client.get("/orders", params={"order_status": "CANCEL"})
        assert "<td>lee</td>" in cancelled.text
        assert "<td>kim</td>" not in cancelled.text
        # 취소된 주문에는 취소 버튼 없음 — No cancel button on cancelled rows
        assert f"/orders/{lee_order}/cancel" not in cancelled.text

        any_status = await client.get("/orders", params={"order_status": ""})
        assert "<td>kim</td>" in any_status.text
        assert "<td>lee</td>" in any_status.text

    async def test_cancel_order(self, client: AsyncClient, db: AsyncSession, member: Member, book: Book):
        """취소 버튼으로 주문 취소, 재고 복원."""
        order_id = await order_service.order(db, member.id, book.id, 2)
        await db.commit()

        listing = await client.get("/orders")
        assert f"/orders/{order_id}/cancel" in listing.text

        res = await client.post(f"/orders/{order_id}/cancel")
        assert res.status_code == 303
        assert res.headers["location"] == "/orders"

        order = await order_service.find_one(db, order_id)
        assert order.status == "CANCEL"
        assert book.stock_quantity == 10

    async def test_cancel_order_twice(self, client: AsyncClient, db: AsyncSession, member: Member, book: Book):
        """이미 취소된 주문 재취소는 400."""
        order_id = await order_service.order(db, member.id, book.id, 2)
        await order_service.cancel_order(db, order_id)
        await db.commit()

        res = await client.post(f"/orders/{order_id}/cancel")
        assert res.status_code == 400
        assert res.json()["detail"] == "Order is already cancelled"
