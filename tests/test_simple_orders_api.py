"""주문 요약 API 테스트 — V1~V4가 같은 주문 요약을 반환하는지 검증.

Order summary API tests — v1..v4 must return logically equivalent summaries.
Order dates are left out of the comparison: SQLite hands back naive
timestamps for the column projection in v4.
"""

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Address, Book, Member
from app.services.order_service import order_service
from tests.conftest import create_member


def _summary(order_id: str, name: str, status: str, address: dict | None) -> tuple:
    city = address["city"] if address else None
    return (order_id, name, status, city)


async def _place_orders(db: AsyncSession, member: Member, book: Book) -> tuple[str, str]:
    other: Member = await create_member(db, "userB", city="진주")
    first = await order_service.order(db, member.id, book.id, 1)
    second = await order_service.order(db, other.id, book.id, 2)
    await order_service.cancel_order(db, second)
    await db.commit()
    return str(first), str(second)


class TestSimpleOrders:
    """주문 요약 API 버전별 테스트."""

    async def test_versions_are_equivalent(self, client: AsyncClient, db: AsyncSession, member: Member, book: Book):
        """V1~V4 모두 같은 주문 ID, 회원 이름, 상태, 배송지를 반환."""
        first, second = await _place_orders(db, member, book)
        expected = {
            _summary(first, "회원1", "ORDER", {"city": "서울"}),
            _summary(second, "userB", "CANCEL", {"city": "진주"}),
        }

        v1 = (await client.get("/api/v1/simple-orders")).json()
        assert {
            _summary(o["id"], o["member"]["name"], o["status"], o["delivery"]["address"])
            for o in v1
        } == expected

        for version in ("v2", "v3", "v4"):
            res = await client.get(f"/api/{version}/simple-orders")
            assert res.status_code == 200
            assert {
                _summary(o["order_id"], o["name"], o["order_status"], o["address"])
                for o in res.json()
            } == expected

    async def test_v1_exposes_entity_graph(self, client: AsyncClient, db: AsyncSession, member: Member, book: Book):
        """V1 — 주문 상품, 상품, 총액까지 엔티티 그래프가 그대로 노출됨."""
        order_id = await order_service.order(db, member.id, book.id, 3)
        await db.commit()

        res = await client.get("/api/v1/simple-orders")
        assert res.status_code == 200
        order = res.json()[0]
        assert order["id"] == str(order_id)
        assert order["total_price"] == 30000
        assert order["order_items"][0]["count"] == 3
        assert order["order_items"][0]["item"]["dtype"] == "B"
        assert order["delivery"]["status"] == "READY"

    async def test_v4_projection_fields(self, client: AsyncClient, db: AsyncSession, member: Member, book: Book):
        """V4 — 다섯 필드만 담은 DTO."""
        await order_service.order(db, member.id, book.id, 1)
        await db.commit()

        res = await client.get("/api/v4/simple-orders")
        row = res.json()[0]
        assert set(row) == {"order_id", "name", "order_date", "order_status", "address"}
        assert row["address"] == {"city": "서울", "street": "경기", "zipcode": "123123"}

    async def test_empty(self, client: AsyncClient):
        """주문이 없으면 모든 버전이 빈 목록."""
        for version in ("v1", "v2", "v3", "v4"):
            res = await client.get(f"/api/{version}/simple-orders")
            assert res.status_code == 200
            assert res.json() == []

    async def test_empty_address_is_null_in_every_version(self, client: AsyncClient, db: AsyncSession, book: Book):
        """주소 없는 회원의 주문 — 모든 버전에서 배송지는 null."""
        lee = Member(name="lee", address=Address())
        db.add(lee)
        await db.commit()
        await order_service.order(db, lee.id, book.id, 1)
        await db.commit()

        v1 = (await client.get("/api/v1/simple-orders")).json()
        assert v1[0]["delivery"]["address"] is None
        assert v1[0]["member"]["address"] is None
        for version in ("v2", "v3", "v4"):
            res = await client.get(f"/api/{version}/simple-orders")
            assert res.json()[0]["address"] is None
