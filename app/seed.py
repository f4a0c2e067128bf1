"""초기 데이터 시드 스크립트 — 샘플 회원, 도서, 주문 생성.

Seed script — Creates sample members, books, and orders.
Run this script once to get data for the /simple-orders endpoints and pages.

Usage:
    python -m app.seed

Creates:
    - 2명 회원: userA(서울), userB(진주) (2 members)
    - 4권 도서: JPA1/JPA2 BOOK, SPRING1/SPRING2 BOOK (4 books)
    - 회원별 주문 1건, 주문당 주문상품 2건 (1 order per member, 2 lines each)
"""

import asyncio

from sqlalchemy import select

from app.database import async_session, engine, Base
from app.models import Address, Book, Delivery, Member, Order, OrderItem


def _create_member(name: str, city: str, street: str, zipcode: str) -> Member:
    return Member(name=name, address=Address(city=city, street=street, zipcode=zipcode))


def _create_book(name: str, price: int, stock_quantity: int) -> Book:
    return Book(name=name, price=price, stock_quantity=stock_quantity)


def _create_order(member: Member, *lines: tuple[Book, int]) -> Order:
    order_items: list[OrderItem] = [
        OrderItem.create_order_item(book, book.price, count) for book, count in lines
    ]
    delivery = Delivery(address=member.address)
    return Order.create_order(member, delivery, *order_items)


async def seed() -> None:
    """데이터베이스를 샘플 데이터로 시드합니다.

    Seed the database with sample data.
    Creates tables if they don't exist, then inserts two members,
    four books, and one order per member.

    Idempotent: 이미 시드된 경우 건너뜁니다 (Skips if already seeded).
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        # 이미 시드되었는지 확인 — 회원이 하나라도 있으면 건너뜀
        # (Check if already seeded by looking for any existing member)
        result = await db.execute(select(Member).limit(1))
        if result.scalar_one_or_none():
            print("Already seeded. Skipping.")
            return

        member_a: Member = _create_member("userA", "서울", "1", "1111")
        jpa1: Book = _create_book("JPA1 BOOK", 10000, 100)
        jpa2: Book = _create_book("JPA2 BOOK", 20000, 100)
        db.add_all([member_a, jpa1, jpa2])
        db.add(_create_order(member_a, (jpa1, 1), (jpa2, 2)))

        member_b: Member = _create_member("userB", "진주", "2", "2222")
        spring1: Book = _create_book("SPRING1 BOOK", 20000, 200)
        spring2: Book = _create_book("SPRING2 BOOK", 40000, 300)
        db.add_all([member_b, spring1, spring2])
        db.add(_create_order(member_b, (spring1, 3), (spring2, 4)))

        await db.commit()
        print(f"Seeded: members={member_a.id},{member_b.id}")


if __name__ == "__main__":
    asyncio.run(seed())
