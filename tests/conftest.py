"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures.
Each test gets a fresh schema on its own engine (aiosqlite + StaticPool so
every connection sees the same in-memory database).
"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403 — register all models with metadata
from app.models import Address, Book, Member

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 테스트마다 스키마를 새로 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# 커밋해 두어야 API 실패 시 롤백되어도 픽스처 데이터가 남습니다.
# Committed so a rolled-back request does not take fixture rows with it.
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def member(db: AsyncSession) -> Member:
    """테스트 회원을 생성합니다."""
    m = Member(name="회원1", address=Address(city="서울", street="경기", zipcode="123123"))
    db.add(m)
    await db.commit()
    return m


@pytest_asyncio.fixture
async def book(db: AsyncSession) -> Book:
    """가격 10000, 재고 10의 테스트 도서를 생성합니다."""
    b = Book(name="test", price=10000, stock_quantity=10, author="kim", isbn="1234")
    db.add(b)
    await db.commit()
    return b


async def create_member(db: AsyncSession, name: str, city: str = "서울") -> Member:
    """이름과 도시로 회원을 만들어 커밋합니다."""
    m = Member(name=name, address=Address(city=city, street="1", zipcode="1111"))
    db.add(m)
    await db.commit()
    return m
