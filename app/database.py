"""데이터베이스 엔진, 세션, 트랜잭션 경계 설정 모듈.

Database engine, session, and transaction boundary module.
Sets up the async SQLAlchemy engine, session factory, and ORM base class,
and provides the explicit transaction block used by mutating endpoints.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncAttrs, AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app.config import settings

# 비동기 데이터베이스 엔진 — Async database engine (asyncpg driver)
# pool_pre_ping=True: 커넥션 풀에서 꺼낸 연결의 유효성을 사전 확인 (Validates connections before use)
engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
)

# 비동기 세션 팩토리 — Async session factory
# expire_on_commit=False: 커밋 후에도 객체 속성 접근 가능 (Allows attribute access after commit without refresh)
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(AsyncAttrs, DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스.

    Declarative base class for all ORM models.
    AsyncAttrs exposes ``obj.awaitable_attrs.<relationship>`` so that an
    unloaded association is fetched only by an explicit await.
    """

    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """비동기 데이터베이스 세션을 생성하고 요청 종료 시 닫습니다.

    FastAPI dependency that yields an async database session.
    The session is closed after the request completes; anything not
    committed by then is rolled back.

    Yields:
        AsyncSession: SQLAlchemy 비동기 세션 인스턴스 (Async session instance)
    """
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()


@asynccontextmanager
async def transaction(db: AsyncSession) -> AsyncGenerator[AsyncSession, None]:
    """변경 작업 하나를 원자적 트랜잭션으로 감쌉니다.

    Wrap one mutating operation in an all-or-nothing transaction.
    Commits when the block exits normally and rolls back on any exception,
    which is then re-raised.

    Usage:
        async with transaction(db):
            order_id = await order_service.order(db, member_id, item_id, count)

    Args:
        db: 비동기 데이터베이스 세션 (Async database session)

    Yields:
        AsyncSession: 같은 세션 (The same session)
    """
    try:
        yield db
    except Exception:
        await db.rollback()
        raise
    else:
        await db.commit()
