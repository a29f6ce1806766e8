import asyncio
import logging
import os
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

# In-memory by default: the store is rebuilt and reseeded on every start.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
SQL_ECHO = os.getenv("SQL_ECHO", "0") == "1"


def build_engine(url: str = DATABASE_URL, echo: bool = SQL_ECHO) -> AsyncEngine:
    if url.startswith("sqlite") and ":memory:" in url:
        # every session must see the same in-memory database
        return create_async_engine(
            url,
            echo=echo,
            poolclass=StaticPool,
        )
    return create_async_engine(url, echo=echo)


# Create engine
engine = build_engine()

# Create session factory
async_session_maker = sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)

# Base declarative
Base = declarative_base()


async def init_db(bind: AsyncEngine) -> None:
    """Create a fresh schema on ``bind`` and load the sample catalogue."""
    from .seed import seed_products

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Created tables: %s", ", ".join(Base.metadata.tables))

    factory = sessionmaker(bind, expire_on_commit=False, class_=AsyncSession)
    async with factory() as session:
        count = await seed_products(session)
    logger.info("Seeded %d products", count)


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    # one shared connection underneath: a single unit of work at a time
    lock: asyncio.Lock = request.app.state.db_lock
    async with lock:
        async with async_session_maker() as session:
            yield session
