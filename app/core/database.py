import logging
from typing import AsyncGenerator, List

from fastapi import Request
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class Database:
    """Storage engine handle: opened once at startup, closed once at shutdown"""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.session_factory = async_sessionmaker(
            bind=engine,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_url(cls, url: str, echo: bool = False, **engine_kwargs) -> "Database":
        return cls(create_async_engine(url, echo=echo, **engine_kwargs))

    async def create_all(self) -> None:
        """Create missing tables (Alembic migrations are the source of truth in production)"""
        # Models must be registered on Base.metadata before create_all
        import app.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def table_names(self) -> List[str]:
        async with self.engine.connect() as conn:
            return await conn.run_sync(lambda sync_conn: sorted(inspect(sync_conn).get_table_names()))

    async def close(self) -> None:
        await self.engine.dispose()
        logger.info("Database connection closed")


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session bound to the application's database handle"""
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        yield session
