import logging

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from finance_tracker.models import BaseModel
from finance_tracker.settings.db import DatabaseSettings

logger = logging.getLogger(__name__)


def new_engine(settings: DatabaseSettings) -> AsyncEngine:
    if settings.is_sqlite:
        return create_async_engine(settings.database_url, echo=settings.echo)
    return create_async_engine(
        settings.database_url,
        echo=settings.echo,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_pre_ping=True,
    )


def new_session_maker(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        engine, class_=AsyncSession, autoflush=False, expire_on_commit=False
    )


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as connection:
        await connection.run_sync(BaseModel.metadata.create_all)
    logger.info("Database schema is up to date")
