import logging

from dishka import FromDishka
from dishka.integrations.fastapi import DishkaRoute
from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from finance_tracker.schemas.health import HealthSchema
from finance_tracker.routes.auth import router as auth_router
from finance_tracker.routes.profile import router as profile_router
from finance_tracker.routes.transactions import router as transactions_router

logger = logging.getLogger(__name__)

router = APIRouter(route_class=DishkaRoute)
router.include_router(auth_router)
router.include_router(profile_router)
router.include_router(transactions_router)


@router.get("/health")
async def health(session: FromDishka[AsyncSession]) -> HealthSchema:
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.warning("Health check: database is unreachable", exc_info=True)
        return HealthSchema(status="error", database=False)
    return HealthSchema(status="ok", database=True)
