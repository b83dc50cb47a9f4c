import contextlib
import logging

from dishka import AsyncContainer, Provider
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from finance_tracker.core.db import create_tables
from finance_tracker.deps import create_container
from finance_tracker.routes import router as api_router
from finance_tracker.services.exception_handler import register_exception_handlers
from finance_tracker.settings.app import AppSettings


logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    container: AsyncContainer = app.state.dishka_container
    settings = await container.get(AppSettings)
    if settings.create_tables:
        await create_tables(await container.get(AsyncEngine))
    logger.info("%s started", settings.app_name)
    yield
    await container.close()


def create_app(
    settings: AppSettings | None = None, *extra_providers: Provider
) -> FastAPI:
    settings = settings or AppSettings()
    container = create_container(*extra_providers, app_settings=settings)
    app = FastAPI(lifespan=lifespan, title=settings.app_name)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    setup_dishka(container, app=app)
    app.include_router(api_router)
    return app
