import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic_core import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette import status

from finance_tracker.services.errors import (
    BaseServiceError,
    NotAuthenticatedError,
    NotFoundError,
    PermissionDeniedError,
)

logger = logging.getLogger(__name__)


class DetailJsonExceptionHandler:
    def __init__(self, status_code: int):
        self.status_code = status_code

    async def __call__(self, request: Request, exc: BaseServiceError) -> JSONResponse:
        return JSONResponse({"detail": exc.detail}, status_code=self.status_code)


async def validation_error_exception_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": exc.errors(include_url=False, include_context=False)},
    )


async def storage_error_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    logger.exception(
        "Storage failure on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Storage is temporarily unavailable, retry later"},
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(
        PermissionDeniedError, DetailJsonExceptionHandler(status.HTTP_403_FORBIDDEN)
    )
    app.add_exception_handler(
        NotAuthenticatedError, DetailJsonExceptionHandler(status.HTTP_401_UNAUTHORIZED)
    )
    app.add_exception_handler(
        NotFoundError, DetailJsonExceptionHandler(status.HTTP_404_NOT_FOUND)
    )
    app.add_exception_handler(
        BaseServiceError, DetailJsonExceptionHandler(status.HTTP_400_BAD_REQUEST)
    )
    app.add_exception_handler(ValidationError, validation_error_exception_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_exception_handler)
