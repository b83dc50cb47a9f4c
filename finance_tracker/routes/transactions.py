import logging
from typing import Annotated
from uuid import UUID

from dishka import FromDishka
from dishka.integrations.fastapi import DishkaRoute
from fastapi import APIRouter, Query, Response
from starlette import status

from finance_tracker.deps.auth import CurrentUser, CurrentUserDependency
from finance_tracker.models import Transaction
from finance_tracker.models.enums import TransactionType
from finance_tracker.schemas.transactions import TransactionCreateSchema, TransactionSchema
from finance_tracker.services.filters import Paginated
from finance_tracker.services.transactions import (
    TransactionCreateInteractor,
    TransactionDeleteInteractor,
    TransactionRetrieveInteractor,
    TransactionUpdateInteractor,
    transaction_filters,
)

router = APIRouter(
    prefix="/transactions",
    tags=["transactions"],
    route_class=DishkaRoute,
    dependencies=[CurrentUserDependency],
)
logger = logging.getLogger(__name__)


@router.get("")
async def list_transactions(
    current_user: CurrentUser,
    service: FromDishka[TransactionRetrieveInteractor],
    page: Paginated,
    type_: Annotated[TransactionType | None, Query(alias="type")] = None,
    search: Annotated[str | None, Query(max_length=100)] = None,
) -> list[TransactionSchema]:
    transactions = await service.all(
        transaction_filters(current_user.id, type_=type_, search=search),
        page=page,
    )
    return [TransactionSchema.model_validate(item) for item in transactions]


@router.get("/{transaction_id}")
async def get_transaction(
    transaction_id: UUID,
    current_user: CurrentUser,
    service: FromDishka[TransactionRetrieveInteractor],
) -> TransactionSchema:
    transaction = await service.get(
        (Transaction.id == transaction_id) & (Transaction.user_id == current_user.id)
    )
    return TransactionSchema.model_validate(transaction)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_transaction(
    data: TransactionCreateSchema,
    current_user: CurrentUser,
    create: FromDishka[TransactionCreateInteractor],
) -> TransactionSchema:
    transaction = await create(current_user.id, data)
    return TransactionSchema.model_validate(transaction)


@router.put("/{transaction_id}")
async def update_transaction(
    transaction_id: UUID,
    data: TransactionCreateSchema,
    current_user: CurrentUser,
    update: FromDishka[TransactionUpdateInteractor],
) -> TransactionSchema:
    transaction = await update(current_user.id, transaction_id, data)
    return TransactionSchema.model_validate(transaction)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transaction(
    transaction_id: UUID,
    current_user: CurrentUser,
    delete: FromDishka[TransactionDeleteInteractor],
) -> Response:
    await delete(current_user.id, transaction_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
