from datetime import UTC, datetime
from typing import Annotated
from uuid import UUID

from annotated_types import Ge, MinLen
from pydantic import FiniteFloat, field_validator

from finance_tracker.models.enums import TransactionType
from finance_tracker.schemas.base import BaseSchema


class TransactionCreateSchema(BaseSchema):
    name: Annotated[str, MinLen(1)]
    amount: Annotated[FiniteFloat, Ge(ge=0)]
    type: TransactionType
    date: datetime

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: datetime) -> datetime:
        # naive timestamps are taken as UTC; everything is stored in UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v.astimezone(UTC)


class TransactionSchema(TransactionCreateSchema):
    id: UUID
    user_id: UUID
    created_at: datetime
    updated_at: datetime
