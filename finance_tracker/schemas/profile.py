from pydantic import EmailStr

from finance_tracker.schemas.auth import UserRetrieveSchema
from finance_tracker.schemas.base import BaseSchema


class BucketSetSchema(BaseSchema):
    labels: list[str]
    income: list[float]
    expenses: list[float]


class ChartDataSchema(BaseSchema):
    all: BucketSetSchema
    monthly: BucketSetSchema
    weekly: BucketSetSchema


class ProfileStatsSchema(BaseSchema):
    total_transactions: int
    total_income: float
    total_expenses: float
    savings_rate: str


class ProfileSchema(UserRetrieveSchema):
    stats: ProfileStatsSchema


class ProfileUpdateSchema(BaseSchema):
    name: str | None = None
    email: EmailStr | None = None
    profile_image: str | None = None
