import logging
from uuid import UUID

from dishka import Provider, Scope, provide
from pydantic import TypeAdapter

from finance_tracker.models import Transaction, User
from finance_tracker.schemas.auth import UserRetrieveSchema
from finance_tracker.schemas.profile import (
    ChartDataSchema,
    ProfileSchema,
    ProfileStatsSchema,
)
from finance_tracker.schemas.transactions import TransactionSchema
from finance_tracker.services.profile.aggregation import (
    build_chart_data,
    compute_profile_stats,
)
from finance_tracker.services.transactions import TransactionRetrieveInteractor
from finance_tracker.settings.app import AppSettings

logger = logging.getLogger(__name__)

_transactions_adapter = TypeAdapter(list[TransactionSchema])


class ProfileInteractor:
    def __init__(
        self,
        retriever: TransactionRetrieveInteractor,
        settings: AppSettings,
    ):
        self.retriever = retriever
        self.settings = settings

    async def _transactions(self, user_id: UUID) -> list[TransactionSchema]:
        transactions = await self.retriever.chronological(
            Transaction.user_id == user_id
        )
        return _transactions_adapter.validate_python(transactions, from_attributes=True)

    async def profile(self, user: User) -> ProfileSchema:
        transactions = await self._transactions(user.id)
        stats = compute_profile_stats(transactions)
        return ProfileSchema(
            **UserRetrieveSchema.model_validate(user).model_dump(),
            stats=ProfileStatsSchema.model_validate(stats),
        )

    async def chart_data(self, user_id: UUID) -> ChartDataSchema:
        transactions = await self._transactions(user_id)
        logger.info(
            "Building chart data for user %s from %d transactions",
            user_id,
            len(transactions),
        )
        chart = build_chart_data(transactions, overflow=self.settings.week_overflow)
        return ChartDataSchema.model_validate(chart)


class ProfileServicesProvider(Provider):
    scope = Scope.REQUEST

    profile = provide(ProfileInteractor)
