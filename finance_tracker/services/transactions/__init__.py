import logging
from uuid import UUID

from dishka import Provider, Scope, provide
from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from finance_tracker.models.enums import TransactionType
from finance_tracker.models.transaction import Transaction
from finance_tracker.schemas.transactions import TransactionCreateSchema
from finance_tracker.services.filters import FilterType, PaginatedSchema, apply_pagination
from finance_tracker.services.transactions.errors import TransactionNotFound

logger = logging.getLogger(__name__)

ORDERING_MAPPING = {
    "date": Transaction.date,
    "amount": Transaction.amount,
    "name": Transaction.name,
}


def transaction_filters(
    user_id: UUID,
    type_: TransactionType | None = None,
    search: str | None = None,
) -> FilterType:
    """Caller-scoped filter; ``search`` matches the name case-insensitively."""
    conditions = [Transaction.user_id == user_id]
    if type_ is not None:
        conditions.append(Transaction.type == type_)
    if search:
        conditions.append(Transaction.name.icontains(search, autoescape=True))
    return and_(*conditions)


class TransactionRetrieveInteractor:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def all(
        self, filters: FilterType | None = None, page: PaginatedSchema | None = None
    ) -> list[Transaction]:
        """Matching transactions, newest first unless ``page.ordering`` is set."""
        query = select(Transaction)
        if filters is not None:
            query = query.where(filters)
        query = apply_pagination(
            query,
            page or PaginatedSchema(),
            default_ordering=[Transaction.date.desc(), Transaction.created_at.desc()],
            ordering_mapping=ORDERING_MAPPING,
        )
        return list(await self.session.scalars(query))

    async def chronological(self, filters: FilterType) -> list[Transaction]:
        """Every matching transaction, oldest first."""
        transactions = await self.session.scalars(
            select(Transaction)
            .where(filters)
            .order_by(Transaction.date, Transaction.created_at)
        )
        return list(transactions)

    async def get(self, filters: FilterType) -> Transaction:
        transaction = await self.session.scalar(
            select(Transaction).where(filters).limit(1)
        )
        if transaction is None:
            raise TransactionNotFound()
        return transaction


class TransactionCreateInteractor:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def __call__(
        self, user_id: UUID, data: TransactionCreateSchema
    ) -> Transaction:
        transaction = Transaction(**data.model_dump(), user_id=user_id)
        self.session.add(transaction)
        await self.session.commit()
        logger.info(
            "Transaction %s created (user_id: %s, type: %s)",
            transaction.id,
            user_id,
            transaction.type,
        )
        return transaction


class TransactionUpdateInteractor:
    def __init__(self, session: AsyncSession, retriever: TransactionRetrieveInteractor):
        self.session = session
        self.retriever = retriever

    async def __call__(
        self, user_id: UUID, transaction_id: UUID, data: TransactionCreateSchema
    ) -> Transaction:
        transaction = await self.retriever.get(
            (Transaction.id == transaction_id) & (Transaction.user_id == user_id)
        )
        for field, value in data.model_dump().items():
            setattr(transaction, field, value)
        await self.session.commit()
        logger.info("Transaction %s updated (user_id: %s)", transaction_id, user_id)
        return transaction


class TransactionDeleteInteractor:
    def __init__(self, session: AsyncSession, retriever: TransactionRetrieveInteractor):
        self.session = session
        self.retriever = retriever

    async def __call__(self, user_id: UUID, transaction_id: UUID) -> None:
        transaction = await self.retriever.get(
            (Transaction.id == transaction_id) & (Transaction.user_id == user_id)
        )
        await self.session.delete(transaction)
        await self.session.commit()
        logger.info("Transaction %s deleted (user_id: %s)", transaction_id, user_id)


class TransactionServicesProvider(Provider):
    scope = Scope.REQUEST

    retrieve = provide(TransactionRetrieveInteractor)
    create = provide(TransactionCreateInteractor)
    update = provide(TransactionUpdateInteractor)
    delete = provide(TransactionDeleteInteractor)
