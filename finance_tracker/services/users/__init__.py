import logging

from dishka import Provider, Scope, provide
from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from finance_tracker.models import User
from finance_tracker.schemas.profile import ProfileUpdateSchema
from finance_tracker.services.users.errors import UserAlreadyExists
from finance_tracker.services.filters import FilterType

logger = logging.getLogger(__name__)


class RetrieveUserInteractor:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def exists(self, query: FilterType) -> bool:
        value = await self.session.scalar(exists(User).select().where(query))
        return bool(value)

    async def get(self, query: FilterType) -> User | None:
        return await self.session.scalar(select(User).where(query).limit(1))


class UpdateUserInteractor:
    def __init__(
        self,
        session: AsyncSession,
        retrieve_user_interactor: RetrieveUserInteractor,
    ):
        self.session = session
        self.retrieve_user_interactor = retrieve_user_interactor

    async def __call__(self, user: User, data: ProfileUpdateSchema) -> User:
        changes = data.model_dump(exclude_unset=True)
        email = changes.get("email")
        if email is not None and email != user.email:
            email_taken = await self.retrieve_user_interactor.exists(
                (User.email == email) & (User.id != user.id)
            )
            if email_taken:
                raise UserAlreadyExists()

        for field, value in changes.items():
            if field in ("name", "email") and value is None:
                continue
            setattr(user, field, value)

        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise UserAlreadyExists()

        logger.info("Profile updated (user_id: %s, fields: %s)", user.id, sorted(changes))
        return user


class UserServicesProvider(Provider):
    scope = Scope.REQUEST

    retrieve = provide(RetrieveUserInteractor)
    update = provide(UpdateUserInteractor)
