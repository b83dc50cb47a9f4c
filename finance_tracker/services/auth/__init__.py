import logging
import uuid

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from finance_tracker.models import User
from finance_tracker.schemas.auth import LoginSchema, RegisterSchema
from finance_tracker.services.auth.errors import UserAlreadyExists, WrongPasswordError
from finance_tracker.services.providers.protocols.password_encoder import IPasswordEncoder
from finance_tracker.services.users import RetrieveUserInteractor

logger = logging.getLogger(__name__)


class UserRegisterInteractor:
    def __init__(
        self,
        session: AsyncSession,
        password_encoder: IPasswordEncoder,
        retrieve_user_interactor: RetrieveUserInteractor,
    ):
        self.session = session
        self.password_encoder = password_encoder
        self.retrieve_user_interactor = retrieve_user_interactor

    async def __call__(self, data: RegisterSchema) -> User:
        user_exists = await self.retrieve_user_interactor.exists(
            or_(User.username == data.username, User.email == str(data.email))
        )

        if user_exists:
            raise UserAlreadyExists()

        user = User(
            id=uuid.uuid4(),
            username=data.username,
            email=str(data.email),
            name=data.name,
            password=self.password_encoder.hash_password(data.password),
        )

        try:
            self.session.add(user)
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise UserAlreadyExists()

        logger.info("New user registered (username: %s)", user.username)

        return user


class UserLoginInteractor:
    def __init__(
        self,
        password_encoder: IPasswordEncoder,
        retrieve_user_interactor: RetrieveUserInteractor,
    ):
        self.password_encoder = password_encoder
        self.retrieve_user_interactor = retrieve_user_interactor

    async def __call__(self, data: LoginSchema) -> User:
        user = await self.retrieve_user_interactor.get(
            or_(User.username == data.username, User.email == data.username)
        )
        if not user:
            logger.debug("Login attempt for unknown user %s", data.username)
            raise WrongPasswordError()

        if not self.password_encoder.verify(data.password, user.password):
            logger.debug("Wrong password for user %s", data.username)
            raise WrongPasswordError()
        logger.info("User logged in (username: %s)", user.username)
        return user
