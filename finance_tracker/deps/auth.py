import logging
from typing import Annotated

from dishka import FromDishka, Provider, Scope, provide
from dishka.integrations.fastapi import inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from finance_tracker.models import User
from finance_tracker.services.auth import (
    UserLoginInteractor,
    UserRegisterInteractor,
)
from finance_tracker.services.users import RetrieveUserInteractor
from finance_tracker.services.auth.errors import AuthenticationError
from finance_tracker.services.providers.protocols.token_provider import ITokenProvider


oauth2_scheme = HTTPBearer(auto_error=False)
logger = logging.getLogger(__name__)


class CurrentUserFinder:
    def __init__(
        self,
        token_encoder: ITokenProvider,
        retrieve_user_interactor: RetrieveUserInteractor,
    ):
        self.token_encoder = token_encoder
        self.retrieve_user_interactor = retrieve_user_interactor

    async def __call__(self, token: HTTPAuthorizationCredentials | None) -> User:
        if not token or not token.credentials:
            raise AuthenticationError("Token not found")
        try:
            principal = self.token_encoder.decode_token(token.credentials)
        except Exception:
            logger.debug("Failed to decode token", exc_info=True)
            raise AuthenticationError("Invalid token")
        db_user = await self.retrieve_user_interactor.get(User.id == principal.user_id)
        if not db_user:
            logger.debug("Token refers to a missing user %s", principal.user_id)
            raise AuthenticationError()
        return db_user


@inject
async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(oauth2_scheme)],
    get_user: FromDishka[CurrentUserFinder],
) -> User:
    return await get_user(credentials)


CurrentUserDependency = Depends(get_current_user)
CurrentUser = Annotated[User, CurrentUserDependency]


class AuthServicesProvider(Provider):
    scope = Scope.REQUEST

    register = provide(UserRegisterInteractor)
    login = provide(UserLoginInteractor)
    current_user = provide(CurrentUserFinder)
