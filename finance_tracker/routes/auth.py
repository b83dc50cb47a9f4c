from typing import Annotated

from dishka import FromDishka
from dishka.integrations.fastapi import DishkaRoute
from fastapi import APIRouter
from fastapi.params import Body
from starlette import status

from finance_tracker.deps.auth import CurrentUser
from finance_tracker.models import User
from finance_tracker.schemas.auth import (
    AuthenticationResponseSchema,
    LoginSchema,
    RegisterSchema,
    UserPrincipal,
    UserRetrieveSchema,
)
from finance_tracker.services.auth import UserLoginInteractor, UserRegisterInteractor
from finance_tracker.services.providers.protocols.token_provider import ITokenProvider

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


def _authentication_response(
    user: User, token_encoder: ITokenProvider
) -> AuthenticationResponseSchema:
    access_token = token_encoder.encode_token(UserPrincipal.model_validate(user))
    return AuthenticationResponseSchema(
        user=UserRetrieveSchema.model_validate(user),
        access_token=access_token,
        token=access_token,
    )


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    data: RegisterSchema,
    service: FromDishka[UserRegisterInteractor],
    token_encoder: FromDishka[ITokenProvider],
) -> AuthenticationResponseSchema:
    return _authentication_response(await service(data), token_encoder)


@router.post("/login")
async def login(
    data: Annotated[LoginSchema, Body()],
    service: FromDishka[UserLoginInteractor],
    token_encoder: FromDishka[ITokenProvider],
) -> AuthenticationResponseSchema:
    return _authentication_response(await service(data), token_encoder)


@router.get("/me")
async def get_me(user: CurrentUser) -> UserRetrieveSchema:
    return UserRetrieveSchema.model_validate(user)
