from datetime import datetime
from typing import Annotated, Literal
from uuid import UUID

from annotated_types import MaxLen, MinLen
from pydantic import AliasChoices, EmailStr, Field

from finance_tracker.schemas.base import BaseSchema


class UserPrincipal(BaseSchema):
    user_id: UUID = Field(validation_alias=AliasChoices("user_id", "userId", "id"))


class UserRetrieveSchema(BaseSchema):
    id: UUID
    username: str
    email: EmailStr
    name: str
    profile_image: str | None = None
    join_date: datetime = Field(
        validation_alias=AliasChoices("created_at", "join_date", "joinDate")
    )


class AuthenticationResponseSchema(BaseSchema):
    access_token: str
    token_type: Literal["bearer"] = "bearer"
    # same JWT as access_token, for clients that read `token`
    token: str
    user: UserRetrieveSchema


class RegisterSchema(BaseSchema):
    username: Annotated[str, MinLen(3), MaxLen(64)]
    email: EmailStr
    name: Annotated[str, MinLen(1)]
    # bcrypt only looks at the first 72 bytes
    password: Annotated[str, MinLen(6), MaxLen(72)]


class LoginSchema(BaseSchema):
    username: str = Field(validation_alias=AliasChoices("username", "email"))
    password: str
