from dishka import FromDishka
from dishka.integrations.fastapi import DishkaRoute
from fastapi import APIRouter

from finance_tracker.deps.auth import CurrentUser
from finance_tracker.schemas.auth import UserRetrieveSchema
from finance_tracker.schemas.profile import (
    ChartDataSchema,
    ProfileSchema,
    ProfileUpdateSchema,
)
from finance_tracker.services.profile import ProfileInteractor
from finance_tracker.services.users import UpdateUserInteractor

router = APIRouter(prefix="/profile", tags=["profile"], route_class=DishkaRoute)


@router.get("")
async def get_profile(
    current_user: CurrentUser,
    service: FromDishka[ProfileInteractor],
) -> ProfileSchema:
    return await service.profile(current_user)


@router.put("")
async def update_profile(
    data: ProfileUpdateSchema,
    current_user: CurrentUser,
    update_user: FromDishka[UpdateUserInteractor],
) -> UserRetrieveSchema:
    user = await update_user(current_user, data)
    return UserRetrieveSchema.model_validate(user)


@router.get("/chart-data")
async def get_chart_data(
    current_user: CurrentUser,
    service: FromDishka[ProfileInteractor],
) -> ChartDataSchema:
    return await service.chart_data(current_user.id)
