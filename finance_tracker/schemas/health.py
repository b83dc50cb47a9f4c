from typing import Literal

from finance_tracker.schemas.base import BaseSchema


class HealthSchema(BaseSchema):
    status: Literal["ok", "error"]
    database: bool
