from datetime import timedelta

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from finance_tracker.models.enums import WeekOverflowPolicy


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='app_')

    jwt_secret: SecretStr
    jwt_expires_in: timedelta = timedelta(days=7)

    app_name: str = "Finance Tracker API"
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:19006", "http://localhost:8081"]

    # Days 28-31 fall past the "Week 4" chart bucket
    week_overflow: WeekOverflowPolicy = WeekOverflowPolicy.CLAMP

    create_tables: bool = False
