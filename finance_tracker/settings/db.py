from pydantic import PostgresDsn, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='DB_')

    host: str = "localhost"
    port: int = 5432
    database: str = "finance_tracker"
    username: str = "postgres"
    password: SecretStr = SecretStr("postgres")

    pool_size: int = 15
    max_overflow: int = 15
    echo: bool = False

    # Full SQLAlchemy URL, takes precedence over the parts above
    dsn: str | None = None

    @property
    def database_url(self) -> str:
        if self.dsn:
            return self.dsn
        return str(
            PostgresDsn.build(
                scheme="postgresql+asyncpg",
                username=self.username,
                password=self.password.get_secret_value(),
                host=self.host,
                port=self.port,
                path=self.database,
            )
        )

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")
