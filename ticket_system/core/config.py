# ticket_system/core/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    APP_NAME: str = "Ticket System API"
    APP_DESC: str = "Support tickets and users with JWT auth and Prometheus metrics"
    APP_VERSION: str = "1.0.0"

    # Database
    DB_TYPE: str = "sqlite"
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_NAME: str = "tickets"
    DATABASE_URL: str | None = None  # overrides DB_* when set

    # Auth
    JWT_SECRET: str = Field(default="your-secret-key")
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    ADMIN_EMAIL: str | None = None
    ADMIN_PASSWORD: str | None = None

    # CORS origins, comma separated
    CORS_ORIGINS: str = "*"

    # Server
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # Pydantic v2 style config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_postgres(self) -> bool:
        return self.DB_TYPE.lower() == "postgres"

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.is_postgres:
            url = URL.create(
                "postgresql+psycopg",
                username=self.DB_USER,
                password=self.DB_PASSWORD,
                host=self.DB_HOST,
                port=self.DB_PORT,
                database=self.DB_NAME,
            )
            return url.render_as_string(hide_password=False)
        if self.DB_NAME == ":memory:":
            return "sqlite://"
        return f"sqlite:///./{self.DB_NAME}.db"


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
