"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded beyond dev placeholders)
    - get_settings() is cached (lru_cache) — single instance per process
    - sqlalchemy_url always names an async driver

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - DATABASE_URL wins when set; otherwise the URL is assembled from DB_* parts
      (docker-compose style env files provide the parts, PaaS providers the full URL)
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

from catalog_api.core.domain_types import DatabaseDialect

# Sync URL schemes some providers hand out, mapped to their async drivers
_ASYNC_SCHEMES = {
    "postgres://": "postgresql+asyncpg://",
    "postgresql://": "postgresql+asyncpg://",
    "mysql://": "mysql+aiomysql://",
    "sqlite://": "sqlite+aiosqlite://",
}


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str | None = None
    db_dialect: DatabaseDialect = DatabaseDialect.POSTGRES
    db_host: str = "localhost"
    db_port: int | None = None
    db_user: str = "catalog"
    db_password: str = "catalog"
    db_name: str = "catalog"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_to_async_url(cls, v: str | None) -> str | None:
        """Providers hand out sync URLs; the engine needs the async driver."""
        if isinstance(v, str):
            for prefix, replacement in _ASYNC_SCHEMES.items():
                if v.startswith(prefix):
                    return v.replace(prefix, replacement, 1)
        return v or None

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Auth
    jwt_secret: str = "dev-secret-change-me"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        if self.db_dialect is DatabaseDialect.SQLITE:
            return f"{self.db_dialect.drivername}:///{self.db_name}.db"
        return URL.create(
            self.db_dialect.drivername,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        ).render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()
