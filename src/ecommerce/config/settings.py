from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator, model_validator
from pathlib import Path
from typing import Literal
from functools import lru_cache
from ..validators.config_validators import check_page_sizes, normalize_choice


class Settings(BaseSettings):
    """
    Application settings loaded from environment.
    """

    # Environment
    ENV: Literal["development", "testing", "staging", "production"] = "development"

    # Database configuration
    DB_DRIVER: str = "mssql+aioodbc"
    DB_USERNAME: str
    DB_PASSWORD: str
    DB_HOST: str
    DB_PORT: int = 1433
    DB_NAME: str
    # Extra query string appended to the URL, e.g. "driver=ODBC+Driver+18+for+SQL+Server"
    DB_QUERY: str | None = None
    # How stored procedures are invoked: `EXEC name @Key = ...` or `SELECT * FROM name(...)`
    DB_PROCEDURE_STYLE: Literal["mssql", "postgres"] = "mssql"

    # SQLAlchemy
    SQLALCHEMY_ECHO: bool = False

    # Uploaded assets (logos, product images, avatars)
    ASSET_ROOT: Path = Path("./storage")
    ASSET_TEMP_DIR: str = "temp"

    # Paging
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FORMAT: Literal["json", "text"] = "json"
    LOG_TO_STDOUT: bool = True
    LOG_DIR: Path = Path("/var/log/ecommerce")
    LOG_MAX_BYTES: int = 10_000_000  # 10 MB
    LOG_BACKUP_COUNT: int = 5
    ENABLE_SQL_LOGGING: bool = False

    # --- Derived settings ---
    @property
    def DATABASE_URL(self) -> str:
        """
        Build the SQLAlchemy URL from the DB_* parts.

        The driver decides the dialect (`mssql+aioodbc`, `postgresql+psycopg`, ...);
        DB_QUERY is appended verbatim when set.
        """
        url = (
            f"{self.DB_DRIVER}://"
            f"{self.DB_USERNAME}:{self.DB_PASSWORD}@"
            f"{self.DB_HOST}:{self.DB_PORT}/"
            f"{self.DB_NAME}"
        )
        if self.DB_QUERY:
            url = f"{url}?{self.DB_QUERY.lstrip('?')}"
        return url

    # --- Validators ---
    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: str | None) -> str | None:
        """Logging expects upper-case level names ("DEBUG", "INFO", ...)."""
        return normalize_choice(v, upper=True)

    @field_validator("LOG_FORMAT", "DB_PROCEDURE_STYLE", mode="before")
    def normalize_lowercase(cls, v: str | None) -> str | None:
        return normalize_choice(v)

    @model_validator(mode="after")
    def check_paging(self) -> "Settings":
        check_page_sizes(self.DEFAULT_PAGE_SIZE, self.MAX_PAGE_SIZE)
        return self

    model_config = SettingsConfigDict(
        # .env beside the package root (src/ecommerce/.env)
        env_file=str(Path(__file__).parent.parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Settings are read once per process.
@lru_cache()
def get_settings() -> Settings:
    return Settings()
