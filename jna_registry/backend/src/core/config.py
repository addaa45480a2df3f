"""Application configuration utilities."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LEDGER_TABLE = "registrations"


class Settings(BaseSettings):
    """Settings derived from environment variables."""

    database_url: str = Field(
        default="sqlite:///./jna_registry.db", alias="DATABASE_URL"
    )
    database_ssl: bool = Field(default=False, alias="DATABASE_SSL")
    database_pool_size: int = Field(default=5, alias="DATABASE_POOL_SIZE")
    source_strategy: Literal["static", "dynamic"] = Field(
        default="static", alias="SOURCE_STRATEGY"
    )
    source_tables_raw: str = Field(default="students", alias="SOURCE_TABLES")
    source_table_prefix: str = Field(default="students", alias="SOURCE_TABLE_PREFIX")
    create_ledger_on_startup: bool = Field(
        default=True, alias="CREATE_LEDGER_ON_STARTUP"
    )
    cors_allow_origins_raw: str = Field(default="*", alias="CORS_ALLOW_ORIGINS")
    static_dir: str | None = Field(default=None, alias="STATIC_DIR")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def get(self, key: str, default: object | None = None) -> object | None:
        """Dictionary-style access to configuration values."""

        return self.model_dump(by_alias=True).get(key, default)

    @property
    def source_tables(self) -> list[str]:
        """Return the statically configured source tables in priority order."""

        return _split_csv(self.source_tables_raw)

    @property
    def cors_allow_origins(self) -> list[str]:
        """Return the origins allowed to call the API from a browser."""

        return _split_csv(self.cors_allow_origins_raw) or ["*"]

    @property
    def ledger_table(self) -> str:
        """Return the name of the consolidated registrations table."""

        return LEDGER_TABLE


def _split_csv(raw: str | None) -> list[str]:
    return [part.strip() for part in (raw or "").split(",") if part.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


__all__ = ["LEDGER_TABLE", "Settings", "get_settings"]
