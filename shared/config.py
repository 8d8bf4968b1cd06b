"""Service settings loaded from environment variables (and an optional ``.env``)."""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings shared by the payments and transactions services."""

    project_name: str = Field(default="EchoPay", description="Prefix for API titles")
    api_version: str = Field(default="1.0.0", description="Version reported by both APIs")
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Optional[str] = Field(default=None, description="Also log to this file")

    host: str = Field(default="0.0.0.0", description="Bind address")
    payments_port: int = Field(default=8080, description="Payments service port")
    transactions_port: int = Field(default=8081, description="Transactions service port")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        return v.upper()

    @field_validator("log_file")
    @classmethod
    def empty_log_file_is_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None


@lru_cache()
def get_settings() -> Settings:
    """Settings are read once per process."""
    return Settings()
