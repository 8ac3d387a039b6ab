"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import structlog
from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    PROJECT_NAME: str = "studytrack"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # Task store
    TASK_STORE_URL: str = "http://localhost:4000/api"
    TASK_STORE_TOKEN: str | None = None
    TASK_STORE_TIMEOUT: float = 30.0
    DEFAULT_PAGE_SIZE: int = 50

    # Progress reporting
    REPORTING_TIMEZONE: str = "UTC"
    TREND_PLACEHOLDER_ENABLED: bool = False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def task_store_auth_enabled(self) -> bool:
        """Whether requests to the task store carry a bearer token."""
        return bool(self.TASK_STORE_TOKEN)

    @property
    def reporting_tz(self) -> ZoneInfo:
        """Timezone used for every day/week/month boundary in reports."""
        return ZoneInfo(self.REPORTING_TIMEZONE)

    @field_validator("REPORTING_TIMEZONE", mode="after")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Reject unknown IANA timezone names at startup."""
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as err:
            msg = f"REPORTING_TIMEZONE '{value}' is not a known timezone"
            raise ValueError(msg) from err
        return value

    @field_validator("TASK_STORE_URL", mode="after")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Strip trailing slashes from the task store URL."""
        return value.rstrip("/")

    @field_validator("TASK_STORE_TIMEOUT", mode="after")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        if value <= 0:
            msg = "TASK_STORE_TIMEOUT must be positive"
            raise ValueError(msg)
        return value


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # Determine if we should use JSON output (production) or console output (dev)
    use_json = environment == "production"

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    # Configure structlog
    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
