# name_api/config.py
"""Application settings loaded from the environment and an optional .env file."""

import logging
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from name_api.errors import ConfigurationError

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

# Names understood by both logging.basicConfig and uvicorn.
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class NameSettings(BaseSettings):
    """Settings read once at startup; ``NAME_MYNAME`` is required."""

    myname: str = Field(..., description="Value served on GET /name/")

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000, ge=1, le=65535)
    log_level: str = Field(default="INFO")
    docs_enabled: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_prefix="NAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return level


def load_settings(**overrides: Any) -> NameSettings:
    """
    Build settings, turning validation failures into ConfigurationError.

    Keyword overrides take precedence over the environment.
    """
    try:
        return NameSettings(**overrides)
    except ValidationError as exc:
        keys = sorted(
            "NAME_" + str(err["loc"][0]).upper() for err in exc.errors() if err["loc"]
        )
        raise ConfigurationError(
            f"invalid or missing configuration: {', '.join(keys)}"
        ) from exc


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
