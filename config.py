"""
Environment-driven settings for the settlement API.

Uses pydantic-settings; every field is read from a SETTLEUP_* variable.
"""
import logging
from functools import lru_cache
from typing import Annotated, List

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from errors import ConfigurationError


class Settings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(env_prefix="SETTLEUP_")

    log_level: str = Field(default="INFO", description="Root logging level")
    host: str = Field(default="0.0.0.0", description="Interface uvicorn binds to")
    port: int = Field(default=8000, description="Port uvicorn listens on")
    cors_origins: Annotated[List[str], NoDecode] = Field(default_factory=lambda: ["*"])

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, value):
        # Comma separated in the environment
        if isinstance(value, str):
            return [o.strip() for o in value.split(",") if o.strip()]
        return value


def load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e


@lru_cache()
def get_settings() -> Settings:
    return load_settings()
