"""Deployment configuration read from the environment."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StateDefaults(BaseSettings):
    """Content space credentials and locale used when a request overrides nothing."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CONTENTFUL_",
        extra="ignore",
        frozen=True,
    )

    space_id: str = Field(..., description="Content space ID", min_length=1)
    delivery_token: str = Field(
        ..., description="Content Delivery API access token", min_length=1, repr=False
    )
    preview_token: str = Field(
        ..., description="Content Preview API access token", min_length=1, repr=False
    )
    locale: str = Field("en-US", description="Default locale", min_length=1)


class LogConfiguration(BaseSettings):
    """Logging configuration for the loguru sink."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LOG_",
        extra="ignore",
    )

    level: Literal[
        "TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"
    ] = Field("INFO", description="Minimum log level")
    serialize: bool = Field(False, description="Emit records as JSON lines")


# noinspection PyArgumentList
@lru_cache
def get_defaults() -> StateDefaults:
    """
    Get cached state defaults.
    """
    return StateDefaults()


# noinspection PyArgumentList
@lru_cache
def get_log_config() -> LogConfiguration:
    return LogConfiguration()
