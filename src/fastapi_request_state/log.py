"""Loguru sink setup."""

from __future__ import annotations

import sys

from loguru import logger

from fastapi_request_state.config import LogConfiguration, get_log_config

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def setup_logging(config: LogConfiguration | None = None) -> int:
    """Replace loguru's default sink with a configured stderr sink.

    Returns the handler id so callers can remove it again.
    """
    config = config or get_log_config()

    logger.remove()
    logger.enable("fastapi_request_state")
    return logger.add(
        sys.stderr,
        level=config.level,
        format=_FORMAT,
        serialize=config.serialize,
        backtrace=False,
        diagnose=False,
    )
