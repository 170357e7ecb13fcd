"""FastAPI Request State - immutable per-request app state for FastAPI."""

from loguru import logger

from fastapi_request_state.config import (
    LogConfiguration,
    StateDefaults,
    get_defaults,
    get_log_config,
)
from fastapi_request_state.context import ResolutionContext
from fastapi_request_state.dependency import enrich_openapi, state_dependency
from fastapi_request_state.exceptions import StateException, StateInternalError
from fastapi_request_state.layer import LayerCategory, StateLayer
from fastapi_request_state.layers.cookie import (
    COOKIE_SETTINGS_NAME,
    CookieSettings,
    decode_settings_cookie,
)
from fastapi_request_state.layers.query import QueryOverrides, QueryStringCapture
from fastapi_request_state.log import setup_logging
from fastapi_request_state.resolver import ResolvedPlan, StateResolver, resolve
from fastapi_request_state.state import Api, ResolvedState

# Records stay silent until the application calls setup_logging()
logger.disable("fastapi_request_state")

__all__ = [
    "COOKIE_SETTINGS_NAME",
    "Api",
    "CookieSettings",
    "LayerCategory",
    "LogConfiguration",
    "QueryOverrides",
    "QueryStringCapture",
    "ResolutionContext",
    "ResolvedPlan",
    "ResolvedState",
    "StateDefaults",
    "StateException",
    "StateInternalError",
    "StateLayer",
    "StateResolver",
    "decode_settings_cookie",
    "enrich_openapi",
    "get_defaults",
    "get_log_config",
    "resolve",
    "setup_logging",
    "state_dependency",
]
