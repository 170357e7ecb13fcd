"""Built-in state layers."""

from fastapi_request_state.layers.cookie import (
    COOKIE_SETTINGS_NAME,
    CookieSettings,
    decode_settings_cookie,
)
from fastapi_request_state.layers.query import QueryOverrides, QueryStringCapture

__all__ = [
    "COOKIE_SETTINGS_NAME",
    "CookieSettings",
    "QueryOverrides",
    "QueryStringCapture",
    "decode_settings_cookie",
]
