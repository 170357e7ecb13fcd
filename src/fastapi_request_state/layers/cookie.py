"""Cookie layer — credentials and editorial flag stored by the settings page."""

from __future__ import annotations

import json
import re
from typing import Any

from loguru import logger

from fastapi_request_state.context import ResolutionContext
from fastapi_request_state.layer import LayerCategory, StateLayer

COOKIE_SETTINGS_NAME = "theExampleAppSettings"

_ESCAPED = re.compile(r"\\(.?)", re.DOTALL)

# cookie key -> (ResolvedState field, expected type)
_COOKIE_FIELDS: dict[str, tuple[str, type]] = {
    "spaceId": ("space_id", str),
    "deliveryToken": ("delivery_token", str),
    "previewToken": ("preview_token", str),
    "editorialFeatures": ("editorial_features_enabled", bool),
}


def strip_slashes(value: str) -> str:
    """Remove backslash escapes, keeping the escaped character."""
    return _ESCAPED.sub(r"\1", value)


def decode_settings_cookie(raw: str | None) -> dict[str, Any]:
    """Decode an escaped JSON settings cookie.

    Anything other than a JSON object decodes to an empty dict.
    """
    if not raw:
        return {}

    try:
        payload = json.loads(strip_slashes(raw))
    except ValueError:
        logger.debug("Ignoring settings cookie: invalid JSON")
        return {}

    if not isinstance(payload, dict):
        logger.debug(
            "Ignoring settings cookie: expected an object, got {}",
            type(payload).__name__,
        )
        return {}

    return payload


class CookieSettings(StateLayer):
    """Reads space credentials and the editorial flag from the settings cookie."""

    category = LayerCategory.COOKIE

    def __init__(self, *, cookie_name: str = COOKIE_SETTINGS_NAME) -> None:
        self._cookie_name = cookie_name

    def apply(self, ctx: ResolutionContext) -> None:
        payload = decode_settings_cookie(ctx.request.cookies.get(self._cookie_name))
        if not payload:
            return

        ctx.settings["uses_cookie_credentials"] = True
        for key, (name, expected) in _COOKIE_FIELDS.items():
            value = payload.get(key)
            if isinstance(value, expected):
                ctx.settings[name] = value

    def openapi_spec(self) -> dict[str, Any] | None:
        return {
            "parameters": [
                {
                    "name": self._cookie_name,
                    "in": "cookie",
                    "required": False,
                    "schema": {"type": "string"},
                    "description": (
                        "JSON object with spaceId, deliveryToken, previewToken"
                        " and editorialFeatures overriding the defaults"
                    ),
                },
            ],
        }
