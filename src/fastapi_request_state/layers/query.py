"""Query parameter layers — QueryOverrides, QueryStringCapture."""

from __future__ import annotations

from typing import Any
from urllib.parse import urlencode

from loguru import logger

from fastapi_request_state.context import ResolutionContext
from fastapi_request_state.layer import LayerCategory, StateLayer
from fastapi_request_state.state import EDITORIAL_FEATURES_FLAG, Api

API_PARAM = "api"
LOCALE_PARAM = "locale"


class QueryOverrides(StateLayer):
    """Applies api, locale and editorial-feature overrides from the query."""

    category = LayerCategory.QUERY

    def apply(self, ctx: ResolutionContext) -> None:
        params = ctx.request.query_params

        # The flag only ever enables editorial features.
        ctx.settings["editorial_features_enabled"] = bool(
            ctx.settings.get("editorial_features_enabled")
        ) or (EDITORIAL_FEATURES_FLAG in params)

        raw_api = params.get(API_PARAM)
        if raw_api:
            api = Api.parse(raw_api)
            if api is None:
                logger.debug("Ignoring unknown api token {!r}", raw_api)
            else:
                ctx.settings["api"] = api

        locale = params.get(LOCALE_PARAM)
        if locale:
            ctx.settings["locale"] = locale

    def openapi_spec(self) -> dict[str, Any] | None:
        return {
            "parameters": [
                {
                    "name": API_PARAM,
                    "in": "query",
                    "required": False,
                    "schema": {
                        "type": "string",
                        "enum": ["cda", "cpa", "delivery", "preview"],
                    },
                    "description": "Content API to use",
                },
                {
                    "name": LOCALE_PARAM,
                    "in": "query",
                    "required": False,
                    "schema": {"type": "string"},
                    "description": "Locale code, e.g. en-US",
                },
                {
                    "name": EDITORIAL_FEATURES_FLAG,
                    "in": "query",
                    "required": False,
                    "allowEmptyValue": True,
                    "schema": {"type": "boolean"},
                    "description": "Presence enables editorial features",
                },
            ],
        }


class QueryStringCapture(StateLayer):
    """Rebuilds the query string from the overrides the caller supplied.

    Raw request values are used, not the resolved ones, so links built from
    it reproduce the caller's overrides.
    """

    category = LayerCategory.QUERY_STRING

    def apply(self, ctx: ResolutionContext) -> None:
        params = ctx.request.query_params
        supplied = {
            key: params[key]
            for key in (API_PARAM, LOCALE_PARAM)
            if params.get(key)
        }

        query = urlencode(supplied)
        if EDITORIAL_FEATURES_FLAG in params:
            query += ("&" if query else "") + EDITORIAL_FEATURES_FLAG

        ctx.settings["query_string"] = f"?{query}" if query else ""
