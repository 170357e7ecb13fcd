"""StateResolver — ordered container of StateLayers producing ResolvedState."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from loguru import logger

from fastapi_request_state._types import RequestLike
from fastapi_request_state.config import StateDefaults
from fastapi_request_state.context import ResolutionContext
from fastapi_request_state.layer import StateLayer
from fastapi_request_state.layers.cookie import CookieSettings
from fastapi_request_state.layers.query import QueryOverrides, QueryStringCapture
from fastapi_request_state.state import Api, ResolvedState


@dataclass(frozen=True)
class ResolvedPlan:
    """Immutable, pre-sorted sequence of layers."""

    layers: tuple[StateLayer, ...]


def default_layers() -> tuple[StateLayer, ...]:
    return (CookieSettings(), QueryOverrides(), QueryStringCapture())


class StateResolver:
    """Resolves a ResolvedState from defaults and per-request layers."""

    def __init__(self, *layers: StateLayer) -> None:
        self._layers: list[StateLayer] = list(layers or default_layers())
        self._plan: ResolvedPlan | None = None

    def add(self, *layers: StateLayer) -> StateResolver:
        self._layers.extend(layers)
        self._plan = None
        return self

    def plan(self) -> ResolvedPlan:
        if self._plan is None:
            # sorted() is stable, so layers of one category keep insertion order
            self._plan = ResolvedPlan(
                layers=tuple(
                    sorted(self._layers, key=lambda layer: layer.category.order)
                )
            )
        return self._plan

    def resolve(
        self, request: RequestLike | None, defaults: StateDefaults
    ) -> ResolvedState:
        settings = _baseline(defaults)

        # Request is None outside of HTTP handling, e.g. in a CLI command.
        if request is not None:
            ctx = ResolutionContext(request=request)
            for layer in self.plan().layers:
                layer.apply(ctx)
            settings.update(_non_empty(ctx.settings))

        logger.trace(
            "Resolved state: api={} locale={} cookie_credentials={}",
            settings["api"].value,
            settings["locale"],
            settings["uses_cookie_credentials"],
        )
        return ResolvedState(**settings)


def resolve(request: RequestLike | None, defaults: StateDefaults) -> ResolvedState:
    """Resolve the state for a request using the built-in layers."""
    return StateResolver().resolve(request, defaults)


def _baseline(defaults: StateDefaults) -> dict[str, Any]:
    return {
        "space_id": defaults.space_id,
        "delivery_token": defaults.delivery_token,
        "preview_token": defaults.preview_token,
        "locale": defaults.locale,
        "api": Api.DELIVERY,
        "editorial_features_enabled": False,
        "uses_cookie_credentials": False,
        "query_string": "",
    }


def _non_empty(values: dict[str, Any]) -> dict[str, Any]:
    # Empty values never replace an earlier non-empty one.
    return {key: value for key, value in values.items() if value}
