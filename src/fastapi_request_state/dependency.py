"""state_dependency() — factory producing FastAPI-compatible dependency callables."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import HTTPException
from loguru import logger
from starlette.requests import Request

from fastapi_request_state.config import StateDefaults, get_defaults
from fastapi_request_state.exceptions import StateException, StateInternalError
from fastapi_request_state.openapi import collect_openapi_metadata
from fastapi_request_state.resolver import StateResolver
from fastapi_request_state.state import ResolvedState


def state_dependency(
    resolver: StateResolver | None = None,
    *,
    defaults: StateDefaults | None = None,
) -> Callable[..., Awaitable[ResolvedState]]:
    """Return a FastAPI-compatible dependency that resolves the request state.

    When ``defaults`` is omitted they are read from the environment on first use.
    """
    resolver = resolver or StateResolver()
    plan = resolver.plan()
    metadata = collect_openapi_metadata(plan)

    async def dependency(request: Request) -> ResolvedState:
        try:
            return resolver.resolve(
                request, defaults if defaults is not None else get_defaults()
            )
        except StateException:
            raise
        except Exception as exc:
            logger.exception("State resolution failed")
            wrapped = StateInternalError("Internal state error", cause=exc)
            raise HTTPException(status_code=500, detail=wrapped.detail) from wrapped

    # Attach metadata for OpenAPI enrichment
    dependency._state_openapi_metadata = metadata  # type: ignore[attr-defined]
    dependency._state_resolver = resolver  # type: ignore[attr-defined]

    return dependency


def enrich_openapi(app: Any) -> None:
    """Document the state parameters on every route depending on the state.

    Call this after all routes are registered.
    """
    from fastapi import FastAPI
    from fastapi.routing import APIRoute

    if not isinstance(app, FastAPI):
        return

    for route in app.routes:
        if not isinstance(route, APIRoute):
            continue

        metadata = _find_state_metadata(route)
        if not metadata or "parameters" not in metadata:
            continue

        route.openapi_extra = route.openapi_extra or {}
        existing = route.openapi_extra.setdefault("parameters", [])
        names = {(p["name"], p["in"]) for p in existing}
        for param in metadata["parameters"]:
            if (param["name"], param["in"]) not in names:
                existing.append(param)

    # Routes may have been rendered before enrichment
    app.openapi_schema = None


def _find_state_metadata(route: Any) -> dict[str, Any] | None:
    """Find state OpenAPI metadata attached to route dependencies."""
    for dep in route.dependant.dependencies:
        call = dep.call
        if hasattr(call, "_state_openapi_metadata"):
            result: dict[str, Any] = call._state_openapi_metadata
            return result
    return None
