"""Integration tests for OpenAPI enrichment."""

from __future__ import annotations

from typing import Any

from fastapi import Depends, FastAPI
from httpx import ASGITransport, AsyncClient

from fastapi_request_state.config import StateDefaults
from fastapi_request_state.context import ResolutionContext
from fastapi_request_state.dependency import enrich_openapi, state_dependency
from fastapi_request_state.layer import LayerCategory, StateLayer
from fastapi_request_state.layers.cookie import CookieSettings
from fastapi_request_state.layers.query import QueryOverrides
from fastapi_request_state.openapi import collect_openapi_metadata
from fastapi_request_state.resolver import StateResolver
from fastapi_request_state.state import ResolvedState


class _Undocumented(StateLayer):
    category = LayerCategory.CUSTOM

    def apply(self, ctx: ResolutionContext) -> None:
        pass


async def _get_schema(app: FastAPI) -> dict[str, Any]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/openapi.json")
        return resp.json()


def _make_app(resolver: StateResolver, defaults: StateDefaults) -> FastAPI:
    app = FastAPI()

    @app.get("/test")
    async def endpoint(
        state: ResolvedState = Depends(  # noqa: B008
            state_dependency(resolver, defaults=defaults)
        ),
    ) -> dict[str, Any]:
        return {"ok": True}

    @app.get("/plain")
    async def plain() -> dict[str, Any]:
        return {"ok": True}

    enrich_openapi(app)
    return app


def _param_names(operation: dict[str, Any]) -> list[tuple[str, str]]:
    return [(p["name"], p["in"]) for p in operation.get("parameters", [])]


class TestOpenAPIEnrichment:
    async def test_documents_query_and_cookie_parameters(
        self, defaults: StateDefaults
    ) -> None:
        schema = await _get_schema(_make_app(StateResolver(), defaults))
        names = _param_names(schema["paths"]["/test"]["get"])
        assert ("theExampleAppSettings", "cookie") in names
        assert ("api", "query") in names
        assert ("locale", "query") in names
        assert ("enable_editorial_features", "query") in names

    async def test_routes_without_state_untouched(
        self, defaults: StateDefaults
    ) -> None:
        schema = await _get_schema(_make_app(StateResolver(), defaults))
        assert _param_names(schema["paths"]["/plain"]["get"]) == []

    async def test_only_configured_layers_documented(
        self, defaults: StateDefaults
    ) -> None:
        resolver = StateResolver(QueryOverrides())
        schema = await _get_schema(_make_app(resolver, defaults))
        names = _param_names(schema["paths"]["/test"]["get"])
        assert ("theExampleAppSettings", "cookie") not in names
        assert ("api", "query") in names

    async def test_enrich_twice_does_not_duplicate(
        self, defaults: StateDefaults
    ) -> None:
        app = _make_app(StateResolver(), defaults)
        enrich_openapi(app)
        schema = await _get_schema(app)
        names = _param_names(schema["paths"]["/test"]["get"])
        assert names.count(("api", "query")) == 1

    def test_non_fastapi_app_is_ignored(self) -> None:
        enrich_openapi(object())


class TestCollectOpenAPIMetadata:
    def test_skips_layers_without_spec(self) -> None:
        plan = StateResolver(_Undocumented()).plan()
        assert collect_openapi_metadata(plan) == {}

    def test_deduplicates_parameters(self) -> None:
        plan = StateResolver(CookieSettings(), CookieSettings()).plan()
        metadata = collect_openapi_metadata(plan)
        assert len(metadata["parameters"]) == 1
