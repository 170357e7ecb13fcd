"""Shared pytest fixtures for fastapi-request-state tests."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest
from loguru import logger
from starlette.requests import Request

from fastapi_request_state.config import StateDefaults


@pytest.fixture
def make_request() -> Any:
    """Factory for creating Starlette Request objects with query and cookies."""

    def _make(
        query_string: str = "",
        cookies: dict[str, str] | None = None,
        path: str = "/",
    ) -> Request:
        headers: list[tuple[bytes, bytes]] = []
        if cookies:
            cookie_header = "; ".join(f"{k}={v}" for k, v in cookies.items())
            headers.append((b"cookie", cookie_header.encode()))
        scope: dict[str, Any] = {
            "type": "http",
            "method": "GET",
            "path": path,
            "query_string": query_string.encode(),
            "headers": headers,
            "root_path": "",
        }
        return Request(scope)

    return _make


@pytest.fixture
def defaults() -> StateDefaults:
    """Deployment defaults that never come from the environment."""
    return StateDefaults(
        _env_file=None,  # type: ignore[call-arg]
        space_id="default-space",
        delivery_token="default-delivery",
        preview_token="default-preview",
        locale="en-US",
    )


@pytest.fixture
def log_records() -> Iterator[list[dict[str, Any]]]:
    """Capture loguru records emitted by the package."""
    records: list[dict[str, Any]] = []
    logger.enable("fastapi_request_state")
    handler_id = logger.add(
        lambda message: records.append(message.record), level="TRACE"
    )
    yield records
    logger.remove(handler_id)
    logger.disable("fastapi_request_state")
