"""Shared type aliases and protocols."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol


class RequestLike(Protocol):
    """Anything exposing already-parsed query parameters and cookies.

    Starlette's ``Request`` satisfies it.
    """

    @property
    def query_params(self) -> Mapping[str, str]: ...

    @property
    def cookies(self) -> Mapping[str, str]: ...
