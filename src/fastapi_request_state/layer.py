"""StateLayer abstract base class and LayerCategory enum."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar

from fastapi_request_state.context import ResolutionContext


class LayerCategory(Enum):
    """State layer categories, defining strict precedence order."""

    COOKIE = "cookie"
    QUERY = "query"
    QUERY_STRING = "query_string"
    CUSTOM = "custom"

    @property
    def order(self) -> int:
        _ORDER = {
            "cookie": 1,
            "query": 2,
            "query_string": 3,
            "custom": 4,
        }
        return _ORDER[self.value]


class StateLayer(ABC):
    """Base abstraction for a single source of state overrides."""

    category: ClassVar[LayerCategory]

    @abstractmethod
    def apply(self, ctx: ResolutionContext) -> None: ...

    def openapi_spec(self) -> dict[str, Any] | None:
        return None
