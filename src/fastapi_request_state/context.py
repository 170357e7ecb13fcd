"""ResolutionContext — per-request scratch container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fastapi_request_state._types import RequestLike


@dataclass
class ResolutionContext:
    """Per-request container that state layers write their overrides into.

    ``settings`` is keyed by ``ResolvedState`` field names.
    """

    request: RequestLike
    settings: dict[str, Any] = field(default_factory=dict)
