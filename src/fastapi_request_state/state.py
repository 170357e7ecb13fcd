"""Api enum and ResolvedState — the immutable per-request state value."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from urllib.parse import urlencode

EDITORIAL_FEATURES_FLAG = "enable_editorial_features"


class Api(Enum):
    """Content API selection. Values are the tokens used in links."""

    DELIVERY = "cda"
    PREVIEW = "cpa"

    @property
    def label(self) -> str:
        _LABELS = {
            "cda": "Content Delivery API",
            "cpa": "Content Preview API",
        }
        return _LABELS[self.value]

    @classmethod
    def parse(cls, token: str | None) -> Api | None:
        """Map a query token to an Api, or None when it is not recognised."""
        if token is None:
            return None
        _ALIASES = {
            "cda": cls.DELIVERY,
            "delivery": cls.DELIVERY,
            "cpa": cls.PREVIEW,
            "preview": cls.PREVIEW,
        }
        return _ALIASES.get(token.strip().lower())


@dataclass(frozen=True)
class ResolvedState:
    """Read-only state of the app for the current request."""

    space_id: str
    delivery_token: str = field(repr=False)
    preview_token: str = field(repr=False)
    locale: str
    api: Api = Api.DELIVERY
    editorial_features_enabled: bool = False
    uses_cookie_credentials: bool = False
    query_string: str = ""

    @property
    def api_label(self) -> str:
        return self.api.label

    @property
    def is_delivery_api(self) -> bool:
        return self.api is Api.DELIVERY

    @property
    def has_editorial_features_link(self) -> bool:
        return self.editorial_features_enabled and self.api is Api.PREVIEW

    @property
    def shareable_link_query(self) -> str:
        """Query string reproducing the complete state, for shareable URLs."""
        query = urlencode(
            {
                "space_id": self.space_id,
                "delivery_token": self.delivery_token,
                "preview_token": self.preview_token,
                "api": self.api.value,
                "locale": self.locale,
            }
        )
        if self.editorial_features_enabled:
            query += f"&{EDITORIAL_FEATURES_FLAG}"
        return f"?{query}"

    @property
    def settings(self) -> dict[str, Any]:
        """Cookie-shaped view of the credentials and editorial flag."""
        return {
            "spaceId": self.space_id,
            "deliveryToken": self.delivery_token,
            "previewToken": self.preview_token,
            "editorialFeatures": self.editorial_features_enabled,
        }
