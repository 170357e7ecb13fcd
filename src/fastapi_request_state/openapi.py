"""OpenAPI schema enrichment — collects parameter metadata from state layers."""

from __future__ import annotations

from typing import Any

from fastapi_request_state.resolver import ResolvedPlan


def collect_openapi_metadata(plan: ResolvedPlan) -> dict[str, Any]:
    """Collect the parameters documented by every layer of the plan."""
    parameters: list[dict[str, Any]] = []
    seen: set[tuple[str, str]] = set()

    for layer in plan.layers:
        spec = layer.openapi_spec()
        if spec is None:
            continue

        for param in spec.get("parameters", []):
            key = (param["name"], param["in"])
            if key in seen:
                continue
            seen.add(key)
            parameters.append(param)

    result: dict[str, Any] = {}
    if parameters:
        result["parameters"] = parameters

    return result
