"""
Custom layer example.

Demonstrates:
- Adding a layer that runs after the built-in ones
- Resolving state outside of HTTP handling (CLI)
"""

import sys

from fastapi import Depends, FastAPI

from fastapi_request_state import (
    LayerCategory,
    ResolutionContext,
    ResolvedState,
    StateLayer,
    StateResolver,
    get_defaults,
    resolve,
    state_dependency,
)


class AcceptLanguageLocale(StateLayer):
    """Falls back to the Accept-Language header when no locale was requested."""

    category = LayerCategory.CUSTOM

    def __init__(self, supported: set[str]) -> None:
        self.supported = supported

    def apply(self, ctx: ResolutionContext) -> None:
        if "locale" in ctx.settings:
            return
        header = ctx.request.headers.get("accept-language", "")
        for part in header.split(","):
            tag = part.split(";")[0].strip()
            if tag in self.supported:
                ctx.settings["locale"] = tag
                return


resolver = StateResolver().add(AcceptLanguageLocale({"en-US", "de-DE"}))

app = FastAPI(title="Custom Layer Example")


@app.get("/")
async def home(state: ResolvedState = Depends(state_dependency(resolver))):
    return {"locale": state.locale, "api": state.api.value}


if __name__ == "__main__":
    # No request outside of HTTP: defaults only
    state = resolve(None, get_defaults())
    sys.stdout.write(f"{state.api_label} / {state.locale}\n")
