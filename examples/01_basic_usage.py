"""
Basic usage example of fastapi-request-state.

Demonstrates:
- Reading deployment defaults from CONTENTFUL_* environment variables
- Resolving the per-request state as a FastAPI dependency
- Building links that keep the caller's overrides
"""

from fastapi import Depends, FastAPI

from fastapi_request_state import (
    ResolvedState,
    enrich_openapi,
    setup_logging,
    state_dependency,
)

setup_logging()

app = FastAPI(title="Request State Example")

app_state = state_dependency()


@app.get("/")
async def home(state: ResolvedState = Depends(app_state)):
    """Home page data, with links preserving api/locale overrides."""
    return {
        "api": state.api_label,
        "locale": state.locale,
        "courses_link": f"/courses{state.query_string}",
        "editorial_link": state.has_editorial_features_link,
    }


@app.get("/settings")
async def settings(state: ResolvedState = Depends(app_state)):
    """Settings page pre-filled from the cookie or the defaults."""
    return {
        "settings": state.settings,
        "uses_cookie_credentials": state.uses_cookie_credentials,
        "share": f"/{state.shareable_link_query}",
    }


# Document api, locale, enable_editorial_features and the settings cookie
enrich_openapi(app)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with:
    # curl "http://localhost:8000/?api=cpa&locale=de-DE&enable_editorial_features"
    # curl -b 'theExampleAppSettings={"spaceId":"abc","editorialFeatures":true}' \
    #     http://localhost:8000/settings
