# ABOUTME: Shared resources for the web app: the HTTP client and the search controller.
# ABOUTME: AppDeps is created once in the lifespan handler and hung off app.state.

import httpx
from pydantic import BaseModel, ConfigDict

from weather_lookup.config import Settings
from weather_lookup.controller import SearchController


class AppDeps(BaseModel):
    """Dependencies the request handlers reach through request.app.state.deps."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    settings: Settings
    http_client: httpx.AsyncClient
    controller: SearchController


def create_http_client() -> httpx.AsyncClient:
    """Create the client used for both upstream APIs.

    No timeout and no retries: a failed call ends the attempt and the user resubmits.
    """
    return httpx.AsyncClient(timeout=None, headers={"accept": "application/json"})
