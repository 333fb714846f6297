# ABOUTME: ASGI web entry point serving the single-page weather lookup UI.
# ABOUTME: Starlette routes translate form posts and keystrokes into SearchController transitions.

import contextlib
import logging
import time

import httpx
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, RedirectResponse, Response
from starlette.routing import Route

from weather_lookup.config import Settings, load_settings
from weather_lookup.controller import SearchController
from weather_lookup.deps import AppDeps, create_http_client
from weather_lookup.view import render_page, render_suggestions

logger = logging.getLogger(__name__)


def _deps(request: Request) -> AppDeps:
    return request.app.state.deps


def _back_home() -> RedirectResponse:
    return RedirectResponse("/", status_code=303)


async def index(request: Request) -> HTMLResponse:
    deps = _deps(request)
    return HTMLResponse(render_page(deps.controller.state, deps.settings, time.time()))


async def update_query(request: Request) -> Response:
    """Record the latest input text and reply with the suggestion list once the debounce settles."""
    try:
        body = await request.json()
        query = body.get("query", "")
    except (ValueError, AttributeError):
        return Response("Expected a JSON object with a 'query' field", status_code=400)
    if not isinstance(query, str):
        return Response("The 'query' field must be a string", status_code=400)

    controller = _deps(request).controller
    controller.set_query(query)
    state = await controller.settled()
    return HTMLResponse(render_suggestions(state))


async def search(request: Request) -> RedirectResponse:
    form = await request.form()
    controller = _deps(request).controller
    controller.set_query(str(form.get("query", "")))
    await controller.search()
    return _back_home()


async def select(request: Request) -> Response:
    form = await request.form()
    controller = _deps(request).controller
    candidates = controller.state.candidates
    try:
        candidate = candidates[int(form.get("index", ""))]
    except (ValueError, TypeError, IndexError):
        logger.info("Ignoring selection of unknown suggestion %r", form.get("index"))
        return _back_home()
    await controller.select(candidate)
    return _back_home()


async def new_search(request: Request) -> RedirectResponse:
    _deps(request).controller.new_search()
    return _back_home()


async def toggle_unit(request: Request) -> RedirectResponse:
    _deps(request).controller.toggle_unit()
    return _back_home()


def create_app(settings: Settings | None = None, http_client: httpx.AsyncClient | None = None) -> Starlette:
    """Build the ASGI app. A client passed in is used as-is and left open on shutdown."""
    settings = settings or load_settings()
    if not settings.api_key:
        logger.warning("OPENWEATHER_API_KEY is not set; upstream requests will be rejected")

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette):
        client = http_client or create_http_client()
        app.state.deps = AppDeps(
            settings=settings,
            http_client=client,
            controller=SearchController(client, settings),
        )
        try:
            yield
        finally:
            if http_client is None:
                await client.aclose()

    routes = [
        Route("/", index, methods=["GET"]),
        Route("/api/query", update_query, methods=["POST"]),
        Route("/search", search, methods=["POST"]),
        Route("/select", select, methods=["POST"]),
        Route("/new", new_search, methods=["POST"]),
        Route("/unit", toggle_unit, methods=["POST"]),
    ]
    return Starlette(routes=routes, lifespan=lifespan)
