# ABOUTME: Service layer for the OpenWeather geocoding and current-weather APIs.
# ABOUTME: Resolves place names to candidates and coordinates to WeatherSnapshot objects.

import logging

import httpx

from weather_lookup.config import Settings
from weather_lookup.errors import CITY_NOT_FOUND_MESSAGE, NotFoundError, TransportError
from weather_lookup.models import Candidate, WeatherCondition, WeatherSnapshot

logger = logging.getLogger(__name__)


async def geocode(client: httpx.AsyncClient, settings: Settings, query: str) -> list[Candidate]:
    """Look up places matching a free-text query, in the upstream's relevance order.

    Any failure is reported as "no matches": the result is simply an empty list.
    """
    try:
        resp = await client.get(
            settings.geocoding_url,
            params={"q": query, "limit": settings.suggestion_limit, "appid": settings.api_key},
        )
    except httpx.HTTPError as e:
        logger.warning("Geocoding request for %r failed: %s", query, e)
        return []

    if not resp.is_success:
        logger.warning("Geocoding for %r returned HTTP %s", query, resp.status_code)
        return []

    try:
        return parse_candidates(resp.json())[: settings.suggestion_limit]
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        logger.warning("Geocoding response for %r could not be parsed: %s", query, e)
        return []


async def get_current_weather(
    client: httpx.AsyncClient,
    settings: Settings,
    latitude: float,
    longitude: float,
    label: str | None = None,
) -> WeatherSnapshot:
    """Fetch current conditions for coordinates, always in metric units.

    Raises NotFoundError for a non-success response and TransportError when the
    request fails or the body is unusable.
    """
    try:
        resp = await client.get(
            settings.weather_url,
            params={"lat": latitude, "lon": longitude, "appid": settings.api_key, "units": "metric"},
        )
    except httpx.HTTPError as e:
        raise TransportError(str(e)) from e

    if not resp.is_success:
        raise NotFoundError(_upstream_message(resp) or CITY_NOT_FOUND_MESSAGE)

    try:
        return parse_weather(resp.json(), label)
    except (ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
        raise TransportError(str(e)) from e


def parse_candidates(raw: list) -> list[Candidate]:
    """Turn the geocoder's JSON array into Candidate objects, keeping its order."""
    if not isinstance(raw, list):
        raise TypeError(f"expected a JSON array, got {type(raw).__name__}")
    return [
        Candidate(
            name=r["name"],
            country=r.get("country", ""),
            state=r.get("state"),
            latitude=r["lat"],
            longitude=r["lon"],
        )
        for r in raw
    ]


def parse_weather(data: dict, label: str | None = None) -> WeatherSnapshot:
    """Build a WeatherSnapshot from a current-weather response.

    The display name is the caller's label when given, else the upstream name.
    """
    condition = data["weather"][0]
    main = data["main"]
    wind = data.get("wind") or {}
    sun = data["sys"]
    return WeatherSnapshot(
        name=label or data.get("name", ""),
        condition=WeatherCondition(
            main=condition["main"],
            description=condition["description"],
            icon=condition["icon"],
        ),
        temperature=main["temp"],
        feels_like=main["feels_like"],
        humidity=main["humidity"],
        pressure=main["pressure"],
        wind_speed=wind.get("speed", 0.0),
        wind_deg=wind.get("deg"),
        visibility=data.get("visibility"),
        sunrise=sun["sunrise"],
        sunset=sun["sunset"],
        timezone_offset=data.get("timezone", 0),
    )


def icon_url(settings: Settings, code: str) -> str:
    """URL of the condition artwork for an upstream icon code such as "10d"."""
    return settings.icon_url_template.format(code=code)


def _upstream_message(resp: httpx.Response) -> str | None:
    """Return the "message" field of an error body, if it has one."""
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return None
