# ABOUTME: Shared test fixtures for the weather lookup test suite.
# ABOUTME: Provides test settings, canned upstream payloads and a URL-routed mock HTTP client.

from unittest.mock import AsyncMock

import httpx
import pytest

from weather_lookup.config import Settings


def _response(json_data, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code=status_code, json=json_data, request=httpx.Request("GET", "https://test"))


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api_key="test-key",
        geocoding_url="https://geo.test/direct",
        weather_url="https://weather.test/weather",
        debounce_seconds=0.05,
    )


@pytest.fixture
def geocode_payload() -> list[dict]:
    """Three matches for "Lond", best first."""
    return [
        {"name": "London", "country": "GB", "lat": 51.5, "lon": -0.12},
        {"name": "London", "country": "CA", "state": "Ontario", "lat": 42.98, "lon": -81.24},
        {"name": "Londonderry", "country": "GB", "state": "Northern Ireland", "lat": 55.0, "lon": -7.32},
    ]


@pytest.fixture
def weather_payload() -> dict:
    return {
        "name": "London",
        "weather": [{"main": "Clouds", "description": "broken clouds", "icon": "04d"}],
        "main": {"temp": 11.6, "feels_like": 10.9, "pressure": 1012, "humidity": 81},
        "wind": {"speed": 4.12, "deg": 240},
        "visibility": 10000,
        "sys": {"sunrise": 1700000000, "sunset": 1700040000},
        "timezone": 0,
    }


@pytest.fixture
def fake_client(settings, geocode_payload, weather_payload):
    """Factory for a mock httpx.AsyncClient that answers by URL.

    Geocoding URL requests get `geocode`, everything else gets `weather`. Either
    may be an exception instance, which is raised instead.
    """

    def _make(geocode=None, weather=None, geocode_status: int = 200, weather_status: int = 200):
        geocode = geocode_payload if geocode is None else geocode
        weather = weather_payload if weather is None else weather

        def _get(url, params=None, **kwargs):
            if url == settings.geocoding_url:
                body, status = geocode, geocode_status
            else:
                body, status = weather, weather_status
            if isinstance(body, Exception):
                raise body
            return _response(body, status)

        mock = AsyncMock(spec=httpx.AsyncClient)
        mock.get.side_effect = _get
        return mock

    return _make


def calls_to(client: AsyncMock, url: str) -> list:
    """The recorded client.get calls that targeted `url`."""
    return [c for c in client.get.call_args_list if c.args[0] == url]


@pytest.fixture
def geocode_calls(settings):
    return lambda client: calls_to(client, settings.geocoding_url)


@pytest.fixture
def weather_calls(settings):
    return lambda client: calls_to(client, settings.weather_url)
