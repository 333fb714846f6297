# ABOUTME: Turns a SearchState into display values and renders them with Jinja2 templates.
# ABOUTME: Nothing here touches the network; all inputs are the state record, settings and the current time.

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from weather_lookup.assets import ICONS, background_for
from weather_lookup.config import Settings
from weather_lookup.formatting import (
    convert_temperature,
    format_clock,
    humidity_label,
    is_daytime,
    visibility_label,
    wind_direction,
)
from weather_lookup.models import SearchState, WeatherSnapshot
from weather_lookup.weather_service import icon_url

TEMPLATE_DIR = Path(__file__).parent / "templates"

_env = Environment(loader=FileSystemLoader(TEMPLATE_DIR), autoescape=select_autoescape(["html"]))


def build_view(state: SearchState, settings: Settings, now: float) -> dict:
    """Flatten the state into the values the templates print."""
    view = {
        "query": state.query,
        "error": state.error,
        "phase": state.phase.value,
        "suggestions": [c.label for c in state.candidates],
        "unit": state.unit.value,
        "is_day": False,
        "background": background_for(None, False),
        "weather": None,
    }
    snapshot = state.snapshot
    if snapshot is None:
        return view

    is_day = is_daytime(snapshot.sunrise, snapshot.sunset, now)
    view["is_day"] = is_day
    view["background"] = background_for(snapshot.condition.main, is_day)
    view["weather"] = _weather_view(snapshot, state, settings)
    return view


def _weather_view(snapshot: WeatherSnapshot, state: SearchState, settings: Settings) -> dict:
    unit = state.unit
    wind = f"{snapshot.wind_speed:g} m/s"
    if snapshot.wind_deg is not None:
        wind += f" ({wind_direction(snapshot.wind_deg)})"
    visibility = visibility_label(snapshot.visibility) if snapshot.visibility is not None else "Unknown"
    return {
        "name": snapshot.name,
        "icon_url": icon_url(settings, snapshot.condition.icon),
        "description": snapshot.condition.description,
        "temperature": convert_temperature(snapshot.temperature, unit),
        "feels_like": convert_temperature(snapshot.feels_like, unit),
        "pressure": f"{snapshot.pressure} hPa",
        "details": [
            (ICONS["humidity"], "Humidity", f"{snapshot.humidity}% ({humidity_label(snapshot.humidity)})"),
            (ICONS["wind"], "Wind", wind),
            (ICONS["visibility"], "Visibility", visibility),
        ],
        "sun": [
            (ICONS["sunrise"], "Sunrise", format_clock(snapshot.sunrise, snapshot.timezone_offset)),
            (ICONS["sunset"], "Sunset", format_clock(snapshot.sunset, snapshot.timezone_offset)),
        ],
    }


def render_page(state: SearchState, settings: Settings, now: float) -> str:
    return _env.get_template("index.html").render(view=build_view(state, settings, now))


def render_suggestions(state: SearchState) -> str:
    """Render only the suggestion list, for swapping into the page while the user types."""
    return _env.get_template("_suggestions.html").render(suggestions=[c.label for c in state.candidates])
