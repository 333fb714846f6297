# ABOUTME: Pure functions that turn raw weather fields into display values.
# ABOUTME: Temperature scale conversion, qualitative humidity/visibility labels, compass points, clock times.

import math
from datetime import datetime, timezone

from weather_lookup.models import DisplayUnit

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)
SECTOR_DEGREES = 360 / len(COMPASS_POINTS)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def convert_temperature(celsius: float, unit: DisplayUnit) -> int:
    """Convert an upstream Celsius value to the display unit, rounded to a whole degree."""
    if unit is DisplayUnit.FAHRENHEIT:
        return round_half_up(celsius * 9 / 5 + 32)
    return round_half_up(celsius)


def humidity_label(humidity: float) -> str:
    if humidity < 30:
        return "Low"
    if humidity < 60:
        return "Moderate"
    return "High"


def visibility_label(metres: float) -> str:
    if metres >= 10000:
        return "Excellent"
    if metres >= 5000:
        return "Good"
    if metres >= 2000:
        return "Moderate"
    return "Poor"


def wind_direction(degrees: float) -> str:
    """Map a bearing to one of 16 compass points; each point owns a 22.5 degree sector centred on it."""
    index = math.floor((degrees % 360) / SECTOR_DEGREES + 0.5) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]


def is_daytime(sunrise: int, sunset: int, now: float) -> bool:
    return sunrise < now < sunset


def format_clock(epoch: int, offset: int = 0) -> str:
    """Render an epoch timestamp as 24-hour "HH:MM" in a zone `offset` seconds from UTC."""
    return datetime.fromtimestamp(epoch + offset, tz=timezone.utc).strftime("%H:%M")
