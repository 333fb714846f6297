# ABOUTME: Decorative assets for the result panel: inline SVG icons and page backgrounds.
# ABOUTME: Backgrounds are CSS gradients keyed by OpenWeather "main" category and day/night.

_SVG_OPEN = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" width="32" height="32" '
    'fill="none" stroke="currentColor" stroke-width="1.8" stroke-linecap="round" stroke-linejoin="round">'
)

ICONS = {
    "humidity": _SVG_OPEN + '<path d="M12 3s-6 7-6 11a6 6 0 0 0 12 0c0-4-6-11-6-11z"/></svg>',
    "wind": _SVG_OPEN
    + '<path d="M3 8h11a3 3 0 1 0-3-3"/><path d="M3 12h15a3 3 0 1 1-3 3"/><path d="M3 16h7"/></svg>',
    "visibility": _SVG_OPEN
    + '<path d="M1 12s4-7 11-7 11 7 11 7-4 7-11 7S1 12 1 12z"/><circle cx="12" cy="12" r="3"/></svg>',
    "sunrise": _SVG_OPEN
    + '<path d="M17 18a5 5 0 0 0-10 0"/><path d="M12 2v7"/><path d="M8 6l4-4 4 4"/>'
    '<path d="M2 22h20"/><path d="M4.2 10.2l1.4 1.4"/><path d="M18.4 11.6l1.4-1.4"/></svg>',
    "sunset": _SVG_OPEN
    + '<path d="M17 18a5 5 0 0 0-10 0"/><path d="M12 9V2"/><path d="M16 5l-4 4-4-4"/>'
    '<path d="M2 22h20"/><path d="M4.2 10.2l1.4 1.4"/><path d="M18.4 11.6l1.4-1.4"/></svg>',
}

DEFAULT_BACKGROUND = "linear-gradient(160deg, #4b6cb7 0%, #182848 100%)"

# (day, night)
_BACKGROUNDS = {
    "Clear": (
        "linear-gradient(160deg, #f6d365 0%, #4facfe 100%)",
        "linear-gradient(160deg, #0f2027 0%, #203a43 50%, #2c5364 100%)",
    ),
    "Clouds": (
        "linear-gradient(160deg, #bdc3c7 0%, #6a85b6 100%)",
        "linear-gradient(160deg, #232526 0%, #414345 100%)",
    ),
    "Rain": (
        "linear-gradient(160deg, #5f7c8a 0%, #3a6073 100%)",
        "linear-gradient(160deg, #141e30 0%, #243b55 100%)",
    ),
    "Drizzle": (
        "linear-gradient(160deg, #89a7b1 0%, #566a7f 100%)",
        "linear-gradient(160deg, #1c2a3a 0%, #2f4353 100%)",
    ),
    "Thunderstorm": (
        "linear-gradient(160deg, #373b44 0%, #4286f4 100%)",
        "linear-gradient(160deg, #0f0c29 0%, #302b63 50%, #24243e 100%)",
    ),
    "Snow": (
        "linear-gradient(160deg, #e6dada 0%, #a1c4fd 100%)",
        "linear-gradient(160deg, #3e5151 0%, #7f8c9d 100%)",
    ),
}

# Atmosphere group (fog, haze, dust, ...) all share one look.
_ATMOSPHERE = (
    "linear-gradient(160deg, #d7d2cc 0%, #8e9eab 100%)",
    "linear-gradient(160deg, #2b3339 0%, #4b5761 100%)",
)
for _main in ("Mist", "Smoke", "Haze", "Dust", "Fog", "Sand", "Ash", "Squall", "Tornado"):
    _BACKGROUNDS[_main] = _ATMOSPHERE


def background_for(main: str | None, is_day: bool) -> str:
    """CSS background for a condition category; unknown or missing categories get the default."""
    if main is None or main not in _BACKGROUNDS:
        return DEFAULT_BACKGROUND
    day, night = _BACKGROUNDS[main]
    return day if is_day else night
