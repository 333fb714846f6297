# ABOUTME: Runtime configuration for the weather lookup app, read from the environment.
# ABOUTME: Loads a .env file on import and exposes a frozen Settings model plus logging setup.

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()

GEOCODING_URL = "https://api.openweathermap.org/geo/1.0/direct"
WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{code}@2x.png"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    """Everything the clients, controller and web app need to know about their environment."""

    model_config = ConfigDict(frozen=True)

    api_key: str = ""
    geocoding_url: str = GEOCODING_URL
    weather_url: str = WEATHER_URL
    icon_url_template: str = ICON_URL_TEMPLATE
    suggestion_limit: int = 5
    min_query_length: int = 3
    debounce_seconds: float = 0.5
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build Settings from environment variables, falling back to defaults."""
    return Settings(
        api_key=os.environ.get("OPENWEATHER_API_KEY", ""),
        host=os.environ.get("WEATHER_LOOKUP_HOST", "127.0.0.1"),
        port=int(os.environ.get("WEATHER_LOOKUP_PORT", "8000")),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
