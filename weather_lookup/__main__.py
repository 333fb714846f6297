# ABOUTME: Command-line entry point: `python -m weather_lookup` serves the app with uvicorn.
# ABOUTME: Host, port and log level come from the environment via load_settings().

import uvicorn

from weather_lookup.config import configure_logging, load_settings
from weather_lookup.web import create_app


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
