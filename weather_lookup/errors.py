# ABOUTME: Exception hierarchy for failed weather lookups.
# ABOUTME: Each exception's message is the text shown to the user in the error banner.

INVALID_QUERY_MESSAGE = "Please Enter A Valid City Name."
NO_CITY_MESSAGE = "No city found with that name."
CITY_NOT_FOUND_MESSAGE = "City Not Found"


class WeatherLookupError(Exception):
    """Base class for every failure that ends a lookup attempt."""


class QueryValidationError(WeatherLookupError):
    """The submitted query was rejected before any network call."""


class NotFoundError(WeatherLookupError):
    """No place matched, or the weather service answered with a non-success status."""


class TransportError(WeatherLookupError):
    """The request could not be completed or its body could not be parsed."""


def validate_query(query: str) -> str:
    """Return the trimmed query, or raise QueryValidationError if nothing is left."""
    trimmed = query.strip()
    if not trimmed:
        raise QueryValidationError(INVALID_QUERY_MESSAGE)
    return trimmed
