# ABOUTME: Pydantic models for geocoding candidates, weather snapshots and UI state.
# ABOUTME: SearchState is the single immutable record the search controller transitions.

from enum import Enum

from pydantic import BaseModel, ConfigDict


class DisplayUnit(str, Enum):
    """Temperature scale chosen by the user; switching never triggers a refetch."""

    CELSIUS = "C"
    FAHRENHEIT = "F"

    def toggled(self) -> "DisplayUnit":
        return DisplayUnit.FAHRENHEIT if self is DisplayUnit.CELSIUS else DisplayUnit.CELSIUS


class Phase(str, Enum):
    IDLE = "idle"
    SUGGESTING = "suggesting"
    SEARCHING = "searching"
    SELECTING = "selecting"
    DISPLAYING = "displaying"
    FAILED = "failed"


class Candidate(BaseModel):
    """One geocoding match for a free-text place name."""

    model_config = ConfigDict(frozen=True)

    name: str
    country: str
    state: str | None = None
    latitude: float
    longitude: float

    @property
    def label(self) -> str:
        """Display name in the form "Name, CC, State", leaving out any part that is missing."""
        return ", ".join(part for part in (self.name, self.country, self.state) if part)


class WeatherCondition(BaseModel):
    model_config = ConfigDict(frozen=True)

    main: str
    description: str
    icon: str


class WeatherSnapshot(BaseModel):
    """Current conditions for one resolved location, in metric units."""

    model_config = ConfigDict(frozen=True)

    name: str
    condition: WeatherCondition
    temperature: float
    feels_like: float
    humidity: int
    pressure: int
    wind_speed: float
    wind_deg: float | None = None
    visibility: int | None = None
    sunrise: int
    sunset: int
    timezone_offset: int = 0


class SearchState(BaseModel):
    """Everything the view needs, replaced wholesale on every transition."""

    model_config = ConfigDict(frozen=True)

    query: str = ""
    phase: Phase = Phase.IDLE
    candidates: tuple[Candidate, ...] = ()
    snapshot: WeatherSnapshot | None = None
    error: str = ""
    unit: DisplayUnit = DisplayUnit.CELSIUS
