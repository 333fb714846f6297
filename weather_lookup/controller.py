# ABOUTME: Search orchestration: debounced suggestions, submit/select lookups and unit toggling.
# ABOUTME: Owns one immutable SearchState and replaces it on every transition.

import logging
import time
from collections.abc import Callable
from functools import partial

import httpx

from weather_lookup.config import Settings
from weather_lookup.debounce import Debouncer
from weather_lookup.errors import NO_CITY_MESSAGE, WeatherLookupError, validate_query
from weather_lookup.formatting import is_daytime
from weather_lookup.models import Candidate, Phase, SearchState
from weather_lookup.weather_service import geocode, get_current_weather

logger = logging.getLogger(__name__)


class SearchController:
    """Drives the lookup flow for one user session.

    Every user action bumps a generation counter. Responses are applied only if
    their generation is still current, so a slow reply can never overwrite the
    outcome of a newer action.
    """

    def __init__(self, client: httpx.AsyncClient, settings: Settings, clock: Callable[[], float] = time.time):
        self._client = client
        self._settings = settings
        self._clock = clock
        self._debouncer = Debouncer(settings.debounce_seconds)
        self._generation = 0
        self._state = SearchState()

    @property
    def state(self) -> SearchState:
        return self._state

    def set_query(self, query: str) -> SearchState:
        """Record a keystroke and (re)schedule or clear suggestions."""
        generation = self._next_generation()
        self._update(query=query)
        trimmed = query.strip()
        if len(trimmed) >= self._settings.min_query_length and self._state.snapshot is None:
            self._debouncer.schedule(partial(self._suggest, trimmed, generation))
        else:
            self._debouncer.cancel()
            phase = Phase.DISPLAYING if self._state.snapshot is not None else Phase.IDLE
            self._update(candidates=(), phase=phase)
        return self._state

    async def settled(self) -> SearchState:
        """Wait for the current suggestion timer to be cancelled or to finish its lookup."""
        await self._debouncer.wait()
        return self._state

    async def search(self) -> SearchState:
        """Submit the form: geocode the query afresh and show weather for the top match."""
        self._debouncer.cancel()
        generation = self._next_generation()
        try:
            query = validate_query(self._state.query)
        except WeatherLookupError as e:
            self._fail(str(e))
            return self._state

        self._update(phase=Phase.SEARCHING, snapshot=None, error="")
        candidates = await geocode(self._client, self._settings, query)
        if self._is_stale(generation):
            return self._state
        if not candidates:
            logger.info("No places match %r", query)
            self._fail(NO_CITY_MESSAGE)
            return self._state

        self._update(candidates=tuple(candidates))
        await self._load_weather(candidates[0], generation)
        return self._state

    async def select(self, candidate: Candidate) -> SearchState:
        """Show weather for a suggestion the user clicked, without geocoding again."""
        self._debouncer.cancel()
        generation = self._next_generation()
        self._update(phase=Phase.SELECTING, snapshot=None, error="")
        await self._load_weather(candidate, generation)
        return self._state

    def new_search(self) -> SearchState:
        """Drop the current result and query; the chosen unit is kept."""
        self._debouncer.cancel()
        self._next_generation()
        self._state = SearchState(unit=self._state.unit)
        return self._state

    def toggle_unit(self) -> SearchState:
        self._update(unit=self._state.unit.toggled())
        return self._state

    def is_daytime(self) -> bool:
        snapshot = self._state.snapshot
        if snapshot is None:
            return False
        return is_daytime(snapshot.sunrise, snapshot.sunset, self._clock())

    async def _suggest(self, query: str, generation: int) -> None:
        candidates = await geocode(self._client, self._settings, query)
        if self._is_stale(generation) or self._state.snapshot is not None:
            return
        self._update(candidates=tuple(candidates), phase=Phase.SUGGESTING)

    async def _load_weather(self, candidate: Candidate, generation: int) -> None:
        try:
            snapshot = await get_current_weather(
                self._client, self._settings, candidate.latitude, candidate.longitude, label=candidate.label
            )
        except WeatherLookupError as e:
            if self._is_stale(generation):
                return
            logger.warning("Weather lookup for %s failed: %s", candidate.label, e)
            self._fail(str(e))
            return

        if self._is_stale(generation):
            return
        logger.info("Loaded weather for %s", snapshot.name)
        self._update(
            phase=Phase.DISPLAYING,
            snapshot=snapshot,
            query=snapshot.name,
            candidates=(),
            error="",
        )

    def _fail(self, message: str) -> None:
        self._update(phase=Phase.FAILED, error=message, snapshot=None, candidates=())

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    def _is_stale(self, generation: int) -> bool:
        if generation != self._generation:
            logger.debug("Discarding response for superseded action %d", generation)
            return True
        return False

    def _update(self, **changes) -> None:
        self._state = self._state.model_copy(update=changes)
