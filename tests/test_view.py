# ABOUTME: Tests for the view model and Jinja2 page rendering.
# ABOUTME: Checks display strings, unit switching, day/night backgrounds and rendered HTML.

from weather_lookup.assets import DEFAULT_BACKGROUND, background_for
from weather_lookup.models import Candidate, DisplayUnit, Phase, SearchState
from weather_lookup.view import build_view, render_page, render_suggestions
from weather_lookup.weather_service import parse_weather

DAY = 1700020000
NIGHT = 1700050000


def _displaying(weather_payload, **changes) -> SearchState:
    state = SearchState(
        query="London, GB",
        phase=Phase.DISPLAYING,
        snapshot=parse_weather(weather_payload, "London, GB"),
    )
    return state.model_copy(update=changes)


class TestBuildView:
    def test_idle_state_has_no_weather(self, settings):
        view = build_view(SearchState(), settings, DAY)
        assert view["weather"] is None
        assert view["background"] == DEFAULT_BACKGROUND
        assert view["suggestions"] == []

    def test_weather_fields(self, settings, weather_payload):
        """build_view formats every snapshot field for display.

        Implementation: Builds a view for the London payload in Celsius.
        Passing implies: Temperatures are rounded and labels, directions and times are filled in.
        """
        w = build_view(_displaying(weather_payload), settings, DAY)["weather"]

        assert w["name"] == "London, GB"
        assert w["icon_url"] == "https://openweathermap.org/img/wn/04d@2x.png"
        assert w["temperature"] == 12
        assert w["feels_like"] == 11
        assert w["pressure"] == "1012 hPa"
        details = {label: value for _, label, value in w["details"]}
        assert details == {"Humidity": "81% (High)", "Wind": "4.12 m/s (WSW)", "Visibility": "Excellent"}
        sun = {label: value for _, label, value in w["sun"]}
        assert sun == {"Sunrise": "22:13", "Sunset": "09:20"}

    def test_fahrenheit(self, settings, weather_payload):
        w = build_view(_displaying(weather_payload, unit=DisplayUnit.FAHRENHEIT), settings, DAY)["weather"]
        assert w["temperature"] == 53
        assert w["feels_like"] == 52

    def test_missing_direction_and_visibility(self, settings, weather_payload):
        del weather_payload["wind"]["deg"]
        del weather_payload["visibility"]
        details = {label: value for _, label, value in build_view(_displaying(weather_payload), settings, DAY)["weather"]["details"]}
        assert details["Wind"] == "4.12 m/s"
        assert details["Visibility"] == "Unknown"

    def test_day_and_night_backgrounds(self, settings, weather_payload):
        """The background follows the condition and whether the sun is up.

        Implementation: Builds the same state at a time inside and outside sunrise..sunset.
        Passing implies: Day and night select different gradients for the same condition.
        """
        state = _displaying(weather_payload)
        day = build_view(state, settings, DAY)
        night = build_view(state, settings, NIGHT)

        assert day["is_day"] and not night["is_day"]
        assert day["background"] == background_for("Clouds", True)
        assert night["background"] == background_for("Clouds", False)
        assert day["background"] != night["background"]


class TestBackgroundFor:
    def test_unknown_condition_uses_default(self):
        assert background_for("Volcano", True) == DEFAULT_BACKGROUND
        assert background_for(None, False) == DEFAULT_BACKGROUND

    def test_atmosphere_group_shares_background(self):
        assert background_for("Fog", True) == background_for("Haze", True)


class TestRender:
    def test_page_shows_error_banner(self, settings):
        state = SearchState(phase=Phase.FAILED, error="No city found with that name.")
        html = render_page(state, settings, DAY)
        assert 'class="error"' in html
        assert "No city found with that name." in html

    def test_page_shows_result(self, settings, weather_payload):
        html = render_page(_displaying(weather_payload), settings, DAY)
        assert "<h2>London, GB</h2>" in html
        assert "12 &deg;C" in html
        assert "New Search" in html
        assert "<svg" in html

    def test_page_escapes_query(self, settings):
        html = render_page(SearchState(query='<script>alert("x")</script>'), settings, DAY)
        assert '<script>alert("x")</script>' not in html
        assert "&lt;script&gt;" in html

    def test_suggestion_fragment(self):
        state = SearchState(
            candidates=(
                Candidate(name="London", country="GB", latitude=51.5, longitude=-0.12),
                Candidate(name="London", country="CA", state="Ontario", latitude=42.98, longitude=-81.24),
            )
        )
        html = render_suggestions(state)
        assert 'value="0"' in html and "London, GB" in html
        assert 'value="1"' in html and "London, CA, Ontario" in html

    def test_empty_suggestion_fragment(self):
        assert render_suggestions(SearchState()).strip() == ""
