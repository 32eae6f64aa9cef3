# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from globeweather.facts import FACTS_FAILURE_MESSAGE
from globeweather.geo import Coordinate
from globeweather.session.panels import FactsPanel, Generation, PanelState, WeatherPanel
from tests.helpers import WEATHER_OK

PARIS = Coordinate(48.8566, 2.3522)
ROME = Coordinate(41.8902, 12.4922)


def test_generation_tokens_are_monotonic() -> None:
    gen = Generation()
    a, b = gen.next(), gen.next()
    assert b > a
    assert gen.is_current(b) and not gen.is_current(a)


def test_weather_panel_lifecycle() -> None:
    panel = WeatherPanel()
    seen: list[PanelState] = []
    panel.subscribe(lambda p: seen.append(p.state))
    assert panel.state is PanelState.IDLE and not panel.visible

    token = panel.begin(PARIS)
    assert panel.loading and panel.visible
    assert panel.coordinate == PARIS

    assert panel.resolve(token, WEATHER_OK)
    assert panel.state is PanelState.RESOLVED
    assert not panel.loading
    assert panel.can_request_facts and panel.country == "France"
    assert seen == [PanelState.LOADING, PanelState.RESOLVED]


def test_resolved_can_reenter_loading_but_never_idle() -> None:
    panel = WeatherPanel()
    panel.resolve(panel.begin(PARIS), WEATHER_OK)
    panel.begin(ROME)
    assert panel.state is PanelState.LOADING
    assert panel.coordinate == ROME


def test_stale_settlements_are_dropped() -> None:
    panel = WeatherPanel()
    first = panel.begin(PARIS)
    second = panel.begin(ROME)

    assert not panel.resolve(first, {"location": {"country": "Old"}, "current": {}})
    assert panel.loading
    assert not panel.fail(first, RuntimeError("late"))
    assert panel.loading

    assert panel.resolve(second, WEATHER_OK)
    assert not panel.fail(first)
    assert panel.reading == WEATHER_OK


def test_failure_leaves_placeholder() -> None:
    panel = WeatherPanel()
    panel.resolve(panel.begin(PARIS), WEATHER_OK)
    err = RuntimeError("boom")
    panel.fail(panel.begin(ROME), err)
    assert panel.state is PanelState.RESOLVED
    assert panel.reading is None and panel.error is err
    assert not panel.can_request_facts


def test_facts_panel_clears_and_falls_back() -> None:
    panel = FactsPanel()
    assert panel.title == "Country Facts"
    panel.resolve(panel.begin("France"), ["a", "b"])
    assert panel.facts == ["a", "b"]

    token = panel.begin("Italy")
    assert panel.facts == [] and panel.loading and panel.open
    assert panel.title == "Facts about Italy"
    panel.fail(token)
    assert panel.facts == [FACTS_FAILURE_MESSAGE]

    panel.close()
    assert not panel.open
    assert panel.facts == [FACTS_FAILURE_MESSAGE]


def test_listener_errors_do_not_break_transitions() -> None:
    panel = WeatherPanel()

    def _bad(_panel) -> None:
        raise ValueError("listener bug")

    unsubscribe = panel.subscribe(_bad)
    panel.begin(PARIS)
    assert panel.loading
    unsubscribe()
    unsubscribe()
