# SPDX-License-Identifier: Apache-2.0
"""State machines behind the weather and facts panels.

Every mutation goes through a transition method. Each ``begin`` hands out a
generation token; a settlement carrying an older token is dropped, so only
the latest request's outcome is ever shown even though superseded requests
are never cancelled.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable

from globeweather.facts import FACTS_FAILURE_MESSAGE
from globeweather.geo import Coordinate

LOGGER = logging.getLogger(__name__)


class PanelState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    RESOLVED = "resolved"


class Generation:
    """Monotonic request counter."""

    def __init__(self) -> None:
        self._latest = 0

    @property
    def latest(self) -> int:
        return self._latest

    def next(self) -> int:
        self._latest += 1
        return self._latest

    def is_current(self, token: int) -> bool:
        return token == self._latest


Listener = Callable[[Any], None]


class _Panel:
    def __init__(self) -> None:
        self.state = PanelState.IDLE
        self._generation = Generation()
        self._listeners: list[Listener] = []

    @property
    def loading(self) -> bool:
        return self.state is PanelState.LOADING

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(panel)`` after every transition; returns an unsubscribe."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                LOGGER.exception("Panel listener failed")

    def _accept(self, token: int) -> bool:
        if self._generation.is_current(token):
            return True
        LOGGER.debug(
            "Dropping stale response (token %s, latest %s)",
            token,
            self._generation.latest,
        )
        return False


class WeatherPanel(_Panel):
    """``IDLE -> LOADING -> RESOLVED``; a new pick re-enters ``LOADING``."""

    def __init__(self) -> None:
        super().__init__()
        self.coordinate: Coordinate | None = None
        self.reading: dict[str, Any] | None = None
        self.error: Exception | None = None

    @property
    def visible(self) -> bool:
        return self.state is not PanelState.IDLE

    def begin(self, coordinate: Coordinate) -> int:
        token = self._generation.next()
        self.state = PanelState.LOADING
        self.coordinate = coordinate
        self._notify()
        return token

    def resolve(self, token: int, reading: dict[str, Any]) -> bool:
        if not self._accept(token):
            return False
        self.state = PanelState.RESOLVED
        self.reading = reading
        self.error = None
        self._notify()
        return True

    def fail(self, token: int, error: Exception | None = None) -> bool:
        if not self._accept(token):
            return False
        self.state = PanelState.RESOLVED
        self.reading = None
        self.error = error
        self._notify()
        return True

    @property
    def can_request_facts(self) -> bool:
        return self.state is PanelState.RESOLVED and self.country is not None

    @property
    def country(self) -> str | None:
        if not self.reading:
            return None
        location = self.reading.get("location")
        if not isinstance(location, dict):
            return None
        country = location.get("country")
        return str(country) if country else None


class FactsPanel(_Panel):
    """Modal facts list scoped to one country at a time."""

    def __init__(self) -> None:
        super().__init__()
        self.country: str | None = None
        self.facts: list[str] = []
        self.open = False
        self.failed = False

    def begin(self, country: str) -> int:
        token = self._generation.next()
        self.country = country
        self.facts = []
        self.state = PanelState.LOADING
        self.open = True
        self.failed = False
        self._notify()
        return token

    def resolve(self, token: int, facts: list[str]) -> bool:
        if not self._accept(token):
            return False
        self.facts = list(facts)
        self.state = PanelState.RESOLVED
        self._notify()
        return True

    def fail(self, token: int) -> bool:
        if not self._accept(token):
            return False
        self.facts = [FACTS_FAILURE_MESSAGE]
        self.failed = True
        self.state = PanelState.RESOLVED
        self._notify()
        return True

    def close(self) -> None:
        self.open = False
        self._notify()

    @property
    def title(self) -> str:
        return f"Facts about {self.country}" if self.country else "Country Facts"
