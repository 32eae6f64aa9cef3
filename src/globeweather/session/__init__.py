# SPDX-License-Identifier: Apache-2.0
"""Client-side session: panels, picker surfaces and the proxy client."""

from __future__ import annotations

import asyncio
import logging

from globeweather.errors import GlobeWeatherError
from globeweather.session.client import ProxyClient
from globeweather.session.panels import FactsPanel, PanelState, WeatherPanel
from globeweather.session.pickers import (
    GlobePicker,
    ManualPicker,
    SurfaceSettings,
    Viewport,
)

LOGGER = logging.getLogger(__name__)


class Session:
    """Top-level composition of the state objects shared by the views.

    The globe picker and the weather panel share one ``WeatherPanel``; the
    manual picker keeps its own so its modal never mixes with the drawer.
    """

    def __init__(
        self,
        client: ProxyClient | None = None,
        *,
        settings: SurfaceSettings | None = None,
    ) -> None:
        self.client = client or ProxyClient()
        self.weather = WeatherPanel()
        self.facts = FactsPanel()
        self.globe = GlobePicker(self.weather, self.client, settings=settings)
        self.manual = ManualPicker(self.client)
        self._pending: set[asyncio.Task] = set()

    def request_facts(self) -> asyncio.Task | None:
        """Open the facts panel for the resolved reading's country."""

        if not self.weather.can_request_facts:
            return None
        return self.request_facts_for(self.weather.country or "")

    def request_facts_for(self, country: str) -> asyncio.Task:
        token = self.facts.begin(country)
        task = asyncio.get_running_loop().create_task(self._load_facts(token, country))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _load_facts(self, token: int, country: str) -> None:
        try:
            facts = await self.client.facts(country)
        except GlobeWeatherError as exc:
            LOGGER.error("Unable to load facts for %s: %s", country, exc)
            self.facts.fail(token)
            return
        self.facts.resolve(token, facts)


__all__ = [
    "FactsPanel",
    "GlobePicker",
    "ManualPicker",
    "PanelState",
    "ProxyClient",
    "Session",
    "SurfaceSettings",
    "Viewport",
    "WeatherPanel",
]
