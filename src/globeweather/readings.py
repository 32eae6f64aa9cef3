# SPDX-License-Identifier: Apache-2.0
"""Helpers for the weather provider payload.

The payload is relayed verbatim by the proxy, so the session side only
checks for the two sub-objects it renders and reads fields as-is.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def is_well_formed(payload: Any) -> bool:
    """True when ``payload`` carries both ``location`` and ``current`` objects."""

    if not isinstance(payload, dict):
        return False
    return isinstance(payload.get("location"), dict) and isinstance(
        payload.get("current"), dict
    )


@dataclass(frozen=True, slots=True)
class WeatherSummary:
    name: Any
    country: Any
    temperature: Any
    conditions: str
    humidity: Any
    wind_speed: Any
    pressure: Any
    visibility: Any

    def lines(self) -> list[str]:
        return [
            f"{self.name}, {self.country}",
            f"Temperature: {self.temperature}°C",
            f"Conditions: {self.conditions}",
            f"Humidity: {self.humidity}%",
            f"Wind Speed: {self.wind_speed} km/h",
            f"Pressure: {self.pressure} mb",
            f"Visibility: {self.visibility} km",
        ]


def summarize(payload: dict[str, Any]) -> WeatherSummary:
    """Pull the displayed fields out of a well-formed reading."""

    location = payload["location"]
    current = payload["current"]
    descriptions = current.get("weather_descriptions") or []
    return WeatherSummary(
        name=location.get("name"),
        country=location.get("country"),
        temperature=current.get("temperature"),
        conditions=", ".join(str(d) for d in descriptions),
        humidity=current.get("humidity"),
        wind_speed=current.get("wind_speed"),
        pressure=current.get("pressure"),
        visibility=current.get("visibility"),
    )
