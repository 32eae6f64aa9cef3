from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import requests


@dataclass
class FakeResponse:
    status_code: int = 200
    body: Any = None
    raw: bytes | None = None
    headers: dict[str, str] = field(
        default_factory=lambda: {"Content-Type": "application/json"}
    )

    @property
    def content(self) -> bytes:
        if self.raw is not None:
            return self.raw
        return json.dumps(self.body).encode("utf-8")


class RequestRecorder:
    """Stand-in for ``requests.request`` that records calls.

    ``responses`` are returned in order; an exception instance is raised
    instead of returned.
    """

    def __init__(self, *responses: FakeResponse | Exception) -> None:
        self._responses = list(responses)
        self.calls: list[dict[str, Any]] = []

    def __call__(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self._responses:
            raise AssertionError(f"unexpected request: {method} {url}")
        item = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
        if isinstance(item, Exception):
            raise item
        return item


def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")


WEATHER_OK: dict[str, Any] = {
    "request": {"type": "LatLon", "query": "Lat 48.86 and Lon 2.35"},
    "location": {"name": "Paris", "country": "France", "lat": "48.867"},
    "current": {
        "temperature": 14,
        "weather_descriptions": ["Partly cloudy", "Mist"],
        "humidity": 72,
        "wind_speed": 11,
        "pressure": 1016,
        "visibility": 10,
    },
}

WEATHER_ERROR: dict[str, Any] = {
    "success": False,
    "error": {
        "code": 101,
        "type": "invalid_access_key",
        "info": "You have not supplied a valid API Access Key.",
    },
}


def completion(text: str) -> dict[str, Any]:
    return {
        "id": "gen-1",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": text}}],
    }
