# SPDX-License-Identifier: Apache-2.0
"""Error taxonomy shared by the proxy endpoints and the session layer."""

from __future__ import annotations

from typing import Any


class GlobeWeatherError(Exception):
    """Base class for all handled failures."""

    message = "Unexpected error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class MissingParameter(GlobeWeatherError):
    """A required request parameter was absent or empty."""

    message = "Latitude and longitude are required"


class UpstreamError(GlobeWeatherError):
    """The provider answered with a structured error payload."""

    message = "Upstream provider returned an error"

    def __init__(self, detail: Any = None, message: str | None = None) -> None:
        super().__init__(message)
        self.detail = detail


class TransportFailure(GlobeWeatherError):
    """The provider could not be reached or its body could not be decoded."""

    message = "Failed to fetch weather data"


class ValidationError(GlobeWeatherError):
    """Client-side coordinate validation failed; nothing was sent."""

    message = (
        "Please enter a latitude between -90 and 90 and a longitude between "
        "-180 and 180."
    )


class MalformedResponse(GlobeWeatherError):
    """A response lacked the shape the caller needs."""

    message = "No data available for these coordinates."
