# SPDX-License-Identifier: Apache-2.0
"""Weather proxy route.

Keeps the provider access key on the server: the browser sends only the
coordinate and receives the provider's JSON verbatim.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query

from globeweather.api.utils.errors import error_response, upstream_error_response
from globeweather.connectors import weatherstack
from globeweather.errors import MissingParameter, TransportFailure, UpstreamError

router = APIRouter(tags=["weather"])

LOGGER = logging.getLogger(__name__)

_LAT_QUERY = Query(default=None, description="Latitude in decimal degrees")
_LON_QUERY = Query(default=None, description="Longitude in decimal degrees")


@router.get("/weather")
def weather(lat: str | None = _LAT_QUERY, lon: str | None = _LON_QUERY):
    """Relay current conditions for ``lat``/``lon`` from the weather provider.

    - 400 when either coordinate is missing or empty (no upstream call)
    - 500 with the provider's ``error`` object on provider errors
    - 500 with a generic message when the provider cannot be reached
    """
    if not lat or not lon:
        return error_response(status_code=400, error=MissingParameter.message)

    try:
        return weatherstack.fetch_current(lat, lon)
    except UpstreamError as exc:
        return upstream_error_response(
            route="/api/weather", err_type="UpstreamError", error=exc.detail
        )
    except TransportFailure:
        LOGGER.exception("Failed to fetch weather data")
        return error_response(status_code=500, error=TransportFailure.message)
