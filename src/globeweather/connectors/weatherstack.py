# SPDX-License-Identifier: Apache-2.0
"""Weather provider connector (weatherstack ``/current`` endpoint)."""

from __future__ import annotations

import logging
import time
from typing import Any

from globeweather import config
from globeweather.utils.obs import log_upstream_call
from globeweather.connectors.http import decode_json, request_once
from globeweather.errors import MalformedResponse, TransportFailure, UpstreamError

LOGGER = logging.getLogger(__name__)


def current_url() -> str:
    return f"{config.weather_base_url()}/current"


def fetch_current(lat: str, lon: str) -> dict[str, Any]:
    """Fetch current conditions for ``lat``/``lon`` and return the raw payload.

    Raises ``UpstreamError`` when the provider answers with an ``error``
    object and ``TransportFailure`` when it cannot be reached or decoded.
    """

    params = {
        "access_key": config.weather_api_key() or "",
        "query": f"{lat},{lon}",
    }
    started = time.time()
    status, _headers, content = request_once("GET", current_url(), params=params)
    try:
        payload = decode_json(content)
    except MalformedResponse as exc:
        log_upstream_call("weatherstack", "current", params, status, started)
        raise TransportFailure("Weather provider returned an undecodable body") from exc
    log_upstream_call("weatherstack", "current", params, status, started)
    if isinstance(payload, dict) and payload.get("error") is not None:
        raise UpstreamError(detail=payload["error"])
    if not isinstance(payload, dict):
        raise TransportFailure("Weather provider returned a non-object body")
    return payload
