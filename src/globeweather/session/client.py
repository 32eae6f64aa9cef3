# SPDX-License-Identifier: Apache-2.0
"""Client for the proxy endpoints, used by the picker surfaces.

Requests run in a worker thread so the calling event loop is never blocked;
the coroutine resumes on the loop once the response is in.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from globeweather import config
from globeweather.connectors.http import decode_json, request_once
from globeweather.errors import MalformedResponse, UpstreamError
from globeweather.facts import extract_completion, parse_facts
from globeweather.geo import Coordinate

LOGGER = logging.getLogger(__name__)


def _error_detail(content: bytes) -> Any:
    try:
        body = decode_json(content)
    except MalformedResponse:
        return content.decode("utf-8", errors="ignore") or None
    if isinstance(body, dict) and "error" in body:
        return body["error"]
    return body


class ProxyClient:
    def __init__(self, base_url: str | None = None) -> None:
        self.base_url = (base_url or config.api_url()).rstrip("/")

    async def weather(self, coordinate: Coordinate) -> dict[str, Any]:
        """Return the relayed provider payload for ``coordinate``."""

        url = f"{self.base_url}/api/weather"
        status, _headers, content = await asyncio.to_thread(
            request_once, "GET", url, params=coordinate.as_params()
        )
        if status >= 400:
            raise UpstreamError(
                detail=_error_detail(content), message=f"HTTP error! status: {status}"
            )
        return decode_json(content)

    async def facts(self, country: str) -> list[str]:
        """Request facts for ``country`` and parse the completion text."""

        url = f"{self.base_url}/api/facts"
        status, _headers, content = await asyncio.to_thread(
            request_once, "POST", url, json_body={"country": country}
        )
        if status >= 400:
            raise UpstreamError(
                detail=_error_detail(content),
                message=f"HTTP error! Unable to generate facts status: {status}",
            )
        facts = parse_facts(extract_completion(decode_json(content)))
        LOGGER.debug("Facts loaded: %s", facts)
        return facts
