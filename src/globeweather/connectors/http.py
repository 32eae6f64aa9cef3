# SPDX-License-Identifier: Apache-2.0
"""Single-shot HTTP helper shared by the provider connectors and the session.

Calls are never retried and carry no timeout: each one is a fresh request
whose outcome is reported to the caller as-is.
"""

from __future__ import annotations

import json
from typing import Any

import requests

from globeweather.errors import MalformedResponse, TransportFailure


def request_once(
    method: str,
    url: str,
    *,
    headers: dict[str, str] | None = None,
    params: dict[str, str] | None = None,
    json_body: Any | None = None,
) -> tuple[int, dict[str, str], bytes]:
    """Perform one request; transport errors become ``TransportFailure``."""

    try:
        resp = requests.request(
            method.upper(),
            url,
            headers=headers or {},
            params=params or {},
            json=json_body,
            timeout=None,
        )
    except requests.RequestException as exc:
        raise TransportFailure(f"{method.upper()} {url} failed: {exc}") from exc
    # Flatten headers to str->str
    headers_out: dict[str, str] = {k: v for k, v in resp.headers.items()}
    return resp.status_code, headers_out, resp.content or b""


def decode_json(content: bytes) -> Any:
    """Decode a JSON body or raise ``MalformedResponse``."""

    try:
        return json.loads(content.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise MalformedResponse("Response body is not valid JSON") from exc
