# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import logging
import time
from typing import Any

_UPSTREAM_LOG = logging.getLogger("globeweather.upstream")
_API_LOG = logging.getLogger("globeweather.api")


_SENSITIVE_KEYS = {
    "authorization",
    "password",
    "token",
    "api_key",
    "apikey",
    "access_key",
    "secret",
    "bearer",
}


def _redact(value: Any) -> Any:
    try:
        if isinstance(value, str):
            # naive redact for tokens in strings
            lower = value.lower()
            for k in _SENSITIVE_KEYS:
                if k in lower:
                    return "[REDACTED]"
            return value
        if isinstance(value, dict):
            return {
                k: ("[REDACTED]" if k.lower() in _SENSITIVE_KEYS else _redact(v))
                for k, v in value.items()
            }
        if isinstance(value, list):
            return [_redact(v) for v in value]
        return value
    except Exception:
        return value


def log_upstream_call(
    provider: str,
    operation: str,
    params: dict[str, Any] | None,
    status: int | None,
    started_at: float,
) -> None:
    try:
        dur_ms = int((time.time() - started_at) * 1000)
        payload = {
            "event": "upstream_call",
            "provider": provider,
            "operation": operation,
            "status": status,
            "duration_ms": dur_ms,
            "params": _redact(dict(params or {})),
        }
        _UPSTREAM_LOG.info("%s", payload)
    except Exception:
        # Avoid raising on logging failures
        pass


def log_api_error(route: str, err_type: str, detail: Any) -> None:
    try:
        payload = {
            "event": "api_error",
            "route": route,
            "type": err_type,
            "detail": _redact(detail),
        }
        _API_LOG.error("%s", payload)
    except Exception:
        pass
