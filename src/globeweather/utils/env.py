# SPDX-License-Identifier: Apache-2.0
"""Environment helpers reading ``GLOBEWEATHER_<KEY>`` variables."""

from __future__ import annotations

import os
from pathlib import Path

PREFIX = "GLOBEWEATHER_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def env(key: str, default: str | None = None) -> str | None:
    """Return ``GLOBEWEATHER_<key>`` or ``default`` when unset or blank."""

    value = os.environ.get(f"{PREFIX}{key}")
    if value is None or not value.strip():
        return default
    return value.strip()


def env_bool(key: str, default: bool = False) -> bool:
    value = env(key)
    if value is None:
        return default
    lower = value.lower()
    if lower in _TRUE:
        return True
    if lower in _FALSE:
        return False
    return default


def env_path(key: str, default: str | None = None) -> Path | None:
    value = env(key, default)
    return Path(value).expanduser() if value else None


def secret(name: str) -> str | None:
    """Read an unprefixed secret such as ``WEATHERSTACK_API_KEY``.

    Secrets are looked up at call time and never validated up front; a
    missing value only shows up as an upstream authentication failure.
    """

    value = os.environ.get(name)
    return value if value else None
