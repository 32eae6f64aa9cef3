# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import pytest


@pytest.fixture
def anyio_backend() -> str:
    # Session tasks are scheduled with asyncio directly
    return "asyncio"


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host secrets and .env files out of every test."""

    monkeypatch.setenv("GLOBEWEATHER_SKIP_DOTENV", "1")
    monkeypatch.setenv("WEATHERSTACK_API_KEY", "ws-test-key")
    monkeypatch.setenv("OPEN_ROUTER_API_KEY", "or-test-key")
    for name in (
        "GLOBEWEATHER_WEATHER_BASE_URL",
        "GLOBEWEATHER_LLM_BASE_URL",
        "GLOBEWEATHER_LLM_MODEL",
        "GLOBEWEATHER_LLM_PROVIDER",
        "GLOBEWEATHER_API_URL",
        "GLOBEWEATHER_BUNDLE_DIR",
        "GLOBEWEATHER_SERVE_UI",
        "GLOBEWEATHER_CORS_ORIGINS",
        "GLOBEWEATHER_VERBOSITY",
    ):
        monkeypatch.delenv(name, raising=False)
