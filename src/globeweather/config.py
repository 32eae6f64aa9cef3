# SPDX-License-Identifier: Apache-2.0
"""Runtime configuration resolved from the process environment.

Values are read on every call so tests and long-running servers pick up
changes to the environment without a restart.
"""

from __future__ import annotations

from globeweather.utils.env import env, secret

DEFAULT_WEATHER_BASE_URL = "http://api.weatherstack.com"
DEFAULT_LLM_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_LLM_MODEL = "cognitivecomputations/dolphin3.0-r1-mistral-24b:free"
DEFAULT_API_URL = "http://127.0.0.1:8000"

WEATHER_KEY_ENV = "WEATHERSTACK_API_KEY"
LLM_KEY_ENV = "OPEN_ROUTER_API_KEY"


def weather_base_url() -> str:
    return (env("WEATHER_BASE_URL") or DEFAULT_WEATHER_BASE_URL).rstrip("/")


def weather_api_key() -> str | None:
    return secret(WEATHER_KEY_ENV)


def llm_base_url() -> str:
    return (env("LLM_BASE_URL") or DEFAULT_LLM_BASE_URL).rstrip("/")


def llm_model() -> str:
    return env("LLM_MODEL") or DEFAULT_LLM_MODEL


def llm_api_key() -> str | None:
    return secret(LLM_KEY_ENV)


def api_url() -> str:
    """Base URL of a running proxy server, used by the CLI session."""

    return (env("API_URL") or DEFAULT_API_URL).rstrip("/")


def cors_origins() -> list[str]:
    raw = env("CORS_ORIGINS", "*") or "*"
    return [item.strip() for item in raw.split(",") if item.strip()]
