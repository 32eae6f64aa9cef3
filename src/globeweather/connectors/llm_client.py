# SPDX-License-Identifier: Apache-2.0
"""Chat-completion clients used for country facts."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any

from globeweather import config
from globeweather.connectors.http import decode_json, request_once
from globeweather.errors import MalformedResponse, TransportFailure, UpstreamError
from globeweather.utils.env import env
from globeweather.utils.obs import log_upstream_call

LOGGER = logging.getLogger(__name__)


@dataclass
class LLMClient:
    name: str = "base"
    model: str | None = None

    def complete(
        self, messages: list[dict[str, str]]
    ) -> dict[str, Any]:  # pragma: no cover - thin wrapper
        """Return the provider's raw chat-completion payload."""
        raise NotImplementedError


class OpenRouterClient(LLMClient):
    name = "openrouter"

    def __init__(
        self,
        model: str | None = None,
        base_url: str | None = None,
        api_key: str | None = None,
    ) -> None:
        super().__init__(model=model or config.llm_model())
        self.base_url = (base_url or config.llm_base_url()).rstrip("/")
        self.api_key = api_key if api_key is not None else config.llm_api_key()

    def complete(self, messages: list[dict[str, str]]) -> dict[str, Any]:
        url = f"{self.base_url}/chat/completions"
        headers = {
            "Authorization": f"Bearer {self.api_key or ''}",
            "Content-Type": "application/json",
        }
        body = {"model": self.model, "messages": messages}
        started = time.time()
        status, _headers, content = request_once(
            "POST", url, headers=headers, json_body=body
        )
        log_upstream_call(self.name, "chat.completions", {"model": self.model}, status, started)
        if status >= 400:
            raise UpstreamError(
                detail=content.decode("utf-8", errors="ignore") or None,
                message=f"HTTP error! Unable to generate facts status: {status}",
            )
        try:
            payload = decode_json(content)
        except MalformedResponse as exc:
            raise TransportFailure("AI provider returned an undecodable body") from exc
        if not isinstance(payload, dict):
            raise TransportFailure("AI provider returned a non-object body")
        return payload


class MockClient(LLMClient):
    name = "mock"

    def __init__(self) -> None:
        super().__init__(model="mock")

    def complete(self, messages: list[dict[str, str]]) -> dict[str, Any]:
        prompt = messages[-1]["content"] if messages else ""
        country = prompt.split(":", 1)[-1].split(",", 1)[0].strip() or "this country"
        text = "\n".join(
            f"{i}. Mock fact #{i} about {country}" for i in range(1, 6)
        )
        return {
            "model": self.model,
            "choices": [{"index": 0, "message": {"role": "assistant", "content": text}}],
        }


def select_client(provider: str | None = None, model: str | None = None) -> LLMClient:
    """Pick the completion client from ``provider`` or ``GLOBEWEATHER_LLM_PROVIDER``."""

    prov = (provider or env("LLM_PROVIDER", "openrouter") or "openrouter").lower()
    if prov == "mock":
        return MockClient()
    if prov != "openrouter":
        LOGGER.warning("Unknown LLM provider %r; using openrouter", prov)
    return OpenRouterClient(model=model)
