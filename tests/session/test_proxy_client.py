# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import pytest

from globeweather.errors import MalformedResponse, TransportFailure, UpstreamError
from globeweather.geo import Coordinate
from globeweather.session import ProxyClient
from tests.helpers import (
    WEATHER_OK,
    FakeResponse,
    RequestRecorder,
    completion,
    connection_error,
)

pytestmark = pytest.mark.anyio


async def test_weather_hits_proxy_route(monkeypatch) -> None:
    rec = RequestRecorder(FakeResponse(body=WEATHER_OK))
    monkeypatch.setattr("requests.request", rec)

    payload = await ProxyClient("http://proxy.test/").weather(Coordinate(48.8566, 2.3522))

    assert payload == WEATHER_OK
    call = rec.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "http://proxy.test/api/weather"
    assert call["params"] == {"lat": "48.8566", "lon": "2.3522"}


async def test_weather_default_base_from_env(monkeypatch) -> None:
    monkeypatch.setenv("GLOBEWEATHER_API_URL", "http://elsewhere:9000")
    rec = RequestRecorder(FakeResponse(body=WEATHER_OK))
    monkeypatch.setattr("requests.request", rec)

    await ProxyClient().weather(Coordinate(1, 2))

    assert rec.calls[0]["url"] == "http://elsewhere:9000/api/weather"


async def test_weather_error_status_carries_detail(monkeypatch) -> None:
    rec = RequestRecorder(FakeResponse(status_code=500, body={"error": {"code": 101}}))
    monkeypatch.setattr("requests.request", rec)

    with pytest.raises(UpstreamError) as excinfo:
        await ProxyClient("http://proxy.test").weather(Coordinate(1, 2))

    assert excinfo.value.detail == {"code": 101}
    assert "500" in str(excinfo.value)


async def test_weather_connection_error(monkeypatch) -> None:
    monkeypatch.setattr("requests.request", RequestRecorder(connection_error()))

    with pytest.raises(TransportFailure):
        await ProxyClient("http://proxy.test").weather(Coordinate(1, 2))


async def test_facts_parses_completion(monkeypatch) -> None:
    text = "1. Paris is the capital.\n2. Wine.\n3. Cheese.\n4. Art.\n5. Fashion."
    rec = RequestRecorder(FakeResponse(body=completion(text)))
    monkeypatch.setattr("requests.request", rec)

    facts = await ProxyClient("http://proxy.test").facts("France")

    assert facts == ["Paris is the capital.", "Wine.", "Cheese.", "Art.", "Fashion."]
    call = rec.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "http://proxy.test/api/facts"
    assert call["json"] == {"country": "France"}


async def test_facts_malformed_completion(monkeypatch) -> None:
    rec = RequestRecorder(FakeResponse(body={"choices": []}))
    monkeypatch.setattr("requests.request", rec)

    with pytest.raises(MalformedResponse):
        await ProxyClient("http://proxy.test").facts("France")


async def test_facts_error_status(monkeypatch) -> None:
    rec = RequestRecorder(FakeResponse(status_code=400, body={"error": "Country is required"}))
    monkeypatch.setattr("requests.request", rec)

    with pytest.raises(UpstreamError) as excinfo:
        await ProxyClient("http://proxy.test").facts("")

    assert excinfo.value.detail == "Country is required"
