# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from globeweather.api.server import create_app


@pytest.fixture
def client() -> TestClient:
    """API-only app; the static page is covered separately."""
    return TestClient(create_app(serve_ui=False))
