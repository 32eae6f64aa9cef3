# SPDX-License-Identifier: Apache-2.0
"""AI facts proxy route.

Forwards a fixed prompt for one country to the completion provider and
relays the provider payload; parsing happens in the facts panel.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter
from pydantic import BaseModel, Field

from globeweather.api.utils.errors import error_response, upstream_error_response
from globeweather.connectors.llm_client import select_client
from globeweather.errors import TransportFailure, UpstreamError
from globeweather.facts import build_messages

router = APIRouter(tags=["facts"])

LOGGER = logging.getLogger(__name__)

FACTS_ERROR = "Failed to generate facts"


class FactsRequest(BaseModel):
    country: str | None = Field(default=None, description="Country name")


@router.post("/facts")
def facts(req: FactsRequest | None = None):
    country = ((req.country if req else None) or "").strip()
    if not country:
        return error_response(status_code=400, error="Country is required")

    client = select_client()
    try:
        return client.complete(build_messages(country))
    except UpstreamError as exc:
        return upstream_error_response(
            route="/api/facts",
            err_type="UpstreamError",
            error=FACTS_ERROR,
            log_detail={"message": str(exc), "detail": exc.detail},
        )
    except TransportFailure:
        LOGGER.exception("Failed to generate facts for %s", country)
        return error_response(status_code=500, error=FACTS_ERROR)
