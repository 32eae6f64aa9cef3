# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from globeweather.utils.obs import log_api_error

# Envelope text for routes whose whole body failed validation
BODY_ERRORS = {"/api/facts": "Country is required"}


def error_response(*, status_code: int, error: Any) -> JSONResponse:
    """Return the ``{"error": ...}`` envelope used by every proxy route."""

    return JSONResponse(content={"error": error}, status_code=status_code)


def upstream_error_response(
    *, route: str, err_type: str, error: Any, log_detail: Any = None
) -> JSONResponse:
    """Log a provider-side failure and answer with a 500 envelope."""

    log_api_error(route, err_type, log_detail if log_detail is not None else error)
    return error_response(status_code=500, error=error)


def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed request bodies with a 400 envelope instead of FastAPI's 422."""

    error = BODY_ERRORS.get(request.url.path, "Invalid request")
    log_api_error(request.url.path, "RequestValidationError", exc.errors())
    return error_response(status_code=400, error=error)
