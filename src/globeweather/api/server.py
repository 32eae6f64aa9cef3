# SPDX-License-Identifier: Apache-2.0
"""FastAPI application factory."""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from globeweather import __version__, config
from globeweather.api.routers import facts, landmarks, weather
from globeweather.api.utils.errors import request_validation_handler
from globeweather.utils.cli_helpers import load_dotenv_if_enabled
from globeweather.utils.env import env_bool, env_path
from globeweather.visualization.renderers import DEFAULT_RENDERER, create

LOGGER = logging.getLogger(__name__)


def _prepare_bundle(bundle_dir: Path | None) -> Path:
    if bundle_dir is not None:
        index = bundle_dir / "index.html"
        if not index.is_file():
            raise FileNotFoundError(f"Bundle index not found: {index}")
        return bundle_dir
    out = Path(tempfile.mkdtemp(prefix="globeweather-bundle-"))
    bundle = create(DEFAULT_RENDERER).build(output_dir=out)
    LOGGER.info("Generated globe bundle at %s", bundle.index_html)
    return bundle.output_dir


def create_app(bundle_dir: str | Path | None = None, *, serve_ui: bool | None = None) -> FastAPI:
    """Build the app: ``/api`` proxy routes plus the static globe page at ``/``.

    ``bundle_dir`` (or ``GLOBEWEATHER_BUNDLE_DIR``) serves a pre-built
    bundle; otherwise one is generated into a temporary directory.
    """

    load_dotenv_if_enabled()

    app = FastAPI(title="globeweather", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins(),
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(weather.router, prefix="/api")
    app.include_router(facts.router, prefix="/api")
    app.include_router(landmarks.router, prefix="/api")

    @app.get("/healthz", include_in_schema=False)
    def healthz() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    if serve_ui is None:
        serve_ui = env_bool("SERVE_UI", True)
    if serve_ui:
        chosen = Path(bundle_dir) if bundle_dir is not None else env_path("BUNDLE_DIR")
        static_dir = _prepare_bundle(chosen)
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="ui")
    return app
