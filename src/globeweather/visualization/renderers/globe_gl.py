# SPDX-License-Identifier: Apache-2.0
"""globe.gl based renderer emitting the interactive weather page."""

from __future__ import annotations

import html
import json
import logging
from importlib import resources as ir
from pathlib import Path
from textwrap import dedent

from globeweather.errors import MalformedResponse, ValidationError
from globeweather.facts import FACT_COUNT, FACT_SPLIT_PATTERN, FACTS_FAILURE_MESSAGE
from globeweather.landmarks import Landmark, load_landmarks
from globeweather.session.pickers import SurfaceSettings

from .base import BundleRenderer, GlobeBundle
from .registry import register

LOGGER = logging.getLogger(__name__)

GLOBE_GL_SRC = "https://unpkg.com/globe.gl@2"
GLOBE_IMAGE_URL = "https://unpkg.com/three-globe/example/img/earth-blue-marble.jpg"
BUMP_IMAGE_URL = "https://unpkg.com/three-globe/example/img/earth-topology.png"


@register
class GlobeGLRenderer(BundleRenderer):
    slug = "globe-gl"

    # Never embedded in the page config
    _PRIVATE_OPTIONS = {"landmarks", "settings", "api_key", "credentials", "auth"}

    def build(self, *, output_dir: Path) -> GlobeBundle:
        output_dir = Path(output_dir)
        assets_dir = output_dir / "assets"
        assets_dir.mkdir(parents=True, exist_ok=True)

        index_html = output_dir / "index.html"
        script_path = assets_dir / "globe.js"
        config_path = assets_dir / "config.json"

        config = self._sanitized_config()
        config_path.write_text(json.dumps(config, indent=2) + "\n", encoding="utf-8")
        index_html.write_text(self._render_index_html(config), encoding="utf-8")
        script_path.write_text(self._render_script(), encoding="utf-8")

        LOGGER.debug("Wrote globe bundle to %s", output_dir)
        return GlobeBundle(
            output_dir=output_dir,
            index_html=index_html,
            config_json=config_path,
            assets=(script_path, config_path),
        )

    def _landmarks(self) -> list[dict[str, object]]:
        landmarks = self._options.get("landmarks")
        if landmarks is None:
            landmarks = load_landmarks()
        return [
            lm.to_dict() if isinstance(lm, Landmark) else dict(lm) for lm in landmarks
        ]

    def _sanitized_config(self) -> dict[str, object]:
        """Return config suitable for embedding (no credentials)."""

        settings = self._options.get("settings") or SurfaceSettings()
        filtered = {
            key: value
            for key, value in self._options.items()
            if key not in self._PRIVATE_OPTIONS and value is not None
        }
        api_base = str(filtered.pop("api_base", "") or "").rstrip("/")
        filtered.setdefault("title", "Interactive World Landmarks & Weather")
        filtered.setdefault(
            "description",
            "Discover famous landmarks and check local weather around the globe",
        )
        filtered.setdefault("width", None)
        filtered.setdefault("height", None)
        filtered.setdefault("globe_image_url", GLOBE_IMAGE_URL)
        filtered.setdefault("bump_image_url", BUMP_IMAGE_URL)
        filtered.update(
            {
                "weather_endpoint": f"{api_base}/api/weather",
                "facts_endpoint": f"{api_base}/api/facts",
                "landmarks": self._landmarks(),
                "surface": settings.to_dict(),
                "fact_count": FACT_COUNT,
                "fact_split_pattern": FACT_SPLIT_PATTERN,
                "messages": {
                    "facts_failure": FACTS_FAILURE_MESSAGE,
                    "no_data": MalformedResponse.message,
                    "validation": ValidationError.message,
                    "weather_failure": "Failed to load weather data",
                },
            }
        )
        return filtered

    def _render_index_html(self, config: dict[str, object]) -> str:
        title = html.escape(str(config.get("title") or ""))
        description = html.escape(str(config.get("description") or ""))
        config_json = json.dumps(config, indent=2).replace("</", "<\\/")
        return (
            dedent(
                f"""
            <!DOCTYPE html>
            <html lang="en">
              <head>
                <meta charset="utf-8" />
                <meta name="viewport" content="width=device-width, initial-scale=1" />
                <title>Weather Globe</title>
                <meta name="description" content="Interactive globe with real-time weather data" />
                <style>
                  body, html {{ margin: 0; padding: 0; font-family: system-ui, sans-serif; background: linear-gradient(#eff6ff, #dbeafe); color: #1f2937; }}
                  main {{ min-height: 100vh; display: flex; flex-direction: column; align-items: center; justify-content: center; padding: 8px; box-sizing: border-box; }}
                  h2 {{ color: #1e40af; margin: 0 0 8px; text-align: center; }}
                  .gw-sub {{ color: #4b5563; margin: 0 0 12px; text-align: center; font-size: 0.9rem; }}
                  #gw-globe-container {{ position: relative; width: 100%; max-width: 56rem; height: 600px; cursor: pointer; }}
                  #gw-manual {{ display: flex; gap: 8px; margin: 12px 0; }}
                  #gw-manual input {{ width: 7rem; padding: 4px; border: 1px solid #d1d5db; }}
                  #gw-manual button {{ background: #22c55e; color: #fff; border: 0; padding: 4px 10px; cursor: pointer; }}
                  .gw-hint {{ font-size: 0.8rem; color: #6b7280; text-align: center; }}
                  .gw-overlay {{ position: fixed; inset: 0; background: rgba(0, 0, 0, 0.5); display: none; align-items: center; justify-content: center; z-index: 10; }}
                  .gw-overlay[data-open="true"] {{ display: flex; }}
                  .gw-card {{ background: #fff; border-radius: 8px; padding: 16px 20px; max-width: 24rem; width: 90%; box-shadow: 0 10px 25px rgba(0, 0, 0, 0.2); }}
                  #gw-weather {{ position: fixed; left: 0; right: 0; bottom: 0; background: #fff; border-radius: 12px 12px 0 0; box-shadow: 0 -8px 24px rgba(0, 0, 0, 0.15); padding: 16px; display: none; z-index: 5; max-width: 28rem; margin: 0 auto; }}
                  #gw-weather[data-open="true"] {{ display: block; }}
                  .gw-grid {{ display: grid; grid-template-columns: 1fr 1fr; gap: 8px; }}
                  .gw-tile {{ background: #f9fafb; padding: 8px; border-radius: 6px; }}
                  .gw-tile span {{ display: block; font-size: 0.75rem; color: #6b7280; }}
                  .gw-error {{ color: #dc2626; }}
                  .gw-spinner {{ display: inline-block; width: 18px; height: 18px; border-radius: 50%; border: 2px solid #bfdbfe; border-bottom-color: #3b82f6; animation: gw-spin 0.8s linear infinite; vertical-align: middle; }}
                  @keyframes gw-spin {{ to {{ transform: rotate(360deg); }} }}
                  button.gw-primary {{ width: 100%; margin-top: 10px; background: #3b82f6; color: #fff; border: 0; border-radius: 6px; padding: 8px; cursor: pointer; }}
                  ol.gw-facts {{ padding-left: 1.25rem; }}
                </style>
              </head>
              <body>
                <main>
                  <h2>{title}</h2>
                  <p class="gw-sub">{description}</p>
                  <form id="gw-manual" autocomplete="off">
                    <input type="number" step="any" name="lat" placeholder="Latitude" />
                    <input type="number" step="any" name="lon" placeholder="Longitude" />
                    <button type="submit">Search</button>
                  </form>
                  <div id="gw-globe-container"><div id="gw-globe"></div></div>
                  <div class="gw-hint">Click on a landmark or any location to check the local weather</div>
                </main>
                <section id="gw-weather" data-open="false" aria-live="polite">
                  <div data-weather-body></div>
                  <button type="button" class="gw-primary" data-weather-close>Close</button>
                </section>
                <div id="gw-facts" class="gw-overlay" data-open="false" role="dialog">
                  <div class="gw-card">
                    <h3 data-facts-title>Country Facts</h3>
                    <div data-facts-body></div>
                    <button type="button" class="gw-primary" data-facts-close>Close</button>
                  </div>
                </div>
                <div id="gw-manual-modal" class="gw-overlay" data-open="false" role="dialog">
                  <div class="gw-card">
                    <div data-manual-body></div>
                    <button type="button" class="gw-primary" data-manual-close>Close</button>
                  </div>
                </div>
                <script>
                  window.GLOBEWEATHER_CONFIG = {config_json};
                </script>
                <script src="{GLOBE_GL_SRC}"></script>
                <script src="assets/globe.js"></script>
              </body>
            </html>
            """
            ).strip()
            + "\n"
        )

    def _render_script(self) -> str:
        """Return the packaged script that boots the globe and wires the panels."""

        return ir.files("globeweather.assets").joinpath("globe.js").read_text(encoding="utf-8")
