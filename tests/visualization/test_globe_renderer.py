# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import json
from importlib import resources as ir
from pathlib import Path

import pytest

from globeweather.facts import FACT_SPLIT_PATTERN
from globeweather.landmarks import Landmark, load_landmarks
from globeweather.visualization.renderers import (
    DEFAULT_RENDERER,
    BundleRenderer,
    available,
    create,
    register,
)


def _config(bundle) -> dict:
    return json.loads(bundle.config_json.read_text(encoding="utf-8"))


def test_globe_gl_registered() -> None:
    slugs = {renderer.slug for renderer in available()}
    assert DEFAULT_RENDERER == "globe-gl"
    assert "globe-gl" in slugs


def test_globe_gl_builds_bundle(tmp_path) -> None:
    bundle = create("globe-gl", width=640, height=360).build(output_dir=tmp_path)

    assert bundle.index_html.exists()
    assert bundle.output_dir == tmp_path
    assert {path.name for path in bundle.assets} == {"globe.js", "config.json"}

    html = bundle.index_html.read_text(encoding="utf-8")
    assert "window.GLOBEWEATHER_CONFIG" in html
    assert "https://unpkg.com/globe.gl@2" in html
    assert 'src="assets/globe.js"' in html
    for section in ("gw-manual", "gw-globe", "gw-weather", "gw-facts", "gw-manual-modal"):
        assert f'id="{section}"' in html

    config = _config(bundle)
    assert config["width"] == 640
    assert config["height"] == 360
    assert config["weather_endpoint"] == "/api/weather"
    assert config["facts_endpoint"] == "/api/facts"


def test_config_carries_landmarks_and_surface(tmp_path) -> None:
    config = _config(create("globe-gl").build(output_dir=tmp_path))

    names = [lm["name"] for lm in config["landmarks"]]
    assert names == [lm.name for lm in load_landmarks()]
    assert config["surface"]["auto_rotate_speed"] == 0.1
    assert config["surface"]["landmark_altitude"] == 1.5
    assert config["surface"]["transition_ms"] == 1000
    assert config["fact_count"] == 5
    assert config["fact_split_pattern"] == FACT_SPLIT_PATTERN
    assert config["width"] is None
    assert set(config["messages"]) == {"facts_failure", "no_data", "validation", "weather_failure"}


def test_custom_landmarks_option(tmp_path) -> None:
    custom = (Landmark("Home", "Nowhere", 1.0, 2.0, "#fff"),)
    config = _config(create("globe-gl", landmarks=custom).build(output_dir=tmp_path))

    assert config["landmarks"] == [custom[0].to_dict()]


def test_config_never_embeds_secrets(tmp_path, monkeypatch) -> None:
    bundle = create(
        "globe-gl", api_key="sk-live", credentials={"user": "u"}, auth="Bearer x"
    ).build(output_dir=tmp_path)

    config = _config(bundle)
    for key in ("api_key", "credentials", "auth"):
        assert key not in config
    text = bundle.index_html.read_text(encoding="utf-8") + bundle.config_json.read_text(
        encoding="utf-8"
    )
    assert "sk-live" not in text
    assert "ws-test-key" not in text
    assert "or-test-key" not in text


def test_api_base_prefixes_endpoints(tmp_path) -> None:
    config = _config(
        create("globe-gl", api_base="https://weather.example/").build(output_dir=tmp_path)
    )

    assert config["weather_endpoint"] == "https://weather.example/api/weather"
    assert config["facts_endpoint"] == "https://weather.example/api/facts"
    assert "api_base" not in config


def test_title_is_escaped(tmp_path) -> None:
    bundle = create("globe-gl", title="<b>Globe</b></script>").build(output_dir=tmp_path)

    html = bundle.index_html.read_text(encoding="utf-8")
    assert "<h2>&lt;b&gt;Globe&lt;/b&gt;&lt;/script&gt;</h2>" in html
    assert "</script>\"" not in html


def test_script_keeps_generation_guards(tmp_path) -> None:
    bundle = create("globe-gl").build(output_dir=tmp_path)
    script = Path(bundle.output_dir, "assets", "globe.js").read_text(encoding="utf-8")

    assert "token !== weatherPanel.generation" in script
    assert "token !== factsPanel.generation" in script
    assert 'removeEventListener("resize", updateDimensions)' in script


def test_registry_rejects_duplicates_and_foreign_classes() -> None:
    with pytest.raises(ValueError):

        @register
        class _Dup(BundleRenderer):
            slug = "globe-gl"

            def build(self, *, output_dir):
                raise NotImplementedError

    with pytest.raises(TypeError):
        register(object)  # type: ignore[arg-type]


def test_unknown_slug() -> None:
    with pytest.raises(KeyError):
        create("cesium-globe")


def test_script_comes_from_packaged_asset(tmp_path) -> None:
    bundle = create("globe-gl").build(output_dir=tmp_path)
    written = Path(bundle.output_dir, "assets", "globe.js").read_text(encoding="utf-8")

    packaged = ir.files("globeweather.assets").joinpath("globe.js").read_text(encoding="utf-8")
    assert written == packaged
    assert written.startswith("(function bootstrap() {")
