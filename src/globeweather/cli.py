# SPDX-License-Identifier: Apache-2.0
"""Command-line entry point: serve the app, build the page, query the proxy."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import Any

from globeweather import __version__
from globeweather.readings import summarize
from globeweather.utils.cli_helpers import apply_verbosity_flags, configure_logging_from_env

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INVALID = 2


def _session(ns: Any):
    from globeweather.session import ProxyClient, Session

    return Session(ProxyClient(getattr(ns, "api", None)))


def _print_reading(reading: dict[str, Any], coords: Any = None) -> None:
    for line in summarize(reading).lines():
        print(line)
    if coords is not None:
        print(f"Coordinates: {coords}")


def _print_facts(panel) -> int:
    print(panel.title)
    if not panel.facts:
        print("No facts available")
        return EXIT_FAILED
    for idx, fact in enumerate(panel.facts, start=1):
        print(f"{idx}. {fact}")
    return EXIT_FAILED if panel.failed else EXIT_OK


def handle_serve(ns: Any) -> int:
    import uvicorn

    if ns.bundle_dir:
        os.environ["GLOBEWEATHER_BUNDLE_DIR"] = str(Path(ns.bundle_dir).expanduser())
    uvicorn.run(
        "globeweather.api.server:create_app",
        factory=True,
        host=ns.host,
        port=ns.port,
        log_level=logging.getLevelName(logging.getLogger().level).lower(),
    )
    return EXIT_OK


def handle_build(ns: Any) -> int:
    from globeweather.visualization.renderers import available, create

    slugs = sorted(r.slug for r in available())
    if ns.renderer not in slugs:
        raise SystemExit(
            f"Unknown globe renderer '{ns.renderer}'. Available: {', '.join(slugs)}"
        )
    options: dict[str, Any] = {}
    if ns.width is not None:
        options["width"] = ns.width
    if ns.height is not None:
        options["height"] = ns.height
    if ns.title:
        options["title"] = ns.title
    if ns.api_base:
        options["api_base"] = ns.api_base
    bundle = create(ns.renderer, **options).build(output_dir=Path(ns.output))
    logging.info("Generated globe bundle at %s", bundle.index_html)
    return EXIT_OK


async def _manual(ns: Any) -> int:
    session = _session(ns)
    picker = session.manual
    task = picker.submit(ns.lat, ns.lon)
    if task is not None:
        await task
    if not picker.modal.open:
        return EXIT_INVALID
    if picker.modal.reading is not None:
        _print_reading(picker.modal.reading, picker.panel.coordinate)
        return EXIT_OK
    print(f"Error: {picker.modal.message}", file=sys.stderr)
    return EXIT_INVALID if task is None else EXIT_FAILED


def handle_weather(ns: Any) -> int:
    return asyncio.run(_manual(ns))


async def _landmark(ns: Any) -> int:
    session = _session(ns)
    try:
        task = session.globe.select_landmark(ns.name)
    except KeyError as exc:
        print(f"Error: {exc.args[0]}", file=sys.stderr)
        return EXIT_INVALID
    await task
    panel = session.weather
    if panel.reading is None:
        print("Failed to load weather data", file=sys.stderr)
        return EXIT_FAILED
    _print_reading(panel.reading, panel.coordinate)
    if ns.facts:
        facts_task = session.request_facts()
        if facts_task is not None:
            await facts_task
            print()
            return _print_facts(session.facts)
    return EXIT_OK


def handle_landmark(ns: Any) -> int:
    return asyncio.run(_landmark(ns))


async def _facts(ns: Any) -> int:
    session = _session(ns)
    await session.request_facts_for(ns.country)
    return _print_facts(session.facts)


def handle_facts(ns: Any) -> int:
    return asyncio.run(_facts(ns))


def handle_landmarks(ns: Any) -> int:  # noqa: ARG001
    from globeweather.landmarks import load_landmarks

    for lm in load_landmarks():
        print(f"{lm.name:<24} {lm.country:<16} {lm.lat:>9.4f} {lm.lng:>10.4f}")
    return EXIT_OK


def _add_api_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--api",
        default=None,
        help="Base URL of a running globeweather server (default: GLOBEWEATHER_API_URL)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="globeweather", description="Interactive weather globe"
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Warnings only")
    sub = parser.add_subparsers(dest="command", required=True)

    p_serve = sub.add_parser("serve", help="Run the proxy API and globe page")
    p_serve.add_argument("--host", default="127.0.0.1")
    p_serve.add_argument("--port", type=int, default=8000)
    p_serve.add_argument("--bundle-dir", default=None, help="Serve a pre-built bundle")
    p_serve.set_defaults(func=handle_serve)

    p_build = sub.add_parser("build", help="Write the static globe page")
    p_build.add_argument("--output", required=True, help="Output directory")
    p_build.add_argument("--renderer", default="globe-gl")
    p_build.add_argument("--width", type=int, default=None)
    p_build.add_argument("--height", type=int, default=None)
    p_build.add_argument("--title", default=None)
    p_build.add_argument(
        "--api-base", default=None, help="Prefix for /api routes when served elsewhere"
    )
    p_build.set_defaults(func=handle_build)

    p_weather = sub.add_parser("weather", help="Look up weather for typed coordinates")
    p_weather.add_argument("--lat", required=True, help="Latitude (-90..90)")
    p_weather.add_argument("--lon", required=True, help="Longitude (-180..180)")
    _add_api_arg(p_weather)
    p_weather.set_defaults(func=handle_weather)

    p_landmark = sub.add_parser("landmark", help="Look up weather at a landmark")
    p_landmark.add_argument("name", help="Landmark name (see 'landmarks')")
    p_landmark.add_argument(
        "--facts", action="store_true", help="Also request facts about the country"
    )
    _add_api_arg(p_landmark)
    p_landmark.set_defaults(func=handle_landmark)

    p_list = sub.add_parser("landmarks", help="List bundled landmarks")
    p_list.set_defaults(func=handle_landmarks)

    p_facts = sub.add_parser("facts", help="Generate facts about a country")
    p_facts.add_argument("country")
    _add_api_arg(p_facts)
    p_facts.set_defaults(func=handle_facts)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    apply_verbosity_flags(ns)
    configure_logging_from_env()
    return int(ns.func(ns))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
