# SPDX-License-Identifier: Apache-2.0
"""Logging and dotenv setup shared by the CLI and the API factory."""

from __future__ import annotations

import logging
import os

from globeweather.utils.env import env, env_bool

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "quiet": logging.WARNING,
}


def configure_logging_from_env(default: str = "info") -> int:
    """Configure root logging from ``GLOBEWEATHER_VERBOSITY``.

    Returns the level that was applied.
    """

    verbosity = (env("VERBOSITY", default) or default).lower()
    level = _LEVELS.get(verbosity, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)
    # requests/urllib3 are chatty at debug
    if level > logging.DEBUG:
        logging.getLogger("urllib3").setLevel(logging.WARNING)
    return level


def load_dotenv_if_enabled() -> bool:
    """Load ``.env`` from the working directory unless disabled."""

    if env_bool("SKIP_DOTENV", False):
        return False
    from dotenv import load_dotenv

    return bool(load_dotenv(os.path.join(os.getcwd(), ".env"), override=False))


def apply_verbosity_flags(ns) -> None:
    """Translate ``--verbose``/``--quiet`` flags into the environment."""

    if getattr(ns, "verbose", False):
        os.environ["GLOBEWEATHER_VERBOSITY"] = "debug"
    elif getattr(ns, "quiet", False):
        os.environ["GLOBEWEATHER_VERBOSITY"] = "quiet"
