# SPDX-License-Identifier: Apache-2.0
"""Bundle renderer registry."""

from __future__ import annotations

from . import globe_gl as _globe_gl  # noqa: F401
from .base import BundleRenderer, GlobeBundle
from .registry import available, create, get, register

DEFAULT_RENDERER = "globe-gl"

__all__ = [
    "DEFAULT_RENDERER",
    "BundleRenderer",
    "GlobeBundle",
    "available",
    "create",
    "get",
    "register",
]
