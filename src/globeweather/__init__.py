# SPDX-License-Identifier: Apache-2.0
"""Interactive weather globe: proxy API, session panels and browser bundle."""

from __future__ import annotations

__version__ = "0.3.0"

__all__ = ["__version__"]
