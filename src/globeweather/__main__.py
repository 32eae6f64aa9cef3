# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from globeweather.cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
