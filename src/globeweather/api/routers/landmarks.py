# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from fastapi import APIRouter

from globeweather.landmarks import load_landmarks

router = APIRouter(tags=["landmarks"])


@router.get("/landmarks")
def landmarks() -> list[dict]:
    """Return the bundled landmark list (read-only reference data)."""
    return [lm.to_dict() for lm in load_landmarks()]
