# SPDX-License-Identifier: Apache-2.0
"""Bundled landmark reference data."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from functools import lru_cache
from importlib import resources as ir
from typing import Any

from globeweather.geo import Coordinate


@dataclass(frozen=True, slots=True)
class Landmark:
    name: str
    country: str
    lat: float
    lng: float
    color: str

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(float(self.lat), float(self.lng))

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _read_asset() -> str:
    return (
        ir.files("globeweather.assets")
        .joinpath("landmarks.json")
        .read_text(encoding="utf-8")
    )


@lru_cache(maxsize=1)
def load_landmarks() -> tuple[Landmark, ...]:
    """Load the landmark list once; the result is shared and immutable."""

    records = json.loads(_read_asset())
    landmarks = tuple(
        Landmark(
            name=str(r["name"]),
            country=str(r["country"]),
            lat=float(r["lat"]),
            lng=float(r["lng"]),
            color=str(r["color"]),
        )
        for r in records
    )
    logging.getLogger(__name__).debug("Loaded %d landmarks", len(landmarks))
    return landmarks


def find_landmark(name: str) -> Landmark:
    """Case-insensitive lookup by landmark name."""

    wanted = name.strip().lower()
    for landmark in load_landmarks():
        if landmark.name.lower() == wanted:
            return landmark
    raise KeyError(f"unknown landmark: {name}")
