# SPDX-License-Identifier: Apache-2.0
"""Coordinate model used by every picker surface."""

from __future__ import annotations

from dataclasses import dataclass

LAT_RANGE = (-90.0, 90.0)
LON_RANGE = (-180.0, 180.0)
DECIMALS = 4


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lon: float

    @classmethod
    def rounded(cls, lat: float, lon: float) -> Coordinate:
        """Round both components to four decimal places."""

        return cls(round(float(lat), DECIMALS), round(float(lon), DECIMALS))

    @property
    def in_range(self) -> bool:
        return (
            LAT_RANGE[0] <= self.lat <= LAT_RANGE[1]
            and LON_RANGE[0] <= self.lon <= LON_RANGE[1]
        )

    def as_query(self) -> str:
        return f"{self.lat},{self.lon}"

    def as_params(self) -> dict[str, str]:
        return {"lat": str(self.lat), "lon": str(self.lon)}

    def __str__(self) -> str:
        return f"{self.lat}, {self.lon}"


def parse_float(text: str | None) -> float | None:
    """Parse free text into a float; blank or invalid input yields ``None``."""

    if text is None:
        return None
    stripped = str(text).strip()
    if not stripped:
        return None
    try:
        return float(stripped)
    except ValueError:
        return None
