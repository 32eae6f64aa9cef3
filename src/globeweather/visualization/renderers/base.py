# SPDX-License-Identifier: Apache-2.0
"""Base interfaces for browser bundle renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Sequence


@dataclass(slots=True)
class GlobeBundle:
    """Files written by a renderer; ``output_dir`` can be served as-is."""

    output_dir: Path
    index_html: Path
    config_json: Path
    assets: Sequence[Path] = field(default_factory=tuple)


class BundleRenderer(ABC):
    """Contract for renderers that emit a static, self-contained page."""

    slug: str = "bundle"

    def __init__(self, **options: Any) -> None:
        self._options: dict[str, Any] = dict(options)

    @abstractmethod
    def build(self, *, output_dir: Path) -> GlobeBundle:
        """Generate the bundle inside ``output_dir``."""
