# SPDX-License-Identifier: Apache-2.0
"""Base interfaces for site presentation sinks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Sequence

from siteglobe.mapping.models import LegendEntry, PointDescriptor


@dataclass(slots=True)
class RenderBundle:
    """Describes the output artifacts produced by a renderer."""

    output_dir: Path
    entrypoint: Path
    assets: Sequence[Path] = field(default_factory=tuple)


class SiteRenderer(ABC):
    """Sink that receives markers and legend entries, then writes a bundle.

    Satisfies both the ``PointSink`` and ``LegendSink`` protocols.
    """

    slug: str = "site-renderer"
    description: str = ""

    def __init__(self, **options: Any) -> None:
        self._options: dict[str, Any] = dict(options)
        self.points: list[PointDescriptor] = []
        self.legend: list[LegendEntry] = []

    def render_points(self, points: Sequence[PointDescriptor]) -> None:
        self.points = list(points)

    def render_legend(self, entries: Sequence[LegendEntry]) -> None:
        self.legend = list(entries)

    @abstractmethod
    def build(self, *, output_dir: Path) -> RenderBundle:
        """Write the bundle for the received markers inside ``output_dir``."""

    @classmethod
    def describe(cls) -> dict[str, Any]:
        """Return metadata about the renderer for CLI listings."""

        return {"slug": cls.slug, "description": cls.description}
