# SPDX-License-Identifier: Apache-2.0
"""Fetch, map and hand off: the single run-to-completion site pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from siteglobe.config import SiteGlobeConfig
from siteglobe.errors import SiteGlobeError
from siteglobe.mapping import (
    Diagnostics,
    LegendEntry,
    LegendExtractor,
    MarkerMapper,
    PointDescriptor,
)
from siteglobe.sources import DocumentSource, LegendSink, PointSink, parse_document
from siteglobe.utils.cli_helpers import trace

LOGGER = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    rows: list[dict[str, str]] = field(default_factory=list)
    points: list[PointDescriptor] = field(default_factory=list)
    legend: list[LegendEntry] = field(default_factory=list)
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    ok: bool = True
    error: str | None = None

    def summary(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "error": self.error,
            "rows": len(self.rows),
            "points": len(self.points),
            "legend": [entry.to_dict() for entry in self.legend],
            "diagnostics": self.diagnostics.summary(),
        }


class SitePipeline:
    """Run the source document through the marker mapper and legend extractor.

    A failed fetch or an unparseable document is logged and produces an empty
    result with ``ok=False``; sinks are not called in that case.
    """

    def __init__(
        self,
        source: DocumentSource,
        *,
        mapper: MarkerMapper | None = None,
        legend: LegendExtractor | None = None,
    ) -> None:
        self.source = source
        self.mapper = mapper or MarkerMapper()
        self.legend = legend or LegendExtractor(self.mapper.palette)

    @classmethod
    def from_config(cls, source: DocumentSource, config: SiteGlobeConfig) -> SitePipeline:
        return cls(
            source,
            mapper=MarkerMapper(config.palette, config.style),
            legend=LegendExtractor(config.palette),
        )

    def collect(self) -> PipelineResult:
        trace(f"fetch {self.source!r}")
        try:
            text = self.source.fetch_document()
            rows = parse_document(text)
        except SiteGlobeError as exc:
            LOGGER.error("Site sheet load error: %s", exc)
            return PipelineResult(ok=False, error=str(exc))

        trace(f"map {len(rows)} rows")
        diagnostics = Diagnostics()
        points = self.mapper.map_rows(rows, diagnostics=diagnostics)
        legend = self.legend.extract(rows)

        skipped = diagnostics.skipped_rows
        if skipped:
            LOGGER.info(
                "Skipped %d row(s) without a numeric position: %s",
                len(skipped),
                ", ".join(str(i) for i in skipped),
            )
        LOGGER.debug("Diagnostics: %s", diagnostics.summary())
        return PipelineResult(
            rows=rows, points=points, legend=legend, diagnostics=diagnostics
        )

    def run(
        self,
        point_sink: PointSink | None = None,
        legend_sink: LegendSink | None = None,
    ) -> PipelineResult:
        """Collect markers and legend, then pass them to the given sinks."""

        result = self.collect()
        if not result.ok:
            return result
        if point_sink is not None:
            trace(f"render {len(result.points)} points")
            point_sink.render_points(result.points)
        if legend_sink is not None:
            trace(f"render {len(result.legend)} legend entries")
            legend_sink.render_legend(result.legend)
        return result
