# SPDX-License-Identifier: Apache-2.0
"""Collaborator protocols for the site pipeline.

The mapping core depends only on these narrow contracts: something that
returns the raw document text, and sinks that accept markers and legend
entries. Concrete sources live in this package; sinks are the renderers in
:mod:`siteglobe.visualization.renderers`.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from siteglobe.mapping.models import LegendEntry, PointDescriptor


@runtime_checkable
class DocumentSource(Protocol):
    def fetch_document(self) -> str:
        ...


@runtime_checkable
class PointSink(Protocol):
    def render_points(self, points: Sequence[PointDescriptor]) -> None:
        ...


@runtime_checkable
class LegendSink(Protocol):
    def render_legend(self, entries: Sequence[LegendEntry]) -> None:
        ...
