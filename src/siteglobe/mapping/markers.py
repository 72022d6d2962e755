# SPDX-License-Identifier: Apache-2.0
"""Map spreadsheet rows to sized, colored site markers."""

from __future__ import annotations

import logging
import math
from typing import Iterable, Sequence

from siteglobe.config import CategoryPalette, MarkerStyle

from .description import build_description
from .diagnostics import Diagnostics
from .fields import ParsedField, parse_number, split_categories
from .models import (
    CATEGORY,
    LATITUDE,
    LOCATION,
    LONGITUDE,
    QUANTITY,
    PointDescriptor,
    RowRecord,
)

LOGGER = logging.getLogger(__name__)


def quantity_bounds(rows: Iterable[RowRecord]) -> tuple[float, float] | None:
    """Return ``(min, max)`` over every parseable quantity, or ``None``.

    All rows count, including rows that are later dropped for an invalid
    position.
    """
    sizes = [
        parsed.value
        for parsed in (parse_number(row.get(QUANTITY)) for row in rows)
        if parsed.ok and parsed.value is not None
    ]
    if not sizes:
        return None
    return min(sizes), max(sizes)


class MarkerMapper:
    """Turn row-records into :class:`PointDescriptor` objects.

    Malformed cells never raise: an invalid latitude or longitude drops the
    row, an invalid quantity yields the minimum size and an unknown category
    yields the palette's default color.
    """

    def __init__(
        self,
        palette: CategoryPalette | None = None,
        style: MarkerStyle | None = None,
    ) -> None:
        self.palette = palette or CategoryPalette()
        self.style = style or MarkerStyle()

    def scale_size(
        self, quantity: ParsedField[float], bounds: tuple[float, float] | None
    ) -> float:
        style = self.style
        if not quantity.ok or quantity.value is None or bounds is None:
            return style.min_size
        low, high = bounds
        if high == low:
            return style.min_size
        value = quantity.value
        span = high - low
        if math.isfinite(span):
            ratio = (value - low) / span
        else:
            # range wider than the largest float; halve each term first
            ratio = (value / 2 - low / 2) / (high / 2 - low / 2)
        size = style.min_size + ratio * (style.max_size - style.min_size)
        if not math.isfinite(size):
            return style.min_size
        return min(max(size, style.min_size), style.max_size)

    def map_rows(
        self,
        rows: Sequence[RowRecord],
        diagnostics: Diagnostics | None = None,
    ) -> list[PointDescriptor]:
        rows = list(rows)
        bounds = quantity_bounds(rows)
        points: list[PointDescriptor] = []

        for idx, row in enumerate(rows):
            lat = parse_number(row.get(LATITUDE))
            lon = parse_number(row.get(LONGITUDE))
            if not (lat.ok and lon.ok):
                if diagnostics is not None:
                    bad = lat if not lat.ok else lon
                    diagnostics.skipped(
                        idx, LATITUDE if not lat.ok else LONGITUDE, bad.raw
                    )
                continue

            quantity = parse_number(row.get(QUANTITY))
            if diagnostics is not None and not quantity.ok:
                diagnostics.defaulted(idx, QUANTITY, quantity.raw)

            categories = split_categories(row.get(CATEGORY))
            primary = categories[0] if categories else None
            if diagnostics is not None and self.palette.lookup(primary) is None:
                diagnostics.defaulted(idx, CATEGORY, row.get(CATEGORY))

            points.append(
                PointDescriptor(
                    longitude=float(lon.value),  # type: ignore[arg-type]
                    latitude=float(lat.value),  # type: ignore[arg-type]
                    size=self.scale_size(quantity, bounds),
                    color=self.palette.marker_color(primary),
                    height=idx * self.style.height_step,
                    name=row.get(LOCATION) or "",
                    description=build_description(row),
                    row_index=idx,
                    categories=tuple(c for c in categories if c),
                )
            )

        LOGGER.debug("Mapped %d of %d rows to markers", len(points), len(rows))
        return points
