# SPDX-License-Identifier: Apache-2.0
"""Derive legend entries from the categories present in the data."""

from __future__ import annotations

from typing import Iterable

from siteglobe.config import CategoryPalette

from .fields import split_categories
from .models import CATEGORY, LegendEntry, RowRecord


class LegendExtractor:
    """Collect every category token across all rows, in first-seen order.

    Unlike marker coloring, which uses only the first token of a row, the
    legend lists all tokens.
    """

    def __init__(self, palette: CategoryPalette | None = None) -> None:
        self.palette = palette or CategoryPalette()

    def categories(self, rows: Iterable[RowRecord]) -> list[str]:
        seen: dict[str, None] = {}
        for row in rows:
            for token in split_categories(row.get(CATEGORY)):
                if token:
                    seen.setdefault(token, None)
        return list(seen)

    def extract(self, rows: Iterable[RowRecord]) -> list[LegendEntry]:
        return [
            LegendEntry(category=cat, color=self.palette.legend_color(cat))
            for cat in self.categories(rows)
        ]
