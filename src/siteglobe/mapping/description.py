# SPDX-License-Identifier: Apache-2.0
"""Popup (info box) HTML for a site marker."""

from __future__ import annotations

from html import escape

from .fields import parse_text
from .models import (
    CATEGORY,
    END_YEAR,
    PROJECT,
    PROJECT_URL,
    QUANTITY,
    START_YEAR,
    RowRecord,
)

PLACEHOLDER = "—"


def _cell(row: RowRecord, column: str) -> str:
    return escape(row.get(column) or "")


def build_description(row: RowRecord) -> str:
    """Return the labeled popup HTML for ``row``.

    Missing years render as an em dash; the link line is omitted when the
    row has no project URL.
    """
    start = parse_text(row.get(START_YEAR))
    end = parse_text(row.get(END_YEAR))
    url = parse_text(row.get(PROJECT_URL))

    lines = [
        f"<b>Category:</b> {_cell(row, CATEGORY)}<br/>",
        f"<b>Size:</b> {_cell(row, QUANTITY)}<br/>",
        f"<b>Start Year:</b> {escape(start.or_default(PLACEHOLDER))}<br/>",
        f"<b>End Year:</b> {escape(end.or_default(PLACEHOLDER))}<br/><br/>",
        _cell(row, PROJECT),
    ]
    if url.ok:
        href = escape(url.value or "", quote=True)
        lines.append(
            f'<b>Link:</b> <a href="{href}" target="_blank" rel="noopener">'
            f"{href}</a><br/><br/>"
        )
    return "\n".join(lines)
