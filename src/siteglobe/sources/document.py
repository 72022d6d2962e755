# SPDX-License-Identifier: Apache-2.0
"""Parse delimited spreadsheet exports into row-records."""

from __future__ import annotations

import csv
import io

from siteglobe.errors import DocumentParseError


def parse_document(text: str, *, delimiter: str = ",") -> list[dict[str, str]]:
    """Parse CSV ``text`` with a header row into a list of row mappings.

    Blank lines are skipped. Cells missing from short rows are left out of the
    mapping and cells beyond the header are dropped, so lookups of absent
    columns return ``None``.

    Raises
    ------
    DocumentParseError
        When the document is empty, has no header, or is not valid CSV.
    """
    if not text or not text.strip():
        raise DocumentParseError("Source document is empty")
    text = text.lstrip("\ufeff")

    reader = csv.DictReader(io.StringIO(text, newline=""), delimiter=delimiter)
    try:
        fieldnames = reader.fieldnames
        if not fieldnames or not any(name.strip() for name in fieldnames):
            raise DocumentParseError("Source document has no header row")
        reader.fieldnames = [name.strip() for name in fieldnames]
        rows = [
            {k: v for k, v in row.items() if k is not None and v is not None}
            for row in reader
        ]
    except csv.Error as exc:
        raise DocumentParseError(
            f"Malformed CSV near line {reader.line_num}: {exc}"
        ) from exc
    return rows
