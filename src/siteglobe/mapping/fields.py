# SPDX-License-Identifier: Apache-2.0
"""Per-field parse results for spreadsheet cells.

Spreadsheet cells arrive as strings (or are missing entirely). Rather than
raising on malformed input, each parser returns a :class:`ParsedField` that
records whether a usable value was found, so mapping code can pick a fallback
without exception handling.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ParsedField(Generic[T]):
    raw: str | None
    value: T | None = None
    ok: bool = False

    def or_default(self, default: T) -> T:
        return self.value if self.ok else default  # type: ignore[return-value]


def parse_number(raw: object) -> ParsedField[float]:
    """Parse a finite decimal number, ignoring surrounding whitespace.

    Empty cells, ``nan``/``inf`` spellings and digit-group underscores are
    treated as unparseable.
    """
    if raw is None:
        return ParsedField(raw=None)
    text = str(raw).strip()
    if not text or "_" in text:
        return ParsedField(raw=str(raw))
    try:
        value = float(text)
    except ValueError:
        return ParsedField(raw=str(raw))
    if not math.isfinite(value):
        return ParsedField(raw=str(raw))
    return ParsedField(raw=str(raw), value=value, ok=True)


def parse_text(raw: object) -> ParsedField[str]:
    if raw is None:
        return ParsedField(raw=None)
    text = str(raw).strip()
    if not text:
        return ParsedField(raw=str(raw))
    return ParsedField(raw=str(raw), value=text, ok=True)


def split_categories(raw: object) -> list[str]:
    """Split a comma-separated category cell into trimmed tokens.

    Empty tokens are kept so the first position stays meaningful; callers
    filter them where needed.
    """
    if raw is None:
        return []
    return [token.strip() for token in str(raw).split(",")]
