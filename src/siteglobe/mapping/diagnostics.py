# SPDX-License-Identifier: Apache-2.0
"""Side-channel record of rows that were dropped or fell back to defaults."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

SKIPPED = "skipped"
DEFAULTED = "defaulted"


@dataclass(frozen=True)
class RowIssue:
    row_index: int
    field: str
    kind: str
    raw: str | None = None


@dataclass
class Diagnostics:
    """Collects :class:`RowIssue` entries during a mapping pass."""

    issues: list[RowIssue] = field(default_factory=list)

    def skipped(self, row_index: int, field_name: str, raw: str | None) -> None:
        self.issues.append(RowIssue(row_index, field_name, SKIPPED, raw))

    def defaulted(self, row_index: int, field_name: str, raw: str | None) -> None:
        self.issues.append(RowIssue(row_index, field_name, DEFAULTED, raw))

    @property
    def skipped_rows(self) -> list[int]:
        return sorted({i.row_index for i in self.issues if i.kind == SKIPPED})

    def defaulted_for(self, field_name: str) -> list[int]:
        return [
            i.row_index
            for i in self.issues
            if i.kind == DEFAULTED and i.field == field_name
        ]

    def summary(self) -> dict[str, int]:
        """Count issues keyed by ``kind`` or ``kind:field`` for defaults."""
        counts: Counter[str] = Counter(
            f"{i.kind}:{i.field}" for i in self.issues if i.kind != SKIPPED
        )
        counts[SKIPPED] = len(self.skipped_rows)
        return dict(counts)

    def __len__(self) -> int:
        return len(self.issues)
