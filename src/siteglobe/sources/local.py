# SPDX-License-Identifier: Apache-2.0
"""File and stdin sources, for offline builds from an exported CSV."""

from __future__ import annotations

from siteglobe.errors import DocumentParseError, SourceError
from siteglobe.utils.io_utils import open_input


class FileDocumentSource:
    def __init__(self, path: str) -> None:
        self.path = path

    def fetch_document(self) -> str:
        try:
            with open_input(self.path) as fh:
                data = fh.read()
        except OSError as exc:
            raise SourceError(f"Failed to read {self.path}: {exc}") from exc
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DocumentParseError(f"{self.path} is not UTF-8") from exc

    def __repr__(self) -> str:
        return f"FileDocumentSource({self.path!r})"
