# SPDX-License-Identifier: Apache-2.0
"""Data source adapters: fetch the sheet and parse it into row-records."""

from __future__ import annotations

from .base import DocumentSource, LegendSink, PointSink
from .document import parse_document
from .remote import HTTPDocumentSource
from .local import FileDocumentSource


def _is_remote_ref(value: str) -> bool:
    return value.lower().startswith(("http://", "https://"))


def open_source(
    ref: str, *, timeout: float = 30.0, max_retries: int = 0
) -> DocumentSource:
    """Return an HTTP source for URLs and a file source for paths or ``-``."""

    if _is_remote_ref(ref):
        return HTTPDocumentSource(ref, timeout=timeout, max_retries=max_retries)
    return FileDocumentSource(ref)


__all__ = [
    "DocumentSource",
    "FileDocumentSource",
    "HTTPDocumentSource",
    "LegendSink",
    "PointSink",
    "open_source",
    "parse_document",
]
