# SPDX-License-Identifier: Apache-2.0
"""HTTP source for published spreadsheet exports."""

from __future__ import annotations

import contextlib
import logging
import time

import requests

from siteglobe.errors import DocumentParseError, SourceError

RETRY_STATUS = {429, 500, 502, 503, 504}

LOGGER = logging.getLogger(__name__)


def _parse_retry_after(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        return 0.0


def get_with_retries(
    url: str,
    *,
    timeout: float = 30.0,
    max_retries: int = 0,
    retry_backoff: float = 0.5,
) -> requests.Response:
    """GET ``url``, retrying throttled or 5xx responses up to ``max_retries`` times."""
    attempt = 0
    while True:
        resp = requests.get(url, timeout=timeout)
        if resp.status_code not in RETRY_STATUS or attempt >= max_retries:
            return resp
        delay = retry_backoff * (2**attempt)
        if "Retry-After" in resp.headers:
            with contextlib.suppress(TypeError):
                delay = max(delay, _parse_retry_after(resp.headers["Retry-After"]))
        LOGGER.debug(
            "HTTP %s from %s; retrying in %.1fs", resp.status_code, url, delay
        )
        time.sleep(delay)
        attempt += 1


class HTTPDocumentSource:
    """Fetch a UTF-8 CSV document from a fixed URL."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 30.0,
        max_retries: int = 0,
        retry_backoff: float = 0.5,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_backoff = retry_backoff

    def fetch_document(self) -> str:
        try:
            resp = get_with_retries(
                self.url,
                timeout=self.timeout,
                max_retries=self.max_retries,
                retry_backoff=self.retry_backoff,
            )
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise SourceError(f"Failed to fetch {self.url}: {exc}") from exc
        content = resp.content or b""
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DocumentParseError(f"Document at {self.url} is not UTF-8") from exc

    def __repr__(self) -> str:
        return f"HTTPDocumentSource({self.url!r})"
