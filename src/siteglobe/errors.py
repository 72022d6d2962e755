# SPDX-License-Identifier: Apache-2.0
"""Exception types raised by SiteGlobe."""

from __future__ import annotations


class SiteGlobeError(Exception):
    """Base class for errors that abort a SiteGlobe run."""


class SourceError(SiteGlobeError):
    """Raised when the source document cannot be fetched or read."""


class DocumentParseError(SiteGlobeError):
    """Raised when the fetched document is not a usable CSV table."""


class ConfigError(SiteGlobeError, ValueError):
    pass
