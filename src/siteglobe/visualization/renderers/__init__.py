# SPDX-License-Identifier: Apache-2.0
"""Site renderer registry and the built-in sinks."""

from __future__ import annotations

from . import cesium_sites as _cesium_sites  # noqa: F401
from . import geojson_sites as _geojson_sites  # noqa: F401
from .base import RenderBundle, SiteRenderer
from .registry import UnknownRendererError, available, create, get, register, slugs

__all__ = [
    "RenderBundle",
    "SiteRenderer",
    "UnknownRendererError",
    "available",
    "create",
    "get",
    "register",
    "slugs",
]
