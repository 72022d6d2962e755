# SPDX-License-Identifier: Apache-2.0
from .renderers import RenderBundle, SiteRenderer, available, create

__all__ = ["RenderBundle", "SiteRenderer", "available", "create"]
