# SPDX-License-Identifier: Apache-2.0
"""CLI handler that builds a site globe bundle."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Any

from siteglobe.config import SiteGlobeConfig, load_config
from siteglobe.errors import ConfigError
from siteglobe.pipeline import SitePipeline
from siteglobe.sources import open_source
from siteglobe.utils.cli_helpers import apply_verbosity_flags, configure_logging_from_env
from siteglobe.visualization.renderers import UnknownRendererError, create


def resolve_config(ns: Any) -> SiteGlobeConfig:
    """Load the layered config and apply CLI flag overrides from ``ns``."""

    try:
        cfg = load_config(getattr(ns, "config", None))
    except ConfigError as exc:
        raise SystemExit(str(exc)) from exc
    overrides: dict[str, Any] = {}
    if getattr(ns, "source", None):
        overrides["source"] = ns.source
    if getattr(ns, "timeout", None) is not None:
        overrides["timeout"] = ns.timeout
    if getattr(ns, "retries", None) is not None:
        overrides["max_retries"] = ns.retries
    if getattr(ns, "legend_title", None):
        overrides["legend_title"] = ns.legend_title
    return dataclasses.replace(cfg, **overrides) if overrides else cfg


def handle_build(ns: Any) -> int:
    """Handle ``siteglobe build``."""

    apply_verbosity_flags(ns)
    configure_logging_from_env()

    cfg = resolve_config(ns)
    try:
        renderer = create(ns.target, **cfg.renderer_options())
    except UnknownRendererError as exc:
        raise SystemExit(str(exc)) from exc
    source = open_source(cfg.source, timeout=cfg.timeout, max_retries=cfg.max_retries)

    result = SitePipeline.from_config(source, cfg).run(renderer, renderer)
    try:
        bundle = renderer.build(output_dir=Path(ns.output))
    except OSError as exc:
        raise SystemExit(f"Cannot write bundle to {ns.output}: {exc}") from exc
    if not result.ok:
        logging.error("No sites loaded; wrote empty globe at %s", bundle.entrypoint)
        return 1

    logging.info(
        "Generated %s bundle with %d site(s) at %s",
        ns.target,
        len(result.points),
        bundle.entrypoint,
    )
    if bundle.assets:
        logging.debug(
            "Bundle assets: %s",
            ", ".join(
                str(path.relative_to(bundle.output_dir)) for path in bundle.assets
            ),
        )
    print(bundle.entrypoint)
    return 0
