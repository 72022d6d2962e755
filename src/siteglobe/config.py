# SPDX-License-Identifier: Apache-2.0
"""Configuration for the site globe: palette, marker style and source settings.

Values are layered, lowest precedence first:

1. Built-in defaults (the published project-sites sheet and GNSS palette).
2. An optional YAML file passed with ``--config``.
3. Environment variables ``SITEGLOBE_SOURCE_URL`` and ``SITEGLOBE_TIMEOUT``.
4. Explicit CLI flags (applied by the caller through :func:`dataclasses.replace`).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

from siteglobe.errors import ConfigError

DEFAULT_SOURCE_URL = (
    "https://docs.google.com/spreadsheets/d/e/2PACX-1vQCrUJH-IyyRMocINP2zOII0z2EQPa8"
    "qhEBidLSr2mjoW-EY5iSqunaSD_ZklMjoas0z7aUPim3JOfb/pub?output=csv"
)

DEFAULT_CATEGORY_COLORS: Mapping[str, str] = MappingProxyType(
    {
        "Ice Flow": "#125ae1",
        "Altimetry": "#9852d9",
        "Reflectometry": "#f44e8a",
        "Education": "#f96502",
    }
)
DEFAULT_MARKER_COLOR = "#ffffff"
LEGEND_FALLBACK_COLOR = "#cccccc"

MIN_SIZE = 6.0
MAX_SIZE = 20.0
HEIGHT_STEP = 5.0
METERS_PER_SIZE_UNIT = 10_000.0

DEFAULT_LEGEND_TITLE = "Primary GNSS Application:"
DEFAULT_IMAGERY_URL = "https://a.basemaps.cartocdn.com/light_nolabels/{z}/{x}/{y}@2x.png"
DEFAULT_IMAGERY_CREDIT = "https://carto.com/basemaps under non commerical use"
DEFAULT_TIMEOUT = 30.0

ENV_SOURCE_URL = "SITEGLOBE_SOURCE_URL"
ENV_TIMEOUT = "SITEGLOBE_TIMEOUT"


@dataclass(frozen=True)
class CategoryPalette:
    """Fixed category to CSS color table."""

    colors: Mapping[str, str] = field(default_factory=lambda: DEFAULT_CATEGORY_COLORS)
    default_color: str = DEFAULT_MARKER_COLOR
    legend_fallback_color: str = LEGEND_FALLBACK_COLOR

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "colors",
            MappingProxyType({str(k): str(v) for k, v in self.colors.items()}),
        )

    def lookup(self, category: str | None) -> str | None:
        if not category:
            return None
        return self.colors.get(category)

    def marker_color(self, category: str | None) -> str:
        return self.lookup(category) or self.default_color

    def legend_color(self, category: str | None) -> str:
        return self.lookup(category) or self.legend_fallback_color


@dataclass(frozen=True)
class MarkerStyle:
    """Display size range and vertical stacking for markers."""

    min_size: float = MIN_SIZE
    max_size: float = MAX_SIZE
    height_step: float = HEIGHT_STEP

    def __post_init__(self) -> None:
        if self.min_size > self.max_size:
            raise ConfigError(
                f"min_size ({self.min_size}) must not exceed max_size ({self.max_size})"
            )
        if self.height_step < 0:
            raise ConfigError("height_step must be non-negative")


@dataclass
class SiteGlobeConfig:
    source: str = DEFAULT_SOURCE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = 0
    palette: CategoryPalette = field(default_factory=CategoryPalette)
    style: MarkerStyle = field(default_factory=MarkerStyle)
    legend_title: str = DEFAULT_LEGEND_TITLE
    meters_per_size_unit: float = METERS_PER_SIZE_UNIT
    imagery_url: str = DEFAULT_IMAGERY_URL
    imagery_credit: str = DEFAULT_IMAGERY_CREDIT

    def renderer_options(self) -> dict[str, Any]:
        """Options forwarded to presentation sinks."""

        return {
            "legend_title": self.legend_title,
            "meters_per_size_unit": self.meters_per_size_unit,
            "imagery_url": self.imagery_url,
            "imagery_credit": self.imagery_credit,
        }


def _read_yaml(path: Path) -> dict[str, Any]:
    path = path.expanduser()
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    return {str(k): v for k, v in data.items()}


def _section(data: Mapping[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{key}' must be a mapping")
    return value


def _as_float(value: Any, key: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"'{key}' must be a number, got {value!r}") from exc


def config_from_mapping(data: Mapping[str, Any]) -> SiteGlobeConfig:
    """Build a config from a parsed YAML mapping on top of the defaults."""

    cfg = SiteGlobeConfig()

    palette_data = _section(data, "palette")
    if palette_data:
        colors = palette_data.get("colors", DEFAULT_CATEGORY_COLORS)
        if not isinstance(colors, Mapping):
            raise ConfigError("'palette.colors' must be a mapping")
        cfg.palette = CategoryPalette(
            colors=colors,
            default_color=str(palette_data.get("default_color", DEFAULT_MARKER_COLOR)),
            legend_fallback_color=str(
                palette_data.get("legend_fallback_color", LEGEND_FALLBACK_COLOR)
            ),
        )

    style_data = _section(data, "style")
    if style_data:
        cfg.style = MarkerStyle(
            min_size=_as_float(style_data.get("min_size", MIN_SIZE), "style.min_size"),
            max_size=_as_float(style_data.get("max_size", MAX_SIZE), "style.max_size"),
            height_step=_as_float(
                style_data.get("height_step", HEIGHT_STEP), "style.height_step"
            ),
        )

    if data.get("source"):
        cfg.source = str(data["source"])
    if data.get("timeout") is not None:
        cfg.timeout = _as_float(data["timeout"], "timeout")
    if data.get("max_retries") is not None:
        cfg.max_retries = int(_as_float(data["max_retries"], "max_retries"))
    if data.get("legend_title") is not None:
        cfg.legend_title = str(data["legend_title"])

    renderer_data = _section(data, "renderer")
    if renderer_data.get("meters_per_size_unit") is not None:
        cfg.meters_per_size_unit = _as_float(
            renderer_data["meters_per_size_unit"], "renderer.meters_per_size_unit"
        )
    if renderer_data.get("imagery_url"):
        cfg.imagery_url = str(renderer_data["imagery_url"])
    if renderer_data.get("imagery_credit"):
        cfg.imagery_credit = str(renderer_data["imagery_credit"])
    return cfg


def load_config(
    path: str | Path | None = None, *, env: Mapping[str, str] | None = None
) -> SiteGlobeConfig:
    """Load configuration from defaults, an optional YAML file and the environment."""

    env = os.environ if env is None else env
    cfg = config_from_mapping(_read_yaml(Path(path)) if path else {})

    source = (env.get(ENV_SOURCE_URL) or "").strip()
    if source:
        cfg.source = source
    timeout = (env.get(ENV_TIMEOUT) or "").strip()
    if timeout:
        cfg.timeout = _as_float(timeout, ENV_TIMEOUT)
    return cfg
