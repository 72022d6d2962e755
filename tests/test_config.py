# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import pytest

from siteglobe.config import (
    DEFAULT_SOURCE_URL,
    CategoryPalette,
    MarkerStyle,
    load_config,
)
from siteglobe.errors import ConfigError


def test_defaults_match_published_sheet():
    cfg = load_config(env={})
    assert cfg.source == DEFAULT_SOURCE_URL
    assert cfg.style == MarkerStyle(6.0, 20.0, 5.0)
    assert cfg.palette.marker_color("Altimetry") == "#9852d9"
    assert cfg.palette.marker_color("Nope") == "#ffffff"
    assert cfg.palette.legend_color("Nope") == "#cccccc"
    assert cfg.legend_title == "Primary GNSS Application:"
    assert cfg.max_retries == 0


def test_palette_is_read_only():
    palette = CategoryPalette(colors={"A": "#000"})
    with pytest.raises(TypeError):
        palette.colors["B"] = "#fff"  # type: ignore[index]


def test_style_rejects_inverted_bounds():
    with pytest.raises(ConfigError):
        MarkerStyle(min_size=20, max_size=6)


def test_yaml_file_overrides_defaults(tmp_path):
    path = tmp_path / "siteglobe.yaml"
    path.write_text(
        "\n".join(
            [
                "source: https://example.org/sites.csv",
                "timeout: 5",
                "max_retries: 2",
                "legend_title: Sites",
                "palette:",
                "  colors:",
                "    Seismic: '#00ff00'",
                "  default_color: '#010101'",
                "style:",
                "  min_size: 2",
                "  max_size: 8",
                "renderer:",
                "  meters_per_size_unit: 500",
            ]
        ),
        encoding="utf-8",
    )
    cfg = load_config(path, env={})

    assert cfg.source == "https://example.org/sites.csv"
    assert cfg.timeout == 5.0
    assert cfg.max_retries == 2
    assert cfg.legend_title == "Sites"
    assert dict(cfg.palette.colors) == {"Seismic": "#00ff00"}
    assert cfg.palette.marker_color(None) == "#010101"
    assert cfg.palette.legend_fallback_color == "#cccccc"
    assert cfg.style == MarkerStyle(2.0, 8.0, 5.0)
    assert cfg.meters_per_size_unit == 500.0


def test_environment_overrides_file(tmp_path):
    path = tmp_path / "c.yaml"
    path.write_text("source: https://file.example/a.csv\n", encoding="utf-8")
    cfg = load_config(
        path,
        env={
            "SITEGLOBE_SOURCE_URL": "https://env.example/b.csv",
            "SITEGLOBE_TIMEOUT": "12.5",
        },
    )
    assert cfg.source == "https://env.example/b.csv"
    assert cfg.timeout == 12.5


@pytest.mark.parametrize(
    "content",
    ["- just\n- a list\n", "style: 3\n", "timeout: soon\n", "palette:\n  colors: [a]\n"],
)
def test_invalid_config_raises(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path, env={})


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "absent.yaml", env={})
