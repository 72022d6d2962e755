# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import json

import pytest

from siteglobe.mapping import LegendEntry, PointDescriptor
from siteglobe.visualization.renderers import SiteRenderer, available, create, get, register


def _point(**overrides) -> PointDescriptor:
    data = {
        "longitude": -38.46,
        "latitude": 72.58,
        "size": 10.0,
        "color": "#125ae1",
        "height": 0.0,
        "name": "Summit Station",
        "description": "<b>Category:</b> Ice Flow<br/>",
        "row_index": 0,
        "categories": ("Ice Flow",),
    }
    data.update(overrides)
    return PointDescriptor(**data)


def test_site_renderers_registered() -> None:
    slugs = {renderer.slug for renderer in available()}
    assert {"cesium-sites", "geojson"} <= slugs


def test_registry_rejects_duplicates_and_unknown() -> None:
    cls = type(
        "Dup",
        (SiteRenderer,),
        {"slug": "cesium-sites", "build": lambda self, *, output_dir: None},
    )
    with pytest.raises(ValueError):
        register(cls)
    with pytest.raises(TypeError):
        register(dict)  # type: ignore[arg-type]
    with pytest.raises(KeyError, match="Available: cesium-sites, geojson"):
        create("no-such-renderer")


def test_describe_reports_slug_and_description() -> None:
    info = get("geojson").describe()
    assert info["slug"] == "geojson"
    assert info["description"].startswith("FeatureCollection")


def test_cesium_renderer_builds_bundle(tmp_path) -> None:
    renderer = create("cesium-sites", legend_title="Primary GNSS Application:")
    renderer.render_points([_point(), _point(name="Boulder", height=5.0)])
    renderer.render_legend(
        [LegendEntry("Ice Flow", "#125ae1"), LegendEntry("Snow", "#cccccc")]
    )
    bundle = renderer.build(output_dir=tmp_path)

    assert bundle.entrypoint == tmp_path / "index.html"
    html = bundle.entrypoint.read_text(encoding="utf-8")
    assert "window.SITEGLOBE_DATA" in html
    assert "Cesium.js" in html
    assert '<div id="legend-title">Primary GNSS Application:</div>' in html
    assert "background: #cccccc" in html
    assert "<span>Snow</span>" in html
    # embedded description markup cannot terminate the script element
    assert "<b>Category:<\\/b>" in html

    asset_names = {path.name for path in bundle.assets}
    assert asset_names == {"sites.js", "config.json", "points.json", "legend.json"}

    assets = tmp_path / "assets"
    points = json.loads((assets / "points.json").read_text(encoding="utf-8"))
    assert [p["name"] for p in points] == ["Summit Station", "Boulder"]
    assert points[1]["height"] == 5.0

    config = json.loads((assets / "config.json").read_text(encoding="utf-8"))
    assert config["meters_per_size_unit"] == 10000.0
    assert "light_nolabels" in config["imagery_url"]

    legend = json.loads((assets / "legend.json").read_text(encoding="utf-8"))
    assert legend[1] == {"category": "Snow", "color": "#cccccc"}

    script = (assets / "sites.js").read_text(encoding="utf-8")
    assert "timeline: false" in script
    assert "outlineColor: Cesium.Color.BLACK" in script
    assert "point.size * metersPerUnit" in script


def test_cesium_renderer_empty_bundle(tmp_path) -> None:
    bundle = create("cesium-sites").build(output_dir=tmp_path / "empty")
    html = bundle.entrypoint.read_text(encoding="utf-8")
    assert '"points": []' in html
    assert "legend-item" not in html.split("</style>")[1]


def test_cesium_renderer_escapes_legend_text(tmp_path) -> None:
    renderer = create("cesium-sites")
    renderer.render_legend([LegendEntry("<i>Ice</i>", "#000")])
    html = renderer.build(output_dir=tmp_path).entrypoint.read_text(encoding="utf-8")
    assert "<span>&lt;i&gt;Ice&lt;/i&gt;</span>" in html


def test_geojson_renderer_writes_feature_collection(tmp_path) -> None:
    renderer = create("geojson", legend_title="Sites")
    renderer.render_points([_point(), _point(longitude=15.65, latitude=78.22)])
    renderer.render_legend([LegendEntry("Ice Flow", "#125ae1")])
    bundle = renderer.build(output_dir=tmp_path)

    assert bundle.entrypoint.name == "sites.geojson"
    data = json.loads(bundle.entrypoint.read_text(encoding="utf-8"))
    assert data["type"] == "FeatureCollection"
    assert data["features"][0]["geometry"] == {
        "type": "Point",
        "coordinates": [-38.46, 72.58],
    }
    props = data["features"][0]["properties"]
    assert props["color"] == "#125ae1"
    assert "longitude" not in props
    assert data["bbox"] == [-38.46, 72.58, 15.65, 78.22]
    assert data["legend"] == [{"category": "Ice Flow", "color": "#125ae1"}]
    assert data["metadata"] == {"feature_count": 2, "legend_title": "Sites"}


def test_geojson_renderer_without_points(tmp_path) -> None:
    data = create("geojson").feature_collection()
    assert data["features"] == []
    assert data["bbox"] is None


def test_geojson_renderer_honours_zero_indent(tmp_path) -> None:
    renderer = create("geojson", indent=0)
    renderer.render_points([_point()])
    bundle = renderer.build(output_dir=tmp_path)
    text = bundle.entrypoint.read_text(encoding="utf-8")
    assert text.startswith('{\n"type": "FeatureCollection"')
