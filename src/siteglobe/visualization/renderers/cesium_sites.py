# SPDX-License-Identifier: Apache-2.0
"""CesiumJS site globe renderer.

The generated bundle references Cesium assets via jsDelivr CDN and embeds the
marker and legend data inline, so ``index.html`` can be opened directly from
disk. The same data is also written to ``assets/*.json`` for other consumers.
"""

from __future__ import annotations

import json
from html import escape
from pathlib import Path
from textwrap import dedent, indent
from typing import Any

from siteglobe.config import (
    DEFAULT_IMAGERY_CREDIT,
    DEFAULT_IMAGERY_URL,
    DEFAULT_LEGEND_TITLE,
    METERS_PER_SIZE_UNIT,
)

from .base import RenderBundle, SiteRenderer
from .registry import register

CESIUM_VERSION = "1.114.0"
CESIUM_BASE = f"https://cdn.jsdelivr.net/npm/cesium@{CESIUM_VERSION}/Build/Cesium"


def _script_json(value: Any) -> str:
    """Serialize ``value`` for embedding inside a ``<script>`` element."""

    return json.dumps(value, indent=2, ensure_ascii=False).replace("</", "<\\/")


@register
class CesiumSitesRenderer(SiteRenderer):
    slug = "cesium-sites"
    description = "CesiumJS globe of project sites with legend, as a standalone bundle."

    def build(self, *, output_dir: Path) -> RenderBundle:
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        assets_dir = output_dir / "assets"
        assets_dir.mkdir(parents=True, exist_ok=True)

        index_html = output_dir / "index.html"
        script_path = assets_dir / "sites.js"
        config_path = assets_dir / "config.json"
        points_path = assets_dir / "points.json"
        legend_path = assets_dir / "legend.json"

        config = self._sanitized_config()
        points = [point.to_dict() for point in self.points]
        legend = [entry.to_dict() for entry in self.legend]

        config_path.write_text(json.dumps(config, indent=2) + "\n", encoding="utf-8")
        points_path.write_text(
            json.dumps(points, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )
        legend_path.write_text(
            json.dumps(legend, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

        index_html.write_text(
            self._render_index_html(config, points, legend), encoding="utf-8"
        )
        script_path.write_text(self._render_script(), encoding="utf-8")

        return RenderBundle(
            output_dir=output_dir,
            entrypoint=index_html,
            assets=(script_path, config_path, points_path, legend_path),
        )

    def _sanitized_config(self) -> dict[str, object]:
        filtered = {
            key: value for key, value in self._options.items() if value is not None
        }
        filtered.setdefault("title", "Project Sites")
        filtered.setdefault("legend_title", DEFAULT_LEGEND_TITLE)
        filtered.setdefault("meters_per_size_unit", METERS_PER_SIZE_UNIT)
        filtered.setdefault("imagery_url", DEFAULT_IMAGERY_URL)
        filtered.setdefault("imagery_credit", DEFAULT_IMAGERY_CREDIT)
        filtered.setdefault("globe_color", "#f1f1f1ff")
        filtered.setdefault("background_color", "#ffffffff")
        return filtered

    def _render_legend_html(self, title: str) -> str:
        items = [f'<div id="legend-title">{escape(title)}</div>']
        for entry in self.legend:
            items.append(
                '<div class="legend-item">'
                f'<div class="legend-color" style="background: {escape(entry.color, quote=True)}"></div>'
                f"<span>{escape(entry.category)}</span>"
                "</div>"
            )
        return "\n".join(items)

    def _render_index_html(
        self,
        config: dict[str, object],
        points: list[dict[str, Any]],
        legend: list[dict[str, str]],
    ) -> str:
        data = {"points": points, "legend": legend}
        template = dedent(
            """
            <!DOCTYPE html>
            <html lang=\"en\">
              <head>
                <meta charset=\"utf-8\" />
                <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
                <title>{title}</title>
                <link rel=\"stylesheet\" href=\"{cesium_base}/Widgets/widgets.css\" />
                <style>
                  html, body {{ margin: 0; padding: 0; width: 100%; height: 100%; overflow: hidden; font-family: "Avenir", "Helvetica", sans-serif; color: #333; }}
                  #cesiumContainer {{ width: 100%; height: 100%; display: block; }}
                  #legend {{ position: absolute; bottom: 24px; left: 16px; background: rgba(255, 255, 255, 0.92); padding: 10px 14px; border-radius: 6px; box-shadow: 0 1px 4px rgba(0, 0, 0, 0.25); z-index: 100; font-size: 0.9rem; }}
                  #legend-title {{ font-weight: 600; margin-bottom: 6px; }}
                  .legend-item {{ display: flex; align-items: center; gap: 8px; margin: 3px 0; }}
                  .legend-color {{ width: 14px; height: 14px; border-radius: 50%; border: 1px solid #333; }}
                </style>
              </head>
              <body>
                <div id=\"cesiumContainer\"></div>
                <div id=\"legend\">
                  {legend_html}
                </div>
                <script>
                  window.SITEGLOBE_CONFIG = {config_json};
                  window.SITEGLOBE_DATA = {data_json};
                </script>
                <script src=\"{cesium_base}/Cesium.js\"></script>
                <script src=\"assets/sites.js\"></script>
              </body>
            </html>
            """
        ).strip()
        legend_html = indent(
            self._render_legend_html(str(config["legend_title"])), " " * 6
        ).lstrip()
        return (
            template.format(
                title=escape(str(config["title"])),
                cesium_base=CESIUM_BASE,
                legend_html=legend_html,
                config_json=_script_json(config),
                data_json=_script_json(data),
            )
            + "\n"
        )

    def _render_script(self) -> str:
        return (
            dedent(
                """
            (function () {
              const config = window.SITEGLOBE_CONFIG || {};
              const data = window.SITEGLOBE_DATA || { points: [] };
              const container = document.getElementById("cesiumContainer");

              if (!window.Cesium) {
                container.innerHTML = "<strong>Cesium failed to load.</strong>";
                return;
              }

              const viewer = new Cesium.Viewer(container, {
                timeline: false,
                animation: false,
                baseLayerPicker: false,
                geocoder: false,
                sceneModePicker: false,
                navigationHelpButton: false,
                infoBox: true,
                selectionIndicator: false,
                homeButton: false,
                fullscreenButton: false,
              });

              viewer.infoBox.frame.removeAttribute("sandbox");

              viewer.imageryLayers.removeAll();
              viewer.imageryLayers.addImageryProvider(
                new Cesium.UrlTemplateImageryProvider({
                  url: config.imagery_url,
                  credit: config.imagery_credit,
                }),
              );

              const scene = viewer.scene;
              scene.globe.baseColor = Cesium.Color.fromCssColorString(config.globe_color);
              scene.backgroundColor = Cesium.Color.fromCssColorString(config.background_color);
              scene.globe.showGroundAtmosphere = false;
              scene.globe.enableLighting = false;
              scene.skyBox.show = false;
              scene.sun.show = false;
              scene.moon.show = false;
              scene.skyAtmosphere.show = false;

              viewer.infoBox.frame.addEventListener("load", function () {
                const doc = viewer.infoBox.frame.contentDocument;
                const style = doc.createElement("style");
                style.innerHTML = `
                  body, body * {
                    font-family: "Avenir", "Helvetica", sans-serif !important;
                    color: #333 !important;
                  }
                  strong, b {
                    font-family: "Avenir", "Helvetica", sans-serif !important;
                    color: #333 !important;
                    font-weight: bold !important;
                  }
                  span {
                    color: black !important;
                  }
                `;
                doc.head.appendChild(style);
              });

              const metersPerUnit = config.meters_per_size_unit || 10000.0;
              (data.points || []).forEach(function (point) {
                const radius = point.size * metersPerUnit;
                viewer.entities.add({
                  position: Cesium.Cartesian3.fromDegrees(point.longitude, point.latitude),
                  ellipse: {
                    semiMinorAxis: radius,
                    semiMajorAxis: radius,
                    material: Cesium.Color.fromCssColorString(point.color),
                    outline: true,
                    outlineColor: Cesium.Color.BLACK,
                    extrudedHeight: 0,
                    granularity: 0.002,
                    height: point.height,
                  },
                  name: point.name,
                  description: point.description,
                });
              });
            })();
            """
            ).strip()
            + "\n"
        )
