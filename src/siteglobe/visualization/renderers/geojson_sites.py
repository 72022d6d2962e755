# SPDX-License-Identifier: Apache-2.0
"""GeoJSON export of site markers, for GIS tools or other map front-ends."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .base import RenderBundle, SiteRenderer
from .registry import register


@register
class GeoJSONSitesRenderer(SiteRenderer):
    slug = "geojson"
    description = "FeatureCollection of site markers with legend metadata."

    def feature_collection(self) -> dict[str, Any]:
        features: list[dict[str, Any]] = []
        for point in self.points:
            props = point.to_dict()
            props.pop("longitude")
            props.pop("latitude")
            features.append(
                {
                    "type": "Feature",
                    "geometry": {
                        "type": "Point",
                        "coordinates": [point.longitude, point.latitude],
                    },
                    "properties": props,
                }
            )

        bbox = None
        if features:
            lons = [p.longitude for p in self.points]
            lats = [p.latitude for p in self.points]
            bbox = [min(lons), min(lats), max(lons), max(lats)]

        return {
            "type": "FeatureCollection",
            "features": features,
            "bbox": bbox,
            "legend": [entry.to_dict() for entry in self.legend],
            "metadata": {
                "feature_count": len(features),
                "legend_title": self._options.get("legend_title"),
            },
        }

    def build(self, *, output_dir: Path) -> RenderBundle:
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / str(self._options.get("filename") or "sites.geojson")
        indent = self._options.get("indent")
        indent = 2 if indent is None else int(indent)
        path.write_text(
            json.dumps(self.feature_collection(), indent=indent, ensure_ascii=False)
            + "\n",
            encoding="utf-8",
        )
        return RenderBundle(output_dir=output_dir, entrypoint=path)
