# SPDX-License-Identifier: Apache-2.0
"""Row-record column names and the descriptors handed to presentation sinks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

LATITUDE = "Latitude"
LONGITUDE = "Longitude"
QUANTITY = "Size (Quantity)"
CATEGORY = "Color (Category)"
LOCATION = "Location"
PROJECT = "Project"
PROJECT_URL = "Project or Data URL"
START_YEAR = "Start Year"
END_YEAR = "End Year"

RowRecord = Mapping[str, str]


@dataclass(frozen=True, slots=True)
class PointDescriptor:
    """One renderable site marker."""

    longitude: float
    latitude: float
    size: float
    color: str
    height: float
    name: str
    description: str
    row_index: int
    categories: tuple[str, ...] = field(default_factory=tuple)

    @property
    def position(self) -> tuple[float, float]:
        return (self.longitude, self.latitude)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "longitude": self.longitude,
            "latitude": self.latitude,
            "size": self.size,
            "color": self.color,
            "height": self.height,
            "description": self.description,
            "categories": list(self.categories),
            "row_index": self.row_index,
        }


@dataclass(frozen=True, slots=True)
class LegendEntry:
    category: str
    color: str

    def to_dict(self) -> dict[str, str]:
        return {"category": self.category, "color": self.color}
