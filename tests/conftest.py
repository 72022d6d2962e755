# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import pytest

SITES_CSV = """\
Location,Latitude,Longitude,Size (Quantity),Color (Category),Project,Project or Data URL,Start Year,End Year
Summit Station,72.58,-38.46,12,"Ice Flow, Altimetry",GNSS ice velocity,https://example.org/summit,2010,2022
Boulder,40.01,-105.27,4,Education,Outreach kit,,2018,
Lake Tahoe,not-a-lat,-120.0,30,Reflectometry,Snow depth,https://example.org/tahoe,,
Svalbard,78.22,15.65,n/a,Reflectometry,Sea level,,2015,2020

Dome C,-75.1,123.35,30,"Altimetry, Snow",Ice sheet height,,2012,2019
"""


class StaticSource:
    """Document source that returns fixed text or raises a given error."""

    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls = 0

    def fetch_document(self) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def sites_csv() -> str:
    return SITES_CSV


@pytest.fixture
def static_source():
    return StaticSource


def row(lat="10", lon="20", qty="5", cat="Ice Flow", **extra) -> dict[str, str]:
    data = {
        "Latitude": lat,
        "Longitude": lon,
        "Size (Quantity)": qty,
        "Color (Category)": cat,
    }
    data.update(extra)
    return {k: v for k, v in data.items() if v is not None}


@pytest.fixture
def make_row():
    return row
