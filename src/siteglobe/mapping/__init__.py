# SPDX-License-Identifier: Apache-2.0
from .description import build_description
from .diagnostics import Diagnostics, RowIssue
from .fields import ParsedField, parse_number, parse_text, split_categories
from .legend import LegendExtractor
from .markers import MarkerMapper, quantity_bounds
from .models import LegendEntry, PointDescriptor

__all__ = [
    "Diagnostics",
    "LegendEntry",
    "LegendExtractor",
    "MarkerMapper",
    "ParsedField",
    "PointDescriptor",
    "RowIssue",
    "build_description",
    "parse_number",
    "parse_text",
    "quantity_bounds",
    "split_categories",
]
