"""I/O layer for chaoticbadge.

This module handles everything that touches files or user-supplied strings,
keeping the rendering core free of I/O.

Key responsibilities:
- Measure text with font metrics (fonttools)
- Load icons from SVG files (fonttools svgLib)
- Serialize drawings to SVG
- Parse color overrides

Key classes:
- FontMetrics: Text measurement from a font file
- FixedWidthMeasurer: Approximate text measurement
- SvgWriter: Drawing serialization
"""

from chaoticbadge.io.colors import parse_color
from chaoticbadge.io.icon import icon_from_string, load_icon
from chaoticbadge.io.metrics import FixedWidthMeasurer, FontMetrics
from chaoticbadge.io.svg_writer import SvgWriter

__all__ = [
    "FixedWidthMeasurer",
    "FontMetrics",
    "SvgWriter",
    "icon_from_string",
    "load_icon",
    "parse_color",
]
