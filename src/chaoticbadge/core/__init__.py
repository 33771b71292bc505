"""Core rendering algorithms for chaoticbadge.

This module contains:

- Geometry (Bowyer-Watson Delaunay triangulation of a jittered rectangle)
- Shard shading (random brightness per triangle)
- Color policy (light/dark text selection)
- Style strategies (flat, shatter)
- Badge layout
- Thread-pool batch rendering

Rendering is synchronous and free of shared mutable state. The only
randomness comes from an explicit ``random.Random`` or a per-thread one.

Key functions:
- bowyer_watson: Triangulate a point set
- triangulate_rectangle: Generate and triangulate points over a rectangle
- shatter_block: Build a mosaic-filled block
- is_light / contrast_color: Text color policy

Key classes:
- BadgeRenderer: Lays out a badge
- FlatStyle / ShatterStyle: Style strategies
- BatchRenderer: Renders many badges in parallel
"""

from chaoticbadge.core.batch import BatchRenderer, render_request
from chaoticbadge.core.contrast import contrast_color, is_light
from chaoticbadge.core.geometry import (
    Edge,
    Triangle,
    TriangulationResult,
    Vertex,
    bowyer_watson,
    generate_points,
    triangulate_rectangle,
)
from chaoticbadge.core.layout import BadgeRenderer, TextMeasurer, place_icon
from chaoticbadge.core.shading import shade_bounds, shade_color, shatter_block, working_size
from chaoticbadge.core.style import (
    BadgeStyleStrategy,
    FlatStyle,
    ShatterStyle,
    StyleContext,
    create_strategy,
)

__all__ = [
    # Layout
    "BadgeRenderer",
    # Styles
    "BadgeStyleStrategy",
    # Batch
    "BatchRenderer",
    # Geometry
    "Edge",
    "FlatStyle",
    "ShatterStyle",
    "StyleContext",
    "TextMeasurer",
    "Triangle",
    "TriangulationResult",
    "Vertex",
    "bowyer_watson",
    # Color policy
    "contrast_color",
    "create_strategy",
    "generate_points",
    "is_light",
    "place_icon",
    "render_request",
    # Shading
    "shade_bounds",
    "shade_color",
    "shatter_block",
    "triangulate_rectangle",
    "working_size",
]
