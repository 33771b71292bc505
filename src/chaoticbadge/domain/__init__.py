"""Domain models for chaoticbadge.

This module contains the value types the renderer works with. All models are:

- Immutable where possible (frozen dataclasses)
- Independent of any serialization format

Key classes:
- Color: An RGB color with 8-bit channels
- Status: The closed set of badge states
- StatusMap: Status -> (text, color) table passed into styles
- Drawing, Group, Rect, Polygon, Text, Path: The drawing tree
- Icon: A pre-parsed icon with its bounding box
"""

from chaoticbadge.domain.color import (
    BLACK,
    DEFAULT_LEFT_COLOR,
    FAILING_COLOR,
    PASSING_COLOR,
    SHADOW_COLOR,
    UNKNOWN_COLOR,
    WHITE,
    Color,
)
from chaoticbadge.domain.drawing import (
    Drawing,
    Element,
    Group,
    Icon,
    Path,
    Polygon,
    Rect,
    Scale,
    Text,
    Transform,
    Translate,
)
from chaoticbadge.domain.status import (
    EMOTICON_STATUS_MAP,
    STANDARD_STATUS_MAP,
    Status,
    StatusEntry,
    StatusMap,
)

__all__: list[str] = [
    # Colors
    "BLACK",
    "DEFAULT_LEFT_COLOR",
    "FAILING_COLOR",
    "PASSING_COLOR",
    "SHADOW_COLOR",
    "UNKNOWN_COLOR",
    "WHITE",
    "Color",
    # Status tables
    "EMOTICON_STATUS_MAP",
    "STANDARD_STATUS_MAP",
    "Status",
    "StatusEntry",
    "StatusMap",
    # Drawing tree
    "Drawing",
    "Element",
    "Group",
    "Icon",
    "Path",
    "Polygon",
    "Rect",
    "Scale",
    "Text",
    "Transform",
    "Translate",
]
