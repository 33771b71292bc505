"""Minimal vector drawing tree produced by the badge renderer.

The tree only covers what badges need: groups with transforms and inherited
fill/font attributes, rectangles, polygons, text runs and raw path data for
icons. Serialization lives in ``chaoticbadge.io.svg_writer``.
"""

from dataclasses import dataclass, field
from typing import Union

from chaoticbadge.domain.color import Color


@dataclass(frozen=True, slots=True)
class Translate:
    """Translation transform."""

    x: float
    y: float = 0.0


@dataclass(frozen=True, slots=True)
class Scale:
    """Scale transform."""

    sx: float
    sy: float


Transform = Union[Translate, Scale]


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle anchored at the origin of its parent."""

    width: float
    height: float
    fill: Color


@dataclass(frozen=True, slots=True)
class Polygon:
    """Filled closed polygon."""

    points: tuple[tuple[float, float], ...]
    fill: Color


@dataclass(frozen=True, slots=True)
class Text:
    """Single run of text positioned by its baseline origin."""

    content: str
    x: float
    y: float
    fill: Color
    transforms: tuple[Transform, ...] = ()


@dataclass(frozen=True, slots=True)
class Path:
    """Raw SVG path data, used for icon outlines."""

    d: str


@dataclass
class Group:
    """Container element.

    Fill and font attributes set on a group are inherited by its children.
    Transforms apply in order, as in an SVG ``transform`` list.

    Attributes:
        children: Child elements in paint order
        transforms: Transform list applied to the whole group
        fill: Inherited fill color, if any
        font_family: Inherited font family, if any
        font_size_pts: Inherited font size in points, if any
    """

    children: list["Element"] = field(default_factory=list)
    transforms: tuple[Transform, ...] = ()
    fill: Color | None = None
    font_family: str | None = None
    font_size_pts: float | None = None

    def add(self, element: "Element") -> "Group":
        """Append a child element and return self."""
        self.children.append(element)
        return self

    def iter_elements(self):
        """Yield every descendant element depth-first, in paint order."""
        for child in self.children:
            yield child
            if isinstance(child, Group):
                yield from child.iter_elements()


Element = Union[Group, Rect, Polygon, Text, Path]


@dataclass
class Drawing:
    """A finished badge.

    Attributes:
        width: Total width in user units
        height: Total height in user units
        root: Top-level group holding every element
    """

    width: float
    height: float
    root: Group


@dataclass(frozen=True, slots=True)
class Icon:
    """Pre-parsed icon drawing with its bounding box.

    Attributes:
        path_data: SVG path data of the icon outline
        bounds: Bounding box as (x_min, y_min, x_max, y_max)
    """

    path_data: str
    bounds: tuple[float, float, float, float]

    @property
    def width(self) -> float:
        """Width of the bounding box."""
        return self.bounds[2] - self.bounds[0]

    @property
    def height(self) -> float:
        """Height of the bounding box."""
        return self.bounds[3] - self.bounds[1]
