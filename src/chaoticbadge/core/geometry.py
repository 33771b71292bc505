"""Delaunay triangulation of a jittered point set covering a rectangle.

This module provides:
- Vertex, Edge, Triangle: Index-based mesh primitives
- generate_points: Jittered border points plus random interior points
- bowyer_watson: Incremental Delaunay triangulation (O(n^2))
- triangulate_rectangle: Both steps together

Triangles never hold coordinates. They index into a shared vertex list, the
first three entries of which are the synthetic super-triangle during
triangulation. All functions are pure apart from the random generator they
are handed.
"""

import logging
import math
import random
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from chaoticbadge.core.rng import resolve_rng
from chaoticbadge.exceptions import GeometryError, TriangulationError

logger = logging.getLogger(__name__)

# Indices 0..2 hold the super-triangle while triangulating
SUPER_TRIANGLE_SIZE = 3

_TAN_PI_OVER_3 = math.tan(math.pi / 3)
_COS_PI_OVER_3 = math.cos(math.pi / 3)


@dataclass(frozen=True, slots=True)
class Vertex:
    """A point in 2D space.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass(frozen=True, slots=True, eq=False)
class Edge:
    """Unordered pair of vertex indices.

    ``Edge(1, 2) == Edge(2, 1)``; hashing agrees with equality.
    """

    p1: int
    p2: int

    @property
    def key(self) -> tuple[int, int]:
        """Indices in ascending order."""
        return (self.p1, self.p2) if self.p1 <= self.p2 else (self.p2, self.p1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)


@dataclass(frozen=True, slots=True)
class Triangle:
    """Three vertex indices into a shared vertex list.

    Equality and hashing use the indices in their declared order.
    """

    p1: int
    p2: int
    p3: int

    @property
    def indices(self) -> tuple[int, int, int]:
        """The three vertex indices."""
        return (self.p1, self.p2, self.p3)

    @property
    def touches_super_triangle(self) -> bool:
        """Whether any corner is one of the synthetic super-triangle vertices."""
        return min(self.p1, self.p2, self.p3) < SUPER_TRIANGLE_SIZE

    def edges(self) -> tuple[Edge, Edge, Edge]:
        """Return the three edges in winding order."""
        return (Edge(self.p1, self.p2), Edge(self.p2, self.p3), Edge(self.p3, self.p1))

    def has_edge(self, edge: Edge) -> bool:
        """Whether the triangle has the given (unordered) edge."""
        return edge in self.edges()

    def in_circumcircle(self, vertices: Sequence[Vertex], point: Vertex) -> bool:
        """Test whether a point lies strictly inside the circumcircle.

        Uses the sign of the in-circle determinant on coordinates taken
        relative to the point. The result is only meaningful for
        counter-clockwise triangles.

        Args:
            vertices: Shared vertex list
            point: Point to test

        Returns:
            True if the point is strictly inside
        """
        a = vertices[self.p1]
        b = vertices[self.p2]
        c = vertices[self.p3]
        ax, ay = a.x - point.x, a.y - point.y
        bx, by = b.x - point.x, b.y - point.y
        cx, cy = c.x - point.x, c.y - point.y
        det = (
            (ax * ax + ay * ay) * (bx * cy - cx * by)
            - (bx * bx + by * by) * (ax * cy - cx * ay)
            + (cx * cx + cy * cy) * (ax * by - bx * ay)
        )
        return det > 0

    def orientation(self, vertices: Sequence[Vertex]) -> float:
        """Twice the signed area; positive for counter-clockwise winding."""
        a = vertices[self.p1]
        b = vertices[self.p2]
        c = vertices[self.p3]
        return (b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)

    def is_counter_clockwise(self, vertices: Sequence[Vertex]) -> bool:
        """Whether the triangle winds counter-clockwise."""
        return self.orientation(vertices) > 0

    def area(self, vertices: Sequence[Vertex]) -> float:
        """Unsigned area."""
        return abs(self.orientation(vertices)) / 2.0


@dataclass(frozen=True)
class TriangulationResult:
    """Output of a triangulation.

    Attributes:
        vertices: All vertices; indices 0..2 are the discarded super-triangle
        triangles: Surviving triangles, none of which references 0..2
    """

    vertices: tuple[Vertex, ...]
    triangles: tuple[Triangle, ...]

    @property
    def real_vertex_count(self) -> int:
        """Number of input vertices (excluding the super-triangle)."""
        return len(self.vertices) - SUPER_TRIANGLE_SIZE

    def total_area(self) -> float:
        """Sum of the surviving triangle areas."""
        return sum(tri.area(self.vertices) for tri in self.triangles)

    def triangle_points(self, triangle: Triangle) -> tuple[Vertex, Vertex, Vertex]:
        """Return the three vertices of a triangle."""
        return (
            self.vertices[triangle.p1],
            self.vertices[triangle.p2],
            self.vertices[triangle.p3],
        )


def super_triangle(points: Sequence[Vertex], margin: float = 1.0) -> tuple[Vertex, Vertex, Vertex]:
    """Build an equilateral triangle enclosing the bounding circle of the points.

    The circle is centered on the axis-aligned bounding box with a radius of
    half its diagonal, multiplied by ``margin``. The triangle's incircle is
    that circle.

    Args:
        points: Points to enclose
        margin: Radius multiplier (>= 1)

    Returns:
        (apex, base-left, base-right), counter-clockwise

    Raises:
        GeometryError: If there are no points or they all coincide
    """
    if not points:
        raise GeometryError("Cannot build a super-triangle for zero points")

    min_x = min(v.x for v in points)
    max_x = max(v.x for v in points)
    min_y = min(v.y for v in points)
    max_y = max(v.y for v in points)
    center_x = (max_x - min_x) / 2 + min_x
    center_y = (max_y - min_y) / 2 + min_y
    radius = math.hypot(max_x - min_x, max_y - min_y) / 2 * margin
    if radius <= 0:
        raise GeometryError("Cannot build a super-triangle for coincident points")

    half_base = radius * _TAN_PI_OVER_3
    apex_height = radius / _COS_PI_OVER_3
    return (
        Vertex(center_x, center_y + apex_height),
        Vertex(center_x - half_base, center_y - radius),
        Vertex(center_x + half_base, center_y - radius),
    )


def _cavity_boundary(bad: list[Triangle]) -> list[Edge]:
    """Edges of the bad triangles that no other bad triangle shares."""
    counts = Counter(edge for tri in bad for edge in tri.edges())
    boundary: list[Edge] = []
    for tri in bad:
        for edge in tri.edges():
            count = counts[edge]
            if count > 2:
                raise TriangulationError(
                    f"Edge {edge.key} shared by {count} triangles while re-triangulating"
                )
            if count == 1:
                boundary.append(edge)
    return boundary


def bowyer_watson(points: Sequence[Vertex], margin: float = 1.0) -> TriangulationResult:
    """Compute the Delaunay triangulation of a point set.

    Incremental Bowyer-Watson: start from a super-triangle containing every
    point, insert points one at a time, remove the triangles whose
    circumcircle contains the new point, and fan the resulting hole from the
    point. Triangles still touching the super-triangle are dropped at the end.

    Args:
        points: Input points (at least one, not all coincident)
        margin: Super-triangle radius multiplier, see ``super_triangle``

    Returns:
        TriangulationResult whose vertex list is the super-triangle followed
        by the input points, in order

    Raises:
        GeometryError: If the points are degenerate
        TriangulationError: If the mesh becomes inconsistent
    """
    vertices: list[Vertex] = [*super_triangle(points, margin), *points]

    # dict keeps insertion order so seeded runs are reproducible
    triangles: dict[Triangle, None] = {Triangle(0, 1, 2): None}

    for c in range(SUPER_TRIANGLE_SIZE, len(vertices)):
        point = vertices[c]
        bad = [tri for tri in triangles if tri.in_circumcircle(vertices, point)]
        if not bad:
            continue

        boundary = _cavity_boundary(bad)
        for tri in bad:
            del triangles[tri]

        for edge in boundary:
            tri = Triangle(edge.p1, edge.p2, c)
            if not tri.is_counter_clockwise(vertices):
                tri = Triangle(edge.p2, edge.p1, c)
            triangles[tri] = None

    survivors = tuple(tri for tri in triangles if not tri.touches_super_triangle)
    result = TriangulationResult(vertices=tuple(vertices), triangles=survivors)
    logger.debug(
        "Triangulated %d points into %d triangles (%d discarded)",
        result.real_vertex_count,
        len(survivors),
        len(triangles) - len(survivors),
    )
    return result


def generate_points(
    width: float,
    height: float,
    sep: float,
    rng: random.Random | None = None,
    max_border_points: int = 256,
) -> list[Vertex]:
    """Generate a jittered point set covering a rectangle.

    Border points come in pairs on opposite edges, spaced by random steps in
    ``[0.5 * sep, 1.5 * sep)``. The corners other than the origin are added
    explicitly, followed by ``ceil(width * height / sep**2)`` uniformly random
    interior points. Exact duplicates are skipped.

    Args:
        width: Rectangle width (> 0)
        height: Rectangle height (> 0)
        sep: Typical point separation (> 0)
        rng: Random generator (default: the calling thread's)
        max_border_points: Cap on steps taken along each axis

    Returns:
        List of unique vertices

    Raises:
        GeometryError: If the rectangle or separation is not positive
    """
    if width <= 0 or height <= 0:
        raise GeometryError(f"Cannot place points in a {width}x{height} rectangle")
    if sep <= 0:
        raise GeometryError(f"Point separation must be positive, got {sep}")

    rng = resolve_rng(rng)
    s_min, s_max = 0.5 * sep, 1.5 * sep

    points: list[Vertex] = []
    seen: set[Vertex] = set()

    def add(x: float, y: float) -> None:
        vertex = Vertex(x, y)
        if vertex not in seen:
            seen.add(vertex)
            points.append(vertex)

    x = 0.0
    for _ in range(max_border_points):
        if x >= width:
            break
        add(x, 0.0)
        add(x, height)
        x += (s_max - s_min) * rng.random() + s_min

    y = 0.0
    for _ in range(max_border_points):
        if y >= height:
            break
        add(0.0, y)
        add(width, y)
        y += (s_max - s_min) * rng.random() + s_min

    add(0.0, height)
    add(width, 0.0)
    add(width, height)

    interior_count = math.ceil(width * height / (sep * sep))
    for _ in range(interior_count):
        add(width * rng.random(), height * rng.random())

    return points


def triangulate_rectangle(
    width: float,
    height: float,
    sep: float,
    rng: random.Random | None = None,
    max_border_points: int = 256,
    margin: float = 1.0,
) -> TriangulationResult:
    """Generate points over a rectangle and triangulate them.

    Args:
        width: Rectangle width (> 0)
        height: Rectangle height (> 0)
        sep: Typical point separation (> 0)
        rng: Random generator (default: the calling thread's)
        max_border_points: Cap on border steps per axis
        margin: Super-triangle radius multiplier

    Returns:
        TriangulationResult tiling the rectangle
    """
    points = generate_points(width, height, sep, rng=rng, max_border_points=max_border_points)
    return bowyer_watson(points, margin=margin)
