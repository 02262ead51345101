"""2D vector primitives over floor-plan points.

All geometry in the engine lives on the horizontal plane: a :class:`Point`
holds ``(worldX, worldZ)`` and the vertical axis never appears.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from roomscan.geometry.contract import EPSILON


@dataclass(frozen=True)
class Point:
    """Immutable floor-plan point (x = world X, y = world Z)."""

    x: float
    y: float


def dot_product(a: Point, b: Point) -> float:
    return a.x * b.x + a.y * b.y


def cross_product(a: Point, b: Point) -> float:
    """Scalar z-component of the 2D cross product."""
    return a.x * b.y - a.y * b.x


def magnitude_squared(v: Point) -> float:
    return dot_product(v, v)


def subtract(a: Point, b: Point) -> Point:
    return Point(a.x - b.x, a.y - b.y)


def distance(a: Point, b: Point) -> float:
    return math.sqrt(magnitude_squared(subtract(a, b)))


def transform_point(p: Point, matrix: Sequence[float]) -> Point:
    """Map a local ``(X, Z)`` point through a 16-element affine transform.

    The input ``p.y`` is local Z and the output ``y`` is world Z, i.e. the
    top-down projection of the X-Z plane. The caller checks the matrix length.
    """
    x = p.x * matrix[0] + p.y * matrix[8] + matrix[12]
    z = p.x * matrix[2] + p.y * matrix[10] + matrix[14]
    return Point(x, z)


def transform_origin(matrix: Sequence[float]) -> Point:
    """World-space floor position of a transform's translation."""
    return Point(matrix[12], matrix[14])


def _is_finite(*points: Point) -> bool:
    return all(math.isfinite(p.x) and math.isfinite(p.y) for p in points)


def dist_to_segment(p: Point, a: Point, b: Point) -> float:
    """Euclidean distance from ``p`` to the closed segment ``[a, b]``.

    The projection parameter is clamped to ``[0, 1]`` so points beyond an end
    measure to the nearest endpoint. Degenerate segments measure to ``a``.

    Raises:
        ValueError: If any coordinate is not finite.
    """
    if not _is_finite(p, a, b):
        raise ValueError("Invalid point coordinates")
    ab = subtract(b, a)
    l2 = magnitude_squared(ab)
    if l2 < EPSILON:
        return distance(p, a)
    t = dot_product(subtract(p, a), ab) / l2
    t = max(0.0, min(1.0, t))
    projection = Point(a.x + t * ab.x, a.y + t * ab.y)
    return distance(p, projection)


def min_corner_to_segment_distance(corners_a: Sequence[Point], corners_b: Sequence[Point]) -> float:
    """Smallest distance from any vertex of one chain to any edge of the other.

    Both directions are measured. Edges wrap around, so a 2-point chain yields
    its segment twice and a 4-point chain its closed outline.
    """
    best = math.inf
    for points, ring in ((corners_a, corners_b), (corners_b, corners_a)):
        for p in points:
            for q1, q2 in ring_edges(ring):
                d = dist_to_segment(p, q1, q2)
                if d < best:
                    best = d
    return best


def ring_edges(points: Sequence[Point]) -> list[tuple[Point, Point]]:
    """Consecutive vertex pairs including the closing edge."""
    n = len(points)
    return [(points[i], points[(i + 1) % n]) for i in range(n)]


__all__ = [
    "Point",
    "cross_product",
    "distance",
    "dist_to_segment",
    "dot_product",
    "magnitude_squared",
    "min_corner_to_segment_distance",
    "ring_edges",
    "subtract",
    "transform_origin",
    "transform_point",
]
