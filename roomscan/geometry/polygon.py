"""Convex polygon overlap and polygon sanity checks."""

from __future__ import annotations

import math
from typing import Sequence

from shapely.geometry import LinearRing, Polygon

from roomscan.geometry.contract import (
    EPSILON,
    MAX_COORDINATE,
    MAX_VERTEX_ANGLE_DEG,
    MIN_EDGE_LENGTH,
    MIN_VERTEX_ANGLE_DEG,
)
from roomscan.geometry.primitives import Point, dot_product, magnitude_squared, ring_edges, subtract


def _project(polygon: Sequence[Point], axis: Point) -> tuple[float, float]:
    values = [dot_product(axis, p) for p in polygon]
    return min(values), max(values)


def do_polygons_intersect(poly_a: Sequence[Point], poly_b: Sequence[Point]) -> bool:
    """Separating Axis Theorem test for two convex polygons.

    Every edge normal of both polygons is tried as a candidate axis. If the
    projections of the two vertex sets are disjoint on any of them the
    polygons are apart; touching projections still count as overlap.
    Empty polygons never intersect.
    """
    if not poly_a or not poly_b:
        return False
    for polygon in (poly_a, poly_b):
        for p1, p2 in ring_edges(polygon):
            normal = Point(-(p2.y - p1.y), p2.x - p1.x)
            min_a, max_a = _project(poly_a, normal)
            min_b, max_b = _project(poly_b, normal)
            if max_a < min_b or max_b < min_a:
                return False
    return True


def _vertex_angle_deg(prev: Point, curr: Point, nxt: Point) -> float | None:
    v_ba = subtract(prev, curr)
    v_bc = subtract(nxt, curr)
    len_ba = math.sqrt(magnitude_squared(v_ba))
    len_bc = math.sqrt(magnitude_squared(v_bc))
    if len_ba < EPSILON or len_bc < EPSILON:
        return None
    cos_theta = dot_product(v_ba, v_bc) / (len_ba * len_bc)
    cos_theta = max(-1.0, min(1.0, cos_theta))
    return math.degrees(math.acos(cos_theta))


def check_polygon_integrity(points: Sequence[Point]) -> bool:
    """
    Check whether a floor boundary is a usable polygon.

    Rules:
    - At least 3 vertices, all finite and within +/- 10 km of the origin
    - Implicitly closed (first vertex is not repeated at the end)
    - No edge shorter than 1 mm
    - Every vertex angle between 5 and 175 degrees (filters spikes and slivers)
    - Simple ring: no self-intersections, collinear overlaps or repeated vertices
    - Non-degenerate area with counter-clockwise winding in (x, z)

    Args:
        points: Ordered boundary vertices.

    Returns:
        True if every rule holds.
    """
    if len(points) < 3:
        return False

    for p in points:
        if not (math.isfinite(p.x) and math.isfinite(p.y)):
            return False
        if abs(p.x) > MAX_COORDINATE or abs(p.y) > MAX_COORDINATE:
            return False

    first, last = points[0], points[-1]
    if abs(first.x - last.x) < EPSILON and abs(first.y - last.y) < EPSILON:
        return False

    n = len(points)
    for i in range(n):
        p1, p2, p3 = points[i], points[(i + 1) % n], points[(i + 2) % n]
        if math.sqrt(magnitude_squared(subtract(p2, p1))) < MIN_EDGE_LENGTH:
            return False
        angle = _vertex_angle_deg(p1, p2, p3)
        if angle is None or angle < MIN_VERTEX_ANGLE_DEG or angle > MAX_VERTEX_ANGLE_DEG:
            return False

    coords = [(p.x, p.y) for p in points]
    ring = LinearRing(coords)
    if not ring.is_simple:
        return False
    if not ring.is_ccw:
        return False
    return Polygon(coords).area >= EPSILON


__all__ = ["check_polygon_integrity", "do_polygons_intersect"]
