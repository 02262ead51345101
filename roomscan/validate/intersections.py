"""
Intersection Checks

Object-object, wall-object and wall-wall overlap rules. Each check returns
True as soon as one offending pair is found.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from roomscan.geometry.contract import (
    COLLINEAR_AREA_TOLERANCE,
    EPSILON,
    SEGMENT_INTERIOR_MARGIN,
    SEGMENT_OVERLAP_EPSILON,
)
from roomscan.geometry.footprints import (
    ObjectFootprint,
    WallSegment,
    is_degenerate,
    object_footprint,
    wall_centerline,
    wall_rectangle,
)
from roomscan.geometry.polygon import do_polygons_intersect
from roomscan.geometry.primitives import cross_product, dot_product, magnitude_squared, subtract
from roomscan.schema import RawScan
from roomscan.settings import ToleranceSettings


@dataclass(frozen=True)
class IntersectionResult:
    has_object_intersection_errors: bool
    has_wall_object_intersection_errors: bool
    has_wall_wall_intersection_errors: bool


def _solid_object_footprints(scan: RawScan, tolerances: ToleranceSettings) -> list[ObjectFootprint]:
    footprints: list[ObjectFootprint] = []
    for index, obj in enumerate(scan.objects):
        if is_degenerate(obj):
            logger.debug("Object {} has zero volume; excluded from intersection checks", index)
            continue
        fp = object_footprint(obj, inner_tolerance=tolerances.object_inner_tolerance_m)
        if fp is None:
            logger.debug("Object {} has malformed transform or dimensions; excluded", index)
            continue
        footprints.append(fp)
    return footprints


def check_object_intersections(scan: RawScan, tolerances: ToleranceSettings | None = None) -> bool:
    """Two same-story objects overlapping beyond grazing contact.

    Sink/storage pairs are exempt (vanity assemblies). Candidates pass an AABB
    test on the full footprint before the SAT test on the inner footprints.
    """
    tolerances = tolerances or ToleranceSettings()
    boxes = _solid_object_footprints(scan, tolerances)
    for i, box_a in enumerate(boxes):
        for box_b in boxes[i + 1:]:
            if box_a.story != box_b.story:
                continue
            if (box_a.is_sink and box_b.is_storage) or (box_a.is_storage and box_b.is_sink):
                continue
            if not box_a.aabb_overlaps(box_b):
                continue
            if do_polygons_intersect(box_a.inner_corners, box_b.inner_corners):
                logger.debug(
                    "Objects {} and {} intersect",
                    sorted(box_a.category),
                    sorted(box_b.category),
                )
                return True
    return False


def check_wall_object_intersections(scan: RawScan, tolerances: ToleranceSettings | None = None) -> bool:
    """A wall body cutting into a same-story object's inner footprint."""
    tolerances = tolerances or ToleranceSettings()
    boxes = _solid_object_footprints(scan, tolerances)
    for wall in scan.walls:
        wall_poly = wall_rectangle(wall)
        if wall_poly is None:
            continue
        for box in boxes:
            if wall.story != box.story:
                continue
            if do_polygons_intersect(wall_poly, box.inner_corners):
                logger.debug("Wall {} intersects object {}", wall.identifier, sorted(box.category))
                return True
    return False


def _segments_conflict(s1: WallSegment, s2: WallSegment) -> bool:
    x1, y1 = s1.start.x, s1.start.y
    x2, y2 = s1.end.x, s1.end.y
    x3, y3 = s2.start.x, s2.start.y
    x4, y4 = s2.end.x, s2.end.y

    den = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if abs(den) < EPSILON:
        # Parallel: only a collinear overlap is an error
        direction = subtract(s1.end, s1.start)
        area = abs(cross_product(direction, subtract(s2.start, s1.start)))
        if area > COLLINEAR_AREA_TOLERANCE:
            return False
        length_sq = magnitude_squared(direction)
        if length_sq < EPSILON:
            return False
        t3 = dot_product(subtract(s2.start, s1.start), direction) / length_sq
        t4 = dot_product(subtract(s2.end, s1.start), direction) / length_sq
        overlap_start = max(0.0, min(t3, t4))
        overlap_end = min(1.0, max(t3, t4))
        # Strict: segments sharing only an endpoint are a corner join
        return overlap_end - overlap_start > SEGMENT_OVERLAP_EPSILON

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / den
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / den
    low, high = SEGMENT_INTERIOR_MARGIN, 1.0 - SEGMENT_INTERIOR_MARGIN
    return low < t < high and low < u < high


def check_wall_wall_intersections(scan: RawScan) -> bool:
    """Same-story wall centrelines crossing mid-span or overlapping collinearly."""
    segments = [seg for seg in (wall_centerline(w) for w in scan.walls) if seg is not None]
    for i, s1 in enumerate(segments):
        for s2 in segments[i + 1:]:
            if s1.story != s2.story:
                continue
            if _segments_conflict(s1, s2):
                logger.debug("Wall centrelines {} and {} intersect", s1, s2)
                return True
    return False


def check_intersections(scan: RawScan, tolerances: ToleranceSettings | None = None) -> IntersectionResult:
    return IntersectionResult(
        has_object_intersection_errors=check_object_intersections(scan, tolerances),
        has_wall_object_intersection_errors=check_wall_object_intersections(scan, tolerances),
        has_wall_wall_intersection_errors=check_wall_wall_intersections(scan),
    )


__all__ = [
    "IntersectionResult",
    "check_intersections",
    "check_object_intersections",
    "check_wall_object_intersections",
    "check_wall_wall_intersections",
]
