"""Exterior opening rule."""

from __future__ import annotations

import math

from loguru import logger

from roomscan.geometry.footprints import has_valid_transform
from roomscan.geometry.primitives import Point, dist_to_segment, ring_edges, transform_origin
from roomscan.schema import RawScan
from roomscan.settings import ToleranceSettings


def floor_boundary(scan: RawScan) -> list[Point]:
    """Boundary of the first floor; later floors are not consulted."""
    if not scan.floors:
        return []
    corners = [Point(c[0], c[1]) for c in scan.floors[0].polygonCorners if len(c) >= 2]
    if not all(math.isfinite(p.x) and math.isfinite(p.y) for p in corners):
        logger.debug("Floor boundary has non-finite corners; ignored")
        return []
    return corners


def check_external_opening(scan: RawScan, tolerances: ToleranceSettings | None = None) -> bool:
    """An opening whose host wall runs along the floor perimeter.

    The host wall is located by ``parentIdentifier``; its origin must lie
    within the perimeter threshold of some floor edge. Openings tagged with
    another story are ignored.
    """
    tolerances = tolerances or ToleranceSettings()
    corners = floor_boundary(scan)
    if len(corners) < 3:
        return False
    edges = ring_edges(corners)

    for opening in scan.openings:
        if opening.parentIdentifier is None:
            continue
        if opening.story is not None and opening.story != scan.story:
            continue
        wall = scan.find_wall(opening.parentIdentifier)
        if wall is None or not has_valid_transform(wall):
            logger.debug("Opening host wall {} missing or unplaced", opening.parentIdentifier)
            continue
        origin = transform_origin(wall.transform)
        if any(dist_to_segment(origin, p1, p2) < tolerances.exterior_perimeter_m for p1, p2 in edges):
            return True
    return False


__all__ = ["check_external_opening", "floor_boundary"]
