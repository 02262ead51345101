"""Wall shape rules: nib walls, duplicated (colinear) walls and crooked walls."""

from __future__ import annotations

import math
from itertools import combinations

from loguru import logger

from roomscan.geometry.footprints import WallFootprint, has_valid_transform, wall_footprints
from roomscan.geometry.primitives import (
    Point,
    distance,
    dot_product,
    magnitude_squared,
    min_corner_to_segment_distance,
    ring_edges,
    subtract,
)
from roomscan.schema import RawScan
from roomscan.settings import ToleranceSettings


def footprint_diameter(corners: tuple[Point, ...]) -> float:
    """Largest distance between any two footprint corners."""
    return max((distance(a, b) for a, b in combinations(corners, 2)), default=0.0)


def check_nib_walls(scan: RawScan, tolerances: ToleranceSettings | None = None) -> bool:
    """A wall on the scan's story shorter than 1 ft.

    Zero-length footprints are degenerate records, not nib walls.
    """
    tolerances = tolerances or ToleranceSettings()
    walls = [w for w in scan.walls if w.story is None or w.story == scan.story]
    for wall in wall_footprints(walls):
        diameter = footprint_diameter(wall.corners)
        if 0.0 < diameter < tolerances.nib_wall_max_m:
            logger.debug("Nib wall {} is {:.3f} m long", wall.identifier, diameter)
            return True
    return False


def dominant_direction(wall: WallFootprint) -> Point:
    """Unit vector of the longest footprint edge (zero vector if degenerate)."""
    best_len = 0.0
    best = Point(0.0, 0.0)
    for p1, p2 in ring_edges(wall.corners):
        v = subtract(p2, p1)
        length = math.sqrt(magnitude_squared(v))
        if length > best_len:
            best_len = length
            best = Point(v.x / length, v.y / length)
    return best


def check_colinear_walls(scan: RawScan, tolerances: ToleranceSettings | None = None) -> bool:
    """Two parallel walls touching or overlapping, i.e. a duplicated wall.

    Parallel means the dominant directions differ by less than ~5 degrees, so
    ordinary perpendicular corners never qualify.
    """
    tolerances = tolerances or ToleranceSettings()
    walls = wall_footprints(scan.walls)
    directions = [dominant_direction(w) for w in walls]
    for i, j in combinations(range(len(walls)), 2):
        wall_a, wall_b = walls[i], walls[j]
        if wall_a.story is not None and wall_b.story is not None and wall_a.story != wall_b.story:
            continue
        if abs(dot_product(directions[i], directions[j])) <= tolerances.colinear_parallel_cosine:
            continue
        gap = min_corner_to_segment_distance(wall_a.corners, wall_b.corners)
        if gap < tolerances.colinear_touch_m:
            logger.debug("Walls {} and {} are colinear ({:.3f} m apart)", wall_a.identifier, wall_b.identifier, gap)
            return True
    return False


def wall_angle(transform: list[float]) -> float:
    """Heading of the wall's local X axis on the floor plan, in radians."""
    return math.atan2(transform[2], transform[0])


def angular_deviation(angle: float, reference: float) -> float:
    """Distance of ``angle - reference`` from the nearest multiple of 90 degrees."""
    diff = abs(angle - reference)
    step = math.pi / 2.0
    return abs(diff - round(diff / step) * step)


def check_crooked_walls(scan: RawScan, tolerances: ToleranceSettings | None = None) -> bool:
    """A wall slightly off square relative to the first wall.

    Deviations up to ~3 degrees are noise and beyond ~30 degrees are treated
    as deliberate diagonals; anything in between is crooked.
    """
    tolerances = tolerances or ToleranceSettings()
    angles = [wall_angle(w.transform) for w in scan.walls if has_valid_transform(w)]
    if not angles:
        return False
    reference = angles[0]
    for angle in angles[1:]:
        deviation = angular_deviation(angle, reference)
        if tolerances.crooked_min_rad < deviation < tolerances.crooked_max_rad:
            logger.debug("Crooked wall: {:.1f} degrees off square", math.degrees(deviation))
            return True
    return False


__all__ = [
    "angular_deviation",
    "check_colinear_walls",
    "check_crooked_walls",
    "check_nib_walls",
    "dominant_direction",
    "footprint_diameter",
    "wall_angle",
]
