"""Proximity rules: toilet backs, tub surrounds and wall-to-wall gaps."""

from __future__ import annotations

from loguru import logger

from roomscan.geometry.contract import TUB_GAP_SLACK, inches
from roomscan.geometry.footprints import WallFootprint, object_back_point, object_footprint, wall_footprints
from roomscan.geometry.primitives import dist_to_segment, min_corner_to_segment_distance, ring_edges
from roomscan.schema import RawScan
from roomscan.settings import ToleranceSettings


def _walls_on_story(walls: list[WallFootprint], story: int | None) -> list[WallFootprint]:
    # Walls without a story are eligible for every object
    return [w for w in walls if w.story is None or w.story == story]


def check_toilet_gaps(scan: RawScan, tolerances: ToleranceSettings | None = None) -> bool:
    """Toilet back standing off the nearest wall by more than 1 inch.

    The back is the centre of the local -Z face. A toilet with no eligible wall
    on its story also fails.
    """
    tolerances = tolerances or ToleranceSettings()
    walls = wall_footprints(scan.walls)
    for toilet in (o for o in scan.objects if o.has_category("toilet")):
        back = object_back_point(toilet)
        if back is None:
            logger.debug("Toilet with malformed transform or dimensions skipped")
            continue

        eligible = _walls_on_story(walls, toilet.story)
        if not eligible:
            logger.debug("Toilet on story {} has no eligible wall", toilet.story)
            return True

        min_dist = min(
            dist_to_segment(back, p1, p2)
            for wall in eligible
            for p1, p2 in ring_edges(wall.corners)
        )
        if min_dist > tolerances.toilet_gap_max_m:
            logger.debug("Toilet back is {:.2f} in from the nearest wall", inches(min_dist))
            return True
    return False


def check_tub_gaps(scan: RawScan, tolerances: ToleranceSettings | None = None) -> bool:
    """Tub sitting 1 to 6 inches (inclusive) from a wall.

    Closer counts as flush, further as an intentional gap.
    """
    tolerances = tolerances or ToleranceSettings()
    walls = wall_footprints(scan.walls)
    low = tolerances.tub_gap_min_m - TUB_GAP_SLACK
    high = tolerances.tub_gap_max_m + TUB_GAP_SLACK
    for tub in (o for o in scan.objects if o.has_category("bathtub")):
        footprint = object_footprint(tub)
        if footprint is None:
            logger.debug("Bathtub with malformed transform or dimensions skipped")
            continue
        tub_corners = footprint.corners
        for wall in _walls_on_story(walls, tub.story):
            gap = min_corner_to_segment_distance(tub_corners, wall.corners)
            if low <= gap <= high:
                logger.debug("Bathtub gap of {:.2f} in to a wall", inches(gap))
                return True
    return False


def check_wall_gaps(scan: RawScan, tolerances: ToleranceSettings | None = None) -> bool:
    """Two walls separated by more than 1 inch but less than 12 inches.

    Every wall pair is compared regardless of story.
    """
    tolerances = tolerances or ToleranceSettings()
    walls = wall_footprints(scan.walls)
    for i, wall_a in enumerate(walls):
        for wall_b in walls[i + 1:]:
            gap = min_corner_to_segment_distance(wall_a.corners, wall_b.corners)
            if tolerances.wall_gap_min_m < gap < tolerances.wall_gap_max_m:
                logger.debug("Wall gap of {:.2f} in between {} and {}", inches(gap), wall_a.identifier, wall_b.identifier)
                return True
    return False


__all__ = ["check_toilet_gaps", "check_tub_gaps", "check_wall_gaps"]
