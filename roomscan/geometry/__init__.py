"""Floor-plan geometry: primitives, polygon kernel and footprints."""

from .footprints import (
    ObjectFootprint,
    WallFootprint,
    WallSegment,
    door_clearance,
    object_footprint,
    wall_centerline,
    wall_footprint,
    wall_rectangle,
)
from .polygon import check_polygon_integrity, do_polygons_intersect
from .primitives import Point, dist_to_segment, transform_point

__all__ = [
    "ObjectFootprint",
    "Point",
    "WallFootprint",
    "WallSegment",
    "check_polygon_integrity",
    "dist_to_segment",
    "do_polygons_intersect",
    "door_clearance",
    "object_footprint",
    "transform_point",
    "wall_centerline",
    "wall_footprint",
    "wall_rectangle",
]
