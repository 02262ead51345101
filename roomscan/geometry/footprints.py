"""
Footprint Extraction

Turns raw wall/object/door records into world-space floor-plan shapes. Every
builder returns ``None`` for records that cannot be placed (wrong transform
length, missing or non-finite values) so the checks can skip them without
raising.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from roomscan.geometry.contract import (
    DEFAULT_WALL_THICKNESS,
    DIMENSIONS_SIZE,
    DOOR_CLEARANCE,
    DOOR_WIDTH_SHRINK,
    OBJECT_INNER_TOLERANCE,
    TRANSFORM_SIZE,
)
from roomscan.geometry.primitives import Point, transform_point
from roomscan.schema import Door, ObjectItem, ScanEntity, Wall


@dataclass(frozen=True)
class WallFootprint:
    """World-space wall outline (or 2-point centreline)."""

    corners: tuple[Point, ...]
    story: Optional[int]
    identifier: Optional[str] = None


@dataclass(frozen=True)
class WallSegment:
    """Wall centreline used by the crossing test."""

    start: Point
    end: Point
    story: Optional[int]


@dataclass(frozen=True)
class ObjectFootprint:
    """World-space object rectangle, its shrunk inner rectangle and AABB."""

    corners: tuple[Point, ...]
    inner_corners: tuple[Point, ...]
    min_x: float
    min_z: float
    max_x: float
    max_z: float
    story: Optional[int]
    category: frozenset[str]

    @property
    def is_sink(self) -> bool:
        return "sink" in self.category

    @property
    def is_storage(self) -> bool:
        return "storage" in self.category

    def aabb_overlaps(self, other: "ObjectFootprint") -> bool:
        return not (
            self.max_x < other.min_x
            or self.min_x > other.max_x
            or self.max_z < other.min_z
            or self.min_z > other.max_z
        )


def _all_finite(values: Sequence[float]) -> bool:
    return all(math.isfinite(v) for v in values)


def has_valid_transform(entity: ScanEntity) -> bool:
    return len(entity.transform) == TRANSFORM_SIZE and _all_finite(entity.transform)


def has_valid_dimensions(entity: ScanEntity) -> bool:
    return len(entity.dimensions) == DIMENSIONS_SIZE and _all_finite(entity.dimensions)


def is_degenerate(entity: ScanEntity) -> bool:
    """All-zero dimensions: a placeholder with no physical extent."""
    return bool(entity.dimensions) and all(d == 0 for d in entity.dimensions)


def rectangle(half_x: float, half_z: float) -> list[Point]:
    """Local rectangle centred on the origin, wound (-,-) (+,-) (+,+) (-,+)."""
    return [
        Point(-half_x, -half_z),
        Point(half_x, -half_z),
        Point(half_x, half_z),
        Point(-half_x, half_z),
    ]


def to_world(points: Sequence[Point], matrix: Sequence[float]) -> tuple[Point, ...]:
    return tuple(transform_point(p, matrix) for p in points)


def _local_corners(wall: Wall) -> list[Point]:
    return [Point(c[0], c[1]) for c in wall.polygonCorners or [] if len(c) >= 2]


def _is_placeable_wall(wall: Wall) -> bool:
    # A single non-finite corner or dimension makes the wall unplaceable
    if not has_valid_transform(wall) or not _all_finite(wall.dimensions):
        return False
    return all(_all_finite(c[:2]) for c in wall.polygonCorners or [])


def _finite_or_none(points: tuple[Point, ...]) -> tuple[Point, ...] | None:
    if all(math.isfinite(p.x) and math.isfinite(p.y) for p in points):
        return points
    return None


def wall_footprint(wall: Wall) -> WallFootprint | None:
    """World corners from ``polygonCorners``, else the dimension centreline."""
    if not _is_placeable_wall(wall):
        return None
    if wall.polygonCorners:
        local = _local_corners(wall)
    elif wall.dimensions:
        half_len = wall.dimensions[0] / 2.0
        local = [Point(-half_len, 0.0), Point(half_len, 0.0)]
    else:
        return None
    if len(local) < 2:
        return None
    corners = _finite_or_none(to_world(local, wall.transform))
    if corners is None:
        return None
    return WallFootprint(corners=corners, story=wall.story, identifier=wall.identifier)


def wall_footprints(walls: Sequence[Wall]) -> list[WallFootprint]:
    return [fp for fp in (wall_footprint(w) for w in walls) if fp is not None]


def wall_centerline(wall: Wall) -> WallSegment | None:
    """Centreline along local X at local Z = 0.

    The local X extent of ``polygonCorners`` wins when it is non-zero; the
    dimension half-length is the fallback.
    """
    if not _is_placeable_wall(wall):
        return None
    xs = [p.x for p in _local_corners(wall)]
    if xs and max(xs) > min(xs):
        local = (Point(min(xs), 0.0), Point(max(xs), 0.0))
    elif wall.dimensions:
        half_len = wall.dimensions[0] / 2.0
        local = (Point(-half_len, 0.0), Point(half_len, 0.0))
    else:
        return None
    ends = _finite_or_none(to_world(local, wall.transform))
    if ends is None:
        return None
    return WallSegment(start=ends[0], end=ends[1], story=wall.story)


def wall_rectangle(wall: Wall) -> tuple[Point, ...] | None:
    """Wall body as a length x thickness rectangle in world space."""
    if not _is_placeable_wall(wall) or not wall.dimensions:
        return None
    half_len = wall.dimensions[0] / 2.0
    thickness = wall.dimensions[2] if len(wall.dimensions) > 2 else DEFAULT_WALL_THICKNESS
    return _finite_or_none(to_world(rectangle(half_len, thickness / 2.0), wall.transform))


def object_footprint(obj: ObjectItem, *, inner_tolerance: float = OBJECT_INNER_TOLERANCE) -> ObjectFootprint | None:
    if not has_valid_transform(obj) or not has_valid_dimensions(obj):
        return None
    half_w = obj.dimensions[0] / 2.0
    half_d = obj.dimensions[2] / 2.0
    corners = _finite_or_none(to_world(rectangle(half_w, half_d), obj.transform))
    inner = _finite_or_none(
        to_world(
            rectangle(max(0.0, half_w - inner_tolerance), max(0.0, half_d - inner_tolerance)),
            obj.transform,
        )
    )
    if corners is None or inner is None:
        return None
    xs = [p.x for p in corners]
    zs = [p.y for p in corners]
    return ObjectFootprint(
        corners=corners,
        inner_corners=inner,
        min_x=min(xs),
        min_z=min(zs),
        max_x=max(xs),
        max_z=max(zs),
        story=obj.story,
        category=obj.category,
    )


def object_back_point(obj: ObjectItem) -> Point | None:
    """Centre of the object's back face; appliances face local +Z."""
    if not has_valid_transform(obj) or not has_valid_dimensions(obj):
        return None
    back = _finite_or_none((transform_point(Point(0.0, -obj.dimensions[2] / 2.0), obj.transform),))
    return back[0] if back else None


def door_clearance(
    door: Door,
    *,
    clearance: float = DOOR_CLEARANCE,
    width_shrink: float = DOOR_WIDTH_SHRINK,
) -> tuple[Point, ...] | None:
    """Swing zone: door width less ``width_shrink``, +/- ``clearance`` along local Z."""
    if not has_valid_transform(door) or not has_valid_dimensions(door):
        return None
    half_w = max(0.0, door.dimensions[0] - width_shrink) / 2.0
    return _finite_or_none(to_world(rectangle(half_w, clearance), door.transform))


__all__ = [
    "ObjectFootprint",
    "WallFootprint",
    "WallSegment",
    "door_clearance",
    "has_valid_dimensions",
    "has_valid_transform",
    "is_degenerate",
    "object_back_point",
    "object_footprint",
    "rectangle",
    "to_world",
    "wall_centerline",
    "wall_footprint",
    "wall_footprints",
    "wall_rectangle",
]
