"""Descriptive per-scan metadata (counts and shape predicates)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from roomscan.geometry.polygon import check_polygon_integrity
from roomscan.schema import RawScan
from roomscan.validate.openings import floor_boundary

NON_RECT_CORNER_COUNT = 4

# Category tags reported as has<Tag> presence flags
PRESENCE_TAGS = (
    "bed",
    "chair",
    "dishwasher",
    "fireplace",
    "oven",
    "refrigerator",
    "sofa",
    "stairs",
    "stove",
    "table",
    "television",
    "washerDryer",
)


@dataclass(frozen=True)
class ScanMetadata:
    toilet_count: int = 0
    tub_count: int = 0
    sink_count: int = 0
    storage_count: int = 0
    wall_count: int = 0
    door_count: int = 0
    opening_count: int = 0
    window_count: int = 0
    stories: tuple[int, ...] = field(default_factory=tuple)
    has_non_rect_wall: bool = False
    has_curved_wall: bool = False
    has_unparented_embedded: bool = False
    has_valid_floor_polygon: bool = False
    present_categories: frozenset[str] = field(default_factory=frozenset)

    @property
    def has_multiple_stories(self) -> bool:
        return len(self.stories) > 1

    def has_category(self, tag: str) -> bool:
        return tag in self.present_categories

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "toiletCount": self.toilet_count,
            "tubCount": self.tub_count,
            "sinkCount": self.sink_count,
            "storageCount": self.storage_count,
            "wallCount": self.wall_count,
            "doorCount": self.door_count,
            "openingCount": self.opening_count,
            "windowCount": self.window_count,
            "stories": list(self.stories),
            "hasMultipleStories": self.has_multiple_stories,
            "hasNonRectWall": self.has_non_rect_wall,
            "hasCurvedWall": self.has_curved_wall,
            "hasUnparentedEmbedded": self.has_unparented_embedded,
            "hasValidFloorPolygon": self.has_valid_floor_polygon,
        }
        for tag in PRESENCE_TAGS:
            data["has" + tag[0].upper() + tag[1:]] = self.has_category(tag)
        return data


def _count_category(scan: RawScan, tag: str) -> int:
    return sum(1 for o in scan.objects if o.has_category(tag))


def _has_unparented_embedded(scan: RawScan) -> bool:
    embedded = [*scan.doors, *scan.windows, *scan.openings]
    return any(e.parentIdentifier is None for e in embedded)


def compute_scan_metadata(scan: RawScan) -> ScanMetadata:
    """Counts per element kind plus wall-story and floor-shape facts.

    Walls without a story are counted on story 0.
    """
    stories = tuple(sorted({w.story if w.story is not None else 0 for w in scan.walls}))
    present = frozenset(tag for tag in PRESENCE_TAGS if any(o.has_category(tag) for o in scan.objects))
    return ScanMetadata(
        toilet_count=_count_category(scan, "toilet"),
        tub_count=_count_category(scan, "bathtub"),
        sink_count=_count_category(scan, "sink"),
        storage_count=_count_category(scan, "storage"),
        wall_count=len(scan.walls),
        door_count=len(scan.doors),
        opening_count=len(scan.openings),
        window_count=len(scan.windows),
        stories=stories,
        has_non_rect_wall=any(
            w.polygonCorners is not None and len(w.polygonCorners) > NON_RECT_CORNER_COUNT
            for w in scan.walls
        ),
        has_curved_wall=any(w.curve is not None for w in scan.walls),
        has_unparented_embedded=_has_unparented_embedded(scan),
        has_valid_floor_polygon=check_polygon_integrity(floor_boundary(scan)),
        present_categories=present,
    )


__all__ = ["PRESENCE_TAGS", "ScanMetadata", "compute_scan_metadata"]
