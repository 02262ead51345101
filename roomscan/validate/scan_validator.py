"""
Scan Validator

Runs the full rule battery over one scan and returns a flat flag record.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any

from loguru import logger

from roomscan.schema import RawScan
from roomscan.settings import ToleranceSettings
from roomscan.validate.doors import check_door_blocking
from roomscan.validate.gaps import check_toilet_gaps, check_tub_gaps, check_wall_gaps
from roomscan.validate.intersections import check_intersections
from roomscan.validate.metadata import ScanMetadata, compute_scan_metadata
from roomscan.validate.openings import check_external_opening
from roomscan.validate.walls import check_colinear_walls, check_crooked_walls, check_nib_walls

# Field name -> upstream report key
FLAG_KEYS = {
    "has_toilet_gap_errors": "hasToiletGapErrors",
    "has_tub_gap_errors": "hasTubGapErrors",
    "has_wall_gap_errors": "hasWallGapErrors",
    "has_colinear_wall_errors": "hasColinearWallErrors",
    "has_nib_walls": "hasNibWalls",
    "has_object_intersection_errors": "hasObjectIntersectionErrors",
    "has_wall_object_intersection_errors": "hasWallObjectIntersectionErrors",
    "has_wall_wall_intersection_errors": "hasWallWallIntersectionErrors",
    "has_crooked_wall_errors": "hasCrookedWallErrors",
    "has_door_blocking_error": "hasDoorBlockingError",
    "has_external_opening": "hasExternalOpening",
}

# Informational flags that do not count as a failed scan
INFORMATIONAL_FLAGS = frozenset({"has_external_opening"})


@dataclass(frozen=True)
class ScanFlags:
    """Outcome of every rule check for one scan."""

    has_toilet_gap_errors: bool = False
    has_tub_gap_errors: bool = False
    has_wall_gap_errors: bool = False
    has_colinear_wall_errors: bool = False
    has_nib_walls: bool = False
    has_object_intersection_errors: bool = False
    has_wall_object_intersection_errors: bool = False
    has_wall_wall_intersection_errors: bool = False
    has_crooked_wall_errors: bool = False
    has_door_blocking_error: bool = False
    has_external_opening: bool = False

    @property
    def error_flags(self) -> list[str]:
        """Names of the error flags that are set."""
        return [
            f.name
            for f in fields(self)
            if f.name not in INFORMATIONAL_FLAGS and getattr(self, f.name)
        ]

    @property
    def has_errors(self) -> bool:
        return bool(self.error_flags)

    def to_dict(self) -> dict[str, bool]:
        return {FLAG_KEYS[name]: value for name, value in asdict(self).items()}


@dataclass(frozen=True)
class ScanReport:
    """Flags plus descriptive metadata for one scan."""

    source: str
    flags: ScanFlags
    metadata: ScanMetadata

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "flags": self.flags.to_dict(),
            "hasErrors": self.flags.has_errors,
            "metadata": self.metadata.to_dict(),
        }


def validate_scan(scan: RawScan, tolerances: ToleranceSettings | None = None) -> ScanFlags:
    """Evaluate every rule check against ``scan``.

    Checks are independent; each sees the same read-only scan.
    """
    tolerances = tolerances or ToleranceSettings()
    intersections = check_intersections(scan, tolerances)
    flags = ScanFlags(
        has_toilet_gap_errors=check_toilet_gaps(scan, tolerances),
        has_tub_gap_errors=check_tub_gaps(scan, tolerances),
        has_wall_gap_errors=check_wall_gaps(scan, tolerances),
        has_colinear_wall_errors=check_colinear_walls(scan, tolerances),
        has_nib_walls=check_nib_walls(scan, tolerances),
        has_object_intersection_errors=intersections.has_object_intersection_errors,
        has_wall_object_intersection_errors=intersections.has_wall_object_intersection_errors,
        has_wall_wall_intersection_errors=intersections.has_wall_wall_intersection_errors,
        has_crooked_wall_errors=check_crooked_walls(scan, tolerances),
        has_door_blocking_error=check_door_blocking(scan, tolerances),
        has_external_opening=check_external_opening(scan, tolerances),
    )
    if flags.has_errors:
        logger.info("Scan failed {} check(s): {}", len(flags.error_flags), ", ".join(flags.error_flags))
    else:
        logger.debug("Scan passed all checks")
    return flags


def build_scan_report(
    scan: RawScan,
    source: str,
    tolerances: ToleranceSettings | None = None,
) -> ScanReport:
    return ScanReport(
        source=source,
        flags=validate_scan(scan, tolerances),
        metadata=compute_scan_metadata(scan),
    )


__all__ = ["FLAG_KEYS", "ScanFlags", "ScanReport", "build_scan_report", "validate_scan"]
