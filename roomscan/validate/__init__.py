"""Rule checks over RawScan documents."""

from .doors import check_door_blocking
from .gaps import check_toilet_gaps, check_tub_gaps, check_wall_gaps
from .intersections import (
    check_intersections,
    check_object_intersections,
    check_wall_object_intersections,
    check_wall_wall_intersections,
)
from .openings import check_external_opening
from .scan_validator import ScanFlags, validate_scan
from .walls import check_colinear_walls, check_crooked_walls, check_nib_walls

__all__ = [
    "ScanFlags",
    "check_colinear_walls",
    "check_crooked_walls",
    "check_door_blocking",
    "check_external_opening",
    "check_intersections",
    "check_nib_walls",
    "check_object_intersections",
    "check_toilet_gaps",
    "check_tub_gaps",
    "check_wall_gaps",
    "check_wall_object_intersections",
    "check_wall_wall_intersections",
    "validate_scan",
]
