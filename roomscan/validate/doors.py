"""Door clearance rule."""

from __future__ import annotations

from loguru import logger

from roomscan.geometry.footprints import ObjectFootprint, door_clearance, is_degenerate, object_footprint
from roomscan.geometry.polygon import do_polygons_intersect
from roomscan.schema import RawScan
from roomscan.settings import ToleranceSettings


def _solid_footprints(scan: RawScan) -> list[ObjectFootprint]:
    return [
        fp
        for fp in (object_footprint(o) for o in scan.objects if not is_degenerate(o))
        if fp is not None
    ]


def check_door_blocking(scan: RawScan, tolerances: ToleranceSettings | None = None) -> bool:
    """Any object's full footprint inside a door's swing zone.

    The zone spans the door width (less a small shrink against grazing) and
    extends the clearance distance to both sides of the door. Objects on every
    story are considered. Zero-size doors and objects take no part.
    """
    tolerances = tolerances or ToleranceSettings()
    footprints = _solid_footprints(scan)
    for index, door in enumerate(scan.doors):
        if is_degenerate(door):
            logger.debug("Door {} has zero size; skipped", index)
            continue
        zone = door_clearance(
            door,
            clearance=tolerances.door_clearance_m,
            width_shrink=tolerances.door_width_shrink_m,
        )
        if zone is None:
            logger.debug("Door {} has malformed transform or dimensions; skipped", index)
            continue
        for fp in footprints:
            if do_polygons_intersect(zone, fp.corners):
                logger.debug("Door {} blocked by {}", index, sorted(fp.category))
                return True
    return False


__all__ = ["check_door_blocking"]
