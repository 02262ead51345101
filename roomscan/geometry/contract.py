from __future__ import annotations

"""
Geometry Validation Contract

Single source of truth for the calibration constants used by the scan checks.
Check modules import from here instead of hardcoding values.
"""

# Lengths in meters unless noted

INCH = 0.0254  # m
FOOT = 0.3048  # m

# Scan record layout
TRANSFORM_SIZE = 16
DIMENSIONS_SIZE = 3
EPSILON = 1e-10

# Object footprints
OBJECT_INNER_TOLERANCE = 0.0254  # 1 in shrink per side before SAT
DEFAULT_WALL_THICKNESS = 0.15  # m, used when dimensions carry no thickness

# Doors
DOOR_CLEARANCE = 0.6  # m, swept along local Z both ways
DOOR_WIDTH_SHRINK = 0.1  # m

# Gaps
TOILET_GAP_MAX = 0.0254  # 1 in
TUB_GAP_MIN = 0.0254  # 1 in
TUB_GAP_MAX = 0.1524  # 6 in
TUB_GAP_SLACK = 1e-5
WALL_GAP_MIN = 0.0254  # 1 in
WALL_GAP_MAX = 0.3048  # 12 in

# Walls
NIB_WALL_MAX_LENGTH = 0.3048  # 1 ft
COLINEAR_TOUCH_THRESHOLD = 0.0762  # 3 in
COLINEAR_PARALLEL_COSINE = 0.996  # ~5 degrees
COLLINEAR_AREA_TOLERANCE = 1e-5
SEGMENT_OVERLAP_EPSILON = 1e-5
SEGMENT_INTERIOR_MARGIN = 1e-5

# Angles (radians)
CROOKED_MIN_DEVIATION = 0.05  # ~3 degrees
CROOKED_MAX_DEVIATION = 0.52  # ~30 degrees

# Openings
EXTERIOR_PERIMETER_THRESHOLD = 0.5  # m

# Polygon integrity
MAX_COORDINATE = 10_000.0  # m
MIN_EDGE_LENGTH = 0.001  # m
MIN_VERTEX_ANGLE_DEG = 5.0
MAX_VERTEX_ANGLE_DEG = 175.0


def inches(value_m: float) -> float:
    """Convert meters to inches."""
    return float(value_m / INCH)
