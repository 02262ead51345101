from __future__ import annotations

from roomscan.validate.intersections import (
    check_intersections,
    check_object_intersections,
    check_wall_object_intersections,
    check_wall_wall_intersections,
)
from tests.utils_scan import make_object, make_scan, make_wall, rectangular_room


def test_overlapping_objects_flagged() -> None:
    scan = make_scan(
        objects=[
            make_object("toilet", 1.0, 1.0, 0.5, 0.7),
            make_object("bathtub", 1.2, 1.0, 1.5, 0.75),
        ]
    )
    assert check_object_intersections(scan)


def test_sink_and_storage_overlap_is_a_vanity() -> None:
    scan = make_scan(
        objects=[
            make_object("sink", 1.5, 1.75, 0.6, 0.5),
            make_object("storage", 1.5, 1.75, 0.8, 0.5),
        ]
    )
    assert not check_object_intersections(scan)


def test_objects_on_different_stories_ignored() -> None:
    scan = make_scan(
        objects=[
            make_object("toilet", 1.0, 1.0, 0.5, 0.7, story=0),
            make_object("bathtub", 1.0, 1.0, 1.5, 0.75, story=1),
        ]
    )
    assert not check_object_intersections(scan)


def test_grazing_objects_not_flagged() -> None:
    scan = make_scan(
        objects=[
            make_object("storage", 0.0, 0.0, 1.0, 1.0),
            make_object("washerDryer", 1.0, 0.0, 1.0, 1.0),
        ]
    )
    assert not check_object_intersections(scan)


def test_zero_volume_and_malformed_objects_excluded() -> None:
    ghost = make_object("toilet", 1.0, 1.0, 0.0, 0.0, height=0.0)
    broken = make_object("bathtub", 1.0, 1.0, 1.5, 0.75)
    broken["transform"] = broken["transform"][:12]
    scan = make_scan(objects=[ghost, broken, make_object("toilet", 1.0, 1.0, 0.5, 0.7)])
    assert not check_object_intersections(scan)


def test_wall_through_object_flagged() -> None:
    scan = make_scan(
        walls=[make_wall((0.0, 0.0), (3.0, 0.0), thickness=0.1)],
        objects=[make_object("bathtub", 1.5, 0.0, 1.5, 0.75)],
    )
    assert check_wall_object_intersections(scan)


def test_object_clear_of_wall_not_flagged() -> None:
    scan = make_scan(
        walls=[make_wall((0.0, 0.0), (3.0, 0.0), thickness=0.1)],
        objects=[make_object("bathtub", 1.5, 1.0, 1.5, 0.75)],
    )
    assert not check_wall_object_intersections(scan)


def test_wall_object_story_mismatch_ignored() -> None:
    scan = make_scan(
        walls=[make_wall((0.0, 0.0), (3.0, 0.0), thickness=0.1, story=0)],
        objects=[make_object("bathtub", 1.5, 0.0, 1.5, 0.75, story=1)],
    )
    assert not check_wall_object_intersections(scan)


def test_crossing_walls_flagged() -> None:
    scan = make_scan(walls=[make_wall((0.0, 1.0), (2.0, 1.0)), make_wall((1.0, 0.0), (1.0, 2.0))])
    assert check_wall_wall_intersections(scan)


def test_crossing_walls_on_different_stories_ignored() -> None:
    scan = make_scan(
        walls=[
            make_wall((0.0, 1.0), (2.0, 1.0), story=0),
            make_wall((1.0, 0.0), (1.0, 2.0), story=1),
        ]
    )
    assert not check_wall_wall_intersections(scan)


def test_collinear_overlapping_walls_flagged() -> None:
    scan = make_scan(walls=[make_wall((0.0, 0.0), (2.0, 0.0)), make_wall((1.0, 0.0), (3.0, 0.0))])
    assert check_wall_wall_intersections(scan)


def test_end_to_end_and_t_junction_walls_allowed() -> None:
    scan = make_scan(
        walls=[
            make_wall((0.0, 0.0), (1.0, 0.0)),
            make_wall((1.0, 0.0), (2.0, 0.0)),
            make_wall((0.5, 0.0), (0.5, 1.0)),
        ]
    )
    assert not check_wall_wall_intersections(scan)


def test_parallel_offset_walls_allowed() -> None:
    scan = make_scan(walls=[make_wall((0.0, 0.0), (2.0, 0.0)), make_wall((0.0, 0.5), (2.0, 0.5))])
    assert not check_wall_wall_intersections(scan)


def test_closed_room_has_no_intersections() -> None:
    result = check_intersections(make_scan(walls=rectangular_room()))
    assert not result.has_object_intersection_errors
    assert not result.has_wall_object_intersection_errors
    assert not result.has_wall_wall_intersection_errors
