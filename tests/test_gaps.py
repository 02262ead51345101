from __future__ import annotations

import pytest

from roomscan.geometry.contract import INCH, TUB_GAP_MAX, TUB_GAP_MIN, WALL_GAP_MAX, WALL_GAP_MIN
from roomscan.settings import ToleranceSettings
from roomscan.validate.gaps import check_toilet_gaps, check_tub_gaps, check_wall_gaps
from tests.utils_scan import make_object, make_scan, make_wall, rectangular_room


@pytest.fixture
def back_wall() -> dict:
    return make_wall((0.0, 0.0), (3.0, 0.0), identifier="back")


def test_toilet_flush_to_wall_passes(back_wall: dict) -> None:
    # Back face sits 1 cm off the wall
    scan = make_scan(walls=[back_wall], objects=[make_object("toilet", 1.5, 0.36, 0.5, 0.7)])
    assert not check_toilet_gaps(scan)


def test_toilet_standing_off_wall_flagged(back_wall: dict) -> None:
    scan = make_scan(walls=[back_wall], objects=[make_object("toilet", 1.5, 0.45, 0.5, 0.7)])
    assert check_toilet_gaps(scan)


def test_toilet_without_any_wall_flagged() -> None:
    assert check_toilet_gaps(make_scan(objects=[make_object("toilet", 1.5, 0.36, 0.5, 0.7)]))


def test_toilet_only_sees_walls_on_its_story() -> None:
    scan = make_scan(
        walls=[make_wall((0.0, 0.0), (3.0, 0.0), story=0)],
        objects=[make_object("toilet", 1.5, 0.36, 0.5, 0.7, story=1)],
    )
    assert check_toilet_gaps(scan)


def test_walls_without_story_serve_every_toilet(back_wall: dict) -> None:
    scan = make_scan(walls=[back_wall], objects=[make_object("toilet", 1.5, 0.36, 0.5, 0.7, story=2)])
    assert not check_toilet_gaps(scan)


def test_no_toilet_no_error(back_wall: dict) -> None:
    assert not check_toilet_gaps(make_scan(walls=[back_wall]))


def test_tub_gap_in_band_flagged(back_wall: dict) -> None:
    scan = make_scan(walls=[back_wall], objects=[make_object("bathtub", 1.5, 0.475, 1.5, 0.75)])
    assert check_tub_gaps(scan)


def test_tub_flush_or_far_from_wall_passes(back_wall: dict) -> None:
    flush = make_scan(walls=[back_wall], objects=[make_object("bathtub", 1.5, 0.375, 1.5, 0.75)])
    far = make_scan(walls=[back_wall], objects=[make_object("bathtub", 1.5, 0.875, 1.5, 0.75)])
    assert not check_tub_gaps(flush)
    assert not check_tub_gaps(far)


def test_tub_on_other_story_ignored() -> None:
    scan = make_scan(
        walls=[make_wall((0.0, 0.0), (3.0, 0.0), story=0)],
        objects=[make_object("bathtub", 1.5, 0.475, 1.5, 0.75, story=1)],
    )
    assert not check_tub_gaps(scan)


def test_parallel_walls_inside_gap_band_flagged() -> None:
    scan = make_scan(walls=[make_wall((0.0, 0.0), (2.0, 0.0)), make_wall((0.0, 0.1), (2.0, 0.1))])
    assert check_wall_gaps(scan)


@pytest.mark.parametrize("offset", [0.0, 0.3048, 0.5])
def test_walls_outside_gap_band_pass(offset: float) -> None:
    scan = make_scan(walls=[make_wall((0.0, 0.0), (2.0, 0.0)), make_wall((0.0, offset), (2.0, offset))])
    assert not check_wall_gaps(scan)


def test_wall_gaps_ignore_story() -> None:
    scan = make_scan(
        walls=[
            make_wall((0.0, 0.0), (2.0, 0.0), story=0),
            make_wall((0.0, 0.1), (2.0, 0.1), story=1),
        ]
    )
    assert check_wall_gaps(scan)


def test_closed_room_has_no_wall_gaps() -> None:
    assert not check_wall_gaps(make_scan(walls=rectangular_room()))


def test_gap_band_follows_settings(back_wall: dict) -> None:
    scan = make_scan(walls=[back_wall], objects=[make_object("toilet", 1.5, 0.45, 0.5, 0.7)])
    assert not check_toilet_gaps(scan, ToleranceSettings(toilet_gap_max_m=0.2))


def test_toilet_back_exactly_one_inch_off_passes() -> None:
    # Back face at z = 0, wall exactly 1 in behind it
    wall = make_wall((-1.0, -INCH), (1.0, -INCH))
    scan = make_scan(walls=[wall], objects=[make_object("toilet", 0.0, 0.25, 0.5, 0.5)])
    assert not check_toilet_gaps(scan)


def test_toilet_back_just_over_one_inch_off_flagged() -> None:
    wall = make_wall((-1.0, -INCH - 0.001), (1.0, -INCH - 0.001))
    scan = make_scan(walls=[wall], objects=[make_object("toilet", 0.0, 0.25, 0.5, 0.5)])
    assert check_toilet_gaps(scan)


@pytest.mark.parametrize(
    "gap, flagged",
    [
        (TUB_GAP_MIN, True),
        (TUB_GAP_MAX, True),
        (TUB_GAP_MIN - 0.001, False),
        (TUB_GAP_MAX + 0.001, False),
    ],
    ids=["one-inch", "six-inches", "under-band", "over-band"],
)
def test_tub_gap_band_is_inclusive(gap: float, flagged: bool) -> None:
    # Tub edge at z = 0, wall ``gap`` behind it
    wall = make_wall((-2.0, -gap), (2.0, -gap))
    scan = make_scan(walls=[wall], objects=[make_object("bathtub", 0.0, 0.375, 1.5, 0.75)])
    assert check_tub_gaps(scan) is flagged


@pytest.mark.parametrize(
    "offset, flagged",
    [(WALL_GAP_MIN, False), (WALL_GAP_MIN + 0.001, True), (WALL_GAP_MAX - 0.001, True)],
    ids=["exactly-one-inch", "just-over-one-inch", "just-under-one-foot"],
)
def test_wall_gap_band_edges(offset: float, flagged: bool) -> None:
    scan = make_scan(walls=[make_wall((-1.0, 0.0), (1.0, 0.0)), make_wall((-1.0, offset), (1.0, offset))])
    assert check_wall_gaps(scan) is flagged
