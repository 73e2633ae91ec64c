"""
Seat layout geometry tests
"""
import dataclasses
import math

import pytest

from seating import CHAMBER_GEOMETRY, VenueGeometryError, generate_seat_layout
from seating.layout import concentric_row_positions, parallel_row_positions


def test_layout_length_matches_seat_totals():
    layout = generate_seat_layout()
    assert CHAMBER_GEOMETRY.concentric_seat_count_total == 408
    assert CHAMBER_GEOMETRY.parallel_seat_count_total == 57
    assert len(layout) == 465


def test_layout_is_deterministic():
    assert generate_seat_layout() == generate_seat_layout()


def test_first_seat_is_left_end_of_innermost_row():
    x, y = generate_seat_layout()[0]
    assert x == pytest.approx(-5.0)
    assert y == pytest.approx(0.0)


def test_last_seat_of_innermost_row_is_right_end():
    x, y = generate_seat_layout()[11]
    assert x == pytest.approx(5.0)
    assert y == pytest.approx(0.0, abs=1e-9)


def test_concentric_row_radius_strictly_increases():
    max_previous = -1.0
    for row_index in range(len(CHAMBER_GEOMETRY.concentric_seat_count_per_row)):
        distances = [math.hypot(x, y) for x, y in concentric_row_positions(CHAMBER_GEOMETRY, row_index)]
        assert min(distances) > max_previous
        assert all(d == pytest.approx(CHAMBER_GEOMETRY.row_radius(row_index)) for d in distances)
        max_previous = max(distances)


def test_concentric_rows_are_mirror_symmetric():
    for row_index in range(len(CHAMBER_GEOMETRY.concentric_seat_count_per_row)):
        positions = concentric_row_positions(CHAMBER_GEOMETRY, row_index)
        for (x1, y1), (x2, y2) in zip(positions, reversed(positions)):
            assert y1 == pytest.approx(y2, abs=1e-9)
            assert x1 == pytest.approx(-x2, abs=1e-9)


def test_concentric_seats_stay_on_upper_half_circle():
    for x, y in generate_seat_layout()[:CHAMBER_GEOMETRY.concentric_seat_count_total]:
        assert y >= -1e-9


def test_parallel_spacing_is_derived_from_reference_row():
    expected = (math.pi * (5 + 2 * 3 - 0.5) - 0.5 * 2 * 24) / (24 - 1)
    assert CHAMBER_GEOMETRY.parallel_seat_spacing == pytest.approx(expected)
    assert CHAMBER_GEOMETRY.parallel_seat_pitch == pytest.approx(1 + expected)


def test_parallel_row_zero_is_empty():
    assert parallel_row_positions(CHAMBER_GEOMETRY, 0) == []


def test_parallel_row_right_group_then_left_group():
    pitch = CHAMBER_GEOMETRY.parallel_seat_pitch
    positions = parallel_row_positions(CHAMBER_GEOMETRY, 1)

    assert len(positions) == 6
    # Right group
    for i, (x, y) in enumerate(positions[:3]):
        assert x == pytest.approx(7.0)
        assert y == pytest.approx(-pitch * (i + 1))
    # Left group
    for i, (x, y) in enumerate(positions[3:], start=3):
        assert x == pytest.approx(-7.0)
        assert y == pytest.approx(pitch * (i - 6))


def test_left_and_right_groups_cover_same_heights():
    positions = parallel_row_positions(CHAMBER_GEOMETRY, 4)
    right_heights = sorted(round(y, 9) for _, y in positions[:3])
    left_heights = sorted(round(y, 9) for _, y in positions[3:])
    assert right_heights == left_heights


def test_last_parallel_row_is_a_single_right_group():
    positions = parallel_row_positions(CHAMBER_GEOMETRY, 10)
    assert len(positions) == 3
    assert all(x == pytest.approx(CHAMBER_GEOMETRY.row_radius(10)) for x, _ in positions)


def test_parallel_seats_follow_concentric_seats():
    layout = generate_seat_layout()
    first_parallel = layout[CHAMBER_GEOMETRY.concentric_seat_count_total]
    assert first_parallel == parallel_row_positions(CHAMBER_GEOMETRY, 1)[0]


def test_inconsistent_geometry_aborts_layout():
    counts = (0,) + CHAMBER_GEOMETRY.concentric_seat_count_in_segment_per_row[1:]
    geometry = dataclasses.replace(CHAMBER_GEOMETRY, concentric_seat_count_in_segment_per_row=counts)
    with pytest.raises(VenueGeometryError):
        generate_seat_layout(geometry)
