"""
Seat index to seat number translation.

Seat numbers follow the chamber's own convention rather than the layout
order:
- concentric seats are numbered segment by segment around the room, and in
  rows beyond the sub-segmentation threshold the front half of every segment
  is numbered before any back half;
- the left and right parallel blocks each have their own contiguous range.
"""

import math
from bisect import bisect_left
from typing import Tuple

from seating.exceptions import SeatIndexError
from seating.geometry import CHAMBER_GEOMETRY, VenueGeometry


def _parallel_seat_number(geometry: VenueGeometry, seat_index: int) -> int:
    relative_index = seat_index - geometry.concentric_seat_count_total
    general_row_index, column_index = divmod(relative_index, geometry.parallel_group_size)

    # Groups alternate right, left, right, ... in layout order
    if general_row_index % 2:
        base_offset = geometry.left_parallel_number_base
        side_row_index = (general_row_index - 1) // 2
    else:
        base_offset = geometry.right_parallel_number_base
        side_row_index = general_row_index // 2

    return base_offset + geometry.parallel_group_size * side_row_index + column_index


def _concentric_seat_number(geometry: VenueGeometry, seat_index: int) -> int:
    upper_bounds = geometry.concentric_seat_index_upper_bound_per_row
    subsegment_counts = geometry.concentric_seat_count_in_subsegment_per_row

    # First row whose last seat index is >= seat_index
    row_index = bisect_left(upper_bounds, seat_index)
    seat_count_of_inner_rows = upper_bounds[row_index - 1] + 1 if row_index else 0

    seat_count_in_segment = geometry.concentric_seat_count_in_segment_per_row[row_index]
    seat_count_in_subsegment = subsegment_counts[row_index]
    seat_index_within_row = seat_index - seat_count_of_inner_rows

    is_in_back_subsegment = (
        geometry.is_subsegmented(row_index)
        and seat_index_within_row % seat_count_in_segment >= math.ceil(seat_count_in_segment / 2)
    )
    seat_index_within_subsegment = seat_index_within_row % seat_count_in_subsegment
    segment_index = seat_index_within_row // seat_count_in_segment

    if is_in_back_subsegment:
        # Back halves are numbered after the front halves of every row
        first_subsegmented_row = geometry.last_non_subsegmented_row_index + 1
        segmentation_offset = sum(subsegment_counts) + sum(subsegment_counts[first_subsegmented_row:row_index])
    else:
        segmentation_offset = sum(subsegment_counts[:row_index])

    seats_per_segment = geometry.concentric_seat_count_total // geometry.segment_count
    return (
        geometry.concentric_number_base
        + segmentation_offset
        + seats_per_segment * segment_index
        + seat_index_within_subsegment
    )


def _seat_number(geometry: VenueGeometry, seat_index: int) -> int:
    if seat_index >= geometry.concentric_seat_count_total:
        return _parallel_seat_number(geometry, seat_index)
    return _concentric_seat_number(geometry, seat_index)


def seat_number_for(seat_index: int, geometry: VenueGeometry = CHAMBER_GEOMETRY) -> int:
    """
    Translate a seat index into the number printed on the seat.

    Args:
        seat_index: Position of the seat in the generated layout
        geometry: Venue constants

    Returns:
        The seat number

    Raises:
        TypeError: if seat_index is not an integer
        SeatIndexError: if seat_index is outside [0, seat_count_total)
        VenueGeometryError: if the venue constants are inconsistent
    """
    if isinstance(seat_index, bool) or not isinstance(seat_index, int):
        raise TypeError(f"Seat index must be an integer, got {type(seat_index).__name__}")
    geometry.validate()
    if not 0 <= seat_index < geometry.seat_count_total:
        raise SeatIndexError(seat_index, geometry.seat_count_total)

    return _seat_number(geometry, seat_index)


def build_seat_number_table(geometry: VenueGeometry = CHAMBER_GEOMETRY) -> Tuple[int, ...]:
    """
    Precompute the seat number of every seat index.

    Raises:
        VenueGeometryError: if the venue constants are inconsistent
    """
    geometry.validate()
    return tuple(_seat_number(geometry, i) for i in range(geometry.seat_count_total))
