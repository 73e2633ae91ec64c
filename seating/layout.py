"""
Seat layout generation.

Produces the ordered list of 2D seat coordinates for the chamber. The
position of a seat in that list is its seat index, which the numbering and
the rendering client both rely on.
"""

import math
from typing import Iterator, List, Tuple

from seating.geometry import CHAMBER_GEOMETRY, VenueGeometry

Position = Tuple[float, float]


def concentric_row_positions(geometry: VenueGeometry, row_index: int) -> List[Position]:
    """
    Seats of one concentric row, in angular order.

    Seats spread evenly over a half-circle, the first seat on the left end
    (negative x) and the last on the right end.
    """
    seat_count = geometry.concentric_seat_count_per_row[row_index]
    row_radius = geometry.row_radius(row_index)

    positions = []
    for i in range(seat_count):
        angle = math.pi * i / (seat_count - 1)
        x = row_radius * -math.cos(angle)
        y = row_radius * math.sin(angle)
        positions.append((x, y))
    return positions


def is_left_side_seat(geometry: VenueGeometry, local_index: int) -> bool:
    """Whether a seat in a parallel row belongs to the left group."""
    return local_index >= geometry.parallel_group_size


def parallel_row_positions(geometry: VenueGeometry, row_index: int) -> List[Position]:
    """
    Seats of one parallel row: the right group first, then the left group.

    Both groups sit on vertical lines at the row radius and stack downwards
    away from the center line.
    """
    seat_count = geometry.parallel_seat_count_per_row[row_index]
    row_radius = geometry.row_radius(row_index)
    pitch = geometry.parallel_seat_pitch
    group_size = geometry.parallel_group_size

    positions = []
    for i in range(seat_count):
        if is_left_side_seat(geometry, i):
            x = -row_radius
            y = pitch * (i - 2 * group_size)
        else:
            x = row_radius
            y = pitch * (-1 - i)
        positions.append((x, y))
    return positions


def iter_concentric_rows(geometry: VenueGeometry) -> Iterator[Tuple[int, List[Position]]]:
    for row_index in range(len(geometry.concentric_seat_count_per_row)):
        yield row_index, concentric_row_positions(geometry, row_index)


def iter_parallel_rows(geometry: VenueGeometry) -> Iterator[Tuple[int, List[Position]]]:
    for row_index in range(len(geometry.parallel_seat_count_per_row)):
        yield row_index, parallel_row_positions(geometry, row_index)


def generate_seat_layout(geometry: VenueGeometry = CHAMBER_GEOMETRY) -> List[Position]:
    """
    Generate the full seat layout.

    Concentric rows come first (innermost to outermost), followed by the
    parallel rows in row order.

    Returns:
        List of (x, y) tuples; the list index is the seat index

    Raises:
        VenueGeometryError: if the venue constants are inconsistent
    """
    geometry.validate()

    layout = []
    for _, row_positions in iter_concentric_rows(geometry):
        layout.extend(row_positions)
    for _, row_positions in iter_parallel_rows(geometry):
        layout.extend(row_positions)
    return layout
