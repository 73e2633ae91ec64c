"""
Venue geometry parameters.

The chamber is built from concentric arced rows (4 identical angular
segments tiled around a half-circle) and two blocks of straight parallel
rows on the left and right. Every constant used by the layout generator and
the seat numbering lives here.
"""

import math
from dataclasses import dataclass
from functools import cached_property
from typing import Tuple

from seating.exceptions import VenueGeometryError


@dataclass(frozen=True)
class VenueGeometry:
    """Fixed venue shape and numbering convention."""

    initial_row_radius: float = 5.0
    row_interval: float = 2.0
    concentric_seat_count_in_segment_per_row: Tuple[int, ...] = (3, 5, 6, 6, 8, 10, 10, 12, 14, 14, 14)
    # Right group (3 seats) then left group (3 seats); row 0 has none, row 10 only the right group
    parallel_seat_count_per_row: Tuple[int, ...] = (0, 6, 6, 6, 6, 6, 6, 6, 6, 6, 3)
    seat_radius: float = 0.5
    seat_height: float = 0.5
    segment_count: int = 4
    last_non_subsegmented_row_index: int = 2
    # Parallel seat spacing is taken from this concentric row so both blocks look equally dense
    reference_concentric_row_index: int = 3
    parallel_group_size: int = 3

    # Seat number bases
    concentric_number_base: int = 64
    left_parallel_number_base: int = 34
    right_parallel_number_base: int = 472

    def row_radius(self, row_index: int) -> float:
        """Distance of a row from the venue center."""
        return self.initial_row_radius + row_index * self.row_interval

    def is_subsegmented(self, row_index: int) -> bool:
        return row_index > self.last_non_subsegmented_row_index

    @cached_property
    def concentric_seat_count_per_row(self) -> Tuple[int, ...]:
        return tuple(count * self.segment_count for count in self.concentric_seat_count_in_segment_per_row)

    @cached_property
    def concentric_seat_count_in_subsegment_per_row(self) -> Tuple[int, ...]:
        return tuple(
            count // 2 if self.is_subsegmented(row_index) else count
            for row_index, count in enumerate(self.concentric_seat_count_in_segment_per_row)
        )

    @cached_property
    def concentric_seat_count_total(self) -> int:
        return sum(self.concentric_seat_count_per_row)

    @cached_property
    def parallel_seat_count_total(self) -> int:
        return sum(self.parallel_seat_count_per_row)

    @cached_property
    def seat_count_total(self) -> int:
        return self.concentric_seat_count_total + self.parallel_seat_count_total

    @cached_property
    def concentric_seat_index_upper_bound_per_row(self) -> Tuple[int, ...]:
        """Index of the last seat in each concentric row."""
        bounds = []
        seats_so_far = 0
        for row_seat_count in self.concentric_seat_count_per_row:
            seats_so_far += row_seat_count
            bounds.append(seats_so_far - 1)
        return tuple(bounds)

    @cached_property
    def parallel_seat_spacing(self) -> float:
        """
        Gap between neighbouring parallel seats.

        Matches the gap between seats of the reference concentric row, where
        the row's half-circle (measured at the inner edge of the seats) is
        shared by its seats and the gaps between them.
        """
        seat_count = self.concentric_seat_count_per_row[self.reference_concentric_row_index]
        radius = self.row_radius(self.reference_concentric_row_index)
        return (
            math.pi * (radius - self.seat_radius) - self.seat_radius * 2 * seat_count
        ) / (seat_count - 1)

    @cached_property
    def parallel_seat_pitch(self) -> float:
        """Center-to-center distance between neighbouring parallel seats."""
        return 2 * self.seat_radius + self.parallel_seat_spacing

    def validate(self) -> None:
        """
        Check the constants for internal consistency.

        Raises:
            VenueGeometryError: if the layout or the numbering cannot be
                computed from these constants
        """
        if self.segment_count < 1:
            raise VenueGeometryError(f"segment_count must be positive, got {self.segment_count}")

        if len(self.parallel_seat_count_per_row) > len(self.concentric_seat_count_in_segment_per_row):
            raise VenueGeometryError("There are more parallel rows than concentric rows")

        for row_index, seat_count in enumerate(self.concentric_seat_count_per_row):
            # Angular step divides by seat_count - 1
            if seat_count < 2:
                raise VenueGeometryError(
                    f"Concentric row {row_index} has {seat_count} seats, at least 2 are required"
                )
            segment_seat_count = self.concentric_seat_count_in_segment_per_row[row_index]
            if self.is_subsegmented(row_index) and segment_seat_count % 2:
                raise VenueGeometryError(
                    f"Concentric row {row_index} is split into half-segments "
                    f"but has an odd segment seat count ({segment_seat_count})"
                )

        if self.concentric_seat_count_total % self.segment_count:
            raise VenueGeometryError("Concentric seats do not split evenly into segments")

        if not 0 <= self.reference_concentric_row_index < len(self.concentric_seat_count_per_row):
            raise VenueGeometryError(
                f"Reference row {self.reference_concentric_row_index} is not a concentric row"
            )

        for row_index, seat_count in enumerate(self.parallel_seat_count_per_row):
            if seat_count % self.parallel_group_size:
                raise VenueGeometryError(
                    f"Parallel row {row_index} has {seat_count} seats, "
                    f"not a multiple of {self.parallel_group_size}"
                )
            if seat_count > 2 * self.parallel_group_size:
                raise VenueGeometryError(
                    f"Parallel row {row_index} has {seat_count} seats, at most two groups fit"
                )
            # Numbering tells sides apart by alternating groups, so only the last row may be half full
            is_last_row = row_index == len(self.parallel_seat_count_per_row) - 1
            if seat_count == self.parallel_group_size and not is_last_row:
                raise VenueGeometryError(
                    f"Parallel row {row_index} has a single group, only the last row may"
                )


# The one venue this project lays out
CHAMBER_GEOMETRY = VenueGeometry()
