"""
Seating chart built once at startup.

Bundles the seat layout with the precomputed seat numbers so the API and the
export script can look seats up without recomputing anything.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from seating.exceptions import SeatIndexError, VenueGeometryError
from seating.geometry import CHAMBER_GEOMETRY, VenueGeometry
from seating.layout import Position, is_left_side_seat, iter_concentric_rows, iter_parallel_rows
from seating.numbering import build_seat_number_table

logger = logging.getLogger(__name__)


class SeatKind(str, Enum):
    """Which block of the chamber a seat belongs to."""
    CONCENTRIC = "concentric"
    PARALLEL = "parallel"


class Side(str, Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Seat:
    """A single seat with its position and printed number."""
    index: int
    x: float
    y: float
    kind: SeatKind
    row: int
    number: int
    segment: Optional[int] = None  # concentric seats only
    side: Optional[Side] = None    # parallel seats only


@dataclass(frozen=True)
class RowSummary:
    """Seat counts and number range of one row."""
    kind: SeatKind
    row: int
    seat_count: int
    first_index: int
    last_index: int
    min_number: int
    max_number: int


@dataclass(frozen=True)
class SeatingChart:
    """Immutable seat layout plus seat index -> seat number table."""
    geometry: VenueGeometry
    seats: Tuple[Seat, ...]
    seat_numbers: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.seats)

    @property
    def positions(self) -> List[Position]:
        return [(seat.x, seat.y) for seat in self.seats]

    def _check_index(self, seat_index: int) -> None:
        if isinstance(seat_index, bool) or not isinstance(seat_index, int):
            raise TypeError(f"Seat index must be an integer, got {type(seat_index).__name__}")
        if not 0 <= seat_index < len(self.seats):
            raise SeatIndexError(seat_index, len(self.seats))

    def seat(self, seat_index: int) -> Seat:
        self._check_index(seat_index)
        return self.seats[seat_index]

    def seat_number(self, seat_index: int) -> int:
        """O(1) lookup of the printed seat number."""
        self._check_index(seat_index)
        return self.seat_numbers[seat_index]

    def row_summaries(self) -> List[RowSummary]:
        """Per-row overview, concentric rows first. Empty rows are skipped."""
        rows: Dict[Tuple[SeatKind, int], List[Seat]] = {}
        for seat in self.seats:
            rows.setdefault((seat.kind, seat.row), []).append(seat)

        summaries = []
        for (kind, row), row_seats in rows.items():
            numbers = [s.number for s in row_seats]
            summaries.append(RowSummary(
                kind=kind,
                row=row,
                seat_count=len(row_seats),
                first_index=row_seats[0].index,
                last_index=row_seats[-1].index,
                min_number=min(numbers),
                max_number=max(numbers),
            ))
        return summaries


def _build_seats(geometry: VenueGeometry, seat_numbers: Tuple[int, ...]) -> List[Seat]:
    """Walk the layout in seat index order, attaching row metadata."""
    seats = []

    for row_index, row_positions in iter_concentric_rows(geometry):
        seat_count_in_segment = geometry.concentric_seat_count_in_segment_per_row[row_index]
        for i, (x, y) in enumerate(row_positions):
            index = len(seats)
            seats.append(Seat(
                index=index,
                x=x,
                y=y,
                kind=SeatKind.CONCENTRIC,
                row=row_index,
                number=seat_numbers[index],
                segment=i // seat_count_in_segment,
            ))

    for row_index, row_positions in iter_parallel_rows(geometry):
        for i, (x, y) in enumerate(row_positions):
            index = len(seats)
            seats.append(Seat(
                index=index,
                x=x,
                y=y,
                kind=SeatKind.PARALLEL,
                row=row_index,
                number=seat_numbers[index],
                side=Side.LEFT if is_left_side_seat(geometry, i) else Side.RIGHT,
            ))

    return seats


def _check_injective(seat_numbers: Tuple[int, ...]) -> None:
    duplicates = sorted(number for number, count in Counter(seat_numbers).items() if count > 1)
    if duplicates:
        raise VenueGeometryError(
            f"Seat numbering is not injective, duplicated numbers: {duplicates[:10]}"
        )


def build_seating_chart(geometry: VenueGeometry = CHAMBER_GEOMETRY) -> SeatingChart:
    """
    Build the seating chart for the given venue.

    Validates the geometry, generates the layout and precomputes every seat
    number.

    Raises:
        VenueGeometryError: if the constants are inconsistent or two seats
            would share a number
    """
    geometry.validate()

    seat_numbers = build_seat_number_table(geometry)
    _check_injective(seat_numbers)

    seats = _build_seats(geometry, seat_numbers)
    if len(seats) != len(seat_numbers):
        raise VenueGeometryError(
            f"Layout has {len(seats)} seats but numbering covers {len(seat_numbers)}"
        )

    logger.info(
        f"Built seating chart: {geometry.concentric_seat_count_total} concentric + "
        f"{geometry.parallel_seat_count_total} parallel = {len(seats)} seats"
    )
    logger.debug(f"Parallel seat spacing: {geometry.parallel_seat_spacing:.4f}")

    return SeatingChart(geometry=geometry, seats=tuple(seats), seat_numbers=seat_numbers)
