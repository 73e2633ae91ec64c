"""
Exceptions raised by the seating core.
"""


class SeatingError(Exception):
    """Base class for seating chart errors."""


class VenueGeometryError(SeatingError, ValueError):
    """The fixed venue constants are internally inconsistent."""


class SeatIndexError(SeatingError, IndexError):
    def __init__(self, seat_index: int, seat_count: int):
        super().__init__(f"Seat index {seat_index} is outside [0, {seat_count})")
        self.seat_index = seat_index
        self.seat_count = seat_count
