"""
Pydantic schemas for API response models.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from seating import RowSummary, Seat, SeatKind, Side


# ============== Seat Schemas ==============

class SeatResponse(BaseModel):
    """A seat as drawn by the client."""
    index: int
    number: int
    kind: SeatKind
    row: int
    segment: Optional[int] = None  # concentric seats
    side: Optional[Side] = None    # parallel seats
    x: float
    y: float

    @classmethod
    def from_seat(cls, seat: Seat) -> "SeatResponse":
        return cls(
            index=seat.index,
            number=seat.number,
            kind=seat.kind,
            row=seat.row,
            segment=seat.segment,
            side=seat.side,
            x=seat.x,
            y=seat.y,
        )


class SeatDetailResponse(SeatResponse):
    """Seat lookup result including the tooltip label."""
    label: str


class SeatLayoutResponse(BaseModel):
    """Full chart with render hints."""
    total: int
    concentric_total: int
    parallel_total: int
    seat_radius: float
    seat_height: float
    seats: List[SeatResponse] = Field(default_factory=list)


class SeatPositionsResponse(BaseModel):
    """Bare (x, y) pairs, list index = seat index."""
    total: int
    positions: List[List[float]]


# ============== Row Schemas ==============

class RowSummaryResponse(BaseModel):
    kind: SeatKind
    row: int
    seat_count: int
    first_index: int
    last_index: int
    min_number: int
    max_number: int

    @classmethod
    def from_summary(cls, summary: RowSummary) -> "RowSummaryResponse":
        return cls(
            kind=summary.kind,
            row=summary.row,
            seat_count=summary.seat_count,
            first_index=summary.first_index,
            last_index=summary.last_index,
            min_number=summary.min_number,
            max_number=summary.max_number,
        )


class RowSummaryListResponse(BaseModel):
    rows: List[RowSummaryResponse]
    total: int
