"""
Seat chart endpoints.

Read-only views of the seating chart built at startup. The client renders
the positions and asks for a seat's number when the pointer hovers it.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from api.config import settings
from api.schemas import (
    RowSummaryListResponse,
    RowSummaryResponse,
    SeatDetailResponse,
    SeatLayoutResponse,
    SeatPositionsResponse,
    SeatResponse,
)
from seating import SeatIndexError, SeatingChart

logger = logging.getLogger(__name__)
router = APIRouter()


def get_chart(request: Request) -> SeatingChart:
    """Seating chart stored on the application at startup."""
    return request.app.state.chart


def format_seat_label(seat_index: int, seat_number: Optional[int]) -> str:
    """
    Tooltip text for a seat.

    Falls back to the raw index when the seat has no usable number.
    """
    if not seat_number:
        return f"#{seat_index}"
    return settings.seat_label_template.format(number=seat_number)


@router.get("", response_model=SeatLayoutResponse)
async def get_layout(chart: SeatingChart = Depends(get_chart)):
    """Get every seat with its position and number."""
    geometry = chart.geometry
    return SeatLayoutResponse(
        total=len(chart),
        concentric_total=geometry.concentric_seat_count_total,
        parallel_total=geometry.parallel_seat_count_total,
        seat_radius=geometry.seat_radius,
        seat_height=geometry.seat_height,
        seats=[SeatResponse.from_seat(seat) for seat in chart.seats],
    )


@router.get("/positions", response_model=SeatPositionsResponse)
async def get_positions(chart: SeatingChart = Depends(get_chart)):
    """Get seat positions in seat index order."""
    return SeatPositionsResponse(
        total=len(chart),
        positions=[[x, y] for x, y in chart.positions],
    )


@router.get("/rows", response_model=RowSummaryListResponse)
async def get_rows(chart: SeatingChart = Depends(get_chart)):
    """Get per-row seat counts and number ranges."""
    rows = [RowSummaryResponse.from_summary(s) for s in chart.row_summaries()]
    return RowSummaryListResponse(rows=rows, total=len(rows))


@router.get("/{seat_index}", response_model=SeatDetailResponse)
async def get_seat(seat_index: int, chart: SeatingChart = Depends(get_chart)):
    """Get one seat and its tooltip label."""
    try:
        seat = chart.seat(seat_index)
    except SeatIndexError as e:
        logger.debug(f"Seat lookup failed: {e}")
        raise HTTPException(status_code=404, detail="Seat not found")

    return SeatDetailResponse(
        **SeatResponse.from_seat(seat).model_dump(),
        label=format_seat_label(seat.index, seat.number),
    )
