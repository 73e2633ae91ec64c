from .chart import RowSummary, Seat, SeatingChart, SeatKind, Side, build_seating_chart
from .exceptions import SeatIndexError, SeatingError, VenueGeometryError
from .geometry import CHAMBER_GEOMETRY, VenueGeometry
from .layout import generate_seat_layout
from .numbering import build_seat_number_table, seat_number_for

__all__ = [
    'CHAMBER_GEOMETRY', 'VenueGeometry',
    'generate_seat_layout', 'seat_number_for', 'build_seat_number_table',
    'build_seating_chart', 'SeatingChart', 'Seat', 'SeatKind', 'Side', 'RowSummary',
    'SeatingError', 'SeatIndexError', 'VenueGeometryError',
]
