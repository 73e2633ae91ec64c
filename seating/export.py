"""
Export the seating chart to JSON files.

Writes:
- seats.json: every seat with position, row metadata and seat number
- row_summary.json: one entry per row with seat and number ranges
"""

import json
from pathlib import Path
from typing import Dict, List

from seating.chart import RowSummary, Seat, SeatingChart


def seat_to_dict(seat: Seat) -> dict:
    return {
        "index": seat.index,
        "number": seat.number,
        "kind": seat.kind.value,
        "row": seat.row,
        "segment": seat.segment,
        "side": seat.side.value if seat.side else None,
        "x": round(seat.x, 4),
        "y": round(seat.y, 4),
    }


def row_summary_to_dict(summary: RowSummary) -> dict:
    return {
        "kind": summary.kind.value,
        "row": summary.row,
        "seat_count": summary.seat_count,
        "first_index": summary.first_index,
        "last_index": summary.last_index,
        "min_number": summary.min_number,
        "max_number": summary.max_number,
    }


def chart_to_dict(chart: SeatingChart) -> dict:
    geometry = chart.geometry
    return {
        "seat_count": len(chart),
        "seat_radius": geometry.seat_radius,
        "seat_height": geometry.seat_height,
        "seats": [seat_to_dict(seat) for seat in chart.seats],
    }


def count_by_kind(chart: SeatingChart) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for seat in chart.seats:
        counts[seat.kind.value] = counts.get(seat.kind.value, 0) + 1
    return counts


def export_chart(chart: SeatingChart, output_dir: Path) -> List[Path]:
    """
    Write the chart files into output_dir (created if missing).

    Returns:
        Paths of the written files
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    seats_path = output_dir / "seats.json"
    with open(seats_path, 'w') as f:
        json.dump(chart_to_dict(chart), f, indent=2)

    summary_path = output_dir / "row_summary.json"
    with open(summary_path, 'w') as f:
        json.dump([row_summary_to_dict(s) for s in chart.row_summaries()], f, indent=2)

    return [seats_path, summary_path]
