#!/usr/bin/env python3
"""
generate_seats.py

Generate the chamber seating chart and save it as JSON.
Run with: python scripts/generate_seats.py --output-dir output
(after `pip install -e .`, which puts the seating package on the path)
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from seating import VenueGeometryError, build_seating_chart
from seating.export import count_by_kind, export_chart


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate chamber seat coordinates and numbers")
    parser.add_argument("--output-dir", default="output", help="Directory for the JSON files")
    args = parser.parse_args(argv)

    print("Generating seating chart...")
    try:
        chart = build_seating_chart()
    except VenueGeometryError as e:
        print(f"Error: venue geometry is inconsistent: {e}")
        return 1

    print(f"Generated {len(chart)} total seats")

    for path in export_chart(chart, Path(args.output_dir)):
        print(f"Saved {path}")

    # Print summary
    print("\nSummary by kind:")
    for kind, count in sorted(count_by_kind(chart).items()):
        print(f"  {kind}: {count} seats")

    numbers = chart.seat_numbers
    print(f"\nSuccess! Seat numbers range from {min(numbers)} to {max(numbers)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
