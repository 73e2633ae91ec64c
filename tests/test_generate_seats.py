"""
Export script tests
"""
import importlib.util
import json
from pathlib import Path

from seating import VenueGeometryError
from seating.export import chart_to_dict, count_by_kind, export_chart

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "generate_seats.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("generate_seats", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_chart_to_dict(chart):
    data = chart_to_dict(chart)
    assert data["seat_count"] == 465
    assert data["seats"][0] == {
        "index": 0,
        "number": 64,
        "kind": "concentric",
        "row": 0,
        "segment": 0,
        "side": None,
        "x": -5.0,
        "y": 0.0,
    }
    assert data["seats"][-1]["side"] == "right"


def test_count_by_kind(chart):
    assert count_by_kind(chart) == {"concentric": 408, "parallel": 57}


def test_export_chart_writes_files(chart, tmp_path):
    output_dir = tmp_path / "out"
    paths = export_chart(chart, output_dir)

    assert [p.name for p in paths] == ["seats.json", "row_summary.json"]
    seats = json.loads((output_dir / "seats.json").read_text())
    rows = json.loads((output_dir / "row_summary.json").read_text())

    numbers = [s["number"] for s in seats["seats"]]
    assert len(numbers) == len(set(numbers)) == 465
    assert rows[0]["kind"] == "concentric"
    assert rows[-1]["seat_count"] == 3


def test_script_main(tmp_path, capsys):
    script = _load_script()
    assert script.main(["--output-dir", str(tmp_path)]) == 0

    out = capsys.readouterr().out
    assert "Generated 465 total seats" in out
    assert "from 34 to 501" in out
    assert (tmp_path / "seats.json").exists()


def test_script_exits_on_inconsistent_geometry(tmp_path, capsys, monkeypatch):
    script = _load_script()

    def broken_chart():
        raise VenueGeometryError("Concentric row 0 has 1 seats, at least 2 are required")

    monkeypatch.setattr(script, "build_seating_chart", broken_chart)
    assert script.main(["--output-dir", str(tmp_path)]) == 1

    out = capsys.readouterr().out
    assert "venue geometry is inconsistent" in out
    assert not (tmp_path / "seats.json").exists()
