import csv
import json
from pathlib import Path

import pytest

from dirtally.domain.model import DirPath
from dirtally.services.accumulator import SizeIndex
from dirtally.services.report_service import ReportService


def _index() -> SizeIndex:
    return SizeIndex({DirPath.root(): 30, DirPath(("b",)): 10, DirPath(("a",)): 20})


def test_report_defaults_to_json(tmp_path: Path):
    out = tmp_path / "sizes.json"
    path = ReportService(_index()).write_sizes(out)
    assert path == out

    data = json.loads(out.read_text("utf-8"))
    assert data == [
        {"path": "/", "depth": 0, "size": 30},
        {"path": "/a", "depth": 1, "size": 20},
        {"path": "/b", "depth": 1, "size": 10},
    ]


def test_report_ndjson_one_record_per_line(tmp_path: Path):
    out = tmp_path / "sizes.ndjson"
    ReportService(_index()).write_sizes(out, fmt="NDJSON")
    lines = out.read_text("utf-8").splitlines()
    assert len(lines) == 3
    assert json.loads(lines[1])["path"] == "/a"


def test_report_csv_has_stable_columns(tmp_path: Path):
    out = tmp_path / "nested" / "sizes.csv"
    ReportService(_index()).write_sizes(out, fmt="csv")
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert list(rows[0].keys()) == ["path", "depth", "size"]
    assert [r["size"] for r in rows] == ["30", "20", "10"]


def test_report_rejects_unknown_format(tmp_path: Path):
    with pytest.raises(ValueError):
        ReportService(_index()).write_sizes(tmp_path / "x.xml", fmt="xml")
