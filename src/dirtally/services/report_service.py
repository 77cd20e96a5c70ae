# Licensed under the Apache License, Version 2.0 (the "License");
# ...
from __future__ import annotations

import csv
import json
from typing import Any, List
from pathlib import Path

from .accumulator import SizeIndex


class ReportService:
    """
    Writes per-directory size reports (JSON/NDJSON/CSV).

    Notes:
      - JSON (default): one JSON array of {"path", "depth", "size"} records.
      - NDJSON: one record per line.
      - CSV: same fields as columns; stable column order.
      - Records are sorted by path so identical transcripts give identical files.
    """

    FIELDNAMES = ["path", "depth", "size"]

    def __init__(self, index: SizeIndex) -> None:
        self._index = index

    def _records(self) -> List[dict[str, Any]]:
        return [
            {"path": str(p), "depth": p.depth, "size": self._index[p]}
            for p in sorted(self._index)
        ]

    def write_sizes(self, out: Path, fmt: str = "json") -> Path:
        """
        Write the directory size report to `out` in the specified format.

        Returns:
            The path written.

        Raises:
            ValueError: if an unsupported format is requested.
        """
        fmt = (fmt or "json").lower()
        if fmt not in ("json", "ndjson", "csv"):
            raise ValueError(f"Unsupported format: {fmt}")

        records = self._records()
        out.parent.mkdir(parents=True, exist_ok=True)

        if fmt == "json":
            out.write_text(
                json.dumps(records, ensure_ascii=False, indent=2), encoding="utf-8"
            )
            return out

        if fmt == "ndjson":
            lines = (json.dumps(rec, ensure_ascii=False) for rec in records)
            text = "\n".join(lines)
            out.write_text(text + ("\n" if text else ""), encoding="utf-8")
            return out

        with open(out, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=self.FIELDNAMES)
            writer.writeheader()
            for rec in records:
                writer.writerow(rec)
        return out
