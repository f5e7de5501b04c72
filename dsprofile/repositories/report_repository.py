# Standard library
import json
from pathlib import Path
from typing import Any

# Third-party
import polars as pl

# Local imports
from dsprofile.core.models import (
    REPORT_HEADERS,
    REPORT_SCHEMA,
    ColumnProfile,
    ColumnProfileRow,
    Report,
)

# -----------------------------
# Report Repository
# -----------------------------


class ReportRepository:
    """Repository for report file I/O (CSV and JSON)."""

    def save_report(self, report: Report, path: str | Path) -> Path:
        """Write a report, format chosen by suffix.

        Args:
            report: Report to save
            path: Destination ending in .csv or .json

        Returns:
            Resolved destination path
        """
        path = Path(path)
        suffix: str = path.suffix.lower()
        path.parent.mkdir(parents=True, exist_ok=True)

        if suffix == ".csv":
            report.to_frame().write_csv(path)
        elif suffix == ".json":
            path.write_text(json.dumps(report.to_dicts(), indent=2), encoding="utf-8")
        else:
            msg = f"Unsupported report file type: {suffix}"
            raise ValueError(msg)
        return path

    def load_report(self, path: str | Path) -> Report:
        """Read a report written by save_report, preserving row order.

        Args:
            path: Source .csv or .json file

        Returns:
            Report rebuilt from the stored rows
        """
        path = Path(path)
        suffix: str = path.suffix.lower()

        if suffix == ".csv":
            # Read everything as text first so a malformed file fails on headers
            df: pl.DataFrame = pl.read_csv(path, infer_schema_length=0)
            self._check_headers(df.columns, path)
            rows: list[dict[str, Any]] = (
                df.select(list(REPORT_HEADERS)).cast(REPORT_SCHEMA).to_dicts()
            )
        elif suffix == ".json":
            rows = json.loads(path.read_text(encoding="utf-8"))
            for row in rows:
                self._check_headers(list(row), path)
        else:
            msg = f"Unsupported report file type: {suffix}"
            raise ValueError(msg)

        return Report(profiles=tuple(self._row_to_profile(row) for row in rows))

    # -----------------------------
    # Helpers
    # -----------------------------

    def _check_headers(self, columns: list[str], path: Path) -> None:
        missing: list[str] = [h for h in REPORT_HEADERS if h not in columns]
        if missing:
            msg = f"Report file {path} is missing columns: {', '.join(missing)}"
            raise ValueError(msg)

    def _row_to_profile(self, row: ColumnProfileRow | dict[str, Any]) -> ColumnProfile:
        present_count = int(row["present_count"])
        missing_count = int(row["missing_count"])
        return ColumnProfile(
            name=str(row["column_name"]),
            distinct_count=int(row["distinct_count"]),
            total_count=present_count + missing_count,
            missing_count=missing_count,
            present_count=present_count,
            pct_missing=float(row["pct_missing"]),
            pct_distinct=float(row["pct_distinct"]),
        )
