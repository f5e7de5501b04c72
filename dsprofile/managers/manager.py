# Standard library
import threading
from pathlib import Path

# Third-party
import polars as pl

# Local imports
from dsprofile.core.config import ProfilerConfig
from dsprofile.core.models import Report
from dsprofile.core.utils import Dataset, load_file
from dsprofile.repositories.report_repository import ReportRepository
from dsprofile.services.display_service import DisplayService
from dsprofile.services.profile_service import ProfileService

# -----------------------------
# Unified Profiler
# -----------------------------


class DataProfiler:
    """Data profiler - single API surface for profiling operations.
    """

    def __init__(self, config: ProfilerConfig | None = None) -> None:
        self.config: ProfilerConfig = config or ProfilerConfig.from_env()

        # Initialize repositories
        self._report_repo = ReportRepository()

        # Initialize services
        self._profile_service = ProfileService(self.config)
        self._display_service = DisplayService(self.config)

    # -----------------------------
    # Profiling
    # -----------------------------

    def profile(
        self,
        dataset: Dataset,
        cancel_event: threading.Event | None = None,
    ) -> Report:
        """Profile every column of a dataset.

        Args:
            dataset: DataFrame, LazyFrame or mapping of column name to values
            cancel_event: Optional event to abort a long run

        Returns:
            Report with one profile per column

        Examples:
            >>> dp = DataProfiler()
            >>> report = dp.profile({"A": [1, 1, 2, None], "B": list("xyzw")})
            >>> report.column_names
            ['B', 'A']
        """
        return self._profile_service.profile(dataset, cancel_event=cancel_event)

    def profile_file(
        self,
        path: str | Path,
        null_values: list[str] | None = None,
        infer_schema_length: int | None = 10_000,
    ) -> Report:
        """Load a file and profile it.

        Args:
            path: Source .csv, .parquet, .json or .jsonl file
            null_values: Raw markers to read as missing
            infer_schema_length: Rows scanned for CSV type inference

        Returns:
            Report for the loaded dataset
        """
        df: pl.DataFrame = load_file(
            Path(path),
            null_values=null_values,
            infer_schema_length=infer_schema_length,
        )
        return self.profile(df)

    # -----------------------------
    # Display
    # -----------------------------

    def show(self, report: Report, title: str = "Column Profile") -> None:
        """Render a report to the console."""
        self._display_service.show_report(report, title=title)

    # -----------------------------
    # Persistence
    # -----------------------------

    def save(self, report: Report, path: str | Path) -> Path:
        """Write a report to .csv or .json."""
        return self._report_repo.save_report(report, path)

    def load(self, path: str | Path) -> Report:
        """Read a report previously written with save()."""
        return self._report_repo.load_report(path)
