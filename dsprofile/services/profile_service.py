# Standard library
import logging
import threading
from concurrent import futures

# Third-party
import polars as pl

# Local imports
from dsprofile.core.config import ProfilerConfig
from dsprofile.core.models import ColumnProfile, Report
from dsprofile.core.utils import (
    Dataset,
    compute_column_profile,
    sort_profiles,
    to_dataframe,
)
from dsprofile.core.validation import (
    EmptySchemaError,
    ProfilingCancelledError,
    validate_rows,
    validate_schema,
)

logger = logging.getLogger(__name__)

# -----------------------------
# Profile Service
# -----------------------------


class ProfileService:
    """Service computing per-column cardinality and completeness reports."""

    def __init__(self, config: ProfilerConfig | None = None) -> None:
        self.config: ProfilerConfig = config or ProfilerConfig()

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
            cancel_event: Optional event; when set, profiling stops before
                the next column and nothing is returned

        Returns:
            Report with one profile per column, sorted by pct_missing
            ascending then distinct_count descending

        Raises:
            ShapeMismatchError: If columns have inconsistent lengths
            EmptySchemaError: If the dataset has no columns (unless allowed)
            EmptyDatasetError: If the dataset has no rows
            ProfilingCancelledError: If cancel_event is set mid-run
        """
        df: pl.DataFrame = to_dataframe(dataset)

        try:
            validate_schema(df)
        except EmptySchemaError:
            if self.config.allow_empty_schema:
                logger.info("Dataset has no columns, returning empty report")
                return Report()
            raise
        validate_rows(df)

        profiles: list[ColumnProfile] = self._profile_columns(df, cancel_event)
        report = Report(profiles=tuple(sort_profiles(profiles)))

        logger.info(
            "Profiled %d columns over %d rows (%d all-missing, %d constant)",
            len(report),
            df.height,
            len(report.all_missing_columns()),
            len(report.constant_columns()),
        )
        return report

    # -----------------------------
    # Helpers
    # -----------------------------

    def _profile_columns(
        self,
        df: pl.DataFrame,
        cancel_event: threading.Event | None,
    ) -> list[ColumnProfile]:
        """Profile columns in input order, sequentially or across threads."""
        if self.config.max_workers == 1 or df.width == 1:
            return [self._profile_one(df[col], cancel_event) for col in df.columns]

        with futures.ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
            tasks = [
                pool.submit(self._profile_one, df[col], cancel_event)
                for col in df.columns
            ]
            try:
                # Collect in submission order so output matches the sequential path
                return [task.result() for task in tasks]
            except ProfilingCancelledError:
                for task in tasks:
                    task.cancel()
                raise

    def _profile_one(
        self,
        series: pl.Series,
        cancel_event: threading.Event | None,
    ) -> ColumnProfile:
        if cancel_event is not None and cancel_event.is_set():
            logger.warning("Profiling cancelled before column '%s'", series.name)
            msg = f"Profiling cancelled before column '{series.name}'"
            raise ProfilingCancelledError(msg)

        profile: ColumnProfile = compute_column_profile(
            series, nan_as_missing=self.config.nan_as_missing
        )
        logger.debug("Profiled column %r", profile)
        return profile
