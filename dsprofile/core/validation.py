# Standard library
from collections.abc import Mapping, Sequence

# Third-party
import polars as pl

# -----------------------------
# Profiling Errors
# -----------------------------


class ProfilingError(ValueError):
    """Raised when a dataset cannot be profiled."""


class ShapeMismatchError(ProfilingError):
    """Raised when columns have inconsistent lengths."""


class EmptySchemaError(ProfilingError):
    """Raised when a dataset has no columns."""


class EmptyDatasetError(ProfilingError):
    """Raised when a dataset has no rows."""


class ProfilingCancelledError(RuntimeError):
    """Raised when profiling is aborted through a cancel event."""


# -----------------------------
# Validation Functions
# -----------------------------


def validate_column_lengths(columns: Mapping[str, Sequence[object]]) -> None:
    """Validate that every column of a mapping has the same length.

    Args:
        columns: Column name to sequence of values

    Raises:
        ShapeMismatchError: If column lengths differ
    """
    lengths: dict[str, int] = {name: len(values) for name, values in columns.items()}
    if len(set(lengths.values())) > 1:
        detail = ", ".join(f"{name}={n}" for name, n in lengths.items())
        msg = f"Columns have inconsistent lengths ({detail})"
        raise ShapeMismatchError(msg)


def validate_schema(df: pl.DataFrame) -> None:
    """Validate DataFrame has at least one column.

    Args:
        df: DataFrame to validate

    Raises:
        EmptySchemaError: If DataFrame has no columns
    """
    if len(df.columns) == 0:
        msg = "Dataset has no columns"
        raise EmptySchemaError(msg)


def validate_rows(df: pl.DataFrame) -> None:
    """Validate DataFrame has at least one row.

    Args:
        df: DataFrame to validate

    Raises:
        EmptyDatasetError: If DataFrame has no rows
    """
    if df.height == 0:
        msg = (
            f"Dataset has {len(df.columns)} columns but 0 rows; "
            "missing and distinct percentages are undefined"
        )
        raise EmptyDatasetError(msg)
