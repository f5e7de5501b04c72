# Standard library
from collections.abc import Mapping, Sequence
from pathlib import Path

# Third-party
import polars as pl

# Local imports
from dsprofile.core.models import ColumnProfile
from dsprofile.core.validation import validate_column_lengths

# -----------------------------
# Constants
# -----------------------------

FLOAT_DTYPES = {pl.Float32, pl.Float64}
PCT_DECIMALS = 2

Dataset = pl.DataFrame | pl.LazyFrame | Mapping[str, Sequence[object]]

# -----------------------------
# File I/O utilities
# -----------------------------


def load_file(
    path: Path,
    null_values: list[str] | None = None,
    infer_schema_length: int | None = 10_000,
) -> pl.DataFrame:
    """Auto-detect and load file as Polars DataFrame.

    Args:
        path: Source file (.csv, .parquet, .json or .jsonl)
        null_values: Raw CSV markers to read as missing, e.g. ["NA", ""]
        infer_schema_length: Rows scanned for CSV type inference (None = all)
    """
    path = Path(path)
    suffix: str = path.suffix.lower()
    if suffix == ".csv":
        return pl.read_csv(
            path,
            null_values=null_values,
            infer_schema_length=infer_schema_length,
            try_parse_dates=True,
        )
    if suffix == ".parquet":
        return pl.read_parquet(path)
    if suffix == ".json":
        return pl.read_json(path)
    if suffix == ".jsonl":
        return pl.read_ndjson(path)
    msg: str = f"Unsupported file type: {suffix}"
    raise ValueError(msg)


# -----------------------------
# Dataset coercion
# -----------------------------


def to_dataframe(dataset: Dataset) -> pl.DataFrame:
    """Coerce a supported dataset into a Polars DataFrame.

    Mappings are checked for equal column lengths before construction so a
    ragged input surfaces as ShapeMismatchError rather than a polars error.
    The caller's object is never modified.
    """
    if isinstance(dataset, pl.DataFrame):
        return dataset
    if isinstance(dataset, pl.LazyFrame):
        return dataset.collect()
    if isinstance(dataset, Mapping):
        validate_column_lengths(dataset)
        return pl.DataFrame(
            {name: list(values) for name, values in dataset.items()},
            strict=False,
        )
    msg = f"Unsupported dataset type: {type(dataset).__name__}"
    raise TypeError(msg)


# -----------------------------
# Column statistics
# -----------------------------


def missing_mask(series: pl.Series, *, nan_as_missing: bool = True) -> pl.Series:
    """Boolean mask of missing rows (null, and NaN for float columns)."""
    mask: pl.Series = series.is_null()
    if nan_as_missing and series.dtype in FLOAT_DTYPES:
        mask = mask | series.is_nan().fill_null(False)
    return mask


def compute_column_profile(
    series: pl.Series, *, nan_as_missing: bool = True
) -> ColumnProfile:
    """Fold one column into its profile.

    The three aggregates (total, distinct, missing) are independent
    reductions over the same column. Missing values never count as a
    distinct value.
    """
    total_count: int = len(series)
    mask: pl.Series = missing_mask(series, nan_as_missing=nan_as_missing)
    missing_count: int = int(mask.sum())
    distinct_count: int = series.filter(~mask).n_unique()
    present_count: int = total_count - missing_count

    return ColumnProfile(
        name=series.name,
        distinct_count=distinct_count,
        total_count=total_count,
        missing_count=missing_count,
        present_count=present_count,
        pct_missing=round(100 * missing_count / total_count, PCT_DECIMALS),
        pct_distinct=round(distinct_count / total_count, PCT_DECIMALS),
        dtype=str(series.dtype),
    )


def sort_profiles(profiles: list[ColumnProfile]) -> list[ColumnProfile]:
    """Order by pct_missing ascending, then distinct_count descending.

    sorted() is stable, so ties keep the original column order.
    """
    return sorted(profiles, key=lambda p: (p.pct_missing, -p.distinct_count))
