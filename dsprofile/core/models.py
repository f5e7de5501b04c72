# Standard library
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TypedDict, overload

# Third-party
import polars as pl

# -----------------------------
# Constants
# -----------------------------

REPORT_HEADERS: tuple[str, ...] = (
    "column_name",
    "distinct_count",
    "present_count",
    "missing_count",
    "pct_missing",
    "pct_distinct",
)

REPORT_SCHEMA: dict[str, type[pl.DataType]] = {
    "column_name": pl.String,
    "distinct_count": pl.Int64,
    "present_count": pl.Int64,
    "missing_count": pl.Int64,
    "pct_missing": pl.Float64,
    "pct_distinct": pl.Float64,
}

# -----------------------------
# TypedDict Definitions
# -----------------------------


class ColumnProfileRow(TypedDict):
    """Serialized form of a single column profile."""

    column_name: str
    distinct_count: int
    present_count: int
    missing_count: int
    pct_missing: float
    pct_distinct: float


# -----------------------------
# Domain Models
# -----------------------------


@dataclass(frozen=True)
class ColumnProfile:
    """Cardinality and completeness of one column."""

    name: str
    distinct_count: int
    total_count: int
    missing_count: int
    present_count: int
    pct_missing: float
    pct_distinct: float
    dtype: str = "?"

    @property
    def is_all_missing(self) -> bool:
        """True when the column holds no values at all."""
        return self.present_count == 0

    @property
    def is_constant(self) -> bool:
        """True when every present value is identical."""
        return self.distinct_count == 1

    def to_row(self) -> ColumnProfileRow:
        return {
            "column_name": self.name,
            "distinct_count": self.distinct_count,
            "present_count": self.present_count,
            "missing_count": self.missing_count,
            "pct_missing": self.pct_missing,
            "pct_distinct": self.pct_distinct,
        }

    def __repr__(self) -> str:
        return (
            f"ColumnProfile({self.name}, distinct={self.distinct_count}, "
            f"missing={self.missing_count}/{self.total_count}, "
            f"pct_missing={self.pct_missing})"
        )


@dataclass(frozen=True)
class Report:
    """Immutable, ordered sequence of column profiles.

    One entry per profiled column: the columns of the dataset become the
    rows of the report.
    """

    profiles: tuple[ColumnProfile, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.profiles)

    def __iter__(self) -> Iterator[ColumnProfile]:
        return iter(self.profiles)

    @overload
    def __getitem__(self, key: int) -> ColumnProfile: ...

    @overload
    def __getitem__(self, key: str) -> ColumnProfile: ...

    def __getitem__(self, key: int | str) -> ColumnProfile:
        """Index by position or look up by column name."""
        if isinstance(key, str):
            for profile in self.profiles:
                if profile.name == key:
                    return profile
            msg = f"Column '{key}' not in report"
            raise KeyError(msg)
        return self.profiles[key]

    @property
    def column_names(self) -> list[str]:
        return [profile.name for profile in self.profiles]

    # -----------------------------
    # Triage
    # -----------------------------

    def all_missing_columns(self) -> list[str]:
        """Columns that have no present value."""
        return [p.name for p in self.profiles if p.is_all_missing]

    def constant_columns(self) -> list[str]:
        """Columns whose present values are all identical."""
        return [p.name for p in self.profiles if p.is_constant]

    # -----------------------------
    # Conversion
    # -----------------------------

    def to_dicts(self) -> list[ColumnProfileRow]:
        return [profile.to_row() for profile in self.profiles]

    def to_frame(self) -> pl.DataFrame:
        """Report as a DataFrame with the fixed report headers."""
        return pl.DataFrame(self.to_dicts(), schema=REPORT_SCHEMA)

    def __repr__(self) -> str:
        return f"Report({len(self)} columns: {', '.join(self.column_names)})"
