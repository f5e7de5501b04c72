"""Tests for dsprofile.core (models, loading, column statistics)."""

import polars as pl
import pytest

from dsprofile.core.models import REPORT_HEADERS, ColumnProfile, Report
from dsprofile.core.utils import (
    compute_column_profile,
    load_file,
    missing_mask,
    sort_profiles,
    to_dataframe,
)
from dsprofile.core.validation import ShapeMismatchError, validate_column_lengths


def _make_profile(name, distinct=1, missing=0, total=4):
    return ColumnProfile(
        name=name,
        distinct_count=distinct,
        total_count=total,
        missing_count=missing,
        present_count=total - missing,
        pct_missing=round(100 * missing / total, 2),
        pct_distinct=round(distinct / total, 2),
    )


# ── models ───────────────────────────────────────────────────────────

class TestReport:
    def test_lookup_by_name_and_position(self):
        report = Report(profiles=(_make_profile("a"), _make_profile("b")))
        assert report[0].name == "a"
        assert report["b"].name == "b"
        with pytest.raises(KeyError, match="zzz"):
            report["zzz"]

    def test_triage(self):
        report = Report(
            profiles=(
                _make_profile("id", distinct=4),
                _make_profile("kind", distinct=1),
                _make_profile("empty", distinct=0, missing=4),
            )
        )
        assert report.all_missing_columns() == ["empty"]
        assert report.constant_columns() == ["kind"]

    def test_to_frame_headers(self):
        report = Report(profiles=(_make_profile("a", distinct=2, missing=1),))
        df = report.to_frame()
        assert tuple(df.columns) == REPORT_HEADERS
        assert df.row(0) == ("a", 2, 3, 1, 25.0, 0.5)

    def test_empty_report_frame(self):
        df = Report().to_frame()
        assert df.height == 0
        assert tuple(df.columns) == REPORT_HEADERS

    def test_profiles_are_frozen(self):
        profile = _make_profile("a")
        with pytest.raises(AttributeError):
            profile.distinct_count = 3


# ── dataset coercion ─────────────────────────────────────────────────

class TestToDataFrame:
    def test_mapping_keeps_column_order(self):
        df = to_dataframe({"z": [1, 2], "a": ["x", "y"]})
        assert df.columns == ["z", "a"]

    def test_dataframe_passthrough(self, permits_df):
        assert to_dataframe(permits_df) is permits_df

    def test_ragged_mapping(self):
        with pytest.raises(ShapeMismatchError, match="a=3, b=1"):
            to_dataframe({"a": [1, 2, 3], "b": [1]})

    def test_validate_equal_lengths(self):
        validate_column_lengths({"a": [1, 2], "b": ["x", "y"]})


# ── column statistics ────────────────────────────────────────────────

class TestColumnStats:
    def test_missing_mask_nan(self):
        series = pl.Series("v", [1.0, float("nan"), None])
        assert missing_mask(series).to_list() == [False, True, True]
        assert missing_mask(series, nan_as_missing=False).to_list() == [False, False, True]

    def test_missing_mask_ignores_empty_string(self):
        series = pl.Series("s", ["", "a", None])
        assert missing_mask(series).to_list() == [False, False, True]

    def test_profile_excludes_missing_from_distinct(self):
        profile = compute_column_profile(pl.Series("a", [1, 1, 2, None]))
        assert profile.distinct_count == 2
        assert profile.missing_count == 1
        assert profile.dtype == "Int64"

    def test_profile_timestamps(self):
        series = pl.Series(
            "issued",
            ["2023-01-04", "2023-01-04", None, "2023-02-10"],
        ).str.to_date()
        profile = compute_column_profile(series)
        assert profile.distinct_count == 2
        assert profile.pct_missing == 25.0

    def test_sort_profiles(self):
        profiles = [
            _make_profile("half", distinct=1, missing=2),
            _make_profile("low", distinct=1),
            _make_profile("high", distinct=4),
        ]
        assert [p.name for p in sort_profiles(profiles)] == ["high", "low", "half"]


# ── file loading ─────────────────────────────────────────────────────

class TestLoadFile:
    def test_csv_with_null_markers(self, permits_csv):
        df = load_file(permits_csv, null_values=["NA", ""])
        assert df.columns == ["permit_id", "ward", "status", "value", "issued_date"]
        assert df["value"].dtype == pl.Float64
        assert df["value"].null_count() == 1
        assert df["ward"].null_count() == 1

    def test_parquet(self, tmp_path, permits_df):
        path = tmp_path / "permits.parquet"
        permits_df.write_parquet(path)
        assert load_file(path).shape == permits_df.shape

    def test_unsupported_suffix(self, tmp_path):
        with pytest.raises(ValueError, match="Unsupported file type"):
            load_file(tmp_path / "permits.xlsx")
