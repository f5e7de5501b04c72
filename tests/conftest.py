"""Shared test fixtures."""

from pathlib import Path

import polars as pl
import pytest

from dsprofile.core.config import ProfilerConfig

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def permits_csv(fixtures_dir):
    return fixtures_dir / "permits.csv"


@pytest.fixture
def config():
    return ProfilerConfig()


@pytest.fixture
def mixed_dataset():
    """Two columns: A has a repeat and a null, B is fully distinct."""
    return {"A": [1, 1, 2, None], "B": ["x", "y", "z", "w"]}


@pytest.fixture
def permits_df():
    return pl.DataFrame(
        {
            "permit_id": ["P-1", "P-2", "P-3", "P-4", "P-5", "P-6"],
            "ward": [1, 1, 2, None, 3, 3],
            "permit_type": ["BLDG", "BLDG", "BLDG", "BLDG", "BLDG", "BLDG"],
            "contractor": [None, None, None, None, None, None],
            "value": [1200.5, None, 300.0, float("nan"), 450.0, 300.0],
            "is_residential": [True, False, True, None, None, True],
        },
        schema_overrides={"contractor": pl.String},
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep DSPROFILE_* variables from the host out of the tests."""
    for name in (
        "DSPROFILE_MAX_WORKERS",
        "DSPROFILE_NAN_AS_MISSING",
        "DSPROFILE_ALLOW_EMPTY_SCHEMA",
    ):
        monkeypatch.delenv(name, raising=False)
