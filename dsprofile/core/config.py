# Standard library
import os
from dataclasses import dataclass

# -----------------------------
# Environment variables
# -----------------------------

ENV_MAX_WORKERS = "DSPROFILE_MAX_WORKERS"
ENV_NAN_AS_MISSING = "DSPROFILE_NAN_AS_MISSING"
ENV_ALLOW_EMPTY_SCHEMA = "DSPROFILE_ALLOW_EMPTY_SCHEMA"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

# -----------------------------
# Profiler configuration
# -----------------------------


@dataclass(frozen=True)
class ProfilerConfig:
    """Immutable configuration for profiling and rendering."""

    max_workers: int = 1
    """Threads used to profile columns. 1 profiles sequentially."""

    nan_as_missing: bool = True
    """Count floating point NaN as missing in addition to null."""

    allow_empty_schema: bool = False
    """Return an empty report for a dataset with no columns instead of raising."""

    null_pct_high: float = 50
    null_pct_medium: float = 10
    """Missing-percentage thresholds used to colour rendered reports."""

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            msg = f"max_workers must be >= 1, got {self.max_workers}"
            raise ValueError(msg)
        if not 0 <= self.null_pct_medium <= self.null_pct_high <= 100:
            msg = (
                "Expected 0 <= null_pct_medium <= null_pct_high <= 100, got "
                f"{self.null_pct_medium} and {self.null_pct_high}"
            )
            raise ValueError(msg)

    @classmethod
    def from_env(cls) -> "ProfilerConfig":
        """Build a config from DSPROFILE_* environment variables."""
        defaults = cls()
        max_workers_env: str | None = os.getenv(ENV_MAX_WORKERS)
        return cls(
            max_workers=int(max_workers_env) if max_workers_env else defaults.max_workers,
            nan_as_missing=_env_flag(ENV_NAN_AS_MISSING, default=defaults.nan_as_missing),
            allow_empty_schema=_env_flag(
                ENV_ALLOW_EMPTY_SCHEMA, default=defaults.allow_empty_schema
            ),
        )


def _env_flag(name: str, *, default: bool) -> bool:
    raw: str | None = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    msg = f"Invalid boolean for {name}: '{raw}'"
    raise ValueError(msg)
