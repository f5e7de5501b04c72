# Public API exports
import threading

from dsprofile.core.config import ProfilerConfig as ProfilerConfig
from dsprofile.core.models import ColumnProfile as ColumnProfile
from dsprofile.core.models import Report as Report
from dsprofile.core.utils import Dataset
from dsprofile.core.validation import EmptyDatasetError as EmptyDatasetError
from dsprofile.core.validation import EmptySchemaError as EmptySchemaError
from dsprofile.core.validation import (
    ProfilingCancelledError as ProfilingCancelledError,
)
from dsprofile.core.validation import ProfilingError as ProfilingError
from dsprofile.core.validation import ShapeMismatchError as ShapeMismatchError
from dsprofile.managers import DataProfiler as DataProfiler
from dsprofile.services.profile_service import ProfileService


def profile(dataset: Dataset, cancel_event: threading.Event | None = None) -> Report:
    """Profile a dataset with the default configuration."""
    return ProfileService().profile(dataset, cancel_event=cancel_event)


__all__ = [
    "ColumnProfile",
    "DataProfiler",
    "EmptyDatasetError",
    "EmptySchemaError",
    "ProfilerConfig",
    "ProfilingCancelledError",
    "ProfilingError",
    "Report",
    "ShapeMismatchError",
    "profile",
]
