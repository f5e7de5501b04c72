# Core module exports
from dsprofile.core.config import ProfilerConfig as ProfilerConfig
from dsprofile.core.models import ColumnProfile as ColumnProfile
from dsprofile.core.models import ColumnProfileRow as ColumnProfileRow
from dsprofile.core.models import Report as Report
from dsprofile.core.utils import (
    compute_column_profile as compute_column_profile,
)
from dsprofile.core.utils import (
    load_file as load_file,
)
from dsprofile.core.utils import (
    to_dataframe as to_dataframe,
)
from dsprofile.core.validation import (
    EmptyDatasetError as EmptyDatasetError,
)
from dsprofile.core.validation import (
    EmptySchemaError as EmptySchemaError,
)
from dsprofile.core.validation import (
    ProfilingCancelledError as ProfilingCancelledError,
)
from dsprofile.core.validation import (
    ProfilingError as ProfilingError,
)
from dsprofile.core.validation import (
    ShapeMismatchError as ShapeMismatchError,
)

__all__ = [
    "ColumnProfile",
    "ColumnProfileRow",
    "EmptyDatasetError",
    "EmptySchemaError",
    "ProfilerConfig",
    "ProfilingCancelledError",
    "ProfilingError",
    "Report",
    "ShapeMismatchError",
    "compute_column_profile",
    "load_file",
    "to_dataframe",
]
