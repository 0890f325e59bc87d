"""Domain models for the ARFF loader.

Dataset models (types, headers, rows, stream/batch containers) and the
per-run bookkeeping models used by the CLI (error records, load results).
"""

from .dataset import Batch, Stream
from .error_record import ErrorRecord
from .headers import Header, Headers, Representation
from .load_result import FileStat, LoadResult
from .row import Row
from .types import AttributeType, Nominal, Numeric, RepresentationKind

__all__ = [
    # Dataset models
    "AttributeType",
    "Numeric",
    "Nominal",
    "RepresentationKind",
    "Representation",
    "Header",
    "Headers",
    "Row",
    "Stream",
    "Batch",
    # Run bookkeeping models
    "ErrorRecord",
    "FileStat",
    "LoadResult",
]
