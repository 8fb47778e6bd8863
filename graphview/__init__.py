"""Result adaptation and refetch control for data graph table views."""
from .contracts import (
    ColumnDefinition,
    ColumnType,
    DisplayState,
    EmptyState,
    ErrorState,
    LoadingState,
    PopulatedState,
    QueryInputs,
    QueryResultEnvelope,
    TransportFailure,
    UnconfiguredState,
    ViewerConfig,
)
from .query import CallableQueryBoundary, QueryTrigger
from .table import (
    ColumnDeriver,
    ResultNormalizer,
    derive_columns,
    format_field_label,
    infer_field_type,
    normalize_result,
)
from .utils import setup_logging
from .viewer import DataGraphViewer

__all__ = [
    "CallableQueryBoundary",
    "ColumnDefinition",
    "ColumnDeriver",
    "ColumnType",
    "DataGraphViewer",
    "DisplayState",
    "EmptyState",
    "ErrorState",
    "LoadingState",
    "PopulatedState",
    "QueryInputs",
    "QueryResultEnvelope",
    "QueryTrigger",
    "ResultNormalizer",
    "TransportFailure",
    "UnconfiguredState",
    "ViewerConfig",
    "derive_columns",
    "format_field_label",
    "infer_field_type",
    "normalize_result",
    "setup_logging",
]
