from .columns import ColumnDefinition, ColumnSchema, ColumnType, dump_columns, parse_column_config
from .display import (
    DisplayState,
    EmptyState,
    ErrorState,
    LoadingState,
    PopulatedState,
    UnconfiguredState,
)
from .query import (
    REQUIRED_INPUTS,
    PageError,
    QueryInputs,
    QueryOutcome,
    QueryResultEnvelope,
    Row,
    TransportFailure,
    TransportFailureBody,
    ViewerConfig,
    parse_query_outcome,
)

__all__ = [
    "ColumnDefinition",
    "ColumnSchema",
    "ColumnType",
    "DisplayState",
    "EmptyState",
    "ErrorState",
    "LoadingState",
    "PageError",
    "PopulatedState",
    "QueryInputs",
    "QueryOutcome",
    "QueryResultEnvelope",
    "REQUIRED_INPUTS",
    "Row",
    "TransportFailure",
    "TransportFailureBody",
    "UnconfiguredState",
    "ViewerConfig",
    "dump_columns",
    "parse_column_config",
    "parse_query_outcome",
]
