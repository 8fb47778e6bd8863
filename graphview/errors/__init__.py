from .application_errors import (
    ConfigurationIncompleteError,
    GraphViewError,
    InvalidQueryOutcomeError,
    MalformedColumnConfigError,
)

__all__ = [
    "ConfigurationIncompleteError",
    "GraphViewError",
    "InvalidQueryOutcomeError",
    "MalformedColumnConfigError",
]
