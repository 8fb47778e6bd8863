from typing import Optional, Sequence


class GraphViewError(Exception):
    """Base error for the viewer core."""


class ConfigurationIncompleteError(GraphViewError):
    def __init__(self, missing: Sequence[str], message: Optional[str] = None):
        self.missing = list(missing)
        self.message = message or f"Missing required configuration: {', '.join(self.missing)}"
        super().__init__(self.message)

    def __str__(self):
        return self.message


class MalformedColumnConfigError(GraphViewError):
    """Raised when a serialized column configuration cannot be parsed."""


class InvalidQueryOutcomeError(GraphViewError):
    """Raised when the query boundary returns something that is neither an envelope nor a failure."""
