"""
Classification of query boundary outcomes into display states.
"""

import logging
from typing import Any, Optional

from graphview.config import settings
from graphview.contracts.display import (
    DisplayState,
    EmptyState,
    ErrorState,
    PopulatedState,
)
from graphview.contracts.query import (
    QueryResultEnvelope,
    TransportFailure,
    parse_query_outcome,
)
from graphview.errors.application_errors import InvalidQueryOutcomeError

from .columns import ColumnDeriver

UNKNOWN_TRANSPORT_ERROR = "Unknown error"
UNKNOWN_QUERY_ERROR = "Unknown error occurred"
DEFAULT_ERROR_KIND = "Error"


def extract_failure_message(failure: TransportFailure) -> str:
    """Best human-readable message carried by a transport failure."""
    body = failure.body
    if body is not None:
        if body.message:
            return body.message
        if body.page_errors and body.page_errors[0].message:
            return body.page_errors[0].message
    if failure.message:
        return failure.message
    return UNKNOWN_TRANSPORT_ERROR


class ResultNormalizer:
    def __init__(
        self,
        *,
        column_deriver: Optional[ColumnDeriver] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.column_deriver = column_deriver or ColumnDeriver(logger=self.logger)

    def normalize(
        self,
        outcome: Any,
        row_limit: Optional[int] = None,
        column_config: Optional[str] = None,
    ) -> DisplayState:
        """
        Map a raw boundary outcome to exactly one display state. Never raises.

        A result whose size reaches ``row_limit`` is flagged as truncated even when
        it holds exactly that many records, since the boundary reports no true total.
        """
        limit = self._resolve_row_limit(row_limit)
        try:
            parsed = parse_query_outcome(outcome)
        except InvalidQueryOutcomeError as exc:
            self.logger.warning("Discarding unrecognised query outcome: %s", exc)
            return ErrorState(message=UNKNOWN_TRANSPORT_ERROR, kind=DEFAULT_ERROR_KIND)

        if isinstance(parsed, TransportFailure):
            message = extract_failure_message(parsed)
            self.logger.warning("Query boundary failed (status=%s): %s", parsed.status, message)
            return ErrorState(message=message, kind=DEFAULT_ERROR_KIND)

        return self._normalize_envelope(parsed, limit, column_config)

    def _resolve_row_limit(self, row_limit: Optional[int]) -> int:
        if row_limit is None:
            return settings.DEFAULT_ROW_LIMIT
        if isinstance(row_limit, bool) or not isinstance(row_limit, int) or row_limit <= 0:
            self.logger.warning(
                "Invalid row limit %r; using default of %s.", row_limit, settings.DEFAULT_ROW_LIMIT
            )
            return settings.DEFAULT_ROW_LIMIT
        return row_limit

    def _normalize_envelope(
        self,
        envelope: QueryResultEnvelope,
        row_limit: int,
        column_config: Optional[str],
    ) -> DisplayState:
        if not envelope.success:
            error = ErrorState(
                message=envelope.error_message or UNKNOWN_QUERY_ERROR,
                kind=envelope.error_type or DEFAULT_ERROR_KIND,
            )
            self.logger.info("Query reported failure [%s]: %s", error.kind, error.message)
            return error

        data = envelope.data or []
        # A non-zero row_count with no data is still empty.
        if not data:
            return EmptyState()

        rows = data[:row_limit]
        columns = self.column_deriver.derive(column_config, data)
        return PopulatedState(rows=rows, columns=columns, truncated=len(data) >= row_limit)


def normalize_result(
    outcome: Any,
    row_limit: Optional[int] = None,
    column_config: Optional[str] = None,
    *,
    logger: Optional[logging.Logger] = None,
) -> DisplayState:
    return ResultNormalizer(logger=logger).normalize(outcome, row_limit, column_config)
