import logging
from typing import Optional, Sequence

from graphview.contracts.columns import ColumnDefinition, ColumnSchema, parse_column_config
from graphview.contracts.query import Row
from graphview.errors.application_errors import MalformedColumnConfigError

from .inference import infer_field_type
from .labels import format_field_label


class ColumnDeriver:
    """
    Builds the column schema for a result table.

    An explicit column configuration always wins and is returned as-is, without
    checking it against the rows. A configuration that fails to parse is logged
    and ignored, and columns are then generated from the first row: its keys in
    their natural order, labelled by ``format_field_label`` and typed by
    ``infer_field_type``. Later rows are never consulted for typing.
    """

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger(__name__)

    def derive(self, column_config: Optional[str], rows: Sequence[Row]) -> ColumnSchema:
        configured = self._configured_columns(column_config)
        if configured is not None:
            return configured
        return self.columns_from_rows(rows)

    def _configured_columns(self, column_config: Optional[str]) -> Optional[ColumnSchema]:
        if not column_config or not column_config.strip():
            return None
        try:
            return parse_column_config(column_config)
        except MalformedColumnConfigError as exc:
            self.logger.error("%s; falling back to generated columns.", exc)
            return None

    @staticmethod
    def columns_from_rows(rows: Sequence[Row]) -> ColumnSchema:
        if not rows:
            return []
        first_row = rows[0]
        return [
            ColumnDefinition(
                label=format_field_label(field_name),
                field_name=field_name,
                type=infer_field_type(value),
            )
            for field_name, value in first_row.items()
        ]


def derive_columns(
    column_config: Optional[str],
    rows: Sequence[Row],
    *,
    logger: Optional[logging.Logger] = None,
) -> ColumnSchema:
    return ColumnDeriver(logger=logger).derive(column_config, rows)
