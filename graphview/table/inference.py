import numbers
import re
from typing import Any

from graphview.contracts.columns import ColumnType

_DATE_PREFIX_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_URL_PREFIXES = ("http://", "https://")


def infer_field_type(value: Any) -> ColumnType:
    """
    Pick a table column type for a single sample value.

    Only native numbers map to ``number``; numeric-looking strings stay ``text``.
    """
    if value is None:
        return ColumnType.text
    # bool is an int subclass, so it has to be ruled out before the numeric check.
    if isinstance(value, bool):
        return ColumnType.boolean
    if isinstance(value, numbers.Number):
        return ColumnType.number
    if isinstance(value, str):
        if _DATE_PREFIX_PATTERN.match(value):
            return ColumnType.date
        if value.startswith(_URL_PREFIXES):
            return ColumnType.url
    return ColumnType.text
