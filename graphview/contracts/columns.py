from enum import Enum

from pydantic import ConfigDict, TypeAdapter, ValidationError

from graphview.errors.application_errors import MalformedColumnConfigError

from .base import _Base


class ColumnType(str, Enum):
    text = "text"
    number = "number"
    boolean = "boolean"
    date = "date"
    date_local = "date-local"
    url = "url"
    email = "email"
    phone = "phone"


class ColumnDefinition(_Base):
    # Extra keys (e.g. typeAttributes, initialWidth) pass through to the table untouched.
    model_config = ConfigDict(extra="allow", frozen=True)

    label: str
    field_name: str
    type: ColumnType = ColumnType.text


ColumnSchema = list[ColumnDefinition]

_column_schema_adapter = TypeAdapter(ColumnSchema)


def parse_column_config(raw: str) -> ColumnSchema:
    """
    Parse a serialized column configuration (a JSON array of
    ``{"label", "fieldName", "type"}`` objects).

    Raises MalformedColumnConfigError when the payload is not valid JSON or does
    not match the column shape.
    """
    try:
        return _column_schema_adapter.validate_json(raw)
    except ValidationError as exc:
        raise MalformedColumnConfigError(f"Invalid column configuration JSON: {exc}") from exc


def dump_columns(columns: ColumnSchema) -> list[dict]:
    # Keys the configuration left out (such as a defaulted type) stay out.
    return [column.model_dump(by_alias=True, mode="json", exclude_unset=True) for column in columns]
