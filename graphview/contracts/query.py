from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import ConfigDict, Field, ValidationError, field_validator

from graphview.config import settings
from graphview.errors.application_errors import (
    ConfigurationIncompleteError,
    InvalidQueryOutcomeError,
)

from .base import _Base

Row = dict[str, Any]

# Display names used when reporting missing configuration, in reporting order.
REQUIRED_INPUTS: tuple[tuple[str, str], ...] = (
    ("subject_id", "Record ID"),
    ("graph_name", "Graph Name"),
    ("root_entity", "Root DMO"),
    ("select_fields", "Select Fields"),
)


class QueryInputs(_Base):
    model_config = ConfigDict(frozen=True)

    subject_id: Optional[str] = None
    graph_name: Optional[str] = None
    root_entity: Optional[str] = None
    select_fields: tuple[str, ...] = ()
    column_config: Optional[str] = None
    row_limit: int = Field(default_factory=lambda: settings.DEFAULT_ROW_LIMIT, gt=0)

    @field_validator("subject_id", "graph_name", "root_entity", "column_config", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator("select_fields", mode="before")
    @classmethod
    def _split_fields(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            value = value.split(",")
        return tuple(item.strip() for item in value if item and item.strip())

    def missing_fields(self) -> list[str]:
        return [label for name, label in REQUIRED_INPUTS if not getattr(self, name)]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    def cache_key(self) -> tuple:
        """Inputs the query boundary is keyed on; presentation knobs are excluded."""
        return (self.subject_id, self.graph_name, self.select_fields, self.root_entity)

    def query_params(self) -> dict[str, Any]:
        missing = self.missing_fields()
        if missing:
            raise ConfigurationIncompleteError(missing)
        return {
            "subjectId": self.subject_id,
            "graphName": self.graph_name,
            "selectFields": ", ".join(self.select_fields),
            "rootEntity": self.root_entity,
        }

    def with_changes(self, **changes: Any) -> "QueryInputs":
        return QueryInputs.model_validate({**self.model_dump(), **changes})


class ViewerConfig(_Base):
    title: str = Field(default_factory=lambda: settings.DEFAULT_TITLE)
    inputs: QueryInputs = Field(default_factory=QueryInputs)


class QueryResultEnvelope(_Base):
    success: bool
    data: Optional[list[Row]] = None
    row_count: Optional[int] = None
    error_message: Optional[str] = None
    error_type: Optional[str] = None


class PageError(_Base):
    message: Optional[str] = None


class TransportFailureBody(_Base):
    message: Optional[str] = None
    page_errors: list[PageError] = Field(default_factory=list)


class TransportFailure(_Base):
    body: Optional[TransportFailureBody] = None
    message: Optional[str] = None
    status: Optional[int] = None
    status_text: Optional[str] = None
    ok: Optional[bool] = None

    @field_validator("body", mode="before")
    @classmethod
    def _coerce_text_body(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"message": value}
        return value

    @classmethod
    def from_exception(cls, exc: BaseException) -> "TransportFailure":
        body = getattr(exc, "body", None)
        status = getattr(exc, "status", None)
        message = str(exc) or exc.__class__.__name__
        status = status if isinstance(status, int) else None
        try:
            return cls.model_validate(
                {
                    "body": body if isinstance(body, (Mapping, str)) else None,
                    "message": message,
                    "status": status,
                }
            )
        except ValidationError:
            return cls(message=message, status=status)


QueryOutcome = Union[QueryResultEnvelope, TransportFailure]


def parse_query_outcome(raw: Any) -> QueryOutcome:
    """
    Classify whatever the query boundary produced.

    Mappings carrying a ``success`` key are result envelopes, any other mapping
    is a transport failure, and exceptions become transport failures carrying
    their message.
    """
    if isinstance(raw, (QueryResultEnvelope, TransportFailure)):
        return raw
    if isinstance(raw, BaseException):
        return TransportFailure.from_exception(raw)
    if not isinstance(raw, Mapping):
        raise InvalidQueryOutcomeError(
            f"Unsupported query outcome of type {type(raw).__name__}."
        )
    model = QueryResultEnvelope if "success" in raw else TransportFailure
    try:
        return model.model_validate(dict(raw))
    except ValidationError as exc:
        raise InvalidQueryOutcomeError(f"Malformed {model.__name__}: {exc}") from exc
