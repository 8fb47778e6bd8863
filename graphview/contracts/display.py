from typing import Annotated, Literal, Union

from pydantic import ConfigDict, Field

from .base import _Base
from .columns import ColumnDefinition
from .query import Row


class _State(_Base):
    model_config = ConfigDict(frozen=True)


class UnconfiguredState(_State):
    status: Literal["unconfigured"] = "unconfigured"
    message: str
    missing: list[str] = Field(default_factory=list)


class LoadingState(_State):
    status: Literal["loading"] = "loading"


class ErrorState(_State):
    status: Literal["error"] = "error"
    message: str
    kind: str = "Error"


class EmptyState(_State):
    status: Literal["empty"] = "empty"


class PopulatedState(_State):
    status: Literal["populated"] = "populated"
    rows: list[Row]
    columns: list[ColumnDefinition]
    truncated: bool = False


DisplayState = Annotated[
    Union[UnconfiguredState, LoadingState, ErrorState, EmptyState, PopulatedState],
    Field(discriminator="status"),
]
