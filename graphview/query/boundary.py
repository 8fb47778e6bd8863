import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, Protocol, Union

from graphview.contracts.query import TransportFailure

QueryFunction = Callable[[dict[str, Any]], Union[Any, Awaitable[Any]]]


class IQueryBoundary(Protocol):
    async def __call__(self, params: dict[str, Any]) -> Any: ...


class CallableQueryBoundary:
    """
    Adapts a plain sync or async query function to ``IQueryBoundary``.

    Exceptions raised by the function are returned as ``TransportFailure``
    outcomes instead of propagating into the viewer.
    """

    def __init__(self, func: QueryFunction, *, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self._func = func
        self.calls: list[dict[str, Any]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def __call__(self, params: dict[str, Any]) -> Any:
        self.calls.append(dict(params))
        try:
            result = self._func(params)
            if inspect.isawaitable(result):
                result = await result
        except Exception as exc:
            self.logger.warning("Query function raised %s: %s", exc.__class__.__name__, exc)
            return TransportFailure.from_exception(exc)
        return result
