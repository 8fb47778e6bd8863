"""
Controller backing the data graph table component.

Holds the configuration inputs, asks the query trigger whether the boundary has
to run, feeds boundary outcomes through the result normalizer, and exposes the
read-only values the presentation layer renders.
"""

import asyncio
import logging
from typing import Any, Optional

from pydantic import ValidationError

from graphview.contracts.columns import ColumnSchema, dump_columns
from graphview.contracts.display import (
    DisplayState,
    EmptyState,
    ErrorState,
    LoadingState,
    PopulatedState,
    UnconfiguredState,
)
from graphview.contracts.query import QueryInputs, Row, ViewerConfig
from graphview.query.boundary import IQueryBoundary
from graphview.query.trigger import QueryTrigger
from graphview.table.normalizer import ResultNormalizer

_NOT_RECEIVED = object()


class DataGraphViewer:
    def __init__(
        self,
        config: Optional[ViewerConfig] = None,
        *,
        boundary: IQueryBoundary,
        normalizer: Optional[ResultNormalizer] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.config = config or ViewerConfig()
        self._boundary = boundary
        self._normalizer = normalizer or ResultNormalizer(logger=self.logger)
        self._trigger = QueryTrigger(self._schedule_fetch, logger=self.logger)
        self._state: DisplayState = LoadingState()
        self._last_outcome: Any = _NOT_RECEIVED
        self._tasks: set[asyncio.Task] = set()
        self._pending: Optional[QueryInputs] = None
        self._connected = False

    @property
    def trigger(self) -> QueryTrigger:
        return self._trigger

    @property
    def inputs(self) -> QueryInputs:
        return self.config.inputs

    def connect(self) -> None:
        """
        Mount the component and request the first query.

        Without a running event loop the query stays pending until the next
        ``connect`` or ``wait_idle`` call made from inside one.
        """
        self._connected = True
        self._apply_inputs()
        self._start_pending()

    def configure(self, *, title: Optional[str] = None, **changes: Any) -> None:
        """
        Replace configuration inputs and re-evaluate.

        Unknown input names raise TypeError. Values that fail validation are
        logged and the previous inputs are kept.
        """
        unknown = set(changes) - set(QueryInputs.model_fields)
        if unknown:
            raise TypeError(f"Unknown query inputs: {', '.join(sorted(unknown))}")
        update: dict[str, Any] = {}
        if title is not None:
            update["title"] = title
        if changes:
            try:
                update["inputs"] = self.config.inputs.with_changes(**changes)
            except ValidationError as exc:
                self.logger.warning("Rejected query input change %s: %s", sorted(changes), exc)
                if not update:
                    return
        self.config = self.config.model_copy(update=update)
        if self._connected:
            self._apply_inputs()

    def refresh(self) -> bool:
        """Re-run the query for unchanged inputs. Returns False when unconfigured."""
        if not self._connected or not self.has_required_config:
            return False
        self._state = LoadingState()
        return self._trigger.invalidate()

    def receive(self, outcome: Any) -> DisplayState:
        """
        Apply a boundary outcome (envelope, failure payload or exception).

        Outcomes are applied in arrival order; a late response for superseded
        inputs still replaces the state.
        """
        if outcome is None:
            self.logger.debug("Ignoring empty query emission.")
            return self.state
        self._last_outcome = outcome
        self._state = self._normalizer.normalize(
            outcome, self.inputs.row_limit, self.inputs.column_config
        )
        return self.state

    async def wait_idle(self) -> None:
        self._start_pending()
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def _apply_inputs(self) -> None:
        inputs = self.inputs
        if self._trigger.update(inputs) or not inputs.is_complete:
            return
        # Same query key: only presentation knobs changed, so re-derive from the last result.
        if self._last_outcome is not _NOT_RECEIVED and not isinstance(self._state, LoadingState):
            self._state = self._normalizer.normalize(
                self._last_outcome, inputs.row_limit, inputs.column_config
            )

    def _schedule_fetch(self, inputs: QueryInputs) -> None:
        self._state = LoadingState()
        self._pending = inputs
        self._start_pending()

    def _start_pending(self) -> None:
        if self._pending is None:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self.logger.debug("No running event loop; query stays pending.")
            return
        inputs, self._pending = self._pending, None
        task = loop.create_task(self._run_query(inputs))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _effective_inputs(self) -> QueryInputs:
        # A forced refresh briefly reports the subject as absent.
        if self._trigger.suspended:
            return self.inputs.with_changes(subject_id=None)
        return self.inputs

    async def _run_query(self, inputs: QueryInputs) -> None:
        try:
            outcome = await self._boundary(inputs.query_params())
        except Exception as exc:
            self.logger.warning("Query boundary raised %s: %s", exc.__class__.__name__, exc)
            outcome = exc
        self.receive(outcome)

    @property
    def state(self) -> DisplayState:
        inputs = self._effective_inputs()
        if not inputs.is_complete:
            return UnconfiguredState(
                message=QueryTrigger.configuration_message(inputs),
                missing=inputs.missing_fields(),
            )
        return self._state

    @property
    def title(self) -> str:
        return self.config.title

    @property
    def has_required_config(self) -> bool:
        return self._effective_inputs().is_complete

    @property
    def configuration_message(self) -> str:
        return QueryTrigger.configuration_message(self._effective_inputs())

    @property
    def is_loading(self) -> bool:
        return isinstance(self.state, LoadingState)

    @property
    def has_error(self) -> bool:
        return isinstance(self.state, ErrorState)

    @property
    def error_message(self) -> str:
        state = self.state
        return state.message if isinstance(state, ErrorState) else ""

    @property
    def is_empty(self) -> bool:
        return isinstance(self.state, EmptyState)

    @property
    def has_data(self) -> bool:
        return isinstance(self.state, PopulatedState)

    @property
    def rows(self) -> list[Row]:
        state = self.state
        return list(state.rows) if isinstance(state, PopulatedState) else []

    @property
    def columns(self) -> ColumnSchema:
        state = self.state
        return list(state.columns) if isinstance(state, PopulatedState) else []

    @property
    def row_count_message(self) -> str:
        count = len(self.rows)
        limit = self.inputs.row_limit
        if count == limit:
            return f"Showing {count} of potentially more records (limited to {limit})"
        return f"{count} record{'s' if count != 1 else ''} found"

    def snapshot(self) -> dict[str, Any]:
        """Presentation payload with column definitions serialized by alias."""
        return {
            "title": self.title,
            "status": self.state.status,
            "hasRequiredConfig": self.has_required_config,
            "configurationMessage": self.configuration_message,
            "isLoading": self.is_loading,
            "hasError": self.has_error,
            "errorMessage": self.error_message,
            "isEmpty": self.is_empty,
            "rows": self.rows,
            "columns": dump_columns(self.columns),
            "rowCountMessage": self.row_count_message,
        }
