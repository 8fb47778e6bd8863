import logging
from typing import Callable, Hashable, Optional

from graphview.config import settings
from graphview.contracts.query import QueryInputs

FetchRequestHandler = Callable[[QueryInputs], None]
EligibilityListener = Callable[[bool], None]


class QueryTrigger:
    """
    Decides when the query boundary has to run again.

    ``update`` tracks the boundary-facing inputs and requests a fetch only when
    they are complete and differ from the last fetched key. ``invalidate`` forces
    one new fetch for unchanged inputs, reporting an ineligible transition
    followed by an eligible one to subscribers.
    """

    def __init__(
        self,
        on_fetch: FetchRequestHandler,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self._on_fetch = on_fetch
        self._listeners: list[EligibilityListener] = []
        self._inputs = QueryInputs()
        self._eligible = False
        self._fetched_key: Optional[Hashable] = None
        self._suspended = False
        self.fetch_count = 0

    @staticmethod
    def is_eligible(inputs: QueryInputs) -> bool:
        return inputs.is_complete

    @staticmethod
    def missing_fields(inputs: QueryInputs) -> list[str]:
        return inputs.missing_fields()

    @staticmethod
    def configuration_message(inputs: QueryInputs) -> str:
        missing = inputs.missing_fields()
        if not missing:
            return ""
        return f"{settings.CONFIG_MESSAGE_PREFIX} Missing: {', '.join(missing)}"

    @property
    def inputs(self) -> QueryInputs:
        return self._inputs

    @property
    def eligible(self) -> bool:
        return self._eligible

    @property
    def suspended(self) -> bool:
        """True only while a forced refresh reports the subject as absent."""
        return self._suspended

    def subscribe(self, listener: EligibilityListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def update(self, inputs: QueryInputs) -> bool:
        """Track new inputs. Returns True when a fetch was requested."""
        self._inputs = inputs
        eligible = self.is_eligible(inputs)
        self._set_eligible(eligible)
        if not eligible:
            self._fetched_key = None
            return False
        if inputs.cache_key() == self._fetched_key:
            return False
        self._request_fetch(inputs)
        return True

    def invalidate(self) -> bool:
        """Force a refetch of the current inputs. Returns False when they are incomplete."""
        inputs = self._inputs
        if not self.is_eligible(inputs):
            self.logger.debug("Ignoring refresh; query inputs are incomplete.")
            return False
        self._suspended = True
        try:
            self._set_eligible(False)
        finally:
            self._suspended = False
        self._fetched_key = None
        self._set_eligible(True)
        self._request_fetch(inputs)
        return True

    def _set_eligible(self, eligible: bool) -> None:
        if eligible == self._eligible:
            return
        self._eligible = eligible
        for listener in list(self._listeners):
            listener(eligible)

    def _request_fetch(self, inputs: QueryInputs) -> None:
        self.logger.debug(
            "Requesting query for %s/%s (subject=%s).",
            inputs.graph_name,
            inputs.root_entity,
            inputs.subject_id,
        )
        self._on_fetch(inputs)
        # Recorded only once the handler accepted the request.
        self._fetched_key = inputs.cache_key()
        self.fetch_count += 1
