"""Search telemetry sinks.

The client reports every search twice: once before the request is sent and
once after the (normalized) response arrives, followed by a single view
event. Reporting is best-effort and never changes the search result.

Sinks:
- NullTelemetrySink: discards everything (client default)
- StorefrontTelemetrySink: forwards to a storefront context store and an
  optional storefront event bus
"""

from abc import ABC, abstractmethod
from typing import Any, Protocol

import structlog

logger = structlog.get_logger()

# Identifies this search widget instance to the context store and event bus.
SEARCH_UNIT_ID = "livesearch-plp"


class TelemetrySink(ABC):
    """Receiver of search lifecycle notifications."""

    @abstractmethod
    def search_requested(
        self,
        unit_id: str,
        search_id: str,
        phrase: str | None,
        filters: list[dict[str, Any]],
        page_size: int,
        current_page: int,
        sort: list[dict[str, Any]],
    ) -> None:
        """Report the input of a search about to be sent.

        Args:
            unit_id: Search unit identifier.
            search_id: Identifier shared with the matching response report.
            phrase: Search phrase, if any.
            filters: Effective filters as sent to the service.
            page_size: Requested page size.
            current_page: Requested page.
            sort: Sort clauses as sent to the service.
        """

    @abstractmethod
    def search_responded(
        self,
        unit_id: str,
        search_id: str,
        product_search: dict[str, Any] | None,
    ) -> None:
        """Report the normalized ``productSearch`` result of a search."""

    @abstractmethod
    def results_viewed(self, unit_id: str, category_search: bool) -> None:
        """Report that category or search results are being displayed."""


class NullTelemetrySink(TelemetrySink):
    """Sink that ignores every notification."""

    def search_requested(
        self,
        unit_id: str,
        search_id: str,
        phrase: str | None,
        filters: list[dict[str, Any]],
        page_size: int,
        current_page: int,
        sort: list[dict[str, Any]],
    ) -> None:
        pass

    def search_responded(
        self,
        unit_id: str,
        search_id: str,
        product_search: dict[str, Any] | None,
    ) -> None:
        pass

    def results_viewed(self, unit_id: str, category_search: bool) -> None:
        pass


class SearchContextStore(Protocol):
    """Storefront data layer holding search input and result context."""

    def update_search_input_ctx(
        self,
        unit_id: str,
        request_id: str,
        phrase: str | None,
        filters: list[dict[str, Any]],
        page_size: int,
        current_page: int,
        sort: list[dict[str, Any]],
    ) -> None: ...

    def update_search_results_ctx(
        self,
        unit_id: str,
        request_id: str,
        product_search: dict[str, Any] | None,
    ) -> None: ...


class StorefrontTelemetrySink(TelemetrySink):
    """Forward search telemetry to the storefront data layer.

    The event bus is optional and may expose only some of the event
    methods (``search_request_sent``, ``search_response_received``,
    ``category_results_view``, ``search_results_view``). A missing bus or
    a missing method is skipped without error. Events are published even
    when the context store raises; the store error still propagates.
    """

    def __init__(self, context_store: SearchContextStore, event_bus: Any = None) -> None:
        """Initialize the sink.

        Args:
            context_store: Receives search input and result context.
            event_bus: Optional event publisher.
        """
        self.context_store = context_store
        self.event_bus = event_bus

    def _publish(self, event: str, unit_id: str) -> None:
        publish = getattr(self.event_bus, event, None)
        if callable(publish):
            publish(unit_id)
        else:
            logger.debug("Event bus unavailable, skipping event", event_name=event)

    def search_requested(
        self,
        unit_id: str,
        search_id: str,
        phrase: str | None,
        filters: list[dict[str, Any]],
        page_size: int,
        current_page: int,
        sort: list[dict[str, Any]],
    ) -> None:
        try:
            self.context_store.update_search_input_ctx(
                unit_id, search_id, phrase, filters, page_size, current_page, sort
            )
        finally:
            self._publish("search_request_sent", unit_id)

    def search_responded(
        self,
        unit_id: str,
        search_id: str,
        product_search: dict[str, Any] | None,
    ) -> None:
        try:
            self.context_store.update_search_results_ctx(unit_id, search_id, product_search)
        finally:
            self._publish("search_response_received", unit_id)

    def results_viewed(self, unit_id: str, category_search: bool) -> None:
        if category_search:
            self._publish("category_results_view", unit_id)
        else:
            self._publish("search_results_view", unit_id)
