"""Live Search API client.

Async client for the Live Search GraphQL service. Builds request
variables and headers, sends the fixed GraphQL documents, and post-processes
search responses before handing back the decoded ``data`` payload.

Failures to reach the service or to decode its answer raise; a decoded
answer without ``data`` is returned as ``None``.
"""

import copy
from collections.abc import Callable
from typing import Any
from uuid import uuid4

import httpx
import structlog

from livesearch.config import Settings
from livesearch.exceptions import SearchDecodeError, SearchTransportError
from livesearch.facets import normalize_size_facet
from livesearch.filters import assemble_filters
from livesearch.headers import build_headers
from livesearch.models import QueryContext, SearchQuery, StoreIdentity
from livesearch.queries import (
    ATTRIBUTE_METADATA_QUERY,
    PRODUCT_SEARCH_QUERY,
    REFINE_PRODUCT_QUERY,
)
from livesearch.telemetry import SEARCH_UNIT_ID, NullTelemetrySink, TelemetrySink

logger = structlog.get_logger()

IdentifierFactory = Callable[[], str]


def new_identifier() -> str:
    """Generate an opaque random identifier."""
    return str(uuid4())


def _error_message(error: Any) -> str:
    if isinstance(error, dict):
        return error.get("message", str(error))
    return str(error)


class LiveSearchClient:
    """HTTP client for the Live Search GraphQL service.

    Each operation generates its own correlation identifiers, so one client
    can serve any number of concurrent calls. The underlying
    ``httpx.AsyncClient`` is created on first use and released by ``close()``.
    """

    def __init__(
        self,
        api_url: str,
        identity: StoreIdentity,
        sink: TelemetrySink | None = None,
        id_factory: IdentifierFactory = new_identifier,
        timeout: float = 30.0,
    ) -> None:
        """Initialize the client.

        Args:
            api_url: Live Search GraphQL endpoint.
            identity: Store scope and credentials sent with every request.
            sink: Receiver of search telemetry; defaults to a no-op sink.
            id_factory: Source of request and search identifiers.
            timeout: Transport timeout in seconds.
        """
        self.api_url = api_url
        self.identity = identity
        self.sink = sink or NullTelemetrySink()
        self.id_factory = id_factory
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        sink: TelemetrySink | None = None,
    ) -> "LiveSearchClient":
        """Build a client from environment settings."""
        settings = settings or Settings()
        return cls(
            api_url=settings.api_url,
            identity=settings.store_identity(),
            sink=sink,
            timeout=settings.request_timeout,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "LiveSearchClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def _headers(self, request_id: str, context: QueryContext | None) -> dict[str, str]:
        customer_group = context.customer_group if context is not None else ""
        identity = self.identity.model_copy(update={"customer_group": customer_group})
        return build_headers(identity, request_id)

    def _notify(self, hook: str, *args: Any) -> None:
        """Call a telemetry hook; sink failures never fail the search.

        Callers pass copies of request and response data so a sink cannot
        alter what is sent or returned.
        """
        try:
            getattr(self.sink, hook)(*args)
        except Exception:
            logger.warning("Telemetry sink call failed", hook=hook, exc_info=True)

    async def _post(
        self,
        operation: str,
        document: str,
        headers: dict[str, str],
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any] | None:
        """Send a GraphQL document and return the ``data`` field.

        Args:
            operation: Operation name, for logs and errors.
            document: GraphQL document text.
            headers: Request headers.
            variables: GraphQL variables; omitted from the body when None.

        Returns:
            The ``data`` portion of the response, or None when absent.

        Raises:
            SearchTransportError: If the request could not be completed.
            SearchDecodeError: If the response body is not valid JSON.
        """
        client = await self._get_client()

        payload: dict[str, Any] = {"query": document}
        if variables is not None:
            payload["variables"] = variables

        logger.debug(
            "Sending GraphQL request",
            operation=operation,
            request_id=headers.get("X-Request-Id"),
        )

        try:
            response = await client.request(
                method="POST",
                url=self.api_url,
                json=payload,
                headers=headers,
            )
        except httpx.RequestError as e:
            logger.error(
                "GraphQL request failed",
                operation=operation,
                api_url=self.api_url,
                error=str(e),
            )
            raise SearchTransportError(operation, self.api_url, str(e)) from e

        try:
            result = response.json()
        except ValueError as e:
            logger.error(
                "GraphQL response is not JSON",
                operation=operation,
                status_code=response.status_code,
            )
            raise SearchDecodeError(operation, response.status_code, str(e)) from e

        if not isinstance(result, dict):
            logger.warning("GraphQL response has no data", operation=operation)
            return None

        if result.get("errors"):
            logger.warning(
                "GraphQL response contains errors",
                operation=operation,
                errors=[_error_message(error) for error in result["errors"]],
            )

        return result.get("data")

    # =========================================================================
    # Product Search
    # =========================================================================

    async def search_products(
        self,
        query: SearchQuery,
        request_id: str | None = None,
    ) -> dict[str, Any] | None:
        """Search or browse the catalog.

        Adds the default visibility and in-stock filters, reports the search
        to the telemetry sink, sends the request, orders the size facet and
        reports the result.

        Args:
            query: Search parameters.
            request_id: Correlation identifier; generated when omitted.

        Returns:
            The response ``data`` (holding ``productSearch``), or None.

        Raises:
            SearchTransportError: If the service could not be reached.
            SearchDecodeError: If the response body is not valid JSON.
        """
        if request_id is None:
            request_id = self.id_factory()
        search_id = self.id_factory()

        filters = [
            current.to_variables()
            for current in assemble_filters(
                query.filter, query.category_search, query.display_out_of_stock
            )
        ]
        sort = [clause.to_variables() for clause in query.sort]

        variables: dict[str, Any] = {
            "phrase": query.phrase or "",
            "pageSize": query.page_size,
            "currentPage": query.current_page,
            "filter": filters,
            "sort": sort,
        }
        if query.context is not None:
            variables["context"] = query.context.to_variables()

        headers = self._headers(request_id, query.context)

        logger.info(
            "Searching products",
            phrase=query.phrase,
            category_search=query.category_search,
            search_id=search_id,
            request_id=request_id,
        )

        self._notify(
            "search_requested",
            SEARCH_UNIT_ID,
            search_id,
            query.phrase,
            copy.deepcopy(filters),
            query.page_size,
            query.current_page,
            copy.deepcopy(sort),
        )

        data = await self._post("productSearch", PRODUCT_SEARCH_QUERY, headers, variables)

        product_search = data.get("productSearch") if isinstance(data, dict) else None
        if isinstance(product_search, dict) and isinstance(product_search.get("facets"), list):
            product_search["facets"] = list(normalize_size_facet(product_search["facets"]))

        logger.info(
            "Search completed",
            search_id=search_id,
            total_count=product_search.get("total_count") if isinstance(product_search, dict) else None,
        )

        self._notify(
            "search_responded", SEARCH_UNIT_ID, search_id, copy.deepcopy(product_search)
        )
        self._notify("results_viewed", SEARCH_UNIT_ID, query.category_search)

        return data

    # =========================================================================
    # Attribute Metadata
    # =========================================================================

    async def get_attribute_metadata(
        self,
        request_id: str | None = None,
    ) -> dict[str, Any] | None:
        """Fetch sortable and filterable attribute metadata.

        Args:
            request_id: Correlation identifier; generated when omitted.

        Returns:
            The response ``data`` (holding ``attributeMetadata``), or None.
        """
        if request_id is None:
            request_id = self.id_factory()
        headers = self._headers(request_id, None)
        return await self._post("attributeMetadata", ATTRIBUTE_METADATA_QUERY, headers)

    # =========================================================================
    # Product Refinement
    # =========================================================================

    async def refine_product(
        self,
        option_ids: list[str],
        sku: str,
        context: QueryContext | None = None,
        request_id: str | None = None,
    ) -> dict[str, Any] | None:
        """Resolve a configurable product for the selected option values.

        Args:
            option_ids: Selected option value IDs.
            sku: Parent product SKU.
            context: Shopper context; supplies the customer group header.
            request_id: Correlation identifier; generated when omitted.

        Returns:
            The response ``data`` (holding ``refineProduct``), or None.
        """
        if request_id is None:
            request_id = self.id_factory()
        headers = self._headers(request_id, context)
        variables = {"optionIds": list(option_ids), "sku": sku}
        return await self._post("refineProduct", REFINE_PRODUCT_QUERY, headers, variables)
