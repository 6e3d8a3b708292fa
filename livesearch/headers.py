"""Protocol headers for Live Search requests."""

from livesearch.models import StoreIdentity


def build_headers(identity: StoreIdentity, request_id: str) -> dict[str, str]:
    """Map a store identity to the headers every Live Search request carries.

    Args:
        identity: Store scope and credentials for the request.
        request_id: Correlation identifier sent as ``X-Request-Id``.

    Returns:
        Header mapping for the HTTP request.
    """
    return {
        "Magento-Environment-Id": identity.environment_id,
        "Magento-Website-Code": identity.website_code,
        "Magento-Store-Code": identity.store_code,
        "Magento-Store-View-Code": identity.store_view_code,
        "X-Api-Key": identity.api_key,
        "X-Request-Id": request_id,
        "Content-Type": "application/json",
        "Magento-Customer-Group": identity.customer_group,
    }
