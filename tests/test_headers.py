"""Tests for protocol header construction."""

from livesearch.headers import build_headers
from livesearch.models import StoreIdentity


class TestBuildHeaders:
    """Tests for build_headers."""

    def test_maps_identity_to_headers(self, identity):
        """Every identity field lands in its protocol header."""
        headers = build_headers(identity, "req-1")

        assert headers == {
            "Magento-Environment-Id": "env-123",
            "Magento-Website-Code": "base",
            "Magento-Store-Code": "main_website_store",
            "Magento-Store-View-Code": "default",
            "X-Api-Key": "search_gql",
            "X-Request-Id": "req-1",
            "Content-Type": "application/json",
            "Magento-Customer-Group": "",
        }

    def test_customer_group_header(self, identity):
        """Customer group is passed through verbatim."""
        scoped = identity.model_copy(update={"customer_group": "b6589fc6ab0dc82cf12099d1c2d40ab994e8410c"})

        headers = build_headers(scoped, "req-2")

        assert headers["Magento-Customer-Group"] == "b6589fc6ab0dc82cf12099d1c2d40ab994e8410c"

    def test_identity_is_not_modified(self):
        """Building headers leaves the identity untouched."""
        identity = StoreIdentity(
            environment_id="e",
            website_code="w",
            store_code="s",
            store_view_code="v",
            api_key="k",
        )

        build_headers(identity, "req-3")

        assert identity.customer_group == ""
