"""Client configuration.

Loads settings from environment variables with sensible defaults and
configures structured logging.
"""

import logging
import sys

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from livesearch.models import StoreIdentity


class Settings(BaseSettings):
    """Live Search client settings loaded from environment variables."""

    # Service
    api_url: str = Field(
        default="https://catalog-service.adobe.io/graphql",
        description="Live Search GraphQL endpoint",
    )
    request_timeout: float = Field(
        default=30.0,
        description="Transport timeout in seconds",
    )

    # Store identity
    environment_id: str = ""
    website_code: str = "base"
    store_code: str = "main_website_store"
    store_view_code: str = "default"
    api_key: str = "search_gql"

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="LIVESEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def store_identity(self) -> StoreIdentity:
        """Build the store identity described by these settings."""
        return StoreIdentity(
            environment_id=self.environment_id,
            website_code=self.website_code,
            store_code=self.store_code,
            store_view_code=self.store_view_code,
            api_key=self.api_key,
        )


def configure_logging(level: str = "INFO") -> None:
    """Configure stdlib logging and structlog for JSON output on stderr.

    Args:
        level: Log level name (e.g. "DEBUG", "INFO").
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(message)s",
        stream=sys.stderr,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
