"""
Store configuration.

Settings are passed explicitly to the client and services; nothing reads
the environment after startup.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from wooinbox.errors import ConfigurationError

# Upstream pagination limits for email search
ORDERS_PER_PAGE = 100
MAX_SEARCH_PAGES = 5

# Orders revealed per "load more" step
DEFAULT_PAGE_SIZE = 5

DEFAULT_API_VERSION = "wc/v3"
DEFAULT_TIMEOUT = 10


class WooCommerceSettings(BaseModel):
    """Connection settings for a WooCommerce store."""

    site_url: str = Field(description="Store base URL, e.g. https://shop.example.com")
    consumer_key: str = Field(description="REST API consumer key")
    consumer_secret: str = Field(description="REST API consumer secret")
    api_version: str = Field(
        default=DEFAULT_API_VERSION, description="REST API namespace"
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds"
    )

    @property
    def base_url(self) -> str:
        return self.site_url.rstrip("/")

    @property
    def api_base_url(self) -> str:
        return f"{self.base_url}/wp-json/{self.api_version.strip('/')}"

    @classmethod
    def from_env(cls) -> "WooCommerceSettings":
        """
        Build settings from environment variables (and a .env file if present).

        Raises:
            ConfigurationError: If the site URL or credentials are missing
        """
        load_dotenv()

        values = {
            "site_url": os.getenv("WOOCOMMERCE_SITE_URL", "").strip(),
            "consumer_key": os.getenv("WOOCOMMERCE_CONSUMER_KEY", "").strip(),
            "consumer_secret": os.getenv("WOOCOMMERCE_CONSUMER_SECRET", "").strip(),
        }
        missing = [
            f"WOOCOMMERCE_{name.upper()}" for name, value in values.items() if not value
        ]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        timeout = os.getenv("WOOCOMMERCE_TIMEOUT")
        try:
            return cls(
                **values,
                api_version=os.getenv("WOOCOMMERCE_API_VERSION", DEFAULT_API_VERSION),
                timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid store configuration: {e}") from e
