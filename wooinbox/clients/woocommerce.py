"""
WooCommerce REST API client.

Thin requests-based wrapper around the wc/v3 endpoints the inbox sidebar
needs. Responses are parsed into pydantic models; failures are mapped onto
the wooinbox error taxonomy.
"""

import logging
from typing import Any

import requests
from pydantic import TypeAdapter, ValidationError

from wooinbox.clients.base import OrderSource
from wooinbox.config import WooCommerceSettings
from wooinbox.errors import NotFoundError, TransportError
from wooinbox.models.order import Order, OrderNote, Product
from wooinbox.models.search import ConnectionCheck

logger = logging.getLogger(__name__)

_orders_adapter = TypeAdapter(list[Order])
_notes_adapter = TypeAdapter(list[OrderNote])
_products_adapter = TypeAdapter(list[Product])


class WooCommerceClient:
    """
    OrderSource backed by the WooCommerce REST API.

    Usage:
        settings = WooCommerceSettings.from_env()
        client = WooCommerceClient(settings)
        order = client.get_order(1042)
    """

    def __init__(
        self,
        settings: WooCommerceSettings,
        session: requests.Session | None = None,
    ):
        self.settings = settings
        self.session = session or requests.Session()
        self.session.auth = (settings.consumer_key, settings.consumer_secret)
        self.session.headers.update({"Content-Type": "application/json"})

    def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """
        Issue a GET request and return decoded JSON.

        Raises:
            NotFoundError: On HTTP 404
            TransportError: On network errors, other non-2xx responses or
                undecodable bodies
        """
        url = f"{self.settings.api_base_url}/{path.lstrip('/')}"
        try:
            response = self.session.get(
                url, params=params, timeout=self.settings.timeout
            )
        except requests.RequestException as e:
            raise TransportError(f"Request to {path} failed: {e}") from e

        if response.status_code == 404:
            raise NotFoundError("Resource", path)
        if not response.ok:
            raise TransportError(
                response.reason or "Unexpected response", response.status_code
            )

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                f"Invalid JSON from {path}", response.status_code
            ) from e

    def _parse(self, adapter: TypeAdapter, data: Any, path: str) -> Any:
        try:
            return adapter.validate_python(data)
        except ValidationError as e:
            raise TransportError(f"Unexpected payload from {path}: {e}") from e

    def list_orders(
        self, filters: dict[str, Any], page: int, per_page: int
    ) -> list[Order]:
        params = {**filters, "page": page, "per_page": per_page}
        data = self._get("orders", params=params)
        return self._parse(_orders_adapter, data, "orders")

    def get_order(self, order_id: int) -> Order:
        try:
            data = self._get(f"orders/{order_id}")
        except NotFoundError:
            raise NotFoundError("Order", order_id) from None
        if not data or not isinstance(data, dict) or not data.get("id"):
            raise NotFoundError("Order", order_id)
        try:
            return Order.model_validate(data)
        except ValidationError as e:
            raise TransportError(f"Unexpected payload for order {order_id}: {e}") from e

    def list_order_notes(self, order_id: int) -> list[OrderNote]:
        try:
            data = self._get(f"orders/{order_id}/notes")
        except NotFoundError:
            raise NotFoundError("Order", order_id) from None
        return self._parse(_notes_adapter, data, f"orders/{order_id}/notes")

    def list_products(self, limit: int) -> list[Product]:
        data = self._get("products", params={"per_page": limit})
        return self._parse(_products_adapter, data, "products")

    def test_connection(self) -> ConnectionCheck:
        """Probe the store API with a small product listing."""
        return check_connection(self)


def check_connection(source: OrderSource) -> ConnectionCheck:
    """
    Probe an order source with a one-product listing.

    Returns:
        ConnectionCheck; transport failures are reported in-band
    """
    try:
        products = source.list_products(limit=1)
    except (TransportError, NotFoundError) as e:
        logger.warning("WooCommerce connection check failed: %s", e)
        return ConnectionCheck(
            success=False,
            message=f"WooCommerce API connection failed: {e}",
        )

    return ConnectionCheck(
        success=True,
        message="WooCommerce API connection successful",
        product_count=len(products),
    )
