"""Order source interface used by the search and detail services."""

from typing import Any, Protocol

from wooinbox.models.order import Order, OrderNote, Product


class OrderSource(Protocol):
    """
    Read access to a store's orders.

    Implementations raise TransportError for network/HTTP failures and
    NotFoundError when a single order does not exist.
    """

    def list_orders(
        self, filters: dict[str, Any], page: int, per_page: int
    ) -> list[Order]: ...

    def get_order(self, order_id: int) -> Order: ...

    def list_order_notes(self, order_id: int) -> list[OrderNote]: ...

    def list_products(self, limit: int) -> list[Product]: ...
