"""Store API clients."""

from wooinbox.clients.base import OrderSource
from wooinbox.clients.woocommerce import WooCommerceClient, check_connection

__all__ = [
    "OrderSource",
    "WooCommerceClient",
    "check_connection",
]
