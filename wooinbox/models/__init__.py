"""
wooinbox data models.

This package contains all Pydantic models for the WooCommerce inbox sidebar.
"""

# Order models
from wooinbox.models.order import (
    Address,
    LineItem,
    MetaData,
    Order,
    OrderNote,
    OrderStatus,
    Product,
)

# Search models
from wooinbox.models.search import (
    ConnectionCheck,
    EnrichedOrder,
    OrderSearchResponse,
    SearchResultSet,
    SearchType,
)

# Tracking models
from wooinbox.models.tracking import Carrier, TrackingRecord, TrackingStatus

__all__ = [
    # Order models
    "Address",
    "LineItem",
    "MetaData",
    "Order",
    "OrderNote",
    "OrderStatus",
    "Product",
    # Search models
    "ConnectionCheck",
    "EnrichedOrder",
    "OrderSearchResponse",
    "SearchResultSet",
    "SearchType",
    # Tracking models
    "Carrier",
    "TrackingRecord",
    "TrackingStatus",
]
