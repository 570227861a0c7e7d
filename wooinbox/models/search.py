from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from wooinbox.models.order import Order, OrderNote
from wooinbox.models.tracking import TrackingRecord


class SearchType(StrEnum):
    """How a search term was interpreted"""

    EMAIL = "email"
    ORDER_ID = "order_id"


class SearchResultSet(BaseModel):
    """Orders matching one search, newest first."""

    model_config = ConfigDict(frozen=True)

    query: str = Field(description="Normalized search term")
    search_type: SearchType = Field(description="Search interpretation")
    orders: list[Order] = Field(
        default_factory=list, description="Matching orders, newest first"
    )
    pages_fetched: int = Field(default=0, description="Upstream pages requested")

    @property
    def count(self) -> int:
        return len(self.orders)

    @property
    def is_empty(self) -> bool:
        return not self.orders


class EnrichedOrder(BaseModel):
    """Order detail view with derived tracking information."""

    model_config = ConfigDict(frozen=True)

    order: Order = Field(description="Order snapshot")
    tracking: TrackingRecord = Field(description="Derived tracking information")
    notes: list[OrderNote] = Field(
        default_factory=list, description="Order notes used for extraction"
    )
    notes_available: bool = Field(
        default=True, description="False when note retrieval failed"
    )


class ConnectionCheck(BaseModel):
    """Result of a store connectivity check."""

    success: bool = Field(description="Whether the store API responded")
    message: str = Field(description="Human-readable result")
    product_count: int | None = Field(
        default=None, description="Products returned by the probe request"
    )


# API Response Models


class OrderSearchResponse(BaseModel):
    """Response for an order search with incremental reveal."""

    query: str = Field(description="Normalized search term")
    search_type: SearchType = Field(description="Search interpretation")
    total: int = Field(description="Total matching orders")
    visible_count: int = Field(description="Orders included in this response")
    has_more: bool = Field(description="Whether more orders can be revealed")
    orders: list[Order] = Field(description="Revealed orders, newest first")
