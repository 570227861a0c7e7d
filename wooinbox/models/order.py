from datetime import datetime
from decimal import Decimal
from enum import StrEnum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OrderStatus(StrEnum):
    """WooCommerce order status"""

    PENDING = "pending"  # Awaiting payment
    PROCESSING = "processing"  # Paid, awaiting fulfillment
    ON_HOLD = "on-hold"  # Awaiting action
    COMPLETED = "completed"  # Fulfilled
    CANCELLED = "cancelled"  # Cancelled by admin or customer
    REFUNDED = "refunded"  # Refunded in full
    FAILED = "failed"  # Payment failed
    UNKNOWN = "unknown"  # Status not recognized


class Address(BaseModel):
    """Billing or shipping address"""

    model_config = ConfigDict(extra="ignore")

    first_name: str = Field(default="", description="First name")
    last_name: str = Field(default="", description="Last name")
    company: str = Field(default="", description="Company name")
    address_1: str = Field(default="", description="Address line 1")
    address_2: str = Field(default="", description="Address line 2")
    city: str = Field(default="", description="City")
    state: str = Field(default="", description="State or county code")
    postcode: str = Field(default="", description="Postal code")
    country: str = Field(default="", description="ISO 3166-1 alpha-2 country code")
    email: Optional[str] = Field(default=None, description="Email address")
    phone: Optional[str] = Field(default=None, description="Phone number")


class LineItem(BaseModel):
    """Individual line item in an order"""

    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = Field(default=None, description="Line item identifier")
    name: str = Field(description="Product name")
    product_id: Optional[int] = Field(default=None, description="Product identifier")
    quantity: int = Field(default=1, description="Quantity ordered")
    price: Decimal = Field(default=Decimal("0"), description="Unit price")
    total: Decimal = Field(default=Decimal("0"), description="Line total")
    sku: Optional[str] = Field(default=None, description="Stock keeping unit")


class MetaData(BaseModel):
    """Key/value metadata entry attached to an order"""

    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = Field(default=None, description="Metadata identifier")
    key: str = Field(description="Metadata key")
    value: Any = Field(default=None, description="Metadata value")


class Order(BaseModel):
    """
    Snapshot of a WooCommerce order.

    Orders are fetched per request and never persisted. Fields not used by
    the inbox sidebar are ignored on parse.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int = Field(description="WooCommerce order identifier")
    number: Optional[str] = Field(default=None, description="Display order number")
    status: OrderStatus = Field(
        default=OrderStatus.UNKNOWN, description="Order status"
    )
    currency: str = Field(default="USD", description="ISO 4217 currency code")
    date_created: datetime = Field(description="Order creation time")
    total: Decimal = Field(default=Decimal("0"), description="Order total")
    billing: Address = Field(default_factory=Address, description="Billing address")
    shipping: Address = Field(
        default_factory=Address, description="Shipping address"
    )
    line_items: list[LineItem] = Field(
        default_factory=list, description="Order line items"
    )
    customer_note: Optional[str] = Field(
        default=None, description="Free-text note left on the order"
    )
    meta_data: list[MetaData] = Field(
        default_factory=list, description="Order metadata entries"
    )

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value: Any) -> Any:
        if isinstance(value, str) and value not in OrderStatus._value2member_map_:
            return OrderStatus.UNKNOWN
        return value

    @property
    def email(self) -> str:
        """Customer email used for search matching."""
        return self.billing.email or ""

    @property
    def note(self) -> str:
        return self.customer_note or ""


class OrderNote(BaseModel):
    """Note attached to an order by staff, plugins or the customer"""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: Optional[int] = Field(default=None, description="Note identifier")
    note: str = Field(default="", description="Note body")
    author: Optional[str] = Field(default=None, description="Note author")
    date_created: Optional[datetime] = Field(
        default=None, description="Note creation time"
    )
    customer_note: bool = Field(
        default=False, description="Whether the note was sent to the customer"
    )


class Product(BaseModel):
    """Minimal product record, used for connectivity checks"""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(description="Product identifier")
    name: str = Field(default="", description="Product name")
    sku: Optional[str] = Field(default=None, description="Stock keeping unit")
