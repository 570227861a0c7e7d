"""
pytest configuration and fixtures.

Loads environment variables from .env file for all tests and provides an
in-memory order source for service and API tests.
"""

from datetime import datetime
from pathlib import Path
from typing import Any

import pytest
from dotenv import load_dotenv

from wooinbox.errors import NotFoundError, TransportError
from wooinbox.models.order import Order, OrderNote, Product


def pytest_configure(config):
    """Load .env file before running tests"""
    project_root = Path(__file__).parent.parent
    env_file = project_root / ".env"

    if env_file.exists():
        load_dotenv(env_file)


def build_order(
    order_id: int = 1001,
    email: str = "jane@example.com",
    date_created: str = "2024-03-01T10:00:00",
    note: str = "",
    meta_data: list[dict[str, Any]] | None = None,
    status: str = "processing",
    total: str = "49.99",
) -> Order:
    """Build an Order from a WooCommerce-shaped payload."""
    return Order.model_validate(
        {
            "id": order_id,
            "number": str(order_id),
            "status": status,
            "currency": "USD",
            "date_created": date_created,
            "total": total,
            "billing": {"first_name": "Jane", "last_name": "Doe", "email": email},
            "line_items": [
                {
                    "id": 1,
                    "name": "Widget",
                    "quantity": 1,
                    "price": total,
                    "total": total,
                    "sku": "WID-1",
                }
            ],
            "customer_note": note,
            "meta_data": meta_data or [],
        }
    )


def build_note(body: str, note_id: int = 1) -> OrderNote:
    return OrderNote(id=note_id, note=body, date_created=datetime(2024, 3, 2, 9, 0))


class FakeOrderSource:
    """In-memory OrderSource that records the calls made to it."""

    def __init__(
        self,
        pages: list[list[Order]] | None = None,
        orders: dict[int, Order] | None = None,
        notes: dict[int, list[OrderNote]] | None = None,
    ):
        self.pages = pages or []
        self.orders = orders or {}
        self.notes = notes or {}
        self.list_calls: list[dict[str, Any]] = []
        self.fail_on_page: int | None = None
        self.fail_notes = False
        self.fail_products = False

    def list_orders(self, filters, page, per_page):
        self.list_calls.append({"filters": filters, "page": page, "per_page": per_page})
        if self.fail_on_page == page:
            raise TransportError("Internal Server Error", 500)
        if page > len(self.pages):
            return []
        return list(self.pages[page - 1])

    def get_order(self, order_id):
        if order_id not in self.orders:
            raise NotFoundError("Order", order_id)
        return self.orders[order_id]

    def list_order_notes(self, order_id):
        if self.fail_notes:
            raise TransportError("Service Unavailable", 503)
        return list(self.notes.get(order_id, []))

    def list_products(self, limit):
        if self.fail_products:
            raise TransportError("Unauthorized", 401)
        return [Product(id=1, name="Widget")][:limit]


@pytest.fixture
def fake_source() -> FakeOrderSource:
    return FakeOrderSource()


@pytest.fixture
def make_order():
    """Factory for WooCommerce-shaped orders."""
    return build_order


@pytest.fixture
def make_note():
    """Factory for order notes."""
    return build_note


@pytest.fixture
def make_source():
    """Factory for FakeOrderSource instances."""
    return FakeOrderSource
