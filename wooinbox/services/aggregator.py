"""
Order search across the store's paginated orders endpoint.

The upstream `search` parameter matches partially (names, addresses, other
emails), so results are re-filtered to exact billing-email matches here.
"""

import logging

from wooinbox.clients.base import OrderSource
from wooinbox.config import MAX_SEARCH_PAGES, ORDERS_PER_PAGE
from wooinbox.errors import NotFoundError
from wooinbox.host import normalize_email
from wooinbox.models.order import Order
from wooinbox.models.search import SearchResultSet, SearchType

logger = logging.getLogger(__name__)


def is_order_id(term: str) -> bool:
    """Whether a search term should be treated as a numeric order id."""
    return term.isascii() and term.isdigit()


def filter_orders_by_email(orders: list[Order], email: str) -> list[Order]:
    """Keep orders whose billing email equals email, ignoring case."""
    target = normalize_email(email)
    return [order for order in orders if order.email.lower() == target]


def sort_newest_first(orders: list[Order]) -> list[Order]:
    """Sort by creation time, newest first; ties keep their input order."""
    return sorted(orders, key=lambda order: order.date_created, reverse=True)


class OrderAggregator:
    """
    Fetches, filters and sorts orders for one search.

    Each call builds a new SearchResultSet; nothing is cached between
    searches. Transport errors propagate and discard any pages already
    fetched.
    """

    def __init__(
        self,
        source: OrderSource,
        per_page: int = ORDERS_PER_PAGE,
        max_pages: int = MAX_SEARCH_PAGES,
    ):
        self.source = source
        self.per_page = per_page
        self.max_pages = max_pages

    def search(self, term: str) -> SearchResultSet:
        """
        Search by order id when term is all digits, otherwise by email.

        Raises:
            ValueError: If term is blank
        """
        term = term.strip()
        if not term:
            raise ValueError("Please enter a customer email or order ID")

        if is_order_id(term):
            return self.search_by_id(int(term))
        return self.search_by_email(term)

    def search_by_email(self, email: str) -> SearchResultSet:
        """
        Collect all orders billed to email.

        Pages are requested sequentially until an empty page or the page cap.
        """
        normalized = normalize_email(email)
        filters = {"search": normalized, "orderby": "date", "order": "desc"}

        fetched: list[Order] = []
        pages = 0
        for page in range(1, self.max_pages + 1):
            batch = self.source.list_orders(filters, page=page, per_page=self.per_page)
            pages = page
            logger.debug("Fetched page %d with %d orders", page, len(batch))
            if not batch:
                break
            fetched.extend(batch)

        matches = sort_newest_first(filter_orders_by_email(fetched, normalized))

        logger.info(
            "Email search complete",
            extra={
                "json_fields": {
                    "pages_fetched": pages,
                    "orders_fetched": len(fetched),
                    "matches": len(matches),
                }
            },
        )

        return SearchResultSet(
            query=normalized,
            search_type=SearchType.EMAIL,
            orders=matches,
            pages_fetched=pages,
        )

    def search_by_id(self, order_id: int) -> SearchResultSet:
        """Look up a single order; an unknown id yields an empty result."""
        try:
            orders = [self.source.get_order(order_id)]
        except NotFoundError:
            logger.info("Order %s not found", order_id)
            orders = []

        return SearchResultSet(
            query=str(order_id),
            search_type=SearchType.ORDER_ID,
            orders=orders,
            pages_fetched=1,
        )
