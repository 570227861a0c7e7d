"""Order detail view with tracking derived from notes."""

import logging

from wooinbox.clients.base import OrderSource
from wooinbox.errors import NotFoundError, TransportError
from wooinbox.models.order import OrderNote
from wooinbox.models.search import EnrichedOrder
from wooinbox.services.tracking import extract_tracking_info

logger = logging.getLogger(__name__)


class OrderDetailAugmenter:
    """
    Builds an EnrichedOrder from an order and its notes.

    A failed notes request does not fail the detail view: tracking falls back
    to the order's own note and metadata.
    """

    def __init__(self, source: OrderSource, site_url: str | None = None):
        self.source = source
        self.site_url = site_url

    def augment(self, order_id: int) -> EnrichedOrder:
        """
        Fetch an order and attach tracking information.

        Raises:
            NotFoundError: If the order does not exist
            TransportError: If the order itself cannot be fetched
        """
        order = self.source.get_order(order_id)

        notes: list[OrderNote] = []
        notes_available = True
        try:
            notes = self.source.list_order_notes(order_id)
        except (TransportError, NotFoundError) as e:
            logger.warning(
                "Failed to fetch notes for order %s, using order fields only: %s",
                order_id,
                e,
            )
            notes_available = False

        tracking = extract_tracking_info(order, notes, site_url=self.site_url)

        return EnrichedOrder(
            order=order,
            tracking=tracking,
            notes=notes,
            notes_available=notes_available,
        )
