"""
Order lookup API routes.

These endpoints back the inbox sidebar: search by customer email or order
id, reveal results incrementally, and show one order with tracking.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from wooinbox.api.dependencies import get_aggregator, get_augmenter
from wooinbox.config import DEFAULT_PAGE_SIZE
from wooinbox.models.search import EnrichedOrder, OrderSearchResponse
from wooinbox.models.tracking import TrackingRecord
from wooinbox.services.aggregator import OrderAggregator
from wooinbox.services.augmenter import OrderDetailAugmenter
from wooinbox.services.pager import ResultPager

router = APIRouter()


@router.get("/orders/search", response_model=OrderSearchResponse)
def search_orders(
    q: str = Query(description="Customer email or numeric order id"),
    pages: int = Query(default=1, ge=1, description="Result pages to reveal"),
    page_size: int = Query(
        default=DEFAULT_PAGE_SIZE, ge=1, le=50, description="Orders per page"
    ),
    aggregator: OrderAggregator = Depends(get_aggregator),
) -> OrderSearchResponse:
    """
    Search orders by customer email or order id.

    Email searches only return orders whose billing email matches exactly
    (case-insensitive), newest first. An empty result is a successful
    response; upstream failures are reported as 502.

    Args:
        q: Search term
        pages: Number of pages to reveal (1 = first page only)
        page_size: Orders revealed per page
        aggregator: Search service

    Returns:
        OrderSearchResponse with the revealed orders and pagination state
    """
    try:
        result = aggregator.search(q)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    pager = ResultPager(page_size=page_size)
    pager.reset(result.orders)
    for _ in range(pages - 1):
        pager.load_more()

    return OrderSearchResponse(
        query=result.query,
        search_type=result.search_type,
        total=result.count,
        visible_count=pager.visible_count,
        has_more=pager.has_more(),
        orders=pager.current_slice(),
    )


@router.get("/orders/{order_id}", response_model=EnrichedOrder)
def get_order(
    order_id: int,
    augmenter: OrderDetailAugmenter = Depends(get_augmenter),
) -> EnrichedOrder:
    """
    Get an order with tracking derived from its notes.

    If the notes cannot be fetched, tracking is derived from the order's own
    note and metadata and `notes_available` is false.

    Raises:
        404: Order not found
        502: Store API failure
    """
    return augmenter.augment(order_id)


@router.get("/orders/{order_id}/tracking", response_model=TrackingRecord)
def get_order_tracking(
    order_id: int,
    augmenter: OrderDetailAugmenter = Depends(get_augmenter),
) -> TrackingRecord:
    """Get only the tracking information for an order."""
    return augmenter.augment(order_id).tracking
