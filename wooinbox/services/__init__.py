"""
Order lookup services.

- tracking: derive tracking information from notes and metadata
- aggregator: paginated email search with exact-match filtering
- pager: incremental reveal of search results
- augmenter: order detail view with tracking
"""

from wooinbox.services.aggregator import OrderAggregator
from wooinbox.services.augmenter import OrderDetailAugmenter
from wooinbox.services.pager import ResultPager, reveal
from wooinbox.services.tracking import extract_tracking_info, generate_tracking_url

__all__ = [
    "OrderAggregator",
    "OrderDetailAugmenter",
    "ResultPager",
    "extract_tracking_info",
    "generate_tracking_url",
    "reveal",
]
