"""
FastAPI dependencies for store access.

Each request gets its own client and services built from explicit settings;
tests override get_order_source / get_settings with fakes.
"""

from fastapi import Depends

from wooinbox.clients.base import OrderSource
from wooinbox.clients.woocommerce import WooCommerceClient
from wooinbox.config import WooCommerceSettings
from wooinbox.services.aggregator import OrderAggregator
from wooinbox.services.augmenter import OrderDetailAugmenter


def get_settings() -> WooCommerceSettings:
    """
    Load store settings.

    Raises:
        ConfigurationError: If required settings are missing (mapped to 503)
    """
    return WooCommerceSettings.from_env()


def get_order_source(
    settings: WooCommerceSettings = Depends(get_settings),
) -> OrderSource:
    return WooCommerceClient(settings)


def get_aggregator(source: OrderSource = Depends(get_order_source)) -> OrderAggregator:
    return OrderAggregator(source)


def get_augmenter(
    source: OrderSource = Depends(get_order_source),
    settings: WooCommerceSettings = Depends(get_settings),
) -> OrderDetailAugmenter:
    return OrderDetailAugmenter(source, site_url=settings.base_url)
