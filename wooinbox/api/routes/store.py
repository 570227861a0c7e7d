"""Store connectivity route."""

from fastapi import APIRouter, Depends

from wooinbox.api.dependencies import get_order_source
from wooinbox.clients.base import OrderSource
from wooinbox.clients.woocommerce import check_connection
from wooinbox.models.search import ConnectionCheck

router = APIRouter()


@router.get("/connection", response_model=ConnectionCheck)
def test_store_connection(
    source: OrderSource = Depends(get_order_source),
) -> ConnectionCheck:
    """
    Check that the store API is reachable with the configured credentials.

    Failures are reported in the response body with `success: false`.
    """
    return check_connection(source)
