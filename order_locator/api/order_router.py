from fastapi import APIRouter, Depends

from order_locator.api.dependencies import get_geocoder, get_order_store, get_settings
from order_locator.core.config import Settings
from order_locator.schemas.order import OrdersWithLocations
from order_locator.services.geocoder import Geocoder
from order_locator.services.locator import locate_orders
from order_locator.services.order_store import OrderStore

router = APIRouter(tags=["Orders"])


@router.get("/api/orders", response_model=OrdersWithLocations)
async def list_orders(
    store: OrderStore = Depends(get_order_store),
    geocoder: Geocoder = Depends(get_geocoder),
    settings: Settings = Depends(get_settings),
):
    return await locate_orders(store, geocoder, settings.GEOCODE_CONCURRENCY)
