import asyncio
import logging
from typing import List

from order_locator.core.errors import GeocodeError
from order_locator.schemas.order import Location, OrderRead, OrdersWithLocations
from order_locator.services.geocoder import Geocoder
from order_locator.services.order_store import OrderStore

logger = logging.getLogger(__name__)


async def geocode_orders(
    geocoder: Geocoder, orders: List[OrderRead], concurrency: int = 1
) -> List[Location]:
    """Geocode every order, keeping locations[i] aligned with orders[i].

    At most ``concurrency`` lookups are in flight. The first failure cancels
    the remaining lookups and propagates, so callers never see a partial list.
    """
    if concurrency <= 1:
        return [await geocoder.geocode(order.address) for order in orders]

    semaphore = asyncio.Semaphore(concurrency)

    async def _locate(order: OrderRead) -> Location:
        async with semaphore:
            return await geocoder.geocode(order.address)

    tasks = [asyncio.ensure_future(_locate(order)) for order in orders]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def locate_orders(
    store: OrderStore, geocoder: Geocoder, concurrency: int = 1
) -> OrdersWithLocations:
    orders = await store.list_all()
    try:
        locations = await geocode_orders(geocoder, orders, concurrency)
    except GeocodeError as e:
        logger.warning("Geocoding aborted after failure: %s", e)
        raise

    return OrdersWithLocations(orders=orders, locations=locations)
