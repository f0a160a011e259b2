import pytest

from order_locator.api.rendering import render_map
from order_locator.schemas.order import Location, OrderRead


def test_map_requires_one_location_per_order():
    orders = [OrderRead(name="Alice", phone="", address="x", preferable_delivery_time="")]

    with pytest.raises(AssertionError):
        render_map(None, orders, [])

    with pytest.raises(AssertionError):
        render_map(None, orders, [Location(lat=1, lng=2), Location(lat=3, lng=4)])
