from typing import List

from fastapi import Request
from fastapi.templating import Jinja2Templates

from order_locator.core.config import PACKAGE_DIR
from order_locator.schemas.order import Location, OrderRead

templates = Jinja2Templates(directory=str(PACKAGE_DIR / "templates"))


def render_form(request: Request):
    return templates.TemplateResponse(
        request=request,
        name="form.html",
        context={"title": "New delivery order"},
    )


def render_map(request: Request, orders: List[OrderRead], locations: List[Location]):
    """Map page: orders[i] is drawn at locations[i]."""
    assert len(orders) == len(locations), "every order needs exactly one location"

    markers = [
        {
            "lat": location.lat,
            "lng": location.lng,
            "name": order.name,
            "address": order.address,
            "preferable_delivery_time": order.preferable_delivery_time,
        }
        for order, location in zip(orders, locations)
    ]

    return templates.TemplateResponse(
        request=request,
        name="map.html",
        context={
            "title": "Orders map",
            "entries": list(zip(orders, locations)),
            "markers": markers,
        },
    )
