from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException

from order_locator.api.dependencies import get_geocoder, get_order_store, get_settings
from order_locator.api.rendering import render_form, render_map
from order_locator.core.config import Settings
from order_locator.core.errors import ValidationError
from order_locator.schemas.order import OrderCreate
from order_locator.services.geocoder import Geocoder
from order_locator.services.locator import locate_orders
from order_locator.services.order_store import OrderStore

router = APIRouter(tags=["Frontend"])


@router.get("/")
async def order_form_page(request: Request):
    return render_form(request)


@router.post("/submit")
async def submit_order(
    request: Request,
    store: OrderStore = Depends(get_order_store),
):
    """Store the submitted order and send the browser to the map."""
    try:
        form = await request.form()
    except (MultiPartException, HTTPException) as e:
        raise ValidationError(f"could not read order form: {e}") from e

    fields = {}
    for field in OrderCreate.model_fields:
        value = form.get(field, "")
        # File parts arrive as UploadFile, not text
        if not isinstance(value, str):
            raise ValidationError(f"form field {field!r} must be text")
        fields[field] = value

    order_data = OrderCreate(**fields)
    await store.create(order_data)

    # 303 so the browser follows up with a GET
    return RedirectResponse(url="/map", status_code=303)


@router.get("/map")
async def orders_map_page(
    request: Request,
    store: OrderStore = Depends(get_order_store),
    geocoder: Geocoder = Depends(get_geocoder),
    settings: Settings = Depends(get_settings),
):
    data = await locate_orders(store, geocoder, settings.GEOCODE_CONCURRENCY)
    return render_map(request, data.orders, data.locations)
