"""Shared resources for the routers.

The engine, session factory, HTTP client and settings are created once in the
application lifespan and kept on ``app.state``; these helpers hand them to
each request.
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from order_locator.core.config import Settings
from order_locator.core.database import get_async_session
from order_locator.services.geocoder import Geocoder
from order_locator.services.order_store import OrderStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_order_store(session: AsyncSession = Depends(get_async_session)) -> OrderStore:
    return OrderStore(session)


def get_geocoder(request: Request) -> Geocoder:
    settings = request.app.state.settings
    return Geocoder(
        client=request.app.state.http_client,
        api_key=settings.GEOCODING_API_KEY,
        url=settings.GEOCODING_URL,
    )
