import logging
from typing import Any, Optional

import httpx

from order_locator.core.errors import GeocodeError
from order_locator.schemas.order import Location

logger = logging.getLogger(__name__)


def create_http_client(timeout: Optional[float] = None) -> httpx.AsyncClient:
    """The process-wide client used for every geocoding request."""
    return httpx.AsyncClient(timeout=httpx.Timeout(timeout))


class Geocoder:
    """Thin wrapper around the Google Geocoding JSON API.

    Every call is one round trip to the provider: nothing is retried and
    nothing is cached.
    """

    def __init__(self, client: httpx.AsyncClient, api_key: str, url: str):
        self.client = client
        self.api_key = api_key
        self.url = url

    async def geocode(self, address: str) -> Location:
        params = {"address": address, "key": self.api_key}
        try:
            response = await self.client.get(self.url, params=params)
        except httpx.HTTPError as e:
            raise GeocodeError(f"geocode request for {address!r} failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise GeocodeError(
                f"geocode response for {address!r} is not JSON "
                f"(HTTP {response.status_code})"
            ) from e

        return self._parse(address, payload)

    @staticmethod
    def _parse(address: str, payload: Any) -> Location:
        if not isinstance(payload, dict):
            raise GeocodeError(f"unexpected geocode response for {address!r}")

        status = payload.get("status")
        if status != "OK":
            message = f"Geocode request failed with status: {status}"
            if payload.get("error_message"):
                message += f" ({payload['error_message']})"
            raise GeocodeError(message)

        results = payload.get("results") or []
        if not results:
            raise GeocodeError(f"no geocode results for {address!r}")

        try:
            location = results[0]["geometry"]["location"]
            return Location(lat=location["lat"], lng=location["lng"])
        except (KeyError, TypeError, ValueError) as e:
            raise GeocodeError(f"malformed geocode result for {address!r}: {e}") from e
