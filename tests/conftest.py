import httpx
import pytest
from fastapi.testclient import TestClient

from order_locator.api.dependencies import get_geocoder
from order_locator.core.config import Settings
from order_locator.core.database import create_engine, create_session_maker, init_database
from order_locator.main import create_app
from order_locator.services.geocoder import Geocoder

GEOCODING_URL = "https://geocoder.test/maps/api/geocode/json"


class FakeGeocodingProvider:
    """Stands in for the geocoding API behind an httpx.MockTransport.

    Unknown addresses answer ZERO_RESULTS, like the real provider.
    """

    def __init__(self):
        self.payloads = {}
        self.requests = []

    def add(self, address, lat, lng):
        self.payloads[address] = {
            "status": "OK",
            "results": [{"geometry": {"location": {"lat": lat, "lng": lng}}}],
        }

    def fail(self, address, status="ZERO_RESULTS"):
        self.payloads[address] = {"status": status, "results": []}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        address = request.url.params.get("address")
        payload = self.payloads.get(address, {"status": "ZERO_RESULTS", "results": []})
        return httpx.Response(200, json=payload)

    def geocoder(self) -> Geocoder:
        client = httpx.AsyncClient(transport=httpx.MockTransport(self.handler))
        return Geocoder(client=client, api_key="test-key", url=GEOCODING_URL)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "orders.db"


@pytest.fixture
def settings(db_path):
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{db_path}",
        GEOCODING_API_KEY="test-key",
        GEOCODING_URL=GEOCODING_URL,
    )


@pytest.fixture
def provider():
    return FakeGeocodingProvider()


@pytest.fixture
def app(settings, provider):
    app = create_app(settings)
    app.dependency_overrides[get_geocoder] = provider.geocoder
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
async def session_maker(db_path):
    engine = create_engine(f"sqlite+aiosqlite:///{db_path}")
    await init_database(engine)
    yield create_session_maker(engine)
    await engine.dispose()
