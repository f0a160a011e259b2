import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from order_locator.api.health_router import router as health_router
from order_locator.api.order_router import router as order_router
from order_locator.api.page_router import router as page_router
from order_locator.core.config import Settings, settings as default_settings
from order_locator.core.database import create_engine, create_session_maker, init_database
from order_locator.core.errors import GeocodeError, StorageError, ValidationError
from order_locator.services.geocoder import create_http_client

logger = logging.getLogger("order_locator.main")


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s [%(name)s] %(levelname)s: %(message)s'
    )


# --- Lifespan (startup / shutdown) ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    engine = create_engine(settings.DATABASE_URL, echo=settings.DEBUG)
    try:
        await init_database(engine)
    except StorageError:
        await engine.dispose()
        raise
    logger.info("Database ready")

    if not settings.GEOCODING_API_KEY:
        logger.warning("GEOCODING_API_KEY is not set, geocoding requests will be rejected")

    app.state.session_maker = create_session_maker(engine)
    app.state.http_client = create_http_client(settings.GEOCODING_TIMEOUT)

    try:
        yield
    finally:
        logger.info("Shutting down")
        await app.state.http_client.aclose()
        await engine.dispose()


# --- Error responses ---
# The detail goes to the log only; clients get a generic message.
def _error_response(request: Request, status_code: int, message: str):
    if request.url.path.startswith("/api/"):
        return JSONResponse(status_code=status_code, content={"detail": message})
    return PlainTextResponse(message, status_code=status_code)


async def storage_error_handler(request: Request, exc: StorageError):
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return _error_response(request, 500, "Internal Server Error")


async def geocode_error_handler(request: Request, exc: GeocodeError):
    logger.error("Geocoding failure on %s %s: %s", request.method, request.url.path, exc)
    return _error_response(request, 500, "Internal Server Error")


async def validation_error_handler(request: Request, exc: ValidationError):
    logger.warning("Rejected request on %s %s: %s", request.method, request.url.path, exc)
    return _error_response(request, 400, "Bad Request")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title=settings.PROJECT_NAME,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(GeocodeError, geocode_error_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)

    app.include_router(page_router)
    app.include_router(order_router)
    app.include_router(health_router)
    app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")

    return app


configure_logging(default_settings.DEBUG)
app = create_app()


def run() -> None:
    logger.info("Server listening on port %s...", default_settings.PORT)
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    run()
