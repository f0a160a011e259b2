from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Health"])


@router.get("/healthz", response_class=PlainTextResponse)
async def healthz():
    """Liveness only: touches neither the database nor the geocoder."""
    return "OK"
