from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from jrtech.core.config import get_settings

router = APIRouter()


@router.get("/", response_class=PlainTextResponse, tags=["Status"])
async def liveness() -> str:
    """Liveness check, visit the backend root in a browser to see it"""
    site_name = get_settings().site_name
    return f"{site_name} Backend is running. Ready to receive POST requests at /contact."
