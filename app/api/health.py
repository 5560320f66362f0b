"""Health check endpoint."""
import logging
from fastapi import APIRouter, Request

from app.core.config import settings

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check(request: Request):
    """Health check endpoint. Does not contact Ultravox."""
    logger.debug(
        f"[HEALTH] Health check requested - Client: {request.client.host if request.client else 'unknown'}"
    )
    return {"status": "healthy", "model": settings.ultravox_model}
