"""Main FastAPI application."""
from fastapi import FastAPI
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.dependencies import get_config_builder
from app.core.logging import setup_logging
from app.api import health
from app.api.webhooks import voice


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging(settings.log_level)
    get_config_builder()
    yield


app = FastAPI(
    title="Ultravox Twilio Bridge",
    description="Connects inbound Twilio calls to Ultravox voice AI sessions",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router, tags=["health"])
app.include_router(voice.router, tags=["webhooks"])


@app.get("/")
async def root():
    """Service information."""
    return {
        "message": "Ultravox Twilio Bridge",
        "version": "0.1.0",
        "webhook": "/incoming",
    }
