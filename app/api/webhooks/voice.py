"""Twilio voice webhook endpoints."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import Response

from app.core.config import settings
from app.core.dependencies import (
    get_call_control_responder,
    get_config_builder,
    get_ultravox_client,
)
from app.services.agent.prompt import SessionConfigBuilder
from app.services.call_session.bridge import CallBridgeService
from app.services.telephony.responder import CallControlResponder
from app.services.ultravox.client import UltravoxClient

router = APIRouter()
logger = logging.getLogger(__name__)


def get_call_bridge(
    client: UltravoxClient = Depends(get_ultravox_client),
    config_builder: SessionConfigBuilder = Depends(get_config_builder),
    responder: CallControlResponder = Depends(get_call_control_responder),
) -> CallBridgeService:
    """Get call bridge service."""
    return CallBridgeService(
        client,
        config_builder,
        responder,
        disconnect_poll_interval=settings.disconnect_poll_interval,
    )


@router.post("/incoming")
async def handle_incoming_call(
    request: Request,
    From: Optional[str] = Form(None),
    bridge: CallBridgeService = Depends(get_call_bridge),
):
    """
    Handle incoming call from Twilio.

    Creates an Ultravox call for the caller and answers with TwiML that
    streams the call's media to it. Replies 500 (still with spoken TwiML)
    when the session could not be created.
    """
    logger.info(
        f"[INCOMING CALL] Received incoming call webhook - From: {From or 'missing'}, "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )

    result = await bridge.connect_caller(From, is_disconnected=request.is_disconnected)

    logger.info(
        f"[INCOMING CALL] Replying to Twilio - Status: {result.status_code}, "
        f"TwiML length: {len(result.twiml)} bytes"
    )
    return Response(
        content=result.twiml,
        status_code=result.status_code,
        media_type="application/xml",
    )
