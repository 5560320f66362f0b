"""Bridges an inbound Twilio call to an Ultravox session."""
import asyncio
import logging
from typing import Awaitable, Callable, Optional

from app.services.agent.prompt import SessionConfigBuilder, escape_caller_identity
from app.services.call_session.models import CallControlResponse
from app.services.telephony.responder import (
    CONNECTION_ERROR_MESSAGE,
    NUMBER_NOT_IDENTIFIED_MESSAGE,
    CallControlResponder,
)
from app.services.ultravox.client import UltravoxClient
from app.services.ultravox.exceptions import (
    ProviderResponseError,
    SessionAbandonedError,
    SessionCreationError,
)
from app.services.ultravox.models import SessionConfig, SessionHandle

logger = logging.getLogger(__name__)

DisconnectCheck = Callable[[], Awaitable[bool]]


class CallBridgeService:
    """Creates one Ultravox session per inbound call and answers with TwiML."""

    def __init__(
        self,
        client: UltravoxClient,
        config_builder: SessionConfigBuilder,
        responder: CallControlResponder,
        disconnect_poll_interval: float = 0.5,
    ):
        self.client = client
        self.config_builder = config_builder
        self.responder = responder
        self.disconnect_poll_interval = disconnect_poll_interval

    async def connect_caller(
        self,
        caller_number: Optional[str],
        is_disconnected: Optional[DisconnectCheck] = None,
    ) -> CallControlResponse:
        """
        Handle one call arrival.

        Args:
            caller_number: Value of Twilio's From field (may be missing)
            is_disconnected: Polled while waiting on Ultravox; when it returns
                True the outbound call is cancelled

        Returns:
            TwiML and the HTTP status to reply with
        """
        caller_number = escape_caller_identity(caller_number or "")
        if not caller_number:
            logger.warning('[INCOMING CALL] Incoming call without a "From" number')
            return CallControlResponse(
                self.responder.generate_say_twiml(NUMBER_NOT_IDENTIFIED_MESSAGE),
                status_code=200,
            )

        logger.info(f"[INCOMING CALL] Incoming call from: {caller_number}")

        try:
            config = self.config_builder.build(caller_number)
            handle = await self._create_session(config, is_disconnected)
            twiml = self.responder.generate_stream_twiml(handle.join_url)
        except ProviderResponseError as e:
            logger.error(
                f"[INCOMING CALL] Ultravox rejected call creation - Caller: {caller_number}, "
                f"Status: {e.status_code}, Body: {e.body}"
            )
            return self._error_response()
        except SessionCreationError as e:
            logger.error(
                f"[INCOMING CALL] Error creating Ultravox session - Caller: {caller_number}, "
                f"Error: {type(e).__name__}: {str(e)}"
            )
            return self._error_response()
        except Exception as e:
            logger.error(
                f"[INCOMING CALL] Error handling incoming call - Caller: {caller_number}, "
                f"Error: {type(e).__name__}: {str(e)}",
                exc_info=True,
            )
            return self._error_response()

        logger.info(
            f"[INCOMING CALL] Connected caller to Ultravox stream - Caller: {caller_number}, "
            f"joinUrl: {handle.join_url}"
        )
        return CallControlResponse(twiml, status_code=200)

    def _error_response(self) -> CallControlResponse:
        return CallControlResponse(
            self.responder.generate_say_twiml(CONNECTION_ERROR_MESSAGE),
            status_code=500,
        )

    async def _create_session(
        self,
        config: SessionConfig,
        is_disconnected: Optional[DisconnectCheck],
    ) -> SessionHandle:
        """Run the Ultravox call, cancelling it if the caller goes away first."""
        if is_disconnected is None:
            return await self.client.create_call(config)

        call_task = asyncio.ensure_future(self.client.create_call(config))
        watcher = asyncio.ensure_future(self._wait_for_disconnect(is_disconnected))
        try:
            done, _ = await asyncio.wait(
                {call_task, watcher}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            watcher.cancel()
            if not call_task.done():
                call_task.cancel()

        if call_task in done:
            return call_task.result()

        # Re-raises if the disconnect check itself failed
        watcher.result()
        raise SessionAbandonedError("Caller disconnected before the session was created")

    async def _wait_for_disconnect(self, is_disconnected: DisconnectCheck) -> None:
        while not await is_disconnected():
            await asyncio.sleep(self.disconnect_poll_interval)
