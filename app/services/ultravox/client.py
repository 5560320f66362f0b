"""Ultravox call creation client."""
import json
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from app.services.ultravox.exceptions import (
    MalformedResponseError,
    ProviderResponseError,
    ProviderTimeoutError,
    ProviderTransportError,
)
from app.services.ultravox.models import SessionConfig, SessionHandle

logger = logging.getLogger(__name__)


class UltravoxClient:
    """Client for the Ultravox call creation endpoint."""

    def __init__(
        self,
        api_key: str,
        api_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout
        self.transport = transport

    async def create_call(self, config: SessionConfig) -> SessionHandle:
        """
        Create an Ultravox call and return its join URL.

        Exactly one request is made. A new HTTP client is opened per call so
        that nothing is pooled or cached between calls.

        Args:
            config: Call configuration to submit

        Returns:
            Handle carrying the stream join URL

        Raises:
            ProviderTimeoutError: The request exceeded the timeout
            ProviderTransportError: The API could not be reached
            ProviderResponseError: The API returned a non-2xx status
            MalformedResponseError: The body was not JSON or lacked joinUrl
        """
        payload = config.to_payload()
        logger.info(
            f"[ULTRAVOX] Creating Ultravox call with config: {json.dumps(payload, indent=2)}"
        )

        headers = {
            "Content-Type": "application/json",
            "X-API-KEY": self.api_key,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(
                    self.api_url,
                    content=json.dumps(payload).encode("utf-8"),
                    headers=headers,
                )
        except httpx.TimeoutException as e:
            logger.error(
                f"[ULTRAVOX] Request timed out after {self.timeout}s - "
                f"Error: {type(e).__name__}: {str(e)}"
            )
            raise ProviderTimeoutError(
                f"Ultravox API did not respond within {self.timeout}s"
            ) from e
        except httpx.HTTPError as e:
            logger.error(
                f"[ULTRAVOX] Error making Ultravox request - "
                f"Error: {type(e).__name__}: {str(e)}"
            )
            raise ProviderTransportError(f"Ultravox API unreachable: {str(e)}") from e

        if not 200 <= response.status_code < 300:
            logger.error(
                f"[ULTRAVOX] Ultravox API Error: {response.status_code} - Body: {response.text}"
            )
            raise ProviderResponseError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"[ULTRAVOX] Error parsing Ultravox response: {str(e)}")
            raise MalformedResponseError(
                "Ultravox response is not valid JSON", body=response.text
            ) from e

        if not isinstance(data, dict):
            raise MalformedResponseError(
                "Ultravox response is not a JSON object", body=response.text
            )

        try:
            handle = SessionHandle.model_validate(data)
        except ValidationError as e:
            logger.error(f"[ULTRAVOX] Ultravox response missing joinUrl: {response.text}")
            raise MalformedResponseError(
                "Ultravox response has no usable joinUrl", body=response.text
            ) from e

        logger.info(f"[ULTRAVOX] Received Ultravox joinUrl: {handle.join_url}")
        return handle
