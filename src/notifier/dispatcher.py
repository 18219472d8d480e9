"""Slack webhook dispatcher.

Posts a single ``{"text": ...}`` payload to an incoming-webhook URL and
classifies the outcome into a :class:`DeliveryResult`. Failures of any
kind are returned as data, never raised.
"""

from __future__ import annotations

import logging
import os

import httpx

from src.models import DeliveryResult
from src.notifier.logging_config import log_safely

logger = logging.getLogger(__name__)

WEBHOOK_URL_ENV = "SLACK_WEBHOOK_URL"


class SlackDispatcher:
    """Sends alert messages to a Slack incoming webhook."""

    def __init__(
        self,
        webhook_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._webhook_url = webhook_url
        self._transport = transport

    @classmethod
    def from_env(
        cls, transport: httpx.AsyncBaseTransport | None = None,
    ) -> SlackDispatcher:
        """Create a dispatcher for the webhook URL in the environment.

        An unset variable is not rejected here; the empty URL fails at
        request time and is reported like any other transport failure.
        """
        return cls(
            webhook_url=os.environ.get(WEBHOOK_URL_ENV, ""), transport=transport,
        )

    async def send(self, message: str) -> DeliveryResult:
        """POST ``message`` to the webhook and classify the response.

        Any 2xx is reported as ``200``/``"OK"``. Other statuses carry the
        peer's status code and body text. Transport errors map to ``500``
        with the error description.
        """
        headers = {"Content-Type": "application/json"}

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                resp = await client.post(
                    self._webhook_url, json={"text": message}, headers=headers,
                )
                error_text = None if resp.is_success else resp.text
        except Exception as exc:  # every transport failure is reported as 500
            log_safely(logger, logging.ERROR, "Error with request: %r", exc)
            return DeliveryResult(status_code=500, message=str(exc))

        if error_text is not None:
            log_safely(
                logger, logging.ERROR, "Error sending message to Slack: %s %s",
                resp.status_code, error_text,
            )
            return DeliveryResult(status_code=resp.status_code, message=error_text)

        log_safely(
            logger, logging.INFO, "Successfully sent message to Slack: %s", message,
        )
        return DeliveryResult(status_code=200, message="OK")
