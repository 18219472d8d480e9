"""Invocation entry point for the Slack alert relay."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from pydantic import ValidationError

from src.models import InvocationEvent
from src.notifier.dispatcher import SlackDispatcher
from src.notifier.logging_config import configure_logging, log_safely

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "Alert! Check your systems. (default message from Lambda)"


def _serialize_event(event: Any) -> str:
    try:
        return json.dumps(event, default=str)
    except (TypeError, ValueError, RecursionError):
        pass
    try:
        return repr(event)
    except RecursionError:
        return f"<{type(event).__name__} too deeply nested to log>"


def resolve_message(event: Any) -> str:
    """Return the event's ``message``, or the default when it has none."""
    try:
        parsed = InvocationEvent.model_validate(event)
    except ValidationError:
        return DEFAULT_MESSAGE
    if parsed.message is None:
        return DEFAULT_MESSAGE
    return parsed.message


async def handle(
    event: Any, dispatcher: SlackDispatcher | None = None,
) -> dict[str, Any]:
    """Forward the event's message to Slack and shape the result.

    Returns ``{"statusCode": int, "body": str}``. Delivery failures are
    reported through ``statusCode``; nothing is raised.
    """
    log_safely(logger, logging.INFO, "Event received: %s", _serialize_event(event))

    message = resolve_message(event)
    if dispatcher is None:
        dispatcher = SlackDispatcher.from_env()

    result = await dispatcher.send(message)
    return result.to_response().to_payload()


def lambda_handler(event: Any, context: Any = None) -> dict[str, Any]:
    """Synchronous entry invoked by the serverless runtime."""
    configure_logging()
    return asyncio.run(handle(event))
