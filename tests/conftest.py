"""Shared test fixtures for the Slack alert relay."""

from __future__ import annotations

import logging
from collections.abc import Callable

import httpx
import pytest

from src.models import DeliveryResult
from src.notifier.dispatcher import SlackDispatcher

WEBHOOK_URL = "https://hooks.slack.com/services/T000/B000/XXXX"


# --- Simulated Slack peer ---


class FakeSlackPeer:
    """Records every request and answers with a fixed status and body."""

    def __init__(self, status_code: int = 200, body: str = "ok") -> None:
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def failing_transport(exc: Exception) -> httpx.MockTransport:
    """Transport whose every request raises ``exc``."""

    def _raise(request: httpx.Request) -> httpx.Response:
        raise exc

    return httpx.MockTransport(_raise)


@pytest.fixture
def make_dispatcher() -> Callable[..., SlackDispatcher]:
    def _create(
        transport: httpx.AsyncBaseTransport | None = None,
        webhook_url: str = WEBHOOK_URL,
    ) -> SlackDispatcher:
        return SlackDispatcher(webhook_url=webhook_url, transport=transport)

    return _create


# --- Factory functions for test data ---


def make_delivery_result(**kwargs) -> DeliveryResult:
    """Factory for DeliveryResult with sensible defaults."""
    defaults: dict[str, object] = {"status_code": 200, "message": "OK"}
    defaults.update(kwargs)
    return DeliveryResult(**defaults)  # type: ignore[arg-type]


# --- Logging ---


class RaisingLogHandler(logging.Handler):
    """Handler whose every emit fails."""

    def emit(self, record: logging.LogRecord) -> None:
        raise OSError("log sink unavailable")


@pytest.fixture
def raising_log_handler() -> RaisingLogHandler:
    return RaisingLogHandler(level=logging.DEBUG)
