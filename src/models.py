"""Shared Pydantic data models for the Slack alert relay."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# --- Inbound ---


class InvocationEvent(BaseModel):
    """Event passed in by the invocation trigger. Only ``message`` is read."""

    model_config = ConfigDict(extra="ignore")

    message: str | None = None

    @field_validator("message", mode="before")
    @classmethod
    def _non_string_is_absent(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None


# --- Delivery ---


class DeliveryResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    status_code: int
    message: str

    def to_response(self) -> HandlerResponse:
        return HandlerResponse(status_code=self.status_code, body=self.message)


class HandlerResponse(BaseModel):
    """Result shape returned to the invocation trigger."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    body: str

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
