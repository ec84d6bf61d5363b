"""Common system-level response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class RootResponse(BaseModel):
    """Metadata payload returned by the metadata endpoint."""

    name: str = Field(description="Human-friendly service name")
    environment: str = Field(description="Deployment environment identifier")
    version: str = Field(description="Semantic version of the service")
    api_prefix: str = Field(description="Base path for API routes")


class HealthCheckResponse(BaseModel):
    status: str = Field(default="ok", description="Service health indicator")


class MessageResponse(BaseModel):
    """Plain acknowledgement, e.g. after a delete."""

    message: str


class ErrorResponse(BaseModel):
    """Error envelope returned by every exception handler."""

    error: str = Field(description="Human-readable error message")
    code: str = Field(description="Machine-readable error identifier")
    details: Any | None = Field(
        default=None,
        description="Structured context, always including the request id when known.",
    )


__all__ = ["ErrorResponse", "HealthCheckResponse", "MessageResponse", "RootResponse"]
