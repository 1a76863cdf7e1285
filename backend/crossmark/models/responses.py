"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    checks_registered: int = 0


class ValidateResponse(BaseModel):
    valid: bool | None
    category: str
    invalid_type: str | None = None
    reason: str = ""
    details: dict[str, Any] = Field(default_factory=dict)
    debug: dict[str, Any] | None = None
    processing_time_ms: float = 0.0


class ExpectedCaseResponse(ValidateResponse):
    passed: bool
