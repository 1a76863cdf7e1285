"""Health check + meta endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from crossmark.dependencies import get_pipeline
from crossmark.engine.pipeline import Pipeline
from crossmark.engine.registry import get_registry
from crossmark.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        checks_registered=get_registry().count,
    )


@router.get("/config")
async def config(pipeline: Pipeline = Depends(get_pipeline)) -> dict[str, Any]:
    return pipeline.config.to_dict()
