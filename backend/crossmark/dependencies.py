"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from crossmark.config import settings
from crossmark.engine.pipeline import Pipeline, create_pipeline


def get_settings():
    return settings


@lru_cache(maxsize=1)
def get_pipeline() -> Pipeline:
    """Shared validator; it holds only immutable configuration."""
    return create_pipeline()
