"""Cross-mark validation engine."""

from crossmark.engine.registry import check, Stage, get_registry
from crossmark.engine.config import ValidatorConfig, VoteBox
from crossmark.engine.context import Category, ValidationContext, ValidationResult
from crossmark.engine.pipeline import Pipeline, validate_mark

__all__ = [
    "check",
    "Stage",
    "get_registry",
    "ValidatorConfig",
    "VoteBox",
    "Category",
    "ValidationContext",
    "ValidationResult",
    "Pipeline",
    "validate_mark",
]
