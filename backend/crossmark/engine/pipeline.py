"""Pipeline orchestrator — runs decision checks in precedence order until one concludes."""

from __future__ import annotations

import dataclasses
import logging
import time
from collections.abc import Sequence

from crossmark.engine.config import ValidatorConfig
from crossmark.engine.context import (
    Category,
    DebugInfo,
    ValidationContext,
    ValidationResult,
)
from crossmark.engine.registry import CheckRegistry, get_registry, load_checks
from crossmark.utils.geometry import as_stroke

logger = logging.getLogger(__name__)


class Pipeline:
    """A validator bound to one immutable configuration."""

    def __init__(
        self,
        registry: CheckRegistry | None = None,
        config: ValidatorConfig | None = None,
    ) -> None:
        if registry is None:
            load_checks()
            registry = get_registry()
        self.registry = registry
        self.config = config or ValidatorConfig()
        self._ordered = self.registry.resolve_order()

    def run(self, ctx: ValidationContext) -> ValidationContext:
        """Run checks on the given context, stopping at the first verdict."""
        start = time.perf_counter()

        for spec in self._ordered:
            t0 = time.perf_counter()
            spec.fn(ctx)
            ctx.completed_checks.append(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.2fms", spec.id, elapsed)

            if ctx.verdict is not None:
                ctx.verdict = dataclasses.replace(ctx.verdict, check_id=spec.id)
                break

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Validation: %s after %d/%d checks in %.1fms",
            ctx.verdict.category.value if ctx.verdict else Category.VALID.value,
            len(ctx.completed_checks),
            len(self._ordered),
            total,
        )
        return ctx

    def validate(self, strokes: Sequence, debug: bool = False) -> ValidationResult:
        """Classify a mark. ``strokes`` is a list of point sequences [(x, y), ...]."""
        ctx = ValidationContext(strokes=[as_stroke(s) for s in strokes], config=self.config)
        self.run(ctx)

        verdict = ctx.verdict
        return ValidationResult(
            category=verdict.category if verdict else Category.VALID,
            reason=verdict.reason if verdict else "",
            details=dict(verdict.details) if verdict else {},
            debug=DebugInfo.from_context(ctx) if debug else None,
        )


def create_pipeline(config: ValidatorConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(config=config)


def validate_mark(
    strokes: Sequence,
    debug: bool = False,
    config: ValidatorConfig | None = None,
) -> ValidationResult:
    return create_pipeline(config).validate(strokes, debug=debug)
