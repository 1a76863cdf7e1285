"""Check registry — every decision step is a standalone function registered via decorator.

Usage:
    @check(id="C05", stage=Stage.GEOMETRY, dependencies=["C04"])
    def no_cross(ctx: ValidationContext) -> None:
        if not ctx.intersections:
            ctx.conclude(Category.NO_CROSS, "no crossing")

A check either records derived state on the context or concludes it with
a verdict; the pipeline stops at the first verdict, so dependency order
is precedence order.
"""

from __future__ import annotations

import enum
import heapq
import importlib
import logging
import pkgutil
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from crossmark.engine.context import ValidationContext

logger = logging.getLogger(__name__)


class Stage(enum.IntEnum):
    INK = 0
    GEOMETRY = 1
    MARK_COUNT = 2
    SHAPE = 3
    CONTENT = 4


@dataclass
class CheckSpec:
    id: str
    stage: Stage
    fn: Callable[["ValidationContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class CheckRegistry:
    """Registry of decision checks."""

    def __init__(self) -> None:
        self._checks: dict[str, CheckSpec] = {}

    def register(self, spec: CheckSpec) -> None:
        if spec.id in self._checks:
            raise ValueError(f"Duplicate check ID: {spec.id}")
        self._checks[spec.id] = spec
        logger.debug("Registered check %s (%s)", spec.id, spec.stage.name)

    def resolve_order(self) -> list[CheckSpec]:
        """Precedence order: dependencies first, ties broken by check id."""
        pool = self._checks
        in_degree: dict[str, int] = {}
        dependents: dict[str, list[str]] = {cid: [] for cid in pool}
        for cid, spec in pool.items():
            unknown = [dep for dep in spec.dependencies if dep not in pool]
            if unknown:
                raise ValueError(f"Check {cid} depends on unregistered {unknown}")
            in_degree[cid] = len(spec.dependencies)
            for dep in spec.dependencies:
                dependents[dep].append(cid)

        # Kahn's algorithm, smallest ready id first
        ready = [cid for cid, d in in_degree.items() if d == 0]
        heapq.heapify(ready)
        ordered: list[CheckSpec] = []
        while ready:
            cid = heapq.heappop(ready)
            ordered.append(pool[cid])
            for other in dependents[cid]:
                in_degree[other] -= 1
                if in_degree[other] == 0:
                    heapq.heappush(ready, other)

        if len(ordered) != len(pool):
            stuck = sorted(set(pool) - {s.id for s in ordered})
            raise ValueError(f"Circular dependency detected among: {stuck}")
        return ordered

    @property
    def count(self) -> int:
        return len(self._checks)


# Module-level singleton, populated at import time and read-only afterwards
_registry = CheckRegistry()


def get_registry() -> CheckRegistry:
    return _registry


def check(
    *,
    id: str,
    stage: Stage,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a check function."""

    def decorator(fn: Callable[["ValidationContext"], None]):
        spec = CheckSpec(
            id=id,
            stage=stage,
            fn=fn,
            dependencies=dependencies or [],
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator


def load_checks() -> None:
    """Import every module under crossmark.engine.checks so @check decorators fire."""
    package = importlib.import_module("crossmark.engine.checks")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package.__name__}.{module_name}")
