"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PointIn(BaseModel):
    x: float
    y: float
    t: float | None = Field(default=None, description="Capture timestamp (ignored)")


class ValidateRequest(BaseModel):
    strokes: list[list[PointIn]] = Field(
        default_factory=list,
        description="Strokes in logical canvas pixels, one list of points per pen gesture",
    )
    debug: bool = Field(default=False, description="Include intermediate artifacts")

    def stroke_points(self) -> list[list[tuple[float, float]]]:
        return [[(p.x, p.y) for p in stroke] for stroke in self.strokes]


class ExpectedOutcome(BaseModel):
    valid: bool | None
    invalid_type: str | None = None


class ExpectedCaseRequest(ValidateRequest):
    expected: ExpectedOutcome
