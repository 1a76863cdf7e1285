"""POST /api/validate — classify a drawn mark."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from crossmark.dependencies import get_pipeline
from crossmark.engine.pipeline import Pipeline
from crossmark.models.requests import ExpectedCaseRequest, ValidateRequest
from crossmark.models.responses import ExpectedCaseResponse, ValidateResponse

router = APIRouter()


def _run(pipeline: Pipeline, req: ValidateRequest) -> ValidateResponse:
    start = time.perf_counter()
    result = pipeline.validate(req.stroke_points(), debug=req.debug)
    elapsed = (time.perf_counter() - start) * 1000
    return ValidateResponse(**result.to_dict(), processing_time_ms=round(elapsed, 2))


@router.post("/validate", response_model=ValidateResponse)
async def validate(req: ValidateRequest, pipeline: Pipeline = Depends(get_pipeline)) -> ValidateResponse:
    return _run(pipeline, req)


@router.post("/validate/expected", response_model=ExpectedCaseResponse)
async def validate_expected(
    req: ExpectedCaseRequest,
    pipeline: Pipeline = Depends(get_pipeline),
) -> ExpectedCaseResponse:
    """Validate a recorded case and compare with its expected outcome.

    ``valid`` must match; ``invalid_type`` must match unless the
    expectation leaves it null.
    """
    actual = _run(pipeline, req)
    expected = req.expected
    passed = actual.valid == expected.valid and (
        expected.invalid_type is None or actual.invalid_type == expected.invalid_type
    )
    return ExpectedCaseResponse(**actual.model_dump(), passed=passed)
