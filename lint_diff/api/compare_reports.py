"""
POST /api/compare-reports
=========================
HTTP surface for the lint-diff pipeline.

Accepts two decoded lint reports (ESLint or PHP_CodeSniffer JSON), runs the
same pipeline as the CLI and returns the tagged lines, both count buckets,
the exit code the CLI would use and the plain-text report (never colored).

Any LintDiffError is returned as HTTP 422 with the message in `detail`.
"""
import logging
from typing import Any, List

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from lint_diff.core.exceptions import LintDiffError
from lint_diff.services.report_comparator import ComparisonOutcome, compare_reports

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Lint Diff"])


# ---------------------------------------------------------------------------
# Request / Response schemas
# ---------------------------------------------------------------------------
class CompareRequest(BaseModel):
    before: Any
    after: Any


class Counts(BaseModel):
    error: int
    warning: int


class Line(BaseModel):
    line: int
    column: int
    type: str
    message: str
    is_new: bool


class CompareResponse(BaseModel):
    file_name: str
    has_new: bool
    exit_code: int
    new_counts: Counts
    existing_counts: Counts
    lines: List[Line]
    text: str


def _to_response(outcome: ComparisonOutcome) -> CompareResponse:
    result = outcome.result
    return CompareResponse(
        file_name=outcome.file_name,
        has_new=outcome.has_new,
        exit_code=outcome.exit_code,
        new_counts=Counts(error=result.new_counts.error, warning=result.new_counts.warning),
        existing_counts=Counts(
            error=result.existing_counts.error,
            warning=result.existing_counts.warning,
        ),
        lines=[
            Line(
                line=tagged.message.line,
                column=tagged.message.column,
                type=tagged.message.type,
                message=tagged.message.message,
                is_new=tagged.is_new,
            )
            for tagged in result.lines
        ],
        text=outcome.output.text,
    )


@router.post("/compare-reports", response_model=CompareResponse)
def compare_reports_endpoint(request: CompareRequest):
    try:
        outcome = compare_reports(request.before, request.after, color=False)
    except LintDiffError as e:
        logger.error("Comparison failed: %s", e)
        raise HTTPException(status_code=422, detail=str(e))

    return _to_response(outcome)
