"""Analyze API endpoint.

POST /api/analyze - Per-participant statistics for a transcript
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ccbstats.api.deps import get_settings
from ccbstats.config import Settings
from ccbstats.core.engine import analyze_transcript, require_data
from ccbstats.core.errors import NoDataFound, ParseFailure
from ccbstats.export.report import build_reports
from ccbstats.models.domain import AggregationResult
from ccbstats.models.types import AnalysisRequest, AnalysisResponse

router = APIRouter()


def run_analysis(
    html: str,
    ignored_participants: list[str] | None,
    settings: Settings,
) -> AggregationResult:
    """Run the engine and translate its errors into HTTP errors.

    Raises:
        HTTPException: 400 on parse failure, 404 when no rolls are found.
    """
    if ignored_participants is None:
        ignored_participants = sorted(settings.ignored_participants)

    try:
        return require_data(analyze_transcript(html, ignored_participants))
    except ParseFailure as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except NoDataFound as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.post("/analyze", response_model=AnalysisResponse)
def analyze(
    request: AnalysisRequest,
    settings: Settings = Depends(get_settings),
) -> AnalysisResponse:
    """Analyze a transcript.

    Args:
        request: Transcript markup and optional ignore list.
        settings: Runtime settings (injected).

    Returns:
        AnalysisResponse with reports sorted by total rolls.

    Raises:
        HTTPException: 400 if the transcript is not markup, 404 if no rolls.
    """
    result = run_analysis(request.html, request.ignored_participants, settings)

    return AnalysisResponse(
        participants=build_reports(result),
        total_rolls=sum(stats.total_rolls for stats in result.values()),
    )
