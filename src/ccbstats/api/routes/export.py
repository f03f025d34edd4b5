"""Export API endpoint.

POST /api/export - Clipboard text for one or more participants
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ccbstats.api.deps import get_settings
from ccbstats.api.routes.analyze import run_analysis
from ccbstats.config import Settings
from ccbstats.core.errors import NoDataFound
from ccbstats.export.clipboard import format_all, format_participant
from ccbstats.models.types import ExportRequest, ExportResponse

router = APIRouter()


@router.post("/export", response_model=ExportResponse)
def export_text(
    request: ExportRequest,
    settings: Settings = Depends(get_settings),
) -> ExportResponse:
    """Export statistics as plain text.

    mode "single" formats one participant with the detailed template.
    mode "all" formats the displayed participants with the combined
    template, however many remain.

    Args:
        request: Transcript, ignore list and displayed participants.
        settings: Runtime settings (injected).

    Returns:
        ExportResponse with the text.

    Raises:
        HTTPException: 400 on parse failure, 422 if mode "single" has no
            name, 404 if nothing to export.
    """
    result = run_analysis(request.html, request.ignored_participants, settings)

    if request.mode == "single":
        if request.name is None:
            raise HTTPException(status_code=422, detail="name is required for mode single")
        stats = result.get(request.name)
        if stats is None:
            raise HTTPException(status_code=404, detail="Participant not found")
        return ExportResponse(text=format_participant(request.name, stats))

    try:
        return ExportResponse(text=format_all(result, request.participants))
    except NoDataFound as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
