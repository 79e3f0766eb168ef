"""Weekly history API: archive listing, week closing, rename and reports."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from app.api.v1.dependencies import (
    AdminUser,
    CurrentUser,
    get_close_week_use_case,
    get_history_service,
    get_report_renderer,
)
from app.application.interfaces.services import IReportRenderer
from app.application.use_cases.history import CloseWeekUseCase, HistoryService
from app.core.limiter import limit_close_week, limit_writes
from app.schemas.history import (
    WeekClosingResponse,
    WeeklyHistoryRenameRequest,
    WeeklyHistoryResponse,
    WeeklyHistorySummary,
    WeeklyReportResponse,
)

router = APIRouter()

HistoryServiceDep = Annotated[HistoryService, Depends(get_history_service)]


@router.get("", response_model=list[WeeklyHistorySummary])
async def list_history(_: CurrentUser, history_svc: HistoryServiceDep):
    """Archived weeks, newest first (snapshots omitted)."""
    return [WeeklyHistorySummary.model_validate(h) for h in history_svc.list_history()]


@router.post("/close-week", response_model=WeekClosingResponse, status_code=201)
@limit_close_week
async def close_week(
    request: Request,
    actor: AdminUser,
    use_case: Annotated[CloseWeekUseCase, Depends(get_close_week_use_case)],
):
    """Archive the live tasks and board, then clear them (admin only).

    Returns 201 with per-collection cleanup flags when the archive was written;
    503 (ARCHIVE_WRITE_FAILED) when it was not, in which case nothing was deleted.
    """
    result = await use_case.close_week(actor)
    return WeekClosingResponse.model_validate(result)


@router.get("/{history_id}", response_model=WeeklyHistoryResponse)
async def get_history(history_id: str, _: CurrentUser, history_svc: HistoryServiceDep):
    return WeeklyHistoryResponse.model_validate(history_svc.get_history(history_id))


@router.patch("/{history_id}", response_model=WeeklyHistorySummary)
@limit_writes
async def rename_history(
    request: Request,
    history_id: str,
    body: WeeklyHistoryRenameRequest,
    _: CurrentUser,
    history_svc: HistoryServiceDep,
):
    """Set or clear the custom title. The archived snapshot is never modified."""
    updated = await history_svc.rename(history_id, body.title)
    return WeeklyHistorySummary.model_validate(updated)


@router.get("/{history_id}/report", response_model=WeeklyReportResponse)
async def get_report(history_id: str, _: CurrentUser, history_svc: HistoryServiceDep):
    """Report rows with project and collaborator names resolved."""
    return WeeklyReportResponse.model_validate(history_svc.report(history_id))


@router.get(
    "/{history_id}/report.xlsx",
    response_class=Response,
    responses={200: {"content": {"application/octet-stream": {}}}},
)
async def download_report(
    history_id: str,
    _: CurrentUser,
    history_svc: HistoryServiceDep,
    renderer: Annotated[IReportRenderer, Depends(get_report_renderer)],
):
    """Download the two-sheet spreadsheet for one archived week."""
    report = history_svc.report(history_id)
    content = renderer.render(report)
    return Response(
        content=content,
        media_type=renderer.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{renderer.filename(report)}"'
        },
    )
