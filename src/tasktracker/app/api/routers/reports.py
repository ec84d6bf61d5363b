"""Routes for filing and reviewing reports."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...deps import CurrentIdentityDependency, ReportServiceDependency
from ...schemas import MessageResponse, ReportCreate, ReportRead, TaskRef, UserRef
from ...services import ReportDetail

router = APIRouter(prefix="/reports", tags=["reports"])


def _map_report(detail: ReportDetail) -> ReportRead:
    report = detail.report
    return ReportRead(
        id=report.id,
        title=report.title,
        description=report.description,
        category=report.category,
        created_by=UserRef.model_validate(detail.creator) if detail.creator is not None else None,
        related_task=TaskRef.model_validate(detail.related_task) if detail.related_task is not None else None,
        created_at=report.created_at,
        updated_at=report.updated_at,
    )


@router.get("", response_model=list[ReportRead], summary="List reports visible to the caller")
async def list_reports(
    service: ReportServiceDependency,
    identity: CurrentIdentityDependency,
) -> list[ReportRead]:
    return [_map_report(detail) for detail in await service.list_reports(identity)]


@router.post(
    "",
    response_model=ReportRead,
    status_code=status.HTTP_201_CREATED,
    summary="File a report",
)
async def create_report(
    payload: ReportCreate,
    service: ReportServiceDependency,
    identity: CurrentIdentityDependency,
) -> ReportRead:
    detail = await service.create_report(
        identity,
        title=payload.title,
        description=payload.description,
        category=payload.category,
        related_task=payload.related_task,
    )
    return _map_report(detail)


@router.delete("/{report_id}", response_model=MessageResponse, summary="Delete a report (admin)")
async def delete_report(
    report_id: str,
    service: ReportServiceDependency,
    identity: CurrentIdentityDependency,
) -> MessageResponse:
    await service.delete_report(identity, report_id)
    return MessageResponse(message="Report deleted successfully")
