"""
Community Report Endpoints.

Reports are visible to every signed-in user and move through
reported -> investigating -> resolved.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from ecowaste.core.database.entities import CommunityReport
from ecowaste.core.database.schemas import CommunityReportCreate, CommunityReportRead, ReportStatusUpdate
from ecowaste.server.services.deps import CurrentUserId, StorageDep

router = APIRouter(prefix="/community-reports", tags=["community"])


@router.get(
    "",
    response_model=List[CommunityReportRead],
    summary="List Community Reports",
    description="List the most recent reports from all users.",
)
async def list_reports(
    user_id: CurrentUserId,
    storage: StorageDep,
    limit: int = Query(50, ge=1, le=200, description="Maximum number of reports."),
) -> List[CommunityReportRead]:
    reports = await storage.get_community_reports(limit)
    return [CommunityReportRead.model_validate(r) for r in reports]


@router.post(
    "",
    response_model=CommunityReportRead,
    status_code=status.HTTP_201_CREATED,
    summary="File Community Report",
)
async def create_report(
    payload: CommunityReportCreate, user_id: CurrentUserId, storage: StorageDep
) -> CommunityReportRead:
    report = CommunityReport(user_id=user_id, **payload.model_dump(mode="json"))
    created = await storage.create_community_report(report)
    return CommunityReportRead.model_validate(created)


@router.patch(
    "/{report_id}/status",
    response_model=CommunityReportRead,
    summary="Update Report Status",
    description="Move a report through its lifecycle. Resolving stamps resolvedAt.",
    responses={404: {"description": "Report not found"}},
)
async def update_report_status(
    report_id: int, payload: ReportStatusUpdate, user_id: CurrentUserId, storage: StorageDep
) -> CommunityReportRead:
    report = await storage.update_community_report_status(report_id, payload.status)
    if report is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Report not found")
    return CommunityReportRead.model_validate(report)
