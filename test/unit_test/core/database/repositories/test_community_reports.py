"""Unit tests for the community report repository."""

from __future__ import annotations

from datetime import datetime

from ecowaste.core.database.entities import CommunityReport
from ecowaste.core.database.repositories import CommunityReportRepository


def _report(user_id: str, day: int) -> CommunityReport:
    return CommunityReport(
        user_id=user_id,
        report_type="illegal_dumping",
        description="Bags of rubbish by the river",
        location="River Walk",
        created_at=datetime(2026, 1, day),
    )


class TestCommunityReportRepository:
    async def test_list_recent_newest_first_with_limit(self, in_memory_session, user):
        repo = CommunityReportRepository(in_memory_session)
        for day in (1, 2, 3):
            await repo.create(_report(user.id, day))

        reports = await repo.list_recent(limit=2)

        assert [r.created_at.day for r in reports] == [3, 2]

    async def test_defaults(self, in_memory_session, user):
        repo = CommunityReportRepository(in_memory_session)
        report = await repo.create(_report(user.id, 1))

        assert report.status == "reported"
        assert report.priority == "medium"

    async def test_resolving_stamps_resolved_at(self, in_memory_session, user):
        repo = CommunityReportRepository(in_memory_session)
        report = await repo.create(_report(user.id, 1))

        investigating = await repo.update_status(report.id, "investigating")
        assert investigating.resolved_at is None

        resolved = await repo.update_status(report.id, "resolved")
        assert resolved.status == "resolved"
        assert resolved.resolved_at is not None

    async def test_unknown_id_returns_none(self, in_memory_session):
        repo = CommunityReportRepository(in_memory_session)
        assert await repo.update_status(42, "resolved") is None
