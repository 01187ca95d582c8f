"""
Waste Entry Endpoints.

Logging waste credits the entry's EcoPoints to the user in the same
transaction as the insert.
"""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Query, status

from ecowaste.core.database.entities import WasteEntry
from ecowaste.core.database.schemas import WasteEntryCreate, WasteEntryRead, as_naive_utc
from ecowaste.server.services.deps import CurrentUserId, StorageDep

router = APIRouter(prefix="/waste-entries", tags=["waste-entries"])


@router.post(
    "",
    response_model=WasteEntryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Log Waste",
    description="Record a waste entry for the current user and credit its EcoPoints.",
    responses={
        201: {"description": "Entry created and points credited"},
        404: {"description": "The current user has no profile"},
    },
)
async def create_waste_entry(payload: WasteEntryCreate, user_id: CurrentUserId, storage: StorageDep) -> WasteEntryRead:
    entry = WasteEntry(user_id=user_id, **payload.model_dump())
    created = await storage.create_waste_entry(entry)
    return WasteEntryRead.model_validate(created)


@router.get(
    "",
    response_model=List[WasteEntryRead],
    summary="List Waste Entries",
    description="List the current user's entries, newest first, optionally within a date range.",
)
async def list_waste_entries(
    user_id: CurrentUserId,
    storage: StorageDep,
    start_date: Optional[datetime] = Query(None, alias="startDate", description="Inclusive lower bound."),
    end_date: Optional[datetime] = Query(None, alias="endDate", description="Inclusive upper bound."),
) -> List[WasteEntryRead]:
    """
    List waste entries.

    Without ``startDate`` and ``endDate`` every entry is returned. When only one
    bound is given the other side of the range is open.
    """
    if start_date is None and end_date is None:
        entries = await storage.get_user_waste_entries(user_id)
    else:
        start = as_naive_utc(start_date) if start_date else datetime.min
        end = as_naive_utc(end_date) if end_date else datetime.max
        entries = await storage.get_waste_entries_by_date_range(user_id, start, end)
    return [WasteEntryRead.model_validate(e) for e in entries]
