"""
Pickup Schedule Endpoints.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from ecowaste.core.database.entities import PickupSchedule
from ecowaste.core.database.schemas import PickupScheduleCreate, PickupScheduleRead, PickupStatusUpdate
from ecowaste.server.services.deps import CurrentUserId, StorageDep

router = APIRouter(prefix="/pickups", tags=["pickups"])


@router.post(
    "",
    response_model=PickupScheduleRead,
    status_code=status.HTTP_201_CREATED,
    summary="Schedule Pickup",
)
async def create_pickup(
    payload: PickupScheduleCreate, user_id: CurrentUserId, storage: StorageDep
) -> PickupScheduleRead:
    schedule = PickupSchedule(user_id=user_id, **payload.model_dump())
    created = await storage.create_pickup_schedule(schedule)
    return PickupScheduleRead.model_validate(created)


@router.get(
    "",
    response_model=List[PickupScheduleRead],
    summary="List Pickups",
    description="List the current user's pickups, latest scheduled date first.",
)
async def list_pickups(user_id: CurrentUserId, storage: StorageDep) -> List[PickupScheduleRead]:
    schedules = await storage.get_user_pickup_schedules(user_id)
    return [PickupScheduleRead.model_validate(s) for s in schedules]


@router.patch(
    "/{pickup_id}/status",
    response_model=PickupScheduleRead,
    summary="Update Pickup Status",
    description="Move a pickup to scheduled, completed or cancelled. Completing stamps completedAt.",
    responses={404: {"description": "Pickup not found"}},
)
async def update_pickup_status(
    pickup_id: int, payload: PickupStatusUpdate, user_id: CurrentUserId, storage: StorageDep
) -> PickupScheduleRead:
    schedule = await storage.update_pickup_schedule_status(pickup_id, payload.status)
    if schedule is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pickup not found")
    return PickupScheduleRead.model_validate(schedule)
