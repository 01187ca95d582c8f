"""
Cleanup Event Endpoints.
"""

from typing import List

from fastapi import APIRouter, status

from ecowaste.core.database.entities import CleanupEvent
from ecowaste.core.database.schemas import CleanupEventCreate, CleanupEventRead, JoinEventResult
from ecowaste.server.services.deps import CurrentUserId, StorageDep

router = APIRouter(prefix="/cleanup-events", tags=["community"])


@router.get(
    "",
    response_model=List[CleanupEventRead],
    summary="List Upcoming Cleanup Events",
    description="Events that have not started yet, soonest first.",
)
async def list_upcoming_events(user_id: CurrentUserId, storage: StorageDep) -> List[CleanupEventRead]:
    events = await storage.get_upcoming_cleanup_events()
    return [CleanupEventRead.model_validate(e) for e in events]


@router.post(
    "",
    response_model=CleanupEventRead,
    status_code=status.HTTP_201_CREATED,
    summary="Organize Cleanup Event",
    description="Create an event organized by the current user.",
)
async def create_event(payload: CleanupEventCreate, user_id: CurrentUserId, storage: StorageDep) -> CleanupEventRead:
    event = CleanupEvent(organizer_id=user_id, **payload.model_dump())
    created = await storage.create_cleanup_event(event)
    return CleanupEventRead.model_validate(created)


@router.post(
    "/{event_id}/join",
    response_model=JoinEventResult,
    summary="Join Cleanup Event",
    description="Join an event. Joining twice is harmless and does not count twice.",
    responses={
        400: {"description": "The event is full"},
        404: {"description": "Event not found"},
    },
)
async def join_event(event_id: int, user_id: CurrentUserId, storage: StorageDep) -> JoinEventResult:
    joined = await storage.join_cleanup_event(event_id, user_id)
    message = "Joined cleanup event" if joined else "Already joined this cleanup event"
    return JoinEventResult(event_id=event_id, joined=joined, message=message)
