"""
Eco Challenge Endpoints.
"""

from typing import List

from fastapi import APIRouter

from ecowaste.core.database.schemas import ChallengeProgressRead, ChallengeProgressUpdate, EcoChallengeRead
from ecowaste.server.services.deps import CurrentUserId, StorageDep

router = APIRouter(tags=["challenges"])


@router.get(
    "/challenges",
    response_model=List[EcoChallengeRead],
    summary="List Active Challenges",
    description="Active challenges, earliest end date first.",
)
async def list_active_challenges(user_id: CurrentUserId, storage: StorageDep) -> List[EcoChallengeRead]:
    challenges = await storage.get_active_challenges()
    return [EcoChallengeRead.model_validate(c) for c in challenges]


@router.get(
    "/user/challenges",
    response_model=List[ChallengeProgressRead],
    summary="List My Challenge Progress",
)
async def list_my_progress(user_id: CurrentUserId, storage: StorageDep) -> List[ChallengeProgressRead]:
    progress = await storage.get_user_challenge_progress(user_id)
    return [ChallengeProgressRead.model_validate(p) for p in progress]


@router.post(
    "/challenges/{challenge_id}/progress",
    response_model=ChallengeProgressRead,
    summary="Add Challenge Progress",
    description="Add the given amount to the current user's progress on a challenge.",
)
async def add_progress(
    challenge_id: int, payload: ChallengeProgressUpdate, user_id: CurrentUserId, storage: StorageDep
) -> ChallengeProgressRead:
    await storage.update_challenge_progress(user_id, challenge_id, payload.progress)
    progress = await storage.get_user_challenge_progress(user_id)
    current = next(p for p in progress if p.challenge_id == challenge_id)
    return ChallengeProgressRead.model_validate(current)
