"""
Reward Endpoints.

Redeeming spends EcoPoints and issues a redemption code in one transaction.
"""

from typing import List

from fastapi import APIRouter, status

from ecowaste.core.database.schemas import RewardRead, UserRewardRead
from ecowaste.server.services.deps import CurrentUserId, StorageDep

router = APIRouter(tags=["rewards"])


@router.get(
    "/rewards",
    response_model=List[RewardRead],
    summary="List Available Rewards",
    description="Active rewards, cheapest first.",
)
async def list_rewards(user_id: CurrentUserId, storage: StorageDep) -> List[RewardRead]:
    rewards = await storage.get_available_rewards()
    return [RewardRead.model_validate(r) for r in rewards]


@router.get(
    "/user/rewards",
    response_model=List[UserRewardRead],
    summary="List My Redemptions",
)
async def list_my_rewards(user_id: CurrentUserId, storage: StorageDep) -> List[UserRewardRead]:
    redemptions = await storage.get_user_rewards(user_id)
    return [UserRewardRead.model_validate(r) for r in redemptions]


@router.post(
    "/rewards/{reward_id}/redeem",
    response_model=UserRewardRead,
    status_code=status.HTTP_201_CREATED,
    summary="Redeem Reward",
    responses={
        201: {"description": "Reward redeemed; the body carries the redemption code"},
        400: {"description": "Insufficient EcoPoints"},
        404: {"description": "Reward not found"},
    },
)
async def redeem_reward(reward_id: int, user_id: CurrentUserId, storage: StorageDep) -> UserRewardRead:
    user_reward = await storage.redeem_reward(user_id, reward_id)
    return UserRewardRead.model_validate(user_reward)
