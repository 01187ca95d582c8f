"""
User Analytics Endpoints.
"""

from fastapi import APIRouter

from ecowaste.core.database.schemas import UserAnalytics
from ecowaste.server.services.deps import CurrentUserId, StorageDep

router = APIRouter(tags=["analytics"])


@router.get(
    "/user/analytics",
    response_model=UserAnalytics,
    summary="Get My Analytics",
    description="Entry count, EcoPoints, carbon footprint and quantity per waste type.",
)
async def get_analytics(user_id: CurrentUserId, storage: StorageDep) -> UserAnalytics:
    return await storage.get_user_analytics(user_id)
