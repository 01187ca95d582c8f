"""
Current User Endpoints.

The login flow itself runs at the identity provider. These endpoints read and
maintain the profile of the user the auth proxy identified.
"""

from fastapi import APIRouter, HTTPException, status

from ecowaste.core.database.schemas import UserRead, UserUpsert
from ecowaste.core.errors import UserNotFoundError
from ecowaste.core.logging_config import get_logger
from ecowaste.server.services.deps import CurrentUserId, StorageDep

logger = get_logger(__name__)

router = APIRouter(tags=["auth"])


@router.get(
    "/auth/user",
    response_model=UserRead,
    summary="Get Current User",
    description="Retrieve the profile and EcoPoints balance of the authenticated user.",
    responses={
        401: {"description": "No authenticated user"},
        404: {"description": "The user has no profile yet"},
    },
)
async def get_auth_user(user_id: CurrentUserId, storage: StorageDep) -> UserRead:
    user = await storage.get_user(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return UserRead.model_validate(user)


@router.put(
    "/auth/user",
    response_model=UserRead,
    summary="Create or Update Current User",
    description="Create the authenticated user's profile or update the fields given in the body.",
    responses={401: {"description": "No authenticated user"}},
)
async def upsert_auth_user(payload: UserUpsert, user_id: CurrentUserId, storage: StorageDep) -> UserRead:
    """
    Upsert the current user.

    Called after each sign-in with the claims from the identity provider. Fields
    missing from the body keep their stored values; the EcoPoints balance is
    never changed here.
    """
    data = {"id": user_id, **payload.model_dump(exclude_unset=True)}
    user = await storage.upsert_user(data)
    return UserRead.model_validate(user)


@router.get(
    "/login",
    summary="Login",
    description="Sign-in is handled by the identity provider in front of this service.",
    responses={401: {"description": "Always; authenticate with the identity provider"}},
)
async def login():
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Sign in through the identity provider",
    )
