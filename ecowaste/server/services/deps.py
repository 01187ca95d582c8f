"""
Request Dependencies.

Provides the authenticated user id, a ``DatabaseStorage`` bound to the request's
session and the quiz generator for API endpoints.
"""

from typing import Annotated, Optional

from fastapi import Depends, Header, HTTPException, status
from sqlmodel.ext.asyncio.session import AsyncSession

from ecowaste.core.database.session import get_session
from ecowaste.core.storage import DatabaseStorage
from ecowaste.learning import QuizGenerator
from ecowaste.server.core.config import settings
from ecowaste.server.core.constant import USER_ID_HEADER


async def get_current_user_id(
    x_user_id: Optional[str] = Header(default=None, alias=USER_ID_HEADER),
) -> str:
    """
    Resolve the authenticated user.

    Login happens at the identity provider; the fronting auth proxy forwards the
    resulting user id in the ``X-User-Id`` header.
    """
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return x_user_id.strip()


async def get_storage(session: AsyncSession = Depends(get_session)) -> DatabaseStorage:
    return DatabaseStorage(session)


def get_quiz_generator() -> QuizGenerator:
    return QuizGenerator(model=settings.quiz.model or None)


CurrentUserId = Annotated[str, Depends(get_current_user_id)]
StorageDep = Annotated[DatabaseStorage, Depends(get_storage)]
QuizGeneratorDep = Annotated[QuizGenerator, Depends(get_quiz_generator)]
