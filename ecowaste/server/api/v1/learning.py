"""
Learning Endpoints.

Quizzes are generated on demand and not stored; the client submits the
questions back together with its answers, and only the scored attempt is
recorded.
"""

from typing import List

from fastapi import APIRouter

from ecowaste.core.database.entities import QuizAttempt
from ecowaste.core.database.schemas import LearningProgress, QuizGenerateRequest, QuizSubmitRequest
from ecowaste.core.logging_config import get_logger
from ecowaste.learning import QuizQuestion, QuizResult, score_quiz
from ecowaste.server.core.config import settings
from ecowaste.server.services.deps import CurrentUserId, QuizGeneratorDep, StorageDep

logger = get_logger(__name__)

router = APIRouter(tags=["learning"])


@router.post(
    "/quiz/generate",
    response_model=List[QuizQuestion],
    summary="Generate Quiz",
    description="Generate multiple-choice questions about a waste or recycling topic.",
    responses={502: {"description": "The language model failed to produce a quiz"}},
)
async def generate_quiz(
    payload: QuizGenerateRequest, user_id: CurrentUserId, generator: QuizGeneratorDep
) -> List[QuizQuestion]:
    count = payload.count or settings.quiz.question_count
    return await generator.generate(payload.topic, payload.difficulty.value, count)


@router.post(
    "/quiz/submit",
    response_model=QuizResult,
    summary="Submit Quiz",
    description="Score the answers and record the attempt in the user's learning progress.",
    responses={400: {"description": "Missing or invalid answers"}},
)
async def submit_quiz(payload: QuizSubmitRequest, user_id: CurrentUserId, storage: StorageDep) -> QuizResult:
    result = score_quiz(payload.questions, payload.answers)
    await storage.record_quiz_attempt(
        QuizAttempt(
            user_id=user_id,
            topic=payload.topic,
            difficulty=payload.difficulty.value,
            total_questions=result.total_questions,
            correct_answers=result.correct,
            score=result.score,
        )
    )
    logger.debug(f"User {user_id} scored {result.score}% on {payload.topic!r}")
    return result


@router.get(
    "/user/learning-progress",
    response_model=LearningProgress,
    summary="Get My Learning Progress",
)
async def get_learning_progress(user_id: CurrentUserId, storage: StorageDep) -> LearningProgress:
    return await storage.get_learning_progress(user_id)
