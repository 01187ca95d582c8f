"""
Schema models for quiz requests and the learning progress summary.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from ....learning.quiz import QuizQuestion
from ...models.domain.enums import QuizDifficulty
from .common import CamelModel


class QuizGenerateRequest(CamelModel):
    """Schema for asking for a new quiz."""

    topic: str = Field(min_length=1, max_length=200)
    difficulty: QuizDifficulty = QuizDifficulty.medium
    count: Optional[int] = Field(default=None, ge=1, le=20, description="Defaults to the configured question count")


class QuizSubmitRequest(CamelModel):
    """Schema for submitting answers to a generated quiz.

    ``answers[i]`` is the selected option index for ``questions[i]``.
    """

    topic: str = Field(min_length=1, max_length=200)
    difficulty: QuizDifficulty = QuizDifficulty.medium
    questions: List[QuizQuestion] = Field(min_length=1)
    answers: List[int]


class QuizAttemptRead(CamelModel):
    """Schema for reading a recorded quiz attempt."""

    id: int
    topic: str
    difficulty: str
    total_questions: int
    correct_answers: int
    score: int
    created_at: datetime


class LearningProgress(CamelModel):
    """Aggregated quiz history for a user."""

    quizzes_taken: int = 0
    average_score: float = 0.0
    best_score: int = 0
    total_correct: int = 0
    total_questions: int = 0
    topics: List[str] = Field(default_factory=list)
    recent_attempts: List[QuizAttemptRead] = Field(default_factory=list)
