"""
Quiz attempt entity models.

This module contains the database entity for scored quiz submissions, the
source of the learning progress summary.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class QuizAttempt(Base, table=True):
    """Entity for a scored quiz submission.

    Table: quiz_attempts
    """

    __tablename__ = "quiz_attempts"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="users.id", max_length=128, index=True)
    topic: str = Field(max_length=200)
    difficulty: str = Field(default="medium", max_length=16)
    total_questions: int = Field()
    correct_answers: int = Field()
    score: int = Field(description="Percentage of correct answers, 0-100")
    created_at: datetime = Field(default_factory=utc_now, index=True, sa_type=DateTime)

    def __repr__(self) -> str:
        return f"QuizAttempt(id={self.id}, user_id={self.user_id}, topic={self.topic}, score={self.score})"
