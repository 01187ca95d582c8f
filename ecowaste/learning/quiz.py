"""Quiz generation and scoring for the learning section.

Responsibilities
----------------

- Produce multiple-choice questions about a waste or recycling topic.
- Score a set of submitted answers against those questions.

Generation supports two modes, mirroring how model access is configured:

- ``model=None``: deterministic fallback that serves questions from a built-in
  bank. This is useful for tests or deployments without LLM credentials.
- ``model!=None``: uses Pydantic AI to produce a list of ``QuizQuestion``
  objects. Any model accepted by ``pydantic_ai.Agent`` works, including a
  ``"provider:model"`` string.
"""

from __future__ import annotations

import logging
import math
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel
from pydantic_ai import Agent
from pydantic_ai.exceptions import AgentRunError, UserError

from ..core.errors import QuizGenerationError, QuizValidationError
from ..core.monitoring import log_quiz_generated

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an environmental educator writing quizzes about waste management, "
    "recycling and sustainable living. Every question has between 2 and 6 options, "
    "exactly one correct option, and a one or two sentence explanation."
)


class _QuizModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class QuizQuestion(_QuizModel):
    """A multiple-choice question; ``correct_answer`` indexes into ``options``."""

    question: str = Field(min_length=1)
    options: List[str] = Field(min_length=2, max_length=6)
    correct_answer: int = Field(ge=0)
    explanation: str = ""

    @model_validator(mode="after")
    def _check_correct_answer(self) -> "QuizQuestion":
        if self.correct_answer >= len(self.options):
            raise ValueError(
                f"correct_answer {self.correct_answer} is out of range for {len(self.options)} options"
            )
        return self


class QuizAnswerDetail(_QuizModel):
    """Per-question outcome of a submission."""

    question: str
    selected_answer: int
    correct_answer: int
    is_correct: bool
    explanation: str


class QuizResult(_QuizModel):
    """Score of a submission. ``score`` is the percentage of correct answers."""

    score: int
    total_questions: int
    correct: int
    wrong: int
    details: List[QuizAnswerDetail]


_BUILTIN_QUESTIONS: List[QuizQuestion] = [
    QuizQuestion(
        question="Which of these items can usually go in household recycling?",
        options=["Greasy pizza box", "Clean aluminium can", "Used tissue", "Ceramic mug"],
        correct_answer=1,
        explanation="Clean metal cans are accepted almost everywhere; food-soiled paper and ceramics are not.",
    ),
    QuizQuestion(
        question="What should you do with a plastic bottle before recycling it?",
        options=["Fill it with other waste", "Rinse and empty it", "Cut it into pieces", "Wrap it in a bag"],
        correct_answer=1,
        explanation="Empty, rinsed containers avoid contaminating a whole batch of recyclables.",
    ),
    QuizQuestion(
        question="Where should used batteries go?",
        options=["General waste", "Compost", "A battery drop-off point", "Paper recycling"],
        correct_answer=2,
        explanation="Batteries contain metals and chemicals that need special handling and can start bin fires.",
    ),
    QuizQuestion(
        question="Which waste stream produces methane when buried in landfill?",
        options=["Glass", "Food scraps", "Steel", "Concrete"],
        correct_answer=1,
        explanation="Organic waste decomposes without oxygen in landfill and releases methane.",
    ),
    QuizQuestion(
        question="Which of the waste hierarchy steps comes first?",
        options=["Recycle", "Reuse", "Reduce", "Recover"],
        correct_answer=2,
        explanation="Avoiding waste in the first place has the largest environmental benefit.",
    ),
    QuizQuestion(
        question="What does the number inside the plastic recycling triangle indicate?",
        options=["How many times it was recycled", "The resin type", "The bin colour", "The weight in grams"],
        correct_answer=1,
        explanation="Resin identification codes tell sorting facilities what kind of plastic an item is made of.",
    ),
    QuizQuestion(
        question="Why should glass and ceramics not be mixed?",
        options=[
            "Ceramics melt at a different temperature",
            "Ceramics are heavier",
            "Glass is collected on different days",
            "There is no problem mixing them",
        ],
        correct_answer=0,
        explanation="Ceramic fragments do not melt in glass furnaces and cause defects in new glass.",
    ),
    QuizQuestion(
        question="What is the best option for old but working electronics?",
        options=["Throw them away", "Donate or resell them", "Burn them", "Store them forever"],
        correct_answer=1,
        explanation="Reusing devices extends their life and delays e-waste processing.",
    ),
]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_quiz(questions: Sequence[QuizQuestion], answers: Sequence[int]) -> QuizResult:
    """Score ``answers`` against ``questions``.

    ``answers[i]`` is the selected option index for ``questions[i]``. The score
    is the rounded-half-up percentage of correct answers.

    Raises:
        QuizValidationError: If there are no questions, an answer is missing, or
            an answer is not a valid option index.
    """
    if not questions:
        raise QuizValidationError("Quiz has no questions")
    if len(answers) != len(questions):
        raise QuizValidationError(f"Expected {len(questions)} answers, got {len(answers)}")

    details: List[QuizAnswerDetail] = []
    for index, (question, selected) in enumerate(zip(questions, answers)):
        if not 0 <= selected < len(question.options):
            raise QuizValidationError(f"Answer {selected} for question {index + 1} is not a valid option")
        details.append(
            QuizAnswerDetail(
                question=question.question,
                selected_answer=selected,
                correct_answer=question.correct_answer,
                is_correct=selected == question.correct_answer,
                explanation=question.explanation,
            )
        )

    correct = sum(1 for detail in details if detail.is_correct)
    total = len(details)
    return QuizResult(
        score=_round_half_up(correct / total * 100),
        total_questions=total,
        correct=correct,
        wrong=total - correct,
        details=details,
    )


class QuizGenerator:
    """Generates quizzes with Pydantic AI, or from the built-in bank when no model is set."""

    def __init__(self, *, model: Any | None = None) -> None:
        """
        Initialize the generator.

        Args:
            model: A Pydantic AI model instance or ``"provider:model"`` name.
                   If None, questions come from the built-in bank.
        """
        self._model = model

    @property
    def model_name(self) -> Optional[str]:
        if self._model is None:
            return None
        if isinstance(self._model, str):
            return self._model
        return getattr(self._model, "model_name", type(self._model).__name__)

    async def generate(self, topic: str, difficulty: str, count: int = 5) -> List[QuizQuestion]:
        """Generate ``count`` questions about ``topic``.

        Returns:
            Between 1 and ``count`` questions. The fallback bank may hold fewer
            than ``count``.

        Raises:
            QuizGenerationError: If the model call fails or yields no usable questions.
        """
        if self._model is None:
            questions = [q.model_copy() for q in _BUILTIN_QUESTIONS[:count]]
            log_quiz_generated(topic, difficulty, len(questions), None)
            return questions

        try:
            agent: Agent = Agent(
                self._model,
                output_type=List[QuizQuestion],
                system_prompt=SYSTEM_PROMPT,
            )
            result = await agent.run(
                (
                    f"Write {count} multiple-choice questions.\n\n"
                    f"topic={topic}\n"
                    f"difficulty={difficulty}\n"
                )
            )
        except (AgentRunError, UserError) as exc:
            logger.warning(f"Quiz generation failed for topic {topic!r}: {exc}")
            raise QuizGenerationError("Failed to generate quiz") from exc

        questions = list(result.output)[:count]
        if not questions:
            raise QuizGenerationError("Failed to generate quiz")

        log_quiz_generated(topic, difficulty, len(questions), self.model_name)
        return questions
