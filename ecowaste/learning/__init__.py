"""Learning features: AI-generated recycling quizzes and their scoring."""

from .quiz import QuizAnswerDetail, QuizGenerator, QuizQuestion, QuizResult, score_quiz

__all__ = ["QuizAnswerDetail", "QuizGenerator", "QuizQuestion", "QuizResult", "score_quiz"]
