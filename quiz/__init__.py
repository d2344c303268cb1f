"""
quiz/
-----
Assess mode: question records, scoring, the AI provider boundary and
the per-attempt session.

    from quiz import QuizSession, GeminiProvider, load_questions
"""

from quiz.question import AssessmentResult, Question, parse_questions
from quiz.scoring  import AnswerStatus, ScoreSummary, calculate_score, raw_score
from quiz.fallback import FALLBACK_QUESTIONS
from quiz.provider import (
    FALLBACK_WARNING,
    GeminiProvider,
    Grade,
    QuestionProvider,
    load_questions,
)
from quiz.session  import QuizSession

__all__ = [
    "AssessmentResult",
    "Question",
    "parse_questions",
    "AnswerStatus",
    "ScoreSummary",
    "calculate_score",
    "raw_score",
    "FALLBACK_QUESTIONS",
    "FALLBACK_WARNING",
    "GeminiProvider",
    "Grade",
    "QuestionProvider",
    "load_questions",
    "QuizSession",
]
