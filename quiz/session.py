"""
session.py — Assess Mode Flow
==============================
One QuizSession per attempt.  The flow for every question is:

    present  →  submit(option) | skip()  →  next_question()

A question takes exactly one outcome: a second submit or skip returns
the result already recorded.  next_question() after the last question
switches the session to its summary; after that submit() and skip()
raise ValueError.
"""

import logging
from typing import List, Optional, Tuple

from quiz.question import AssessmentResult, Question
from quiz.scoring import AnswerStatus, ScoreSummary, calculate_score

logger = logging.getLogger(__name__)


class QuizSession:
    """
    Attributes:
        questions     : The questions for this attempt, in order.
        current_index : Index of the question on screen.
        history       : (question_id, AnswerStatus) per answered question.
        result        : Outcome of the current question, or None.
        show_summary  : True once the last question has been passed.
    """

    def __init__(self, questions: List[Question]):
        if not questions:
            raise ValueError("a quiz needs at least one question")
        self.questions:     List[Question]                     = list(questions)
        self.current_index: int                                = 0
        self.history:       List[Tuple[str, AnswerStatus]]     = []
        self.result:        Optional[AssessmentResult]         = None
        self.show_summary:  bool                               = False

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_question(self) -> Question:
        return self.questions[self.current_index]

    @property
    def progress(self) -> Tuple[int, int]:
        return self.current_index + 1, len(self.questions)

    @property
    def is_last(self) -> bool:
        return self.current_index == len(self.questions) - 1

    def summary(self) -> ScoreSummary:
        return calculate_score(status for _, status in self.history)

    # ------------------------------------------------------------------
    # Answering
    # ------------------------------------------------------------------
    def submit(self, option_index: int) -> AssessmentResult:
        if self.show_summary:
            raise ValueError("quiz already finished")
        if self.result is not None:
            return self.result

        question = self.current_question
        if not 0 <= option_index < len(question.options):
            raise ValueError(f"option {option_index} out of range")

        if option_index == question.correct_option_index:
            status = AnswerStatus.CORRECT
            feedback = "Correct! Well done."
        else:
            status = AnswerStatus.INCORRECT
            feedback = f"Incorrect. The correct answer is: {question.correct_option}"

        self.result = AssessmentResult(
            question_id=question.id,
            feedback=feedback,
            user_answer=question.options[option_index],
            status=status,
            option_index=option_index,
        )
        self.history.append((question.id, status))
        return self.result

    def skip(self) -> AssessmentResult:
        if self.show_summary:
            raise ValueError("quiz already finished")
        if self.result is not None:
            return self.result

        question = self.current_question
        self.result = AssessmentResult(
            question_id=question.id,
            feedback=f"Skipped. The correct answer was: {question.correct_option}",
            user_answer="Skipped",
            status=AnswerStatus.SKIPPED,
        )
        self.history.append((question.id, AnswerStatus.SKIPPED))
        return self.result

    def next_question(self) -> bool:
        """Move on.  Returns False if the current question has no outcome yet."""
        if self.result is None:
            return False
        self.result = None
        if self.is_last:
            self.show_summary = True
            logger.info("quiz finished: %s", self.summary())
        else:
            self.current_index += 1
        return True
