"""
scoring.py — Negative Marking
==============================
+1 for every correct answer.  Once there are MORE than two incorrect
answers, every incorrect answer costs 1/3: all of them, not just the
ones past the threshold.  Skips score nothing and never count towards
the threshold.

The raw score is authoritative and may go negative; display_score is
the same value floored at zero for the summary card.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

PENALTY_THRESHOLD = 2
PENALTY_PER_INCORRECT = 1 / 3


class AnswerStatus(Enum):
    CORRECT   = "CORRECT"
    INCORRECT = "INCORRECT"
    SKIPPED   = "SKIPPED"


@dataclass(frozen=True)
class ScoreSummary:
    correct_count:   int
    incorrect_count: int
    skipped_count:   int
    raw_score:       float

    @property
    def display_score(self) -> float:
        return max(0.0, self.raw_score)

    @property
    def penalty_applied(self) -> bool:
        return self.incorrect_count > PENALTY_THRESHOLD

    def to_dict(self):
        return {
            "correctCount":   self.correct_count,
            "incorrectCount": self.incorrect_count,
            "skippedCount":   self.skipped_count,
            "rawScore":       self.raw_score,
            "score":          self.display_score,
            "penaltyApplied": self.penalty_applied,
        }


def raw_score(correct: int, incorrect: int) -> float:
    score = float(correct)
    if incorrect > PENALTY_THRESHOLD:
        score -= incorrect * PENALTY_PER_INCORRECT
    return score


def calculate_score(history: Iterable[AnswerStatus]) -> ScoreSummary:
    statuses = list(history)
    correct   = statuses.count(AnswerStatus.CORRECT)
    incorrect = statuses.count(AnswerStatus.INCORRECT)
    skipped   = statuses.count(AnswerStatus.SKIPPED)
    return ScoreSummary(
        correct_count=correct,
        incorrect_count=incorrect,
        skipped_count=skipped,
        raw_score=raw_score(correct, incorrect),
    )
