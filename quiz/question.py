"""
question.py — Quiz Records
===========================
Question is what a provider hands to the quiz; AssessmentResult is
what the quiz hands back to the UI after each answer or skip.

from_dict() is the one place provider output gets validated.  The
quiz session treats every Question it receives as well-formed.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from quiz.scoring import AnswerStatus


@dataclass(frozen=True)
class Question:
    id:                   str
    text:                 str
    options:              List[str] = field(default_factory=list)
    correct_option_index: int       = 0
    context:              str       = ""
    type:                 str       = "MCQ"

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_option_index]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional["Question"]:
        """
        Build a Question from provider JSON (camelCase or snake_case keys).
        Returns None for anything the quiz could not present.
        """
        if not isinstance(data, dict):
            return None

        qid  = str(data.get("id", "")).strip()
        text = str(data.get("text", "")).strip()
        raw_opts = data.get("options")
        if not isinstance(raw_opts, list):
            return None
        opts = [str(o).strip() for o in raw_opts]
        raw_idx = data.get("correctOptionIndex", data.get("correct_option_index"))

        try:
            idx = int(raw_idx)
        except (TypeError, ValueError):
            return None

        if not qid or not text or len(opts) < 2 or not 0 <= idx < len(opts):
            return None
        # the index refers to the list as sent; a blank entry makes the item unusable
        if not all(opts):
            return None

        return cls(
            id=qid,
            text=text,
            options=opts,
            correct_option_index=idx,
            context=str(data.get("context", "")).strip(),
            type=str(data.get("type", "MCQ")) or "MCQ",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id":                 self.id,
            "type":               self.type,
            "text":               self.text,
            "options":            list(self.options),
            "correctOptionIndex": self.correct_option_index,
            "context":            self.context,
        }


def parse_questions(items: Iterable[Any]) -> List[Question]:
    """Validate a provider payload, dropping malformed items and repeated ids."""
    questions: List[Question] = []
    seen = set()
    for item in items or []:
        q = Question.from_dict(item)
        if q is None or q.id in seen:
            continue
        seen.add(q.id)
        questions.append(q)
    return questions


@dataclass(frozen=True)
class AssessmentResult:
    question_id:  str
    feedback:     str
    user_answer:  str
    status:       AnswerStatus    = AnswerStatus.SKIPPED
    option_index: Optional[int]   = None    # None when skipped
    score:        Optional[float] = None    # essay grading only

    @property
    def is_correct(self) -> bool:
        return self.status is AnswerStatus.CORRECT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "questionId":  self.question_id,
            "status":      self.status.value,
            "isCorrect":   self.is_correct,
            "optionIndex": self.option_index,
            "score":       self.score,
            "feedback":    self.feedback,
            "userAnswer":  self.user_answer,
        }
