"""
provider.py — Question & Grading Provider
==========================================
The quiz never talks to an AI service directly.  It talks to a
QuestionProvider, which has two async methods:

    generate_questions()                          → List[Question]
    evaluate_answer(question, answer, context)    → Grade

Neither raises.  A missing API key, a failed call or a reply that is
not the JSON we asked for all degrade to an empty list / a zero grade
with explanatory feedback.  load_questions() then swaps in the three
built-in questions so the Assess tab always has something to show.

GeminiProvider is the production implementation, backed by the
google-generativeai client with JSON response schemas.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

import google.generativeai as genai

from quiz.fallback import FALLBACK_QUESTIONS
from quiz.question import Question, parse_questions

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"
FALLBACK_WARNING = "Failed to load AI questions. Using standard set."

MISSING_KEY_FEEDBACK = "API Key missing. Cannot evaluate."
GRADING_ERROR_FEEDBACK = "Error evaluating answer. Please try again."


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------
QUESTIONS_SCHEMA: Dict[str, Any] = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "id":                 {"type": "STRING"},
            "type":               {"type": "STRING", "enum": ["MCQ"]},
            "text":               {"type": "STRING"},
            "options":            {"type": "ARRAY", "items": {"type": "STRING"}},
            "correctOptionIndex": {"type": "INTEGER"},
            "context":            {"type": "STRING"},
        },
        "required": ["id", "type", "text", "options", "correctOptionIndex", "context"],
    },
}

GRADE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "score":    {"type": "NUMBER"},
        "feedback": {"type": "STRING"},
    },
    "required": ["score", "feedback"],
}


@dataclass(frozen=True)
class Grade:
    score:    float
    feedback: str

    def to_dict(self):
        return {"score": self.score, "feedback": self.feedback}


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------
def questions_prompt(count: int) -> str:
    return f"""
Generate a quiz with exactly {count} Multiple Choice Questions (MCQs) about the **Basic** Bubble Sort algorithm.

CRITICAL VISUAL INSTRUCTION:
- In the visible question text and options, refer to the algorithm simply as "Bubble Sort".
- DO NOT use the words "unoptimized", "basic", or "standard" to qualify the algorithm name in the question text.

LOGICAL INSTRUCTION (for your internal generation):
- The underlying logic and answers MUST be based on the unoptimized version (it runs all passes regardless of whether swaps occurred).
- Best Case Time Complexity is O(N^2) for this version.
- Total comparisons is always N(N-1)/2.

STRICTLY AVOID:
- Questions about "Optimized Bubble Sort".
- Questions about "Early termination" or checking a "swapped" flag.
- Questions implying Best Case time complexity is O(N).

INCLUDE questions about:
- Core mechanics: comparing adjacent pairs, swapping if out of order.
- Pass logic: after k passes, the k largest elements are sorted at the end.
- Comparison counts: specific counts for Pass 1 (N-1), Pass 2 (N-2), etc.
- Tracing: "What is the state of array [X, Y, Z...] after the first pass?"
- Complexity: Time O(N^2), Space O(1).
- Stability: definition and why Bubble Sort is stable.
- Mechanics definitions: "What is a pass?", "What is the bubbling effect?".

For each question, provide a 'context' field explaining the answer.
Format as a valid JSON array of objects.
"""


def grading_prompt(question_text: str, user_answer: str, context: str) -> str:
    return f"""
You are a Computer Science Professor grading a student's answer about Bubble Sort.

Context from course material:
{context}

Question: "{question_text}"
Student Answer: "{user_answer}"

Grade the answer on a scale of 0 to 100.
Provide brief, constructive feedback.
If the answer is incorrect, explain why based on the Bubble Sort algorithm rules.
"""


# ---------------------------------------------------------------------------
# Providers
# ---------------------------------------------------------------------------
class QuestionProvider:
    """Provider with nothing behind it: no questions, zero grades."""

    async def generate_questions(self) -> List[Question]:
        return []

    async def evaluate_answer(self, question_text: str, user_answer: str, context: str) -> Grade:
        return Grade(0.0, MISSING_KEY_FEEDBACK)


def _gemini_model(api_key: str, model_name: str, schema: Dict[str, Any]):
    genai.configure(api_key=api_key)
    return genai.GenerativeModel(
        model_name,
        generation_config=genai.GenerationConfig(
            response_mime_type="application/json",
            response_schema=schema,
        ),
    )


class GeminiProvider(QuestionProvider):
    """
    Attributes:
        api_key        : Gemini credential; empty means "not configured".
        model_name     : Gemini model id.
        question_count : How many MCQs to ask for.
        model_factory  : callable(api_key, model_name, schema) → object with
                         an async generate_content_async(prompt).  Swapped
                         out in tests.
    """

    def __init__(
        self,
        api_key: str,
        model_name: str = DEFAULT_MODEL,
        question_count: int = 20,
        model_factory: Optional[Callable[[str, str, Dict[str, Any]], Any]] = None,
    ):
        self.api_key        = api_key or ""
        self.model_name     = model_name
        self.question_count = question_count
        self.model_factory  = model_factory or _gemini_model

    async def generate_questions(self) -> List[Question]:
        if not self.api_key:
            logger.warning("No Gemini API key configured; skipping question generation.")
            return []

        try:
            data = await self._ask(questions_prompt(self.question_count), QUESTIONS_SCHEMA)
        except Exception:
            logger.exception("Failed to generate questions")
            return []

        if not isinstance(data, list):
            logger.warning("Question payload is a %s, expected a list", type(data).__name__)
            return []

        questions = parse_questions(data)
        logger.info("Generated %d questions (%d dropped)", len(questions), len(data) - len(questions))
        return questions

    async def evaluate_answer(self, question_text: str, user_answer: str, context: str) -> Grade:
        if not self.api_key:
            return Grade(0.0, MISSING_KEY_FEEDBACK)

        try:
            data = await self._ask(grading_prompt(question_text, user_answer, context), GRADE_SCHEMA)
            score = min(100.0, max(0.0, float(data["score"])))
            feedback = str(data["feedback"])
        except Exception:
            logger.exception("Evaluation error")
            return Grade(0.0, GRADING_ERROR_FEEDBACK)

        return Grade(score, feedback)

    async def _ask(self, prompt: str, schema: Dict[str, Any]) -> Any:
        model = self.model_factory(self.api_key, self.model_name, schema)
        response = await model.generate_content_async(prompt)
        text = response.text
        if not text:
            raise ValueError("No response from AI")
        return json.loads(text)


# ---------------------------------------------------------------------------
# Fallback
# ---------------------------------------------------------------------------
async def load_questions(provider: QuestionProvider) -> Tuple[List[Question], Optional[str]]:
    """
    Ask the provider for questions.  Returns (questions, warning); the
    warning is set when the built-in set had to be used.  No retry.
    """
    try:
        questions = await provider.generate_questions()
    except Exception:
        logger.exception("Question provider raised")
        questions = []

    if questions:
        return list(questions), None

    logger.warning("Using %d fallback questions", len(FALLBACK_QUESTIONS))
    return list(FALLBACK_QUESTIONS), FALLBACK_WARNING
