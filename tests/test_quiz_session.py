"""
Tests for question validation and the per-attempt quiz flow.
"""

import unittest

from quiz import FALLBACK_QUESTIONS, Question, QuizSession, parse_questions
from quiz.scoring import AnswerStatus


class TestQuestionParsing(unittest.TestCase):

    def test_camel_case_payload(self):
        q = Question.from_dict({
            "id": "q1", "type": "MCQ", "text": "What is a pass?",
            "options": ["A", "B", "C"], "correctOptionIndex": 1, "context": "why",
        })
        self.assertEqual(q.correct_option, "B")
        self.assertEqual(q.to_dict()["correctOptionIndex"], 1)

    def test_malformed_items_are_dropped(self):
        items = [
            {"id": "ok", "text": "t", "options": ["a", "b"], "correctOptionIndex": 0},
            {"id": "bad-index", "text": "t", "options": ["a", "b"], "correctOptionIndex": 5},
            {"id": "one-option", "text": "t", "options": ["a"], "correctOptionIndex": 0},
            {"id": "no-text", "text": "  ", "options": ["a", "b"], "correctOptionIndex": 0},
            {"id": "no-index", "text": "t", "options": ["a", "b"]},
            {"id": "ok", "text": "dup", "options": ["a", "b"], "correctOptionIndex": 1},
            "not a dict",
        ]
        parsed = parse_questions(items)
        self.assertEqual([q.id for q in parsed], ["ok"])
        self.assertEqual(parsed[0].text, "t")

    def test_blank_option_drops_the_item(self):
        item = {"id": "q", "text": "t", "options": ["", "B", "C"], "correctOptionIndex": 1}
        self.assertIsNone(Question.from_dict(item))

        # index is checked against the list as sent, before anything else
        item = {"id": "q", "text": "t", "options": ["A", "B", " "], "correctOptionIndex": 1}
        self.assertIsNone(Question.from_dict(item))

        item = {"id": "q", "text": "t", "options": [" A ", "B", "C"], "correctOptionIndex": 1}
        q = Question.from_dict(item)
        self.assertEqual(q.options, ["A", "B", "C"])
        self.assertEqual(q.correct_option, "B")

    def test_fallback_set(self):
        self.assertEqual(len(FALLBACK_QUESTIONS), 3)
        self.assertEqual(len({q.id for q in FALLBACK_QUESTIONS}), 3)
        self.assertEqual(FALLBACK_QUESTIONS[1].correct_option, "N - 1")


class TestQuizSession(unittest.TestCase):

    def setUp(self):
        self.quiz = QuizSession(FALLBACK_QUESTIONS)

    def test_requires_questions(self):
        with self.assertRaises(ValueError):
            QuizSession([])

    def test_correct_answer(self):
        result = self.quiz.submit(2)
        self.assertTrue(result.is_correct)
        self.assertEqual(result.feedback, "Correct! Well done.")
        self.assertEqual(result.user_answer, "O(N^2)")
        self.assertEqual(self.quiz.history, [("static_1", AnswerStatus.CORRECT)])

    def test_incorrect_answer_names_the_right_one(self):
        result = self.quiz.submit(0)
        self.assertFalse(result.is_correct)
        self.assertEqual(result.feedback, "Incorrect. The correct answer is: O(N^2)")

    def test_second_answer_is_ignored(self):
        first = self.quiz.submit(0)
        self.assertIs(self.quiz.submit(2), first)
        self.assertIs(self.quiz.skip(), first)
        self.assertEqual(len(self.quiz.history), 1)

    def test_out_of_range_option(self):
        with self.assertRaises(ValueError):
            self.quiz.submit(4)
        self.assertIsNone(self.quiz.result)

    def test_skip(self):
        result = self.quiz.skip()
        self.assertEqual(result.user_answer, "Skipped")
        self.assertEqual(result.feedback, "Skipped. The correct answer was: O(N^2)")
        self.assertEqual(self.quiz.history[-1][1], AnswerStatus.SKIPPED)

    def test_next_requires_an_outcome(self):
        self.assertFalse(self.quiz.next_question())
        self.assertEqual(self.quiz.current_index, 0)

    def test_result_records_choice_and_status(self):
        result = self.quiz.submit(1)
        self.assertEqual(result.option_index, 1)
        self.assertIs(result.status, AnswerStatus.INCORRECT)
        self.assertEqual(result.to_dict()["status"], "INCORRECT")

        self.quiz.next_question()
        skipped = self.quiz.skip()
        self.assertIsNone(skipped.option_index)
        self.assertIs(skipped.status, AnswerStatus.SKIPPED)
        self.assertFalse(skipped.is_correct)

    def test_finished_quiz_takes_no_more_answers(self):
        for _ in FALLBACK_QUESTIONS:
            self.quiz.submit(self.quiz.current_question.correct_option_index)
            self.quiz.next_question()
        self.assertTrue(self.quiz.show_summary)
        self.assertAlmostEqual(self.quiz.summary().raw_score, 3.0)

        with self.assertRaises(ValueError):
            self.quiz.submit(0)
        with self.assertRaises(ValueError):
            self.quiz.skip()
        self.assertFalse(self.quiz.next_question())
        self.assertEqual(len(self.quiz.history), 3)
        self.assertAlmostEqual(self.quiz.summary().raw_score, 3.0)

    def test_full_attempt(self):
        self.quiz.submit(2)
        self.assertTrue(self.quiz.next_question())
        self.assertEqual(self.quiz.progress, (2, 3))
        self.quiz.submit(0)
        self.quiz.next_question()
        self.assertTrue(self.quiz.is_last)
        self.quiz.skip()
        self.quiz.next_question()

        self.assertTrue(self.quiz.show_summary)
        summary = self.quiz.summary()
        self.assertEqual(
            (summary.correct_count, summary.incorrect_count, summary.skipped_count), (1, 1, 1)
        )
        self.assertAlmostEqual(summary.raw_score, 1.0)


if __name__ == "__main__":
    unittest.main()
