"""
Tests for negative marking.
"""

import unittest

from quiz.scoring import AnswerStatus, calculate_score, raw_score

C, I, S = AnswerStatus.CORRECT, AnswerStatus.INCORRECT, AnswerStatus.SKIPPED


class TestScoring(unittest.TestCase):

    def test_two_incorrect_carry_no_penalty(self):
        summary = calculate_score([C] * 5 + [I] + [S] * 2)
        self.assertEqual(summary.correct_count, 5)
        self.assertEqual(summary.incorrect_count, 1)
        self.assertEqual(summary.skipped_count, 2)
        self.assertAlmostEqual(summary.raw_score, 5.0)
        self.assertFalse(summary.penalty_applied)

        self.assertAlmostEqual(raw_score(5, 2), 5.0)

    def test_penalty_covers_every_incorrect_answer(self):
        summary = calculate_score([C] * 5 + [I] * 3)
        self.assertAlmostEqual(summary.raw_score, 4.0)
        self.assertTrue(summary.penalty_applied)

    def test_skips_do_not_trigger_penalty(self):
        summary = calculate_score([C, I, I, S, S, S, S])
        self.assertAlmostEqual(summary.raw_score, 1.0)

    def test_raw_score_may_be_negative(self):
        summary = calculate_score([I] * 6)
        self.assertAlmostEqual(summary.raw_score, -2.0)
        self.assertEqual(summary.display_score, 0.0)

    def test_order_does_not_matter(self):
        a = calculate_score([I, C, I, C, I])
        b = calculate_score([C, C, I, I, I])
        self.assertAlmostEqual(a.raw_score, b.raw_score)

    def test_empty_history(self):
        summary = calculate_score([])
        self.assertEqual(summary.raw_score, 0.0)

    def test_to_dict(self):
        data = calculate_score([C, C, I, I, I]).to_dict()
        self.assertEqual(data["correctCount"], 2)
        self.assertAlmostEqual(data["rawScore"], 1.0)
        self.assertTrue(data["penaltyApplied"])


if __name__ == "__main__":
    unittest.main()
