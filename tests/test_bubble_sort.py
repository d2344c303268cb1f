"""
Tests for the bubble sort generator.

Covers checkpoint order, the comparison count of the unoptimized
variant, stability and the growth of the sorted suffix.
"""

import functools
import random
import unittest

from algorithms import Checkpoint, RunState, bubble_sort, expected_comparisons


@functools.total_ordering
class Tagged:
    """A value that compares on `key` only, so equal keys can be told apart."""

    def __init__(self, key, tag):
        self.key = key
        self.tag = tag

    def __eq__(self, other):
        return self.key == other.key

    def __lt__(self, other):
        return self.key < other.key

    def __repr__(self):
        return f"Tagged({self.key}, {self.tag!r})"


class TestExampleRun(unittest.TestCase):
    """The [3, 1, 2] walk-through from the lessons."""

    def setUp(self):
        self.snaps = list(bubble_sort([3, 1, 2]))

    def test_checkpoint_sequence(self):
        events = [s.event for s in self.snaps]
        self.assertEqual(events, [
            Checkpoint.COMPARE, Checkpoint.SWAP,
            Checkpoint.COMPARE, Checkpoint.SWAP,
            Checkpoint.PASS_COMPLETE,
            Checkpoint.COMPARE,
            Checkpoint.PASS_COMPLETE,
            Checkpoint.PASS_COMPLETE,
            Checkpoint.FINISHED,
        ])

    def test_first_pass(self):
        self.assertEqual(self.snaps[0].comparing, (0, 1))
        self.assertEqual(self.snaps[0].values, (3, 1, 2))
        self.assertEqual(self.snaps[1].values, (1, 3, 2))
        self.assertEqual(self.snaps[2].comparing, (1, 2))
        self.assertEqual(self.snaps[3].values, (1, 2, 3))
        self.assertEqual(self.snaps[4].sorted_indices, frozenset({2}))
        self.assertIsNone(self.snaps[4].comparing)

    def test_second_pass_has_no_swap(self):
        self.assertEqual(self.snaps[5].comparing, (0, 1))
        self.assertEqual(self.snaps[5].values, (1, 2, 3))
        self.assertEqual(self.snaps[6].event, Checkpoint.PASS_COMPLETE)
        self.assertEqual(self.snaps[6].sorted_indices, frozenset({1, 2}))

    def test_final_state(self):
        last = self.snaps[-1]
        self.assertEqual(last.values, (1, 2, 3))
        self.assertEqual(last.state, RunState.FINISHED)
        self.assertIsNone(last.comparing)
        self.assertEqual(last.comparisons, 3)
        self.assertEqual(last.swaps, 2)

    def test_step_numbers_are_sequential(self):
        self.assertEqual([s.step_number for s in self.snaps], list(range(len(self.snaps))))


class TestProperties(unittest.TestCase):

    def _inputs(self):
        rng = random.Random(7)
        yield [45, 9, 78, 23, 12, 60, 31, 55]
        yield list(range(10))                  # already sorted
        yield list(range(10, 0, -1))           # reverse order
        yield [5, 5, 5, 5]
        for n in range(2, 12):
            yield [rng.randint(0, 20) for _ in range(n)]

    def test_output_is_sorted(self):
        for values in self._inputs():
            last = list(bubble_sort(values))[-1]
            self.assertEqual(list(last.values), sorted(values))

    def test_comparisons_never_terminate_early(self):
        for values in self._inputs():
            snaps = list(bubble_sort(values))
            compares = sum(1 for s in snaps if s.event is Checkpoint.COMPARE)
            self.assertEqual(compares, expected_comparisons(len(values)))
            self.assertEqual(snaps[-1].comparisons, len(values) * (len(values) - 1) // 2)

    def test_sorted_input_makes_no_swaps(self):
        snaps = list(bubble_sort([1, 2, 3, 4, 5]))
        self.assertEqual(snaps[-1].swaps, 0)
        self.assertEqual(snaps[-1].comparisons, 10)

    def test_sorted_suffix_after_each_pass(self):
        for values in self._inputs():
            n = len(values)
            expected = sorted(values)
            passes = [s for s in bubble_sort(values) if s.event is Checkpoint.PASS_COMPLETE]
            self.assertEqual(len(passes), n)
            for k, snap in enumerate(passes, start=1):
                self.assertEqual(snap.sorted_indices, frozenset(range(n - k, n)))
                self.assertEqual(list(snap.values[n - k:]), expected[n - k:])

    def test_sorted_set_only_grows(self):
        previous = frozenset()
        for snap in bubble_sort([9, 4, 7, 1, 8, 2]):
            self.assertTrue(previous <= snap.sorted_indices)
            previous = snap.sorted_indices

    def test_running_snapshots_highlight_at_most_one_pair(self):
        for snap in bubble_sort([4, 3, 2, 1]):
            if snap.event in (Checkpoint.COMPARE, Checkpoint.SWAP):
                j, k = snap.comparing
                self.assertEqual(k, j + 1)
                self.assertEqual(snap.state, RunState.RUNNING)
            else:
                self.assertIsNone(snap.comparing)

    def test_stable_on_equal_values(self):
        items = [Tagged(2, "a"), Tagged(1, "x"), Tagged(2, "b"), Tagged(1, "y"), Tagged(2, "c")]
        last = list(bubble_sort(items))[-1]
        self.assertEqual([i.tag for i in last.values], ["x", "y", "a", "b", "c"])

    def test_input_is_not_mutated(self):
        values = [3, 2, 1]
        list(bubble_sort(values))
        self.assertEqual(values, [3, 2, 1])


class TestEdgeCases(unittest.TestCase):

    def test_empty(self):
        snaps = list(bubble_sort([]))
        self.assertEqual(len(snaps), 1)
        self.assertEqual(snaps[0].event, Checkpoint.FINISHED)

    def test_single_value(self):
        snaps = list(bubble_sort([42]))
        self.assertEqual([s.event for s in snaps], [Checkpoint.PASS_COMPLETE, Checkpoint.FINISHED])
        self.assertEqual(snaps[-1].sorted_indices, frozenset({0}))
        self.assertEqual(snaps[-1].comparisons, 0)

    def test_expected_comparisons(self):
        self.assertEqual(expected_comparisons(0), 0)
        self.assertEqual(expected_comparisons(1), 0)
        self.assertEqual(expected_comparisons(2), 1)
        self.assertEqual(expected_comparisons(8), 28)


if __name__ == "__main__":
    unittest.main()
