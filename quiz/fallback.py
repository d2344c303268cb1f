"""
Built-in questions used whenever the provider returns nothing.
"""

from typing import List

from quiz.question import Question

FALLBACK_QUESTIONS: List[Question] = [
    Question(
        id="static_1",
        text="What is the average Time Complexity of Bubble Sort?",
        options=["O(N)", "O(log N)", "O(N^2)", "O(1)"],
        correct_option_index=2,
        context="Bubble sort runs in O(N^2) time because of nested loops.",
    ),
    Question(
        id="static_2",
        text="In the first pass of Bubble Sort on an array of size N, how many comparisons are made?",
        options=["N", "N - 1", "N / 2", "N * N"],
        correct_option_index=1,
        context=(
            "In the first pass, we compare indices 0 vs 1, 1 vs 2, ... up to N-2 vs N-1. "
            "This is N-1 comparisons."
        ),
    ),
    Question(
        id="static_3",
        text="Is Bubble Sort a stable sorting algorithm?",
        options=["Yes", "No", "Only for integers", "Only for small arrays"],
        correct_option_index=0,
        context=(
            "Yes, Bubble Sort is stable because it only swaps adjacent elements if the left one "
            "is strictly greater than the right one. Equal elements are not swapped."
        ),
    ),
]
