"""
slides.py — Learning Mode Content
===================================
The five fixed slides of the Learn tab plus a small cursor object
that the web app keeps per session.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Slide:
    id:            str
    title:         str
    content:       List[str] = field(default_factory=list)
    bullet_points: List[str] = field(default_factory=list)


SLIDES: List[Slide] = [
    Slide(
        id="intro",
        title="Bubble Sorting: Introduction",
        content=[
            "Bubble Sort is one of the most foundational sorting methods in computer science.",
            "Despite being simpler and slower than modern algorithms, it provides an excellent "
            "starting point for understanding algorithmic thinking.",
        ],
        bullet_points=[
            "Sorting is critical for databases (names, prices, dates).",
            "Real-world examples: Phone books, home sales rankings, GDP analysis.",
            "Bubble Sort, Selection Sort, and Insertion Sort are the three 'simple' sorting algorithms.",
        ],
    ),
    Slide(
        id="analogy",
        title="The Baseball Team Analogy",
        content=[
            "Imagine arranging a baseball team in order of increasing height.",
            "Humans can scan the whole line instantly and pick the tallest player. Computers cannot do this.",
        ],
        bullet_points=[
            "Computers are not intelligent; they cannot 'see the big picture'.",
            "A computer can only compare two values at a time.",
            "It must follow a precise set of rules (an algorithm) to sort the data.",
        ],
    ),
    Slide(
        id="mechanism",
        title="How Bubble Sort Works",
        content=[
            "The algorithm relies on two fundamental steps: Comparison and Movement (Swap).",
            "We start at the left and compare adjacent players (items).",
        ],
        bullet_points=[
            "Rule: Compare two adjacent items. If the one on the left is larger, SWAP them.",
            "Move one position to the right and repeat.",
            "This causes larger items to 'bubble up' to the end of the array.",
        ],
    ),
    Slide(
        id="passes",
        title="Passes and Progress",
        content=[
            "A 'Pass' is one full run through the array from left to right.",
            "After the first pass, the largest item is guaranteed to be in its final sorted position at the end.",
        ],
        bullet_points=[
            "Pass 1: N-1 comparisons. Largest item reaches position N-1.",
            "Pass 2: N-2 comparisons. Second largest item reaches position N-2.",
            "The algorithm repeats until all items are sorted.",
        ],
    ),
    Slide(
        id="efficiency",
        title="Efficiency and Big O",
        content=[
            "Bubble Sort is comparatively slow for large datasets.",
            "We measure efficiency by counting Comparisons and Swaps.",
        ],
        bullet_points=[
            "Comparisons: Sum of (N-1) + (N-2) + ... + 1 ≈ N²/2.",
            "Swaps: In the worst case (reverse order), also ≈ N²/2. Average is N²/4.",
            "Big O Notation: We ignore constants (like 1/2). Bubble Sort is O(N²).",
            "Meaning: Doubling the items quadruples the sorting time.",
        ],
    ),
]


class SlideDeck:
    """Cursor over a list of slides.  next()/prev() stop at the ends."""

    def __init__(self, slides: List[Slide] = SLIDES):
        if not slides:
            raise ValueError("a deck needs at least one slide")
        self.slides = list(slides)
        self.index = 0

    @property
    def current(self) -> Slide:
        return self.slides[self.index]

    @property
    def is_first(self) -> bool:
        return self.index == 0

    @property
    def is_last(self) -> bool:
        return self.index == len(self.slides) - 1

    @property
    def position(self) -> str:
        return f"Slide {self.index + 1} of {len(self.slides)}"

    def next(self) -> bool:
        if self.is_last:
            return False
        self.index += 1
        return True

    def prev(self) -> bool:
        if self.is_first:
            return False
        self.index -= 1
        return True

    def goto(self, index: int) -> None:
        if not 0 <= index < len(self.slides):
            raise IndexError(f"slide index {index} out of range")
        self.index = index
