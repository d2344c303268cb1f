"""
bubble_sort.py — Unoptimized Bubble Sort
==========================================
Generator-based bubble sort.  Yields a Snapshot at every checkpoint:
  1. Highlight the adjacent pair (j, j+1)   →  COMPARE
  2. Swap them if the left one is larger   →  SWAP
  3. End of a pass: index n-i-1 is final   →  PASS_COMPLETE
  4. All passes done                        →  FINISHED

Every pass runs to the end even when it made no swaps.  The lessons
teach the unoptimized variant, so a full run always makes exactly
n(n-1)/2 comparisons whatever the input order.

The swap test is a strict `>`, so equal values never trade places and
the sort is stable.

The generator works on its own copy of the input; callers only ever
see frozen Snapshots.
"""

from typing import Generator, List, Sequence

from algorithms.step import Checkpoint, RunState, Snapshot, SnapshotBuilder


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line; index = pseudocode_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def bubble_sort(A):",                              # 0
    "    n ← length(A)",                                # 1
    "    for i ← 0 to n - 1:",                          # 2
    "        for j ← 0 to n - i - 2:",                  # 3
    "            if A[j] > A[j + 1]:",                  # 4
    "                swap(A[j], A[j + 1])",             # 5
    "        mark A[n - i - 1] as sorted",              # 6
    "    return A",                                     # 7
]


def expected_comparisons(n: int) -> int:
    """Comparisons made by a full run over n values: (n-1) + (n-2) + … + 1."""
    return n * (n - 1) // 2 if n > 1 else 0


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bubble_sort(values: Sequence[int]) -> Generator[Snapshot, None, None]:
    """
    Yields Snapshots for every checkpoint of an unoptimized bubble sort.

    Args:
        values : The input sequence.  It is copied, never mutated.

    Yields:
        Snapshot – one per checkpoint (compare, swap, pass end, finish).
    """

    arr = list(values)
    n   = len(arr)
    sb  = SnapshotBuilder(arr)

    for i in range(n):
        sb.pass_number = i + 1

        for j in range(n - i - 1):
            # --- highlight the pair ---
            sb.compare(j, j + 1)
            sb.pseudocode_line = 4
            sb.explanation = (
                f"Pass {i + 1}: compare <strong>A[{j}] = {arr[j]}</strong> with "
                f"<strong>A[{j + 1}] = {arr[j + 1]}</strong>."
            )
            yield sb.build(Checkpoint.COMPARE)

            # --- strict >: equal neighbours stay put ---
            if arr[j] > arr[j + 1]:
                sb.swap(j, j + 1)
                sb.pseudocode_line = 5
                sb.explanation = (
                    f"{arr[j + 1]} &gt; {arr[j]}, so they swap. "
                    f"The larger value moves one step to the right."
                )
                yield sb.build(Checkpoint.SWAP)

        # --- the largest unsorted value has bubbled into place ---
        sorted_at = n - i - 1
        sb.mark_sorted(sorted_at)
        sb.pseudocode_line = 6
        sb.explanation = (
            f"Pass {i + 1} complete: <strong>{arr[sorted_at]}</strong> is now in its "
            f"final position (index {sorted_at})."
        )
        yield sb.build(Checkpoint.PASS_COMPLETE)

    sb.comparing = None
    sb.pseudocode_line = 7
    sb.explanation = (
        f"Done. {sb.comparisons} comparisons and {sb.swaps} swaps "
        f"over {n} passes."
    )
    yield sb.build(Checkpoint.FINISHED, state=RunState.FINISHED)
