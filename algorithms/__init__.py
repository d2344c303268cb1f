"""
algorithms/
-----------
The sorting algorithm and its snapshot types.

    from algorithms import bubble_sort, PSEUDOCODE, Snapshot, RunState
"""

from algorithms.step import (
    Checkpoint,
    RunState,
    Snapshot,
    SnapshotBuilder,
    SUSPEND_POINTS,
    idle_snapshot,
)
from algorithms.bubble_sort import bubble_sort, expected_comparisons, PSEUDOCODE

__all__ = [
    "Checkpoint",
    "RunState",
    "Snapshot",
    "SnapshotBuilder",
    "SUSPEND_POINTS",
    "idle_snapshot",
    "bubble_sort",
    "expected_comparisons",
    "PSEUDOCODE",
]
