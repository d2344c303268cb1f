"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete bubble sort run (all Snapshots) with no pacing,
then computes the metrics the Analytics panel shows.

Usage:
    rec = Recorder()
    metrics = rec.record([45, 9, 78, 23])   # exhausts the generator
    rec.snapshots                            # every checkpoint, in order
    rec.export()                             # serialisable snapshot for replay
"""

import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Sequence

from algorithms.bubble_sort import bubble_sort, expected_comparisons
from algorithms.step import Checkpoint, Snapshot


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    length:               int   = 0
    comparisons:          int   = 0
    swaps:                int   = 0
    passes:               int   = 0       # PASS_COMPLETE checkpoints
    total_steps:          int   = 0       # number of Snapshots yielded
    expected_comparisons: int   = 0       # n(n-1)/2
    is_sorted:            bool  = False
    wall_time_ms:         float = 0.0


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        snapshots : Full list of Snapshots from the last recorded run.
        metrics   : RunMetrics of that run (None until record() is called).
    """

    def __init__(self):
        self.snapshots: List[Snapshot]       = []
        self.metrics:   Optional[RunMetrics] = None
        self._input:    tuple                = ()

    def record(self, values: Sequence[int]) -> RunMetrics:
        """Run the sort to completion, keep every snapshot, compute metrics."""
        self._input = tuple(values)
        start = time.monotonic()
        self.snapshots = list(bubble_sort(self._input))
        wall_ms = (time.monotonic() - start) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        return self.metrics

    def pass_boundaries(self) -> List[Snapshot]:
        """The PASS_COMPLETE snapshots, one per pass, in order."""
        return [s for s in self.snapshots if s.event is Checkpoint.PASS_COMPLETE]

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "input":     list(self._input),
            "metrics":   asdict(self.metrics) if self.metrics else {},
            "snapshots": [s.to_dict() for s in self.snapshots],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        last   = self.snapshots[-1] if self.snapshots else None
        values = last.values if last else ()

        return RunMetrics(
            length=len(self._input),
            comparisons=last.comparisons if last else 0,
            swaps=last.swaps if last else 0,
            passes=len(self.pass_boundaries()),
            total_steps=len(self.snapshots),
            expected_comparisons=expected_comparisons(len(self._input)),
            is_sorted=all(values[k] <= values[k + 1] for k in range(len(values) - 1)),
            wall_time_ms=round(wall_ms, 2),
        )
