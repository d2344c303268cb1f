"""
step.py — Sort Snapshot
========================
The sort generator yields Snapshot objects.  A Snapshot is a
frozen-in-time picture of everything the visualizer needs to render
one frame of the bar chart:

    • The sequence values at this instant
    • Which adjacent pair is under comparison (or none)
    • Which indices are already confirmed sorted
    • The run state (idle / running / finished)
    • Which line of pseudocode is executing right now
    • A plain-English explanation of *why* this step happened

Design decisions:
  - Snapshot is a frozen dataclass built from tuples / frozensets, so a
    reader can never reach back into the live sequence.  The generator
    is the only writer; the stepper / renderer are pure readers.
  - `event` names the checkpoint that produced the snapshot.  The
    stepper suspends after COMPARE and SWAP, never after the others.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional, Sequence, Set, Tuple


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class RunState(Enum):
    IDLE     = "idle"
    RUNNING  = "running"
    FINISHED = "finished"


class Checkpoint(Enum):
    READY         = "ready"           # idle, nothing happened yet
    COMPARE       = "compare"         # pair (j, j+1) highlighted
    SWAP          = "swap"            # pair just swapped
    PASS_COMPLETE = "pass_complete"   # index n-i-1 confirmed sorted
    FINISHED      = "finished"


# checkpoints after which the run pauses for one pacing delay
SUSPEND_POINTS = frozenset({Checkpoint.COMPARE, Checkpoint.SWAP})


@dataclass(frozen=True)
class Snapshot:
    """
    Attributes:
        step_number     : 0-based index of this snapshot in the run.
        values          : Sequence contents at this instant.
        comparing       : (j, j+1) under comparison, or None.
        sorted_indices  : Indices confirmed in final position.
        state           : RunState of the engine.
        event           : Checkpoint that produced this snapshot.
        pass_number     : 1-based current pass (0 before the first).
        comparisons     : Comparisons made so far in this run.
        swaps           : Swaps made so far in this run.
        pseudocode_line : 0-based index into PSEUDOCODE, -1 for none.
        explanation     : Human-readable "why" text for the explanation panel.
    """

    step_number:     int                       = 0
    values:          Tuple[int, ...]           = ()
    comparing:       Optional[Tuple[int, int]] = None
    sorted_indices:  FrozenSet[int]            = field(default_factory=frozenset)
    state:           RunState                  = RunState.IDLE
    event:           Checkpoint                = Checkpoint.READY
    pass_number:     int                       = 0
    comparisons:     int                       = 0
    swaps:           int                       = 0
    pseudocode_line: int                       = -1
    explanation:     str                       = ""

    @property
    def is_suspend_point(self) -> bool:
        return self.event in SUSPEND_POINTS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step_number":     self.step_number,
            "values":          list(self.values),
            "comparing":       list(self.comparing) if self.comparing else None,
            "sorted_indices":  sorted(self.sorted_indices),
            "state":           self.state.value,
            "event":           self.event.value,
            "pass_number":     self.pass_number,
            "comparisons":     self.comparisons,
            "swaps":           self.swaps,
            "pseudocode_line": self.pseudocode_line,
            "explanation":     self.explanation,
        }


def idle_snapshot(values: Sequence[int]) -> Snapshot:
    """The snapshot shown before a run starts (and after a reset)."""
    return Snapshot(
        values=tuple(values),
        explanation="Press <strong>Start Sorting</strong> to watch larger values bubble to the right.",
    )


# ---------------------------------------------------------------------------
# Convenience builder so the generator doesn't have to spell out every kwarg
# ---------------------------------------------------------------------------
class SnapshotBuilder:
    """
    Mutable scratch-pad the sort generator uses to construct Snapshots.

    Usage inside the generator:
        sb = SnapshotBuilder(values)
        sb.compare(0, 1)
        sb.explanation = "Compare 45 and 9."
        yield sb.build(Checkpoint.COMPARE)
    """

    def __init__(self, values: List[int]):
        self.values:          List[int]                 = values
        self.comparing:       Optional[Tuple[int, int]] = None
        self.sorted_indices:  Set[int]                  = set()
        self.pass_number:     int                       = 0
        self.comparisons:     int                       = 0
        self.swaps:           int                       = 0
        self.pseudocode_line: int                       = -1
        self.explanation:     str                       = ""
        self._step_no:        int                       = 0

    # -- helpers --
    def compare(self, left: int, right: int):
        self.comparing = (left, right)
        self.comparisons += 1

    def swap(self, left: int, right: int):
        self.values[left], self.values[right] = self.values[right], self.values[left]
        self.swaps += 1

    def mark_sorted(self, index: int):
        self.comparing = None
        self.sorted_indices.add(index)

    def build(self, event: Checkpoint, state: RunState = RunState.RUNNING) -> Snapshot:
        snap = Snapshot(
            step_number=self._step_no,
            values=tuple(self.values),
            comparing=self.comparing,
            sorted_indices=frozenset(self.sorted_indices),
            state=state,
            event=event,
            pass_number=self.pass_number,
            comparisons=self.comparisons,
            swaps=self.swaps,
            pseudocode_line=self.pseudocode_line,
            explanation=self.explanation,
        )
        self._step_no += 1
        return snap
