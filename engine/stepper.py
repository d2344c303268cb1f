"""
stepper.py — Sort Animation Engine
====================================
The Stepper is the ONLY object the UI interacts with during a run.
It owns the input sequence and the sort generator, and exposes a
small start/reset API plus two ways of resuming at suspend points.

State machine:
    IDLE     →  start()            →  RUNNING
    RUNNING  →  (passes exhausted) →  FINISHED
    RUNNING  →  reset()            →  IDLE
    FINISHED →  reset()            →  IDLE

start() is a no-op returning False unless the engine is IDLE.

Pacing:
  The run suspends for `delay` seconds after every COMPARE snapshot and
  after every SWAP snapshot, and nowhere else.  Two drivers resume it:

    tick()      – wall-clock polling, called from the web UI's state
                  poll (or any timer).  Resumes once `delay` has elapsed.
    await run() – coroutine driver for an asyncio event loop.

Cancellation:
  reset() bumps a run counter.  A suspended run compares its own counter
  with the engine's when it resumes and stops without emitting anything
  further if they differ.  The pending delay always completes first.

Thread safety:
  This class is NOT thread-safe.  Drive it from a single thread or a
  single event loop.
"""

import asyncio
import logging
import random
import time
from typing import Awaitable, Callable, Generator, List, Optional, Sequence

from algorithms.bubble_sort import bubble_sort
from algorithms.step import RunState, Snapshot, idle_snapshot

logger = logging.getLogger(__name__)


# seconds between suspend points; the visual pacing unit
DEFAULT_DELAY = 0.6


def random_sequence(size: int = 8, low: int = 5, high: int = 99, seed: Optional[int] = None) -> List[int]:
    """Fresh input values for a new engine."""
    if size < 0:
        raise ValueError("size must be non-negative")
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(size)]


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        delay     : Seconds the run pauses at each suspend point.
        snapshots : Every Snapshot emitted in the current run, in order.
        on_step   : Optional callback(Snapshot) fired on every emission.
                    The UI hooks its re-render here.
    """

    def __init__(
        self,
        values: Sequence[int],
        delay: float = DEFAULT_DELAY,
        on_step: Optional[Callable[[Snapshot], None]] = None,
    ):
        self._initial:   tuple                 = tuple(values)
        self.delay:      float                 = delay
        self.on_step:    Optional[Callable[[Snapshot], None]] = on_step
        self.snapshots:  List[Snapshot]        = []

        self._generator: Optional[Generator[Snapshot, None, None]] = None
        self._run_id:    int                   = 0
        self._current:   Snapshot              = idle_snapshot(self._initial)

        # for tick() timing
        self._last_tick: float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> bool:
        """Begin a run and advance to its first suspend point."""
        if self.state is not RunState.IDLE:
            logger.debug("start() ignored: engine is %s", self.state.value)
            return False

        self._run_id   += 1
        self._generator = bubble_sort(self._initial)
        self.snapshots  = []
        logger.info("run %d started on %d values", self._run_id, len(self._initial))

        self._advance()
        self._last_tick = time.monotonic()
        return True

    def reset(self) -> None:
        """Abort any run and go back to the original values, IDLE."""
        if self.state is RunState.RUNNING:
            logger.info("run %d cancelled", self._run_id)
        self._run_id += 1
        if self._generator is not None:
            self._generator.close()
            self._generator = None
        self.snapshots = []
        self._emit(idle_snapshot(self._initial))

    # ------------------------------------------------------------------
    # Drivers
    # ------------------------------------------------------------------
    def tick(self) -> bool:
        """
        Call periodically (e.g. every 100 ms).  If running and a full
        delay has passed since the last suspension, resumes the run up
        to its next suspend point.  Returns True if it resumed.
        """
        if self.state is not RunState.RUNNING:
            return False
        now = time.monotonic()
        if now - self._last_tick < self.delay:
            return False
        self._advance()
        self._last_tick = now
        return True

    async def run(self, sleep: Optional[Callable[[float], Awaitable[None]]] = None) -> bool:
        """
        Start a run and drive it on the event loop.  Returns True when
        the run finished, False if start was rejected or the run was
        cancelled by reset().
        """
        sleep = sleep or asyncio.sleep
        if not self.start():
            return False
        run_id = self._run_id

        while self.state is RunState.RUNNING:
            await sleep(self.delay)
            if run_id != self._run_id:
                return False
            self._advance()
        return True

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current(self) -> Snapshot:
        return self._current

    @property
    def state(self) -> RunState:
        return self._current.state

    @property
    def initial_values(self) -> tuple:
        return self._initial

    @property
    def is_running(self) -> bool:
        return self.state is RunState.RUNNING

    @property
    def is_finished(self) -> bool:
        return self.state is RunState.FINISHED

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _advance(self) -> None:
        """Pull snapshots until the next suspend point or the end of the run."""
        if self._generator is None:
            return
        run_id = self._run_id
        for snap in self._generator:
            self.snapshots.append(snap)
            self._emit(snap)
            # on_step may have called reset()
            if run_id != self._run_id or snap.is_suspend_point:
                return
        self._generator = None
        logger.info(
            "run %d finished: %d comparisons, %d swaps",
            self._run_id, self._current.comparisons, self._current.swaps,
        )

    def _emit(self, snap: Snapshot) -> None:
        self._current = snap
        if self.on_step:
            self.on_step(snap)
