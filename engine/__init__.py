"""
engine/
-------
Playback & recording layer.

    from engine import Stepper, Recorder
"""

from engine.stepper  import Stepper, DEFAULT_DELAY, random_sequence
from engine.recorder import Recorder, RunMetrics

__all__ = [
    "Stepper",
    "DEFAULT_DELAY",
    "random_sequence",
    "Recorder",
    "RunMetrics",
]
