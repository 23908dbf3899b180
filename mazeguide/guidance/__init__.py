"""Guidance pulse sequencing and the schedulers that drive it."""

__all__ = [
    "GuidanceSequencer",
    "GuidanceState",
    "AbstractScheduler",
    "ManualScheduler",
    "ThreadingScheduler",
    "ScheduledCall",
]

from .scheduler import AbstractScheduler, ManualScheduler, ScheduledCall, ThreadingScheduler
from .sequencer import GuidanceSequencer, GuidanceState
