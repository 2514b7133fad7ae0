"""Presentation pacing between applied actions.

Pauses never change battle outcomes. Headless runs use ``NullScheduler``;
the terminal demo sleeps for real.
"""
from __future__ import annotations
import time
from typing import List, Protocol

DEFAULT_INTERVAL = 0.5


class Scheduler(Protocol):
    def pause(self, seconds: float) -> None: ...


class NullScheduler:
    def pause(self, seconds: float) -> None:
        return None


class SleepScheduler:
    def __init__(self, scale: float = 1.0):
        self.scale = scale

    def pause(self, seconds: float) -> None:
        if seconds > 0 and self.scale > 0:
            time.sleep(seconds * self.scale)


class RecordingScheduler:
    """Keeps every requested pause; tests interleave it with event logs."""

    def __init__(self):
        self.pauses: List[float] = []

    def pause(self, seconds: float) -> None:
        self.pauses.append(seconds)

__all__ = ["Scheduler","NullScheduler","SleepScheduler","RecordingScheduler","DEFAULT_INTERVAL"]
