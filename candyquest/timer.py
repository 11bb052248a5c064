"""Millisecond and high-resolution timers."""

from __future__ import annotations

import time
from typing import Callable, Optional


def _ticks_ms() -> int:
    return time.monotonic_ns() // 1_000_000


class Timer:
    """Timer with millisecond precision."""

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock or _ticks_ms
        self._start_time = 0
        self.start()

    def start(self) -> None:
        self._start_time = self._clock()

    def read_sec(self) -> int:
        return (self._clock() - self._start_time) // 1000

    def read_msec(self) -> float:
        return float(self._clock() - self._start_time)


class PerfTimer:
    """High-resolution timer counting raw ticks of a performance counter."""

    DEFAULT_FREQUENCY = 1_000_000_000

    def __init__(
        self,
        counter: Optional[Callable[[], int]] = None,
        frequency: Optional[int] = None,
    ) -> None:
        self._counter = counter or time.perf_counter_ns
        self.frequency = frequency or self.DEFAULT_FREQUENCY
        self._start_time = 0
        self.start()

    def start(self) -> None:
        self._start_time = self._counter()

    def read_ticks(self) -> int:
        return self._counter() - self._start_time

    def read_ms(self) -> float:
        return self.read_ticks() / self.frequency * 1000