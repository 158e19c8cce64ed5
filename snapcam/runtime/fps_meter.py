"""Rolling frame-rate estimate for the status line."""

from __future__ import annotations

from collections import deque


class FPSMeter:
    """Average rate over the last ``window_size`` frame intervals.

    Reports 0.0 until at least ``min_samples`` intervals have been seen.
    """

    def __init__(self, window_size: int = 30, min_samples: int = 3) -> None:
        self._intervals: deque[float] = deque(maxlen=window_size)
        self._min_samples = min_samples
        self._last_time: float | None = None
        self._fps = 0.0

    def tick(self, now: float) -> float:
        if self._last_time is not None and now > self._last_time:
            self._intervals.append(now - self._last_time)
            if len(self._intervals) >= self._min_samples:
                self._fps = len(self._intervals) / sum(self._intervals)
        self._last_time = now
        return self._fps

    @property
    def fps(self) -> float:
        return self._fps


__all__ = ["FPSMeter"]
