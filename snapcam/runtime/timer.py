"""Fixed-delay repeating task on top of a Tk-style scheduler."""

from __future__ import annotations

from typing import Any, Callable, Optional

from snapcam.core.logging_utils import LoggerLike, ensure_structured_logger

from .interfaces import Scheduler


class RepeatingTimer:
    """Re-arms ``callback`` every ``interval_s`` seconds after it returns.

    The delay is counted from the end of each run, so time spent inside the
    callback is not subtracted from the next interval. The callback returns
    False to stop the timer; ``stop()`` cancels a pending run.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        callback: Callable[[], bool],
        interval_s: float,
        *,
        logger: LoggerLike = None,
    ) -> None:
        if interval_s <= 0:
            raise ValueError(f"interval_s must be positive, got {interval_s}")
        self._scheduler = scheduler
        self._callback = callback
        self._interval_s = interval_s
        self._logger = ensure_structured_logger(logger, fallback_name=__name__)
        self._pending: Optional[Any] = None
        self._active = False
        self._runs = 0

    @property
    def active(self) -> bool:
        return self._active

    @property
    def interval_s(self) -> float:
        return self._interval_s

    @property
    def runs(self) -> int:
        return self._runs

    def start(self, delay_s: float = 0.0) -> None:
        if self._active:
            return
        self._active = True
        self._arm(delay_s)

    def stop(self) -> None:
        self._active = False
        if self._pending is not None:
            self._scheduler.after_cancel(self._pending)
            self._pending = None

    def _arm(self, delay_s: float) -> None:
        self._pending = self._scheduler.after(int(round(delay_s * 1000)), self._run)

    def _run(self) -> None:
        self._pending = None
        if not self._active:
            return
        self._runs += 1
        keep_going = False
        try:
            keep_going = self._callback()
        finally:
            if keep_going and self._active:
                self._arm(self._interval_s)
            else:
                self._active = False
                self._logger.debug("Timer stopped after %d runs", self._runs)


__all__ = ["RepeatingTimer"]
