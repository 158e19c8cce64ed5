"""Seams between the runtime and the GUI toolkit."""

from __future__ import annotations

from typing import Any, Callable, Protocol

import numpy as np


class Notifier(Protocol):
    """Shows short modal messages to the user."""

    def error(self, title: str, message: str) -> None: ...

    def info(self, title: str, message: str) -> None: ...


class FrameSurface(Protocol):
    """Owns the single renderable image shown in the window."""

    def replace(self, buffer: np.ndarray) -> None: ...

    def repaint(self) -> None: ...

    def release(self) -> None: ...


class Scheduler(Protocol):
    """Anything with Tk's ``after``/``after_cancel`` contract."""

    def after(self, ms: int, func: Callable[[], Any]) -> Any: ...

    def after_cancel(self, id: Any) -> None: ...


__all__ = ["FrameSurface", "Notifier", "Scheduler"]
