"""Application context shared by the frame pump, exporter and shell."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from snapcam.capture.device import DeviceSession
from snapcam.capture.prober import NegotiatedMode


@dataclass
class AppContext:
    session: DeviceSession
    mode: NegotiatedMode
    raw_frame: Optional[np.ndarray] = None
    display_buffer: np.ndarray = field(init=False, repr=False)
    is_running: bool = True
    stop_reason: Optional[str] = None
    frames_rendered: int = 0

    def __post_init__(self) -> None:
        # Preallocated once; every tick copies into it in place.
        self.display_buffer = np.zeros((self.mode.height, self.mode.width, 3), dtype=np.uint8)

    @property
    def has_frame(self) -> bool:
        return self.frames_rendered > 0

    def stop(self, reason: Optional[str] = None) -> None:
        if not self.is_running:
            return
        self.is_running = False
        self.stop_reason = reason


__all__ = ["AppContext"]
