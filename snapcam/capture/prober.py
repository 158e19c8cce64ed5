"""Camera capability probing.

Walks descending candidate lists and keeps the first mode the device
reports back as applied.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from snapcam.core.logging_utils import get_module_logger

logger = get_module_logger(__name__)

RESOLUTION_CANDIDATES: tuple[tuple[int, int], ...] = (
    (3840, 2160),
    (2560, 1440),
    (1920, 1080),
    (1280, 720),
    (1280, 960),
    (800, 600),
    (640, 480),
)

FPS_CANDIDATES: tuple[float, ...] = (60, 50, 30, 25, 24, 15, 10)

FPS_TOLERANCE = 1.0
DEFAULT_FPS = 30.0


class CapabilityDevice(Protocol):
    def set_resolution(self, width: int, height: int) -> None: ...
    def resolution(self) -> tuple[int, int]: ...
    def set_fps(self, fps: float) -> None: ...
    def fps(self) -> float: ...


@dataclass(frozen=True)
class NegotiatedMode:
    width: int
    height: int
    fps: float

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def frame_interval_s(self) -> float:
        return 1.0 / self.fps

    def describe(self) -> str:
        return f"{self.width}x{self.height} @ {self.fps:.1f} fps"


def probe_resolution(
    device: CapabilityDevice,
    candidates: Sequence[tuple[int, int]] = RESOLUTION_CANDIDATES,
) -> tuple[int, int]:
    """Return the first candidate the device applies exactly.

    When nothing matches, the last read-back value is kept and the last
    request stays applied on the device.
    """
    actual = None
    for width, height in candidates:
        device.set_resolution(width, height)
        actual = device.resolution()
        logger.debug("Requested %dx%d, device reports %dx%d", width, height, *actual)
        if actual == (width, height):
            return actual

    if actual is None:
        actual = device.resolution()
    if actual[0] <= 0 or actual[1] <= 0:
        logger.warning("Device reports an empty frame size %dx%d", *actual)
    else:
        logger.info("No exact resolution match, keeping %dx%d", *actual)
    return actual


def probe_fps(
    device: CapabilityDevice,
    candidates: Sequence[float] = FPS_CANDIDATES,
    tolerance: float = FPS_TOLERANCE,
) -> float:
    """Return the read-back rate of the first candidate within ``tolerance``."""
    for requested in candidates:
        device.set_fps(requested)
        actual = device.fps()
        logger.debug("Requested %.1f fps, device reports %.2f", requested, actual)
        if abs(actual - requested) < tolerance:
            return actual

    actual = device.fps()
    if actual <= 0:
        logger.warning("Device reports %.2f fps, falling back to %.1f", actual, DEFAULT_FPS)
        return DEFAULT_FPS
    logger.info("No frame rate within tolerance, using reported %.2f fps", actual)
    return actual


def negotiate(
    device: CapabilityDevice,
    resolutions: Sequence[tuple[int, int]] = RESOLUTION_CANDIDATES,
    frame_rates: Sequence[float] = FPS_CANDIDATES,
) -> NegotiatedMode:
    width, height = probe_resolution(device, resolutions)
    fps = probe_fps(device, frame_rates)
    mode = NegotiatedMode(width=width, height=height, fps=fps)
    logger.info("Negotiated camera mode %s", mode.describe())
    return mode


__all__ = [
    "DEFAULT_FPS",
    "FPS_CANDIDATES",
    "FPS_TOLERANCE",
    "NegotiatedMode",
    "RESOLUTION_CANDIDATES",
    "negotiate",
    "probe_fps",
    "probe_resolution",
]
