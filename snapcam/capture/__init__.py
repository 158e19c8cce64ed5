from .device import DeviceSession
from .prober import (
    FPS_CANDIDATES,
    RESOLUTION_CANDIDATES,
    NegotiatedMode,
    negotiate,
    probe_fps,
    probe_resolution,
)

__all__ = [
    "DeviceSession",
    "FPS_CANDIDATES",
    "RESOLUTION_CANDIDATES",
    "NegotiatedMode",
    "negotiate",
    "probe_fps",
    "probe_resolution",
]
