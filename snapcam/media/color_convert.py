"""Color order and sizing helpers between the camera and the display."""

from __future__ import annotations

import cv2
import numpy as np


def to_rgb(frame: np.ndarray) -> np.ndarray:
    """Convert a device-native frame (BGR, BGRA or grayscale) to 3-channel RGB."""

    if frame.ndim == 2 or (frame.ndim == 3 and frame.shape[2] == 1):
        return cv2.cvtColor(frame, cv2.COLOR_GRAY2RGB)

    if frame.ndim == 3:
        channels = frame.shape[2]
        if channels == 3:
            return cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        if channels == 4:
            # Some backends deliver BGRX; drop the padding channel.
            return cv2.cvtColor(frame, cv2.COLOR_BGRA2RGB)

    raise ValueError(f"Unsupported frame shape {frame.shape}")


def to_native(rgb: np.ndarray) -> np.ndarray:
    """Convert an RGB display buffer back to the encoder's BGR order."""
    return cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR)


def ensure_uint8(frame: np.ndarray) -> np.ndarray:
    if frame.dtype == np.uint8:
        return frame
    if frame.dtype == np.uint16:
        return (frame >> 8).astype(np.uint8)
    return np.clip(frame, 0, 255).astype(np.uint8)


def fit_to(frame: np.ndarray, size: tuple[int, int]) -> np.ndarray:
    """Resize ``frame`` to ``size`` given as (width, height)."""
    height, width = frame.shape[:2]
    if (width, height) == tuple(size):
        return frame
    return cv2.resize(frame, size)


__all__ = ["ensure_uint8", "fit_to", "to_native", "to_rgb"]
