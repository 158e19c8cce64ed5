"""OpenCV-backed camera device session."""

from __future__ import annotations

from typing import Any, Callable, Optional

import cv2
import numpy as np

from snapcam.core.logging_utils import LoggerLike, ensure_structured_logger


class DeviceSession:
    """Exclusive handle to one open camera.

    Settings follow a request/read-back pattern: ``set_*`` only asks the
    driver, the matching getter reports what was actually applied.
    """

    def __init__(
        self,
        device: int | str = 0,
        backend: int = cv2.CAP_ANY,
        *,
        capture_factory: Callable[..., Any] = cv2.VideoCapture,
        logger: LoggerLike = None,
    ) -> None:
        self._device = device
        self._backend = backend
        self._capture_factory = capture_factory
        self._logger = ensure_structured_logger(logger, fallback_name=__name__)
        self._cap = None
        self._auto_exposure = False
        self._autofocus = False

    def open(self) -> bool:
        if self.is_open:
            return True
        self._cap = self._capture_factory(self._device, self._backend)
        if not self._cap.isOpened():
            self._logger.error("Failed to open camera %s", self._device)
            self._cap.release()
            self._cap = None
            return False
        self._logger.info("Opened camera %s", self._device)
        return True

    def release(self) -> bool:
        """Release the device. Returns False when it was already released."""
        if self._cap is None:
            return False
        self._cap.release()
        self._cap = None
        self._logger.info("Released camera %s", self._device)
        return True

    @property
    def device(self) -> int | str:
        return self._device

    @property
    def is_open(self) -> bool:
        return self._cap is not None and self._cap.isOpened()

    # ------------------------------------------------------------------
    # Capability request / read-back

    def set_resolution(self, width: int, height: int) -> None:
        self._require_open()
        self._cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
        self._cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)

    def resolution(self) -> tuple[int, int]:
        self._require_open()
        actual_w = int(self._cap.get(cv2.CAP_PROP_FRAME_WIDTH))
        actual_h = int(self._cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
        return actual_w, actual_h

    def set_fps(self, fps: float) -> None:
        self._require_open()
        self._cap.set(cv2.CAP_PROP_FPS, fps)

    def fps(self) -> float:
        self._require_open()
        return float(self._cap.get(cv2.CAP_PROP_FPS))

    def enable_auto_controls(self) -> None:
        """Turn on auto exposure and autofocus where the driver supports them."""
        self._require_open()
        self._auto_exposure = bool(self._cap.set(cv2.CAP_PROP_AUTO_EXPOSURE, 1))
        self._autofocus = bool(self._cap.set(cv2.CAP_PROP_AUTOFOCUS, 1))
        self._logger.debug(
            "Auto controls: exposure=%s autofocus=%s", self._auto_exposure, self._autofocus
        )

    @property
    def auto_exposure(self) -> bool:
        return self._auto_exposure

    @property
    def autofocus(self) -> bool:
        return self._autofocus

    # ------------------------------------------------------------------
    # Two-phase capture

    def grab(self) -> bool:
        """Latch the next frame inside the driver without decoding it."""
        if self._cap is None:
            return False
        return bool(self._cap.grab())

    def retrieve(self) -> Optional[np.ndarray]:
        """Decode the latched frame. Returns None on failure."""
        if self._cap is None:
            return None
        ret, frame = self._cap.retrieve()
        if not ret or frame is None:
            return None
        return frame

    def _require_open(self) -> None:
        if self._cap is None:
            raise RuntimeError(f"Camera {self._device} is not open")


__all__ = ["DeviceSession"]
