"""Per-tick capture, conversion and render step."""

from __future__ import annotations

import time
from typing import Callable

import cv2
import numpy as np

from snapcam.core.logging_utils import LoggerLike, ensure_structured_logger
from snapcam.media.color_convert import ensure_uint8, fit_to, to_rgb

from .context import AppContext
from .fps_meter import FPSMeter
from .interfaces import FrameSurface, Notifier

CAMERA_ERROR_TITLE = "Camera error"
CAPTURE_FAILED = "Unable to capture a video frame."
DECODE_FAILED = "Unable to decode the video frame."
STOPPED_SUFFIX = "The live preview has stopped."


class FramePump:
    """Pulls one frame from the device and pushes it to the display."""

    def __init__(
        self,
        context: AppContext,
        surface: FrameSurface,
        notifier: Notifier,
        *,
        clock: Callable[[], float] = time.monotonic,
        logger: LoggerLike = None,
    ) -> None:
        self._context = context
        self._surface = surface
        self._notifier = notifier
        self._clock = clock
        self._logger = ensure_structured_logger(logger, fallback_name=__name__)
        self._meter = FPSMeter()

    @property
    def fps(self) -> float:
        return self._meter.fps

    def tick(self) -> bool:
        """Run one capture/render cycle. Returns False once the loop is stopped."""
        ctx = self._context
        if not ctx.is_running:
            return False

        if not ctx.session.grab():
            self._fail(CAPTURE_FAILED)
            return False

        frame = ctx.session.retrieve()
        if frame is None:
            self._fail(DECODE_FAILED)
            return False
        ctx.raw_frame = frame

        try:
            resized = fit_to(ensure_uint8(frame), ctx.mode.size)
            rgb = to_rgb(resized)
        except (ValueError, cv2.error) as exc:
            self._logger.error("Frame conversion failed for shape %s: %s", frame.shape, exc)
            self._fail(DECODE_FAILED)
            return False

        np.copyto(ctx.display_buffer, rgb)
        self._surface.replace(ctx.display_buffer)
        self._surface.repaint()

        ctx.frames_rendered += 1
        self._meter.tick(self._clock())
        if ctx.frames_rendered == 1:
            self._logger.info(
                "First frame rendered: native %dx%d -> display %dx%d",
                frame.shape[1], frame.shape[0], ctx.mode.width, ctx.mode.height,
            )
        return True

    def _fail(self, reason: str) -> None:
        self._context.stop(reason)
        self._logger.error("%s Stopping frame updates after %d frames",
                           reason, self._context.frames_rendered)
        self._notifier.error(CAMERA_ERROR_TITLE, f"{reason}\n{STOPPED_SUFFIX}")


__all__ = ["FramePump"]
