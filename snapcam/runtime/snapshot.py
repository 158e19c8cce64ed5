"""Export of the current display buffer to a PNG file."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional

import cv2

from snapcam.core.logging_utils import LoggerLike, ensure_structured_logger
from snapcam.media.color_convert import to_native

from .context import AppContext
from .interfaces import Notifier

SNAPSHOT_FAILED_TITLE = "Snapshot failed"
SNAPSHOT_SAVED_TITLE = "Snapshot saved"
NO_IMAGE_DATA = "No image data available to save"
COULD_NOT_SAVE = "Could not save file"


@dataclass(frozen=True)
class SnapshotResult:
    saved: bool
    filename: Optional[str] = None
    reason: Optional[str] = None


def snapshot_filename(timestamp: float) -> str:
    return f"screenshot_{int(timestamp)}.png"


class SnapshotExporter:
    """Writes ``screenshot_<unix_seconds>.png`` from the latest displayed frame.

    One attempt per call; the outcome is shown to the user and returned.
    """

    def __init__(
        self,
        context: AppContext,
        notifier: Notifier,
        *,
        output_dir: Path = Path("."),
        clock: Callable[[], float] = time.time,
        writer: Callable[[str, Any], bool] = cv2.imwrite,
        logger: LoggerLike = None,
    ) -> None:
        self._context = context
        self._notifier = notifier
        self._output_dir = Path(output_dir)
        self._clock = clock
        self._writer = writer
        self._logger = ensure_structured_logger(logger, fallback_name=__name__)

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    def export(self) -> SnapshotResult:
        if not self._context.has_frame:
            self._logger.warning("Snapshot requested before any frame was rendered")
            self._notifier.error(SNAPSHOT_FAILED_TITLE, NO_IMAGE_DATA)
            return SnapshotResult(saved=False, reason=NO_IMAGE_DATA)

        filename = str(self._output_dir / snapshot_filename(self._clock()))
        native = to_native(self._context.display_buffer)

        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            written = bool(self._writer(filename, native))
        except (OSError, cv2.error) as exc:
            self._logger.error("Writing %s failed: %s", filename, exc)
            written = False

        if not written:
            self._logger.error("Could not save snapshot %s", filename)
            self._notifier.error(SNAPSHOT_FAILED_TITLE, COULD_NOT_SAVE)
            return SnapshotResult(saved=False, filename=filename, reason=COULD_NOT_SAVE)

        self._logger.info("Saved snapshot %s", filename)
        self._notifier.info(SNAPSHOT_SAVED_TITLE, f"Image saved as:\n{filename}")
        return SnapshotResult(saved=True, filename=filename)


__all__ = [
    "COULD_NOT_SAVE",
    "NO_IMAGE_DATA",
    "SnapshotExporter",
    "SnapshotResult",
    "snapshot_filename",
]
