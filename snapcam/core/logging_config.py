"""Root logging setup for the SnapCam process."""

from __future__ import annotations

import contextlib
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
LOG_FILENAME = "snapcam.log"
LOG_MAX_BYTES = 500 * 1024
LOG_BACKUP_COUNT = 2

# Pillow logs every PPM encode at DEBUG.
SUPPRESSED_LOGGERS = ("PIL",)


def _coerce_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        name = level.upper()
        if not hasattr(logging, name):
            raise ValueError(f"Unknown log level '{level}'")
        return getattr(logging, name)
    return int(level)


def resolve_log_file(log_file: Optional[Union[str, Path]]) -> Optional[Path]:
    """Map the configured ``log_file`` to the file actually written.

    An empty value disables file logging. A directory gets ``snapcam.log``
    inside it.
    """
    if not log_file:
        return None
    path = Path(log_file).expanduser()
    if path.is_dir():
        path = path / LOG_FILENAME
    return path


def configure_logging(
    level: Union[int, str] = logging.INFO,
    *,
    console: bool = True,
    log_file: Optional[Union[str, Path]] = None,
) -> Optional[Path]:
    """Replace the root handlers with SnapCam's console and rotating file handlers.

    Returns the log file in use, or None when only the console is logged to.
    """
    numeric_level = _coerce_level(level)
    root = logging.getLogger()

    for handler in list(root.handlers):
        root.removeHandler(handler)
        with contextlib.suppress(Exception):
            handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    if console:
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

    log_path = resolve_log_file(log_file)
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if not root.handlers:
        # --no-console without a log file: keep warnings visible on stderr.
        fallback = logging.StreamHandler(sys.stderr)
        fallback.setLevel(logging.WARNING)
        fallback.setFormatter(formatter)
        root.addHandler(fallback)

    root.setLevel(numeric_level)
    for name in SUPPRESSED_LOGGERS:
        logging.getLogger(name).setLevel(logging.ERROR)

    return log_path


__all__ = [
    "LOG_DATEFMT",
    "LOG_FILENAME",
    "LOG_FORMAT",
    "configure_logging",
    "resolve_log_file",
]
