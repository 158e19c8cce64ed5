"""Startup sequence and process entry point."""

from __future__ import annotations

import argparse
import contextlib
from typing import Any, Callable, Optional

import tkinter as tk

from snapcam.capture.device import DeviceSession
from snapcam.capture.prober import negotiate
from snapcam.cli.common import add_common_cli_arguments, merge_args_into_config, pre_parse_config_path
from snapcam.core.config import SnapcamConfig, load_config
from snapcam.core.logging_config import configure_logging
from snapcam.core.logging_utils import get_module_logger
from snapcam.runtime.context import AppContext
from snapcam.runtime.snapshot import SnapshotExporter
from snapcam.ui.dialogs import DialogNotifier
from snapcam.ui.shell import CameraShell

EXIT_OK = 0
EXIT_CAMERA_UNAVAILABLE = 2

OPEN_FAILED_TITLE = "Initialization failed"
OPEN_FAILED_MESSAGE = "Unable to open the camera. Check that the device is connected."

logger = get_module_logger("App")


def parse_args(argv: Optional[list[str]] = None) -> tuple[argparse.Namespace, SnapcamConfig]:
    config = load_config(pre_parse_config_path(argv))

    parser = argparse.ArgumentParser(
        prog="snapcam",
        description="Live camera preview with one-click PNG snapshots",
    )
    add_common_cli_arguments(parser, defaults=config)
    args = parser.parse_args(argv)
    return args, merge_args_into_config(args, config)


def run_app(
    config: SnapcamConfig,
    *,
    session_factory: Callable[[int], DeviceSession] = DeviceSession,
    root_factory: Callable[[], Any] = tk.Tk,
    notifier_factory: Callable[[Any], Any] = DialogNotifier,
) -> int:
    root = root_factory()
    root.withdraw()
    notifier = notifier_factory(root)

    session = session_factory(config.camera_index)
    if not session.open():
        logger.error("Camera %s could not be opened", config.camera_index)
        notifier.error(OPEN_FAILED_TITLE, OPEN_FAILED_MESSAGE)
        with contextlib.suppress(tk.TclError):
            root.destroy()
        return EXIT_CAMERA_UNAVAILABLE

    try:
        mode = negotiate(session)
        session.enable_auto_controls()

        context = AppContext(session=session, mode=mode)
        exporter = SnapshotExporter(context, notifier, output_dir=config.output_path)
        shell = CameraShell(
            root,
            context,
            notifier=notifier,
            exporter=exporter,
            title=config.window_title,
            control_bar_height=config.control_bar_height,
        )
        shell.start()
        root.mainloop()
        shell.close()
    finally:
        session.release()
        with contextlib.suppress(tk.TclError):
            root.destroy()

    logger.info("Exited normally")
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    args, config = parse_args(argv)
    log_path = configure_logging(
        config.log_level,
        console=config.console_output,
        log_file=config.log_path,
    )
    logger.info("Starting SnapCam with camera %s", config.camera_index)
    if log_path is not None:
        logger.info("Logging to %s", log_path)
    logger.debug("Effective config: %s", config.to_dict())
    return run_app(config)


__all__ = ["EXIT_CAMERA_UNAVAILABLE", "EXIT_OK", "main", "parse_args", "run_app"]
