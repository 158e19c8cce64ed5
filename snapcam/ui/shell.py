"""Main window: preview canvas, snapshot button and lifecycle wiring."""

from __future__ import annotations

import contextlib
from pathlib import Path
from typing import Optional

import tkinter as tk
from tkinter import ttk

from snapcam.core.logging_utils import LoggerLike, ensure_structured_logger
from snapcam.runtime.context import AppContext
from snapcam.runtime.interfaces import Notifier
from snapcam.runtime.pump import FramePump
from snapcam.runtime.snapshot import SnapshotExporter, SnapshotResult
from snapcam.runtime.timer import RepeatingTimer

from .dialogs import DialogNotifier
from .display import DisplaySurface

DEFAULT_CONTROL_BAR_HEIGHT = 30
BUTTON_WIDTH = 100
BUTTON_HEIGHT = 25
STATUS_REFRESH_FRAMES = 15


class CameraShell:
    def __init__(
        self,
        root: tk.Tk,
        context: AppContext,
        *,
        notifier: Optional[Notifier] = None,
        exporter: Optional[SnapshotExporter] = None,
        title: str = "SnapCam",
        control_bar_height: int = DEFAULT_CONTROL_BAR_HEIGHT,
        output_dir: Path = Path("."),
        logger: LoggerLike = None,
    ) -> None:
        self.root = root
        self.context = context
        self._logger = ensure_structured_logger(logger, fallback_name=__name__)
        self._notifier = notifier or DialogNotifier(root)
        self._control_bar_height = control_bar_height
        self._closed = False

        self._build_layout(title)

        self.display = DisplaySurface(self.canvas)
        self.pump = FramePump(context, self.display, self._notifier, logger=self._logger)
        self.exporter = exporter or SnapshotExporter(context, self._notifier, output_dir=output_dir)
        self.timer = RepeatingTimer(root, self._on_tick, context.mode.frame_interval_s)

        self.root.protocol("WM_DELETE_WINDOW", self.close)

    # ------------------------------------------------------------------
    # Layout

    def _build_layout(self, title: str) -> None:
        width, height = self.context.mode.size
        bar = self._control_bar_height

        self.root.title(title)
        self.root.geometry(f"{width}x{height + bar}")
        self.root.resizable(False, False)

        self.canvas = tk.Canvas(
            self.root,
            width=width,
            height=height,
            bg="black",
            highlightthickness=0,
        )
        self.canvas.pack(side=tk.TOP)

        control_bar = ttk.Frame(self.root, height=bar)
        control_bar.pack(side=tk.TOP, fill=tk.X)
        control_bar.pack_propagate(False)

        self.snapshot_btn = ttk.Button(control_bar, text="Snapshot", command=self.take_snapshot)
        self.snapshot_btn.place(
            relx=0.5, rely=0.5, anchor="center", width=BUTTON_WIDTH, height=BUTTON_HEIGHT
        )

        self.status_var = tk.StringVar(master=self.root, value=self.context.mode.describe())
        self.status_label = ttk.Label(control_bar, textvariable=self.status_var, anchor="w")
        self.status_label.pack(side=tk.LEFT, padx=6)

    @property
    def window_size(self) -> tuple[int, int]:
        width, height = self.context.mode.size
        return width, height + self._control_bar_height

    # ------------------------------------------------------------------
    # Lifecycle

    @property
    def closed(self) -> bool:
        return self._closed

    def start(self) -> None:
        self._logger.info("Starting preview at %s", self.context.mode.describe())
        self.root.deiconify()
        self.timer.start(0.0)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._logger.info("Closing window after %d frames", self.context.frames_rendered)

        self.context.stop("window closed")
        self.timer.stop()
        self.context.session.release()
        self.display.release()
        with contextlib.suppress(tk.TclError):
            self.root.withdraw()
            self.root.quit()

    # ------------------------------------------------------------------
    # Event handlers

    def take_snapshot(self) -> SnapshotResult:
        return self.exporter.export()

    def _on_tick(self) -> bool:
        keep_going = self.pump.tick()
        if not keep_going:
            self.status_var.set(f"Stopped: {self.context.stop_reason or 'capture ended'}")
        elif self.context.frames_rendered % STATUS_REFRESH_FRAMES == 0:
            self.status_var.set(f"{self.context.mode.describe()} | {self.pump.fps:.1f} fps")
        return keep_going


__all__ = ["CameraShell", "DEFAULT_CONTROL_BAR_HEIGHT"]
