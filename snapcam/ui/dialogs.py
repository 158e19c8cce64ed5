"""Modal message boxes."""

from __future__ import annotations

from typing import Optional

import tkinter as tk
from tkinter import messagebox

from snapcam.core.logging_utils import get_module_logger

logger = get_module_logger(__name__)


class DialogNotifier:
    def __init__(self, parent: Optional[tk.Misc] = None) -> None:
        self._parent = parent

    def error(self, title: str, message: str) -> None:
        logger.debug("Error dialog: %s | %s", title, message)
        messagebox.showerror(title, message, parent=self._parent)

    def info(self, title: str, message: str) -> None:
        logger.debug("Info dialog: %s | %s", title, message)
        messagebox.showinfo(title, message, parent=self._parent)


__all__ = ["DialogNotifier"]
