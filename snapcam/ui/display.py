"""Canvas-backed preview surface."""

from __future__ import annotations

import io
from typing import Optional

import numpy as np
import tkinter as tk
from PIL import Image


class DisplaySurface:
    """Shows one RGB buffer on a canvas.

    The surface owns at most one ``PhotoImage``. ``replace`` swaps in the new
    image before dropping the old one, so the canvas never points at a
    released image.
    """

    def __init__(self, canvas: tk.Canvas) -> None:
        self._canvas = canvas
        self._photo: Optional[tk.PhotoImage] = None
        self._image_id: Optional[int] = None

    @property
    def has_image(self) -> bool:
        return self._photo is not None

    @property
    def photo(self) -> Optional[tk.PhotoImage]:
        return self._photo

    def replace(self, buffer: np.ndarray) -> None:
        image = Image.fromarray(buffer)

        # Native PhotoImage from PPM bytes avoids PIL.ImageTk lifetime issues
        ppm_data = io.BytesIO()
        image.save(ppm_data, format="PPM")
        photo = tk.PhotoImage(master=self._canvas, data=ppm_data.getvalue())

        if self._image_id is None:
            self._image_id = self._canvas.create_image(0, 0, image=photo, anchor="nw")
        else:
            self._canvas.itemconfig(self._image_id, image=photo)
        self._photo = photo

    def repaint(self) -> None:
        self._canvas.update_idletasks()

    def release(self) -> None:
        if self._image_id is not None:
            self._canvas.delete(self._image_id)
            self._image_id = None
        self._photo = None


__all__ = ["DisplaySurface"]
