"""Tkinter window that shows each generation."""

import tkinter as tk
from typing import Optional

import numpy as np
from PIL import Image, ImageTk

from ..core.errors import StartupError
from ..core.sinks import DisplaySink


def buffer_to_image(buffer: np.ndarray, width: int, height: int) -> Image.Image:
    """Convert a flat buffer of packed 0xRRGGBB pixels into an RGB image.

    Args:
        buffer: Row-major pixels, ``width * height`` entries
        width: Image width in pixels
        height: Image height in pixels

    Raises:
        ValueError: If the buffer length does not match the image size
    """
    pixels = np.asarray(buffer, dtype=np.uint32)
    if pixels.size != width * height:
        raise ValueError(f"Buffer has {pixels.size} pixels, expected {width * height}")

    pixels = pixels.reshape(height, width)
    rgb = np.empty((height, width, 3), dtype=np.uint8)
    rgb[..., 0] = (pixels >> 16) & 0xFF
    rgb[..., 1] = (pixels >> 8) & 0xFF
    rgb[..., 2] = pixels & 0xFF
    return Image.fromarray(rgb)


class TkinterDisplay(DisplaySink):
    """Fixed-size window showing the magnified grid.

    Pressing Escape or closing the window makes ``is_open()`` return False.
    """

    def __init__(
        self,
        width: int,
        height: int,
        title: str = "Conway's Game of Life - Press ESC to exit",
        master: Optional[tk.Tk] = None,
    ) -> None:
        """Create the window.

        Args:
            width: Window width in pixels
            height: Window height in pixels
            title: Window title
            master: Existing root window to draw into

        Raises:
            StartupError: If no window can be created (e.g. no display)
        """
        self.width = width
        self.height = height

        try:
            self.master = master or tk.Tk()
        except tk.TclError as e:
            raise StartupError(f"Cannot open display window: {e}") from e

        self.master.title(title)
        self.master.configure(bg="#333333")
        self.master.resizable(False, False)

        self.canvas = tk.Canvas(
            self.master,
            width=width,
            height=height,
            bg="#000000",
            highlightthickness=0,
        )
        self.canvas.pack()
        self._image_id = self.canvas.create_image(0, 0, anchor=tk.NW)

        # Keep a reference or Tk drops the image
        self._photo: Optional[ImageTk.PhotoImage] = None

        self._open = True
        self._destroyed = False
        self.master.bind("<Escape>", self._request_exit)
        self.master.protocol("WM_DELETE_WINDOW", self._request_exit)

    def _request_exit(self, event: Optional[tk.Event] = None) -> None:
        self._open = False

    def present(self, buffer: np.ndarray) -> None:
        """Draw a render buffer and process pending window events."""
        if self._destroyed:
            return

        image = buffer_to_image(buffer, self.width, self.height)
        self._photo = ImageTk.PhotoImage(image, master=self.master)
        self.canvas.itemconfigure(self._image_id, image=self._photo)
        self.master.update()

    def is_open(self) -> bool:
        """Process pending events and report whether the user asked to exit."""
        if self._destroyed:
            return False
        self.master.update()
        return self._open

    def close(self) -> None:
        """Destroy the window."""
        if self._destroyed:
            return
        self._destroyed = True
        self._open = False
        self._photo = None
        self.master.destroy()
