"""Display, recording and command-line frontends.

The tkinter window lives in ``lifereel.frontends.tkinter_display`` and is
imported on demand so headless runs do not need Tk.
"""

from .gif_exporter import GifExporter
from .cli import main

__all__ = ["GifExporter", "main"]
