"""Animated GIF recorder backed by Pillow."""

import os

from PIL import GifImagePlugin, Image

from ..core.errors import StartupError
from ..core.sinks import FrameSink


# Global palette: index 0 dark blue (dead), index 1 white (alive)
GIF_PALETTE = [
    0x00, 0x11, 0x22,
    0xFF, 0xFF, 0xFF,
]

GIF_TRAILER = b";"


class GifExporter(FrameSink):
    """Records generations as frames of a looping two-colour GIF.

    The output file is opened on construction so an unwritable path fails
    before the run starts. The GIF header goes out with the first frame and
    every frame is encoded and written as soon as it is appended, one frame
    per generation even when consecutive generations are identical.
    """

    def __init__(self, filename: str, width: int, height: int, fps: int) -> None:
        """Open the output file.

        Args:
            filename: Path of the GIF to write
            width: Frame width in cells
            height: Frame height in cells
            fps: Playback rate; each frame lasts 100 // fps centiseconds

        Raises:
            StartupError: If the file cannot be created
        """
        self.filename = filename
        self.width = width
        self.height = height
        self.frame_delay_cs = 100 // fps
        self._frame_count = 0
        self._closed = False

        try:
            self._file = open(filename, "wb")
        except OSError as e:
            raise StartupError(f"Cannot create output file '{filename}': {e}") from e

    @property
    def frame_count(self) -> int:
        """Number of frames written so far."""
        return self._frame_count

    @property
    def closed(self) -> bool:
        return self._closed

    def _make_frame(self, indices: bytes) -> Image.Image:
        frame = Image.frombytes("P", (self.width, self.height), bytes(indices))
        frame.putpalette(GIF_PALETTE)
        return frame

    def append_frame(self, indices: bytes) -> None:
        """Encode one generation of row-major palette indices and write it.

        Raises:
            ValueError: If the exporter is closed or the frame has the wrong size
            OSError: If the frame cannot be written
        """
        if self._closed:
            raise ValueError("Cannot append a frame to a closed exporter")

        expected = self.width * self.height
        if len(indices) != expected:
            raise ValueError(f"Frame has {len(indices)} cells, expected {expected}")

        frame = self._make_frame(indices)

        if self._frame_count == 0:
            header, _ = GifImagePlugin.getheader(frame, info={"loop": 0})
            self._file.write(b"".join(header))

        data = GifImagePlugin.getdata(frame, duration=self.frame_delay_cs * 10)
        self._file.write(b"".join(data))
        self._file.flush()
        self._frame_count += 1

    def close(self) -> None:
        """Terminate the GIF and close the file.

        A run that produced no frames leaves no file behind.
        """
        if self._closed:
            return
        self._closed = True

        try:
            if self._frame_count:
                self._file.write(GIF_TRAILER)
        finally:
            self._file.close()

        if self._frame_count == 0:
            os.remove(self.filename)
