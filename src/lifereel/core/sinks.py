"""Interfaces between the simulation and its display and file outputs."""

from abc import ABC, abstractmethod

import numpy as np


class DisplaySink(ABC):
    """Something that shows rendered generations and can ask the run to stop."""

    @abstractmethod
    def present(self, buffer: np.ndarray) -> None:
        """Show a packed 0xRRGGBB pixel buffer as produced by Grid.render_buffer."""

    @abstractmethod
    def is_open(self) -> bool:
        """False once the user has asked to exit."""

    def close(self) -> None:
        """Release the display. Safe to call more than once."""

    def __enter__(self) -> "DisplaySink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class FrameSink(ABC):
    """Append-only recorder of generations as palette-index frames."""

    @abstractmethod
    def append_frame(self, indices: bytes) -> None:
        """Append one generation as produced by Grid.export_indices."""

    @abstractmethod
    def close(self) -> None:
        """Finalize the output. Safe to call more than once."""

    def __enter__(self) -> "FrameSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class HeadlessDisplay(DisplaySink):
    """Display that shows nothing and never asks to stop."""

    def __init__(self) -> None:
        self.frames_presented = 0

    def present(self, buffer: np.ndarray) -> None:
        self.frames_presented += 1

    def is_open(self) -> bool:
        return True


class NullFrameSink(FrameSink):
    """Frame sink that discards every frame."""

    def __init__(self) -> None:
        self.frame_count = 0

    def append_frame(self, indices: bytes) -> None:
        self.frame_count += 1

    def close(self) -> None:
        pass
