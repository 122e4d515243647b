"""Core simulation logic."""

from .grid import Grid, CellState, next_state
from .game import GameOfLife, RunResult
from .config import RunConfig
from .patterns import Pattern, Placement, PatternLibrary, default_placements
from .sinks import DisplaySink, FrameSink, HeadlessDisplay, NullFrameSink
from .errors import LifeReelError, StartupError

__all__ = [
    "Grid",
    "CellState",
    "next_state",
    "GameOfLife",
    "RunResult",
    "RunConfig",
    "Pattern",
    "Placement",
    "PatternLibrary",
    "default_placements",
    "DisplaySink",
    "FrameSink",
    "HeadlessDisplay",
    "NullFrameSink",
    "LifeReelError",
    "StartupError",
]
