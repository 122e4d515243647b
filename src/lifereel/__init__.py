"""Conway's Game of Life with a live window and animated GIF recording."""

__version__ = "0.1.0"

from .core.grid import Grid, CellState
from .core.game import GameOfLife, RunResult
from .core.config import RunConfig
from .core.patterns import Pattern, Placement, PatternLibrary, default_placements

__all__ = [
    "Grid",
    "CellState",
    "GameOfLife",
    "RunResult",
    "RunConfig",
    "Pattern",
    "Placement",
    "PatternLibrary",
    "default_placements",
]
