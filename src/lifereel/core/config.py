"""Run parameters."""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class RunConfig:
    """Parameters fixed for the lifetime of a run.

    Defaults reproduce a 100x100 grid shown at 8x magnification, capped at 10
    frames per second for 200 generations.
    """

    width: int = 100
    height: int = 100
    scale: int = 8
    fps: int = 10
    max_generations: int = 200
    density: float = 0.15
    output: str = "conway_game_of_life.gif"
    seed: Optional[int] = None
    headless: bool = False
    progress_interval: int = 20

    @property
    def window_width(self) -> int:
        return self.width * self.scale

    @property
    def window_height(self) -> int:
        return self.height * self.scale

    @property
    def frame_delay_cs(self) -> int:
        """GIF frame delay in centiseconds (truncated)."""
        return 100 // self.fps

    @property
    def frame_interval(self) -> float:
        """Minimum wall-clock seconds between generations."""
        return 1.0 / self.fps

    def validate(self) -> List[str]:
        """Return a list of problems with this configuration (empty if valid)."""
        errors = []

        if self.width <= 0:
            errors.append("Width must be positive")

        if self.height <= 0:
            errors.append("Height must be positive")

        if self.scale <= 0:
            errors.append("Scale must be positive")

        if not 1 <= self.fps <= 100:
            errors.append("FPS must be between 1 and 100")

        if self.max_generations <= 0:
            errors.append("Max generations must be positive")

        if not 0.0 <= self.density <= 1.0:
            errors.append("Density must be between 0.0 and 1.0")

        if not self.output:
            errors.append("Output filename must not be empty")

        if self.progress_interval <= 0:
            errors.append("Progress interval must be positive")

        return errors
