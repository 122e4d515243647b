"""Generation loop tying the grid to its display and recorder."""

from typing import Callable, Deque, Dict, Iterable, NamedTuple, Optional
from collections import deque
import time
import numpy as np

from .config import RunConfig
from .grid import Grid
from .patterns import Placement, default_placements
from .sinks import DisplaySink, FrameSink, HeadlessDisplay, NullFrameSink


class RunResult(NamedTuple):
    """Outcome of GameOfLife.run()."""

    generations: int
    reason: str
    population: int
    duration_seconds: float


class GameOfLife:
    """Runs Conway's Game of Life for a fixed number of generations.

    Each iteration advances the grid one full generation, presents the
    magnified render buffer, appends the generation to the frame sink, checks
    whether to stop and then sleeps to cap the rate at ``config.fps``.
    """

    MAX_GENERATIONS = "max_generations"
    WINDOW_CLOSED = "window_closed"

    def __init__(
        self,
        grid: Grid,
        config: Optional[RunConfig] = None,
        display: Optional[DisplaySink] = None,
        exporter: Optional[FrameSink] = None,
        reporter: Optional[Callable[[str], None]] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the driver.

        Args:
            grid: The grid to simulate
            config: Run parameters (defaults to RunConfig())
            display: Where rendered generations go (defaults to headless)
            exporter: Where palette-index frames go (defaults to discarding them)
            reporter: Receives progress lines; silent when omitted
            sleep: Blocking wait used for frame pacing
            clock: Monotonic time source used for frame pacing
        """
        self.grid = grid
        self.config = config or RunConfig(width=grid.width, height=grid.height)
        self.display = display or HeadlessDisplay()
        self.exporter = exporter or NullFrameSink()
        self._report = reporter or (lambda message: None)
        self._sleep = sleep
        self._clock = clock
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)

        self._population_history.append(self.population)

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    @property
    def population_history(self) -> list:
        """Population counts of the most recent generations."""
        return list(self._population_history)

    def initialize(
        self,
        rng: Optional[np.random.Generator] = None,
        placements: Optional[Iterable[Placement]] = None,
    ) -> None:
        """Seed the grid with random noise and then the given placements.

        Args:
            rng: Random source; seeded from ``config.seed`` when omitted
            placements: Patterns to stamp; the default layout when omitted
        """
        if rng is None:
            rng = np.random.default_rng(self.config.seed)
        if placements is None:
            placements = default_placements()

        self.grid.seed(rng, self.config.density, placements)

        self._generation = 0
        self._population_history.clear()
        self._population_history.append(self.population)

    def advance(self) -> None:
        """Advance the simulation by one generation."""
        self.grid.step()
        self._generation += 1
        self._population_history.append(self.population)

    def run(self) -> RunResult:
        """Run until the generation ceiling or until the display closes.

        The display and exporter are closed on every exit path, so the
        recording is finalized even when a step, present or write fails.
        """
        config = self.config
        reason = self.MAX_GENERATIONS
        start_time = self._clock()

        self._report(f"Generating {config.max_generations} generations...")

        try:
            while self._generation < config.max_generations:
                if not self.display.is_open():
                    reason = self.WINDOW_CLOSED
                    break

                tick = self._clock()

                self.advance()
                self.display.present(self.grid.render_buffer(config.scale))
                self.exporter.append_frame(self.grid.export_indices())

                if self._generation % config.progress_interval == 0:
                    self._report(f"Generation {self._generation}/{config.max_generations}")

                self._pace(tick)
        finally:
            try:
                self.exporter.close()
            finally:
                self.display.close()

        duration = self._clock() - start_time
        return RunResult(self._generation, reason, self.population, duration)

    def _pace(self, tick: float) -> None:
        """Sleep for whatever is left of this generation's time slot."""
        remaining = self.config.frame_interval - (self._clock() - tick)
        if remaining > 0:
            self._sleep(remaining)

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with generation, population and grid information
        """
        return {
            "generation": self._generation,
            "population": self.population,
            "population_history": list(self._population_history),
            "population_density": self.population / (self.grid.width * self.grid.height),
            "grid_size": self.grid.shape,
        }
