"""Hard-edged simulation grid for Conway's Game of Life."""

from enum import IntEnum
from typing import Iterable, Iterator, List, Optional, Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .patterns import Pattern, Placement


ALIVE_COLOR = 0x00FFFFFF
DEAD_COLOR = 0x00001122
OUT_OF_BOUNDS_COLOR = 0x00000000

_PALETTE = np.array([DEAD_COLOR, ALIVE_COLOR], dtype=np.uint32)


class CellState(IntEnum):
    """State of a single cell."""

    DEAD = 0
    ALIVE = 1


def next_state(current: CellState, neighbors: int) -> CellState:
    """Apply Conway's B3/S23 rule to a single cell.

    Args:
        current: Current state of the cell
        neighbors: Number of living Moore neighbors (0-8)

    Returns:
        State of the cell in the next generation
    """
    if current == CellState.ALIVE:
        if neighbors < 2:
            return CellState.DEAD  # underpopulation
        if neighbors > 3:
            return CellState.DEAD  # overpopulation
        return CellState.ALIVE
    if neighbors == 3:
        return CellState.ALIVE  # birth
    return CellState(current)


# next_state for every (state, neighbor count) pair, indexed [state, neighbors]
_RULE_TABLE = np.array(
    [[next_state(state, n) for n in range(9)] for state in CellState],
    dtype=np.int8,
)


class Grid:
    """Fixed-size 2D grid of cells with hard edges.

    Cells are stored in a numpy array indexed ``[x, y]``. Positions outside
    ``[0, width) x [0, height)`` do not exist: they are never counted as
    neighbors and never wrap to the opposite edge.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize a new grid with every cell dead.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self._cells = np.zeros((width, height), dtype=np.int8)

        # Simulation is single-threaded
        torch.set_num_threads(1)

        # Input tensor and kernel for the neighbor convolution (reused every step)
        self._torch_input = torch.zeros(1, 1, height, width, dtype=torch.float32)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cell array, indexed [x, y]."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def in_bounds(self, x: int, y: int) -> bool:
        """Whether (x, y) lies inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds for {self.width}x{self.height} grid")

    def cell_state(self, x: int, y: int) -> CellState:
        """Get the state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(x, y)
        return CellState(int(self._cells[x, y]))

    def is_alive(self, x: int, y: int) -> bool:
        """Whether the cell at (x, y) is alive.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        return self.cell_state(x, y) == CellState.ALIVE

    def set_cell(self, x: int, y: int, alive: bool) -> None:
        """Set the state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(x, y)
        self._cells[x, y] = 1 if alive else 0

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(0)

    def randomize(self, density: float, rng: Optional[np.random.Generator] = None) -> None:
        """Set every cell alive independently with probability ``density``.

        Args:
            density: Chance each cell will be alive (0.0 to 1.0)
            rng: Random source; a fresh default generator when omitted

        Raises:
            ValueError: If density is outside [0, 1]
        """
        if not 0.0 <= density <= 1.0:
            raise ValueError(f"Density must be between 0.0 and 1.0, got {density}")

        if rng is None:
            rng = np.random.default_rng()
        mask = rng.random((self.width, self.height)) < density
        self._cells[:] = mask

    def place_pattern(self, pattern: Pattern, x: int, y: int) -> int:
        """Stamp a pattern with its top-left offset at (x, y).

        Cells landing outside the grid are dropped.

        Returns:
            Number of cells actually set alive
        """
        placed = 0
        for cx, cy in pattern.cells_at(x, y):
            if self.in_bounds(cx, cy):
                self._cells[cx, cy] = 1
                placed += 1
        return placed

    def seed(
        self,
        rng: Optional[np.random.Generator],
        density: float,
        placements: Iterable[Placement] = (),
    ) -> None:
        """Reinitialize the grid: random noise first, then patterns on top.

        Args:
            rng: Random source for the noise
            density: Probability that each cell starts alive
            placements: Patterns to stamp over the noise, in order
        """
        self.clear()
        self.randomize(density, rng)
        for placement in placements:
            self.place_pattern(placement.pattern, placement.x, placement.y)

    def neighbor_count(self, x: int, y: int) -> int:
        """Count living Moore neighbors of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(x, y)
        count = 0
        for dx in [-1, 0, 1]:
            for dy in [-1, 0, 1]:
                if dx == 0 and dy == 0:
                    continue

                nx, ny = x + dx, y + dy
                if self.in_bounds(nx, ny):
                    count += int(self._cells[nx, ny])

        return count

    def neighbor_counts(self) -> np.ndarray:
        """Count neighbors for all cells using a zero-padded convolution.

        Returns:
            Array of neighbor counts indexed [x, y]
        """
        # Grid uses (width, height) but PyTorch expects (height, width), so transpose
        self._torch_input[0, 0] = torch.from_numpy(self._cells.T.astype(np.float32))

        # Zero padding: cells beyond the edge count as absent
        neighbors = F.conv2d(self._torch_input, self._torch_kernel, padding=1)

        return neighbors[0, 0].numpy().astype(np.int8).T

    def step(self) -> None:
        """Advance the grid by one generation.

        Every cell is evaluated against the current generation by looking up
        next_state for its (state, neighbor count) pair; the result is built in
        a new array and swapped in once complete.
        """
        neighbors = self.neighbor_counts()
        self._cells = _RULE_TABLE[self._cells, neighbors]

    def live_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (x, y) of every living cell in row-major order."""
        ys, xs = np.nonzero(self._cells.T)
        for y, x in zip(ys, xs):
            yield (int(x), int(y))

    def cell_color(self, x: int, y: int) -> int:
        """Packed 0xRRGGBB colour for a cell; black outside the grid."""
        if not self.in_bounds(x, y):
            return OUT_OF_BOUNDS_COLOR
        return ALIVE_COLOR if self._cells[x, y] else DEAD_COLOR

    def export_indices(self) -> bytes:
        """Row-major palette indices (0 dead, 1 alive), one byte per cell."""
        return self._cells.T.astype(np.uint8).tobytes()

    def render_buffer(self, scale: int) -> np.ndarray:
        """Magnify the grid into a flat buffer of packed 0xRRGGBB pixels.

        Each cell becomes a ``scale x scale`` block. The buffer is row-major with
        ``(width * scale) * (height * scale)`` entries.

        Raises:
            ValueError: If scale is less than 1
        """
        if scale < 1:
            raise ValueError(f"Scale must be at least 1, got {scale}")

        colors = _PALETTE[self._cells.T]
        return np.repeat(np.repeat(colors, scale, axis=0), scale, axis=1).ravel()

    def to_list(self) -> List[List[int]]:
        """Convert grid to a nested list of rows (row-major)."""
        return self._cells.T.tolist()

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        result = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                row.append("*" if self._cells[x, y] else ".")
            result.append("".join(row))
        return "\n".join(result)
