"""Built-in Conway's Game of Life patterns and the default seeding layout."""

from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional, Tuple


class Pattern:
    """An immutable, named set of live-cell offsets.

    Offsets are relative to the pattern's base position, with ``(0, 0)`` at the
    top-left corner of its bounding box.
    """

    def __init__(
        self,
        name: str,
        cells: Iterable[Tuple[int, int]],
        description: str = "",
        category: str = "",
    ) -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: (dx, dy) offsets of living cells, in order
            description: Optional description
            category: Catalog category (e.g. "Oscillators")
        """
        self._name = name
        self._cells = tuple((int(dx), int(dy)) for dx, dy in cells)
        self._description = description
        self._category = category

    @property
    def name(self) -> str:
        return self._name

    @property
    def cells(self) -> Tuple[Tuple[int, int], ...]:
        """Ordered (dx, dy) offsets of living cells."""
        return self._cells

    @property
    def description(self) -> str:
        return self._description

    @property
    def category(self) -> str:
        return self._category

    @property
    def population(self) -> int:
        """Number of living cells in the pattern."""
        return len(self._cells)

    def cells_at(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """Yield absolute coordinates of the pattern stamped at (x, y)."""
        for dx, dy in self._cells:
            yield (x + dx, y + dy)

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self._cells:
            return (0, 0, 0, 0)

        xs, ys = zip(*self._cells)
        return (min(xs), min(ys), max(xs), max(ys))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (width, height)."""
        min_x, min_y, max_x, max_y = self.get_bounding_box()
        return (max_x - min_x + 1, max_y - min_y + 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return self._name == other._name and self._cells == other._cells

    def __hash__(self) -> int:
        return hash((self._name, self._cells))

    def __repr__(self) -> str:
        return f"Pattern({self._name!r}, {self.population} cells)"


class Placement(NamedTuple):
    """A pattern stamped at a base position."""

    pattern: Pattern
    x: int
    y: int


# Still lifes
BLOCK = Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block", "Still Life")

BEEHIVE = Pattern(
    "Beehive",
    [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)],
    "Beehive still life",
    "Still Life",
)

# Oscillators
BLINKER = Pattern("Blinker", [(0, 0), (1, 0), (2, 0)], "Period-2 oscillator", "Oscillators")

TOAD = Pattern(
    "Toad",
    [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)],
    "Period-2 oscillator",
    "Oscillators",
)

BEACON = Pattern(
    "Beacon",
    [(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)],
    "Period-2 oscillator, two diagonal blocks",
    "Oscillators",
)

PULSAR = Pattern(
    "Pulsar",
    [
        # Top half
        (2, 0), (3, 0), (4, 0), (8, 0), (9, 0), (10, 0),
        (0, 2), (5, 2), (7, 2), (12, 2),
        (0, 3), (5, 3), (7, 3), (12, 3),
        (0, 4), (5, 4), (7, 4), (12, 4),
        (2, 5), (3, 5), (4, 5), (8, 5), (9, 5), (10, 5),
        # Bottom half (mirrored)
        (2, 7), (3, 7), (4, 7), (8, 7), (9, 7), (10, 7),
        (0, 8), (5, 8), (7, 8), (12, 8),
        (0, 9), (5, 9), (7, 9), (12, 9),
        (0, 10), (5, 10), (7, 10), (12, 10),
        (2, 12), (3, 12), (4, 12), (8, 12), (9, 12), (10, 12),
    ],
    "Period-3 oscillator",
    "Oscillators",
)

# Spaceships
GLIDER = Pattern(
    "Glider",
    [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)],
    "Smallest spaceship, moves (+1, +1) every 4 generations",
    "Spaceships",
)

LIGHTWEIGHT_SPACESHIP = Pattern(
    "Lightweight Spaceship",
    [
        (0, 0), (3, 0),
        (4, 1),
        (0, 2), (4, 2),
        (1, 3), (2, 3), (3, 3), (4, 3),
    ],
    "LWSS - period-4 spaceship, moves 2 cells right every 4 generations",
    "Spaceships",
)

BUILTIN_PATTERNS: Tuple[Pattern, ...] = (
    GLIDER,
    BLOCK,
    BLINKER,
    TOAD,
    BEACON,
    BEEHIVE,
    LIGHTWEIGHT_SPACESHIP,
    PULSAR,
)


def default_placements() -> List[Placement]:
    """Placements stamped over the random noise at startup.

    Coordinates are laid out for a 100x100 grid; smaller grids clip them.
    """
    return [
        Placement(GLIDER, 15, 15),
        Placement(GLIDER, 70, 10),
        Placement(BLOCK, 5, 5),
        Placement(BLOCK, 90, 90),
        Placement(BLINKER, 25, 25),
        Placement(TOAD, 35, 35),
        Placement(BEACON, 45, 45),
        Placement(BEEHIVE, 60, 60),
        Placement(LIGHTWEIGHT_SPACESHIP, 10, 50),
        Placement(PULSAR, 50, 20),
    ]


class PatternLibrary:
    """Read-only catalog of the built-in patterns, keyed by name."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {p.name: p for p in BUILTIN_PATTERNS}

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Args:
            name: Pattern name

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def require(self, name: str) -> Pattern:
        """Get a pattern by name, raising KeyError if it is unknown."""
        try:
            return self._patterns[name]
        except KeyError:
            raise KeyError(f"Unknown pattern '{name}'") from None

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get pattern names grouped by category, in catalog order."""
        categories: Dict[str, List[str]] = {}
        for pattern in self._patterns.values():
            categories.setdefault(pattern.category, []).append(pattern.name)
        return categories

    def __contains__(self, name: object) -> bool:
        return name in self._patterns

    def __len__(self) -> int:
        return len(self._patterns)
