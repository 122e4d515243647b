"""Tests for the Pattern class and the built-in catalog."""

import pytest

from lifereel.core.grid import Grid
from lifereel.core.patterns import (
    BEACON,
    BEEHIVE,
    BLINKER,
    BLOCK,
    BUILTIN_PATTERNS,
    GLIDER,
    LIGHTWEIGHT_SPACESHIP,
    PULSAR,
    TOAD,
    Pattern,
    PatternLibrary,
    Placement,
    default_placements,
)


class TestPattern:
    """Test cases for the Pattern class."""

    def test_initialization(self):
        """Test pattern initialization."""
        pattern = Pattern("Line", [(0, 0), (1, 0), (2, 0)], "Three in a row", "Custom")

        assert pattern.name == "Line"
        assert pattern.cells == ((0, 0), (1, 0), (2, 0))
        assert pattern.description == "Three in a row"
        assert pattern.category == "Custom"
        assert pattern.population == 3

    def test_cells_are_immutable(self):
        """Cells are stored as a tuple, detached from the caller's list."""
        cells = [(0, 0), (1, 1)]
        pattern = Pattern("Pair", cells)
        cells.append((2, 2))

        assert pattern.cells == ((0, 0), (1, 1))
        with pytest.raises(AttributeError):
            pattern.cells = ()

    def test_cells_at(self):
        """Offsets are translated by the base position."""
        assert list(BLINKER.cells_at(5, 3)) == [(5, 3), (6, 3), (7, 3)]

    def test_bounding_box_and_size(self):
        assert GLIDER.get_bounding_box() == (0, 0, 2, 2)
        assert GLIDER.get_size() == (3, 3)
        assert LIGHTWEIGHT_SPACESHIP.get_size() == (5, 4)
        assert PULSAR.get_size() == (13, 13)
        assert Pattern("Empty", []).get_bounding_box() == (0, 0, 0, 0)

    def test_equality(self):
        assert Pattern("Block", BLOCK.cells) == BLOCK
        assert Pattern("Other", BLOCK.cells) != BLOCK
        assert hash(Pattern("Block", BLOCK.cells)) == hash(BLOCK)


class TestBuiltinPatterns:
    """The exact cell offsets of the catalog."""

    @pytest.mark.parametrize(
        "pattern,cells",
        [
            (GLIDER, {(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)}),
            (BLOCK, {(0, 0), (0, 1), (1, 0), (1, 1)}),
            (BLINKER, {(0, 0), (1, 0), (2, 0)}),
            (TOAD, {(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)}),
            (BEACON, {(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)}),
            (BEEHIVE, {(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)}),
            (
                LIGHTWEIGHT_SPACESHIP,
                {(0, 0), (3, 0), (4, 1), (0, 2), (4, 2), (1, 3), (2, 3), (3, 3), (4, 3)},
            ),
        ],
    )
    def test_cells(self, pattern, cells):
        assert set(pattern.cells) == cells
        assert pattern.population == len(cells)

    def test_pulsar(self):
        """The pulsar has 48 distinct cells, symmetric in both axes."""
        cells = set(PULSAR.cells)
        assert len(PULSAR.cells) == 48
        assert len(cells) == 48
        assert {(12 - x, y) for x, y in cells} == cells
        assert {(x, 12 - y) for x, y in cells} == cells
        assert (6, 6) not in cells

    def test_placement_on_grid(self):
        """Stamping at a known base sets exactly the translated cells."""
        for pattern in BUILTIN_PATTERNS:
            grid = Grid(30, 30)
            grid.place_pattern(pattern, 7, 9)
            assert set(grid.live_cells()) == {(x + 7, y + 9) for x, y in pattern.cells}

    def test_no_duplicate_offsets(self):
        for pattern in BUILTIN_PATTERNS:
            assert len(set(pattern.cells)) == len(pattern.cells), pattern.name


class TestDefaultPlacements:
    """The startup layout."""

    def test_layout(self):
        placements = default_placements()
        assert len(placements) == 10
        assert all(isinstance(p, Placement) for p in placements)

        names = [p.pattern.name for p in placements]
        assert names.count("Glider") == 2
        assert names.count("Block") == 2
        for name in ["Blinker", "Toad", "Beacon", "Beehive", "Lightweight Spaceship", "Pulsar"]:
            assert names.count(name) == 1

        assert Placement(GLIDER, 15, 15) in placements
        assert Placement(PULSAR, 50, 20) in placements

    def test_fits_default_grid(self):
        """Every default placement lies fully inside a 100x100 grid."""
        grid = Grid(100, 100)
        for placement in default_placements():
            assert grid.place_pattern(placement.pattern, placement.x, placement.y) == placement.pattern.population

    def test_returns_fresh_list(self):
        first = default_placements()
        first.clear()
        assert len(default_placements()) == 10


class TestPatternLibrary:
    """Test cases for the PatternLibrary class."""

    def test_builtin_patterns(self):
        library = PatternLibrary()
        assert len(library) == 8
        assert library.list_patterns() == [
            "Glider",
            "Block",
            "Blinker",
            "Toad",
            "Beacon",
            "Beehive",
            "Lightweight Spaceship",
            "Pulsar",
        ]

    def test_get_pattern(self):
        library = PatternLibrary()
        assert library.get_pattern("Glider") is GLIDER
        assert library.get_pattern("Nonexistent") is None
        assert "Pulsar" in library
        assert "Nonexistent" not in library

    def test_require(self):
        library = PatternLibrary()
        assert library.require("Toad") is TOAD
        with pytest.raises(KeyError):
            library.require("Nonexistent")

    def test_categories(self):
        categories = PatternLibrary().get_patterns_by_category()
        assert set(categories) == {"Still Life", "Oscillators", "Spaceships"}
        assert categories["Still Life"] == ["Block", "Beehive"]
        assert categories["Spaceships"] == ["Glider", "Lightweight Spaceship"]
        assert categories["Oscillators"] == ["Blinker", "Toad", "Beacon", "Pulsar"]
