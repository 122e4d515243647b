#!/usr/bin/env python3
"""
Example usage of the lifereel package without a window or GIF.
"""

from lifereel import Grid, GameOfLife, PatternLibrary, Placement, RunConfig


def main():
    """Demonstrate programmatic usage of the lifereel package."""
    config = RunConfig(width=20, height=20, density=0.0, max_generations=8)
    grid = Grid(config.width, config.height)
    game = GameOfLife(grid, config)

    library = PatternLibrary()
    glider = library.require("Glider")
    game.initialize(placements=[Placement(glider, 8, 8)])

    print("Initial state:")
    print(grid)
    print(f"Population: {game.population}")
    print()

    for _ in range(config.max_generations):
        game.advance()
        print(f"Generation {game.generation}:")
        print(grid)
        print()

    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
