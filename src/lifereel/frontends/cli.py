"""Command-line interface for recording Conway's Game of Life runs."""

import argparse
import sys
from typing import List, Optional

from ..core.config import RunConfig
from ..core.errors import StartupError
from ..core.game import GameOfLife, RunResult
from ..core.grid import Grid
from ..core.patterns import PatternLibrary, default_placements
from ..core.sinks import DisplaySink, FrameSink, HeadlessDisplay, NullFrameSink
from .gif_exporter import GifExporter


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    defaults = RunConfig()
    parser = argparse.ArgumentParser(
        prog="lifereel",
        description="Run Conway's Game of Life in a window and record it as an animated GIF",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                   # 100x100 grid, 200 generations
  %(prog)s -W 60 -H 40 -s 12 --fps 20        # Smaller grid, bigger cells
  %(prog)s --headless -g 500 -o long.gif     # No window, just the GIF
  %(prog)s --seed 42 -d 0.3                  # Reproducible, denser noise
  %(prog)s --list-patterns                   # Show the pattern catalog
        """,
    )

    parser.add_argument("-W", "--width", type=int, default=defaults.width, help=f"Grid width (default: {defaults.width})")

    parser.add_argument("-H", "--height", type=int, default=defaults.height, help=f"Grid height (default: {defaults.height})")

    parser.add_argument(
        "-s",
        "--scale",
        type=int,
        default=defaults.scale,
        help=f"Window pixels per cell (default: {defaults.scale})",
    )

    parser.add_argument(
        "--fps",
        type=int,
        default=defaults.fps,
        help=f"Generations per second, also the GIF frame rate (default: {defaults.fps})",
    )

    parser.add_argument(
        "-g",
        "--max-generations",
        type=int,
        default=defaults.max_generations,
        help=f"Number of generations to run (default: {defaults.max_generations})",
    )

    parser.add_argument(
        "-d",
        "--density",
        type=float,
        default=defaults.density,
        help=f"Initial random population density 0.0-1.0 (default: {defaults.density})",
    )

    parser.add_argument(
        "-o",
        "--output",
        default=defaults.output,
        help=f"GIF file to write (default: {defaults.output})",
    )

    parser.add_argument("--seed", type=int, help="Random seed for reproducible runs")

    parser.add_argument("--headless", action="store_true", help="Run without opening a window")

    parser.add_argument("--no-gif", action="store_true", help="Do not record a GIF")

    parser.add_argument("--list-patterns", action="store_true", help="List the built-in patterns and exit")

    parser.add_argument("-v", "--verbose", action="store_true", help="Print run settings and detailed results")

    return parser


def config_from_args(args: argparse.Namespace) -> RunConfig:
    """Build a RunConfig from parsed arguments."""
    return RunConfig(
        width=args.width,
        height=args.height,
        scale=args.scale,
        fps=args.fps,
        max_generations=args.max_generations,
        density=args.density,
        output=args.output,
        seed=args.seed,
        headless=args.headless,
    )


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = config_from_args(args).validate()

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def list_patterns(library: Optional[PatternLibrary] = None) -> None:
    """Print the pattern catalog and the default layout."""
    library = library or PatternLibrary()

    print("Available patterns:")
    for category, names in library.get_patterns_by_category().items():
        print(f"\n{category}:")
        for name in names:
            pattern = library.require(name)
            size = pattern.get_size()
            print(f"  {name}: {size[0]}x{size[1]}, {pattern.population} cells")
            if pattern.description:
                print(f"    {pattern.description}")

    print("\nDefault layout (stamped over the random noise):")
    for placement in default_placements():
        print(f"  {placement.pattern.name} at ({placement.x}, {placement.y})")


def open_display(config: RunConfig) -> DisplaySink:
    """Open the window for a run, or a headless stand-in."""
    if config.headless:
        return HeadlessDisplay()

    # Imported lazily so headless runs work without Tk
    from .tkinter_display import TkinterDisplay

    return TkinterDisplay(config.window_width, config.window_height)


def open_exporter(config: RunConfig, record: bool = True) -> FrameSink:
    """Open the GIF recorder for a run, or a sink that discards frames."""
    if not record:
        return NullFrameSink()
    return GifExporter(config.output, config.width, config.height, config.fps)


def run(config: RunConfig, record: bool = True) -> RunResult:
    """Seed a grid and run it to completion.

    Raises:
        StartupError: If the output file or the window cannot be opened
    """
    grid = Grid(config.width, config.height)

    with open_exporter(config, record) as exporter:
        with open_display(config) as display:
            game = GameOfLife(grid, config, display, exporter, reporter=print)
            game.initialize()
            return game.run()


def format_finish_reason(reason: str) -> str:
    """Format the stop reason for display."""
    if reason == GameOfLife.WINDOW_CLOSED:
        return "Window closed by user"
    if reason == GameOfLife.MAX_GENERATIONS:
        return "Reached maximum generations"
    return reason


def print_results(result: RunResult, config: RunConfig, record: bool, verbose: bool) -> None:
    """Print the run summary."""
    print(f"\nSimulation completed after {result.generations} generations")
    print(f"Finish reason: {format_finish_reason(result.reason)}")

    if record:
        print(f"GIF saved to: {config.output}")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Grid size: {config.width}x{config.height}")
        print(f"  Final population: {result.population}")
        print(f"  Population density: {result.population / (config.width * config.height):.2%}")
        print(f"  Duration: {result.duration_seconds:.3f} seconds")
        if result.duration_seconds > 0:
            print(f"  Speed: {result.generations / result.duration_seconds:.1f} generations/second")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.list_patterns:
        list_patterns()
        return 0

    if not validate_args(args):
        return 1

    config = config_from_args(args)
    record = not args.no_gif

    print("Starting Conway's Game of Life...")
    if args.verbose:
        print(f"Grid: {config.width}x{config.height}, scale {config.scale}, {config.fps} fps")
        print(f"Initial density: {config.density:.2%}")
        if config.seed is not None:
            print(f"Random seed: {config.seed}")

    try:
        result = run(config, record)
    except StartupError as e:
        print(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    print_results(result, config, record, args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
