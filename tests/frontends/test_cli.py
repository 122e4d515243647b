"""Tests for the CLI frontend."""

from unittest.mock import patch

from PIL import Image

from lifereel.core.config import RunConfig
from lifereel.core.errors import StartupError
from lifereel.core.game import GameOfLife, RunResult
from lifereel.core.sinks import HeadlessDisplay, NullFrameSink
from lifereel.frontends.cli import (
    config_from_args,
    create_parser,
    format_finish_reason,
    list_patterns,
    main,
    open_display,
    open_exporter,
    print_results,
    run,
    validate_args,
)
from lifereel.frontends.gif_exporter import GifExporter


class TestArgumentParsing:
    """Parser, config building and validation."""

    def test_defaults(self):
        args = create_parser().parse_args([])
        config = config_from_args(args)

        assert config == RunConfig()
        assert args.no_gif is False
        assert args.list_patterns is False
        assert args.verbose is False

    def test_all_options(self):
        args = create_parser().parse_args(
            [
                "-W", "30",
                "-H", "20",
                "-s", "4",
                "--fps", "25",
                "-g", "50",
                "-d", "0.3",
                "-o", "out.gif",
                "--seed", "7",
                "--headless",
            ]
        )
        config = config_from_args(args)

        assert config == RunConfig(
            width=30,
            height=20,
            scale=4,
            fps=25,
            max_generations=50,
            density=0.3,
            output="out.gif",
            seed=7,
            headless=True,
        )

    def test_validate_args(self, capsys):
        parser = create_parser()
        assert validate_args(parser.parse_args([]))

        assert not validate_args(parser.parse_args(["-W", "0", "-d", "2"]))
        output = capsys.readouterr().out
        assert "Error: Invalid arguments:" in output
        assert "Width must be positive" in output
        assert "Density must be between 0.0 and 1.0" in output


class TestHelpers:
    """Sink selection and output formatting."""

    def test_open_display_headless(self):
        assert isinstance(open_display(RunConfig(headless=True)), HeadlessDisplay)

    def test_open_exporter(self, tmp_path):
        assert isinstance(open_exporter(RunConfig(), record=False), NullFrameSink)

        exporter = open_exporter(RunConfig(output=str(tmp_path / "x.gif"), width=5, height=5))
        assert isinstance(exporter, GifExporter)
        assert exporter.width == 5
        exporter.close()

    def test_format_finish_reason(self):
        assert format_finish_reason(GameOfLife.MAX_GENERATIONS) == "Reached maximum generations"
        assert format_finish_reason(GameOfLife.WINDOW_CLOSED) == "Window closed by user"
        assert format_finish_reason("other") == "other"

    def test_print_results(self, capsys):
        result = RunResult(generations=12, reason=GameOfLife.MAX_GENERATIONS, population=5, duration_seconds=2.0)
        print_results(result, RunConfig(width=10, height=10), record=True, verbose=True)

        output = capsys.readouterr().out
        assert "Simulation completed after 12 generations" in output
        assert "Reached maximum generations" in output
        assert "GIF saved to: conway_game_of_life.gif" in output
        assert "Population density: 5.00%" in output
        assert "6.0 generations/second" in output

    def test_list_patterns(self, capsys):
        list_patterns()
        output = capsys.readouterr().out
        assert "Available patterns:" in output
        assert "Glider: 3x3, 5 cells" in output
        assert "Pulsar: 13x13, 48 cells" in output
        assert "Pulsar at (50, 20)" in output


class TestRun:
    """End-to-end headless runs."""

    def test_run_records_gif(self, tmp_path):
        path = tmp_path / "run.gif"
        config = RunConfig(width=20, height=15, max_generations=5, fps=100, output=str(path), headless=True, seed=1)

        result = run(config)

        assert result.generations == 5
        assert result.reason == GameOfLife.MAX_GENERATIONS
        with Image.open(path) as im:
            assert im.size == (20, 15)
            assert im.n_frames == 5

    def test_run_without_recording(self, tmp_path):
        config = RunConfig(width=10, height=10, max_generations=3, fps=100, output=str(tmp_path / "no.gif"), headless=True)

        result = run(config, record=False)

        assert result.generations == 3
        assert not (tmp_path / "no.gif").exists()


class TestMain:
    """Test cases for main()."""

    def test_list_patterns(self, capsys):
        assert main(["--list-patterns"]) == 0
        assert "Available patterns:" in capsys.readouterr().out

    def test_invalid_arguments(self, capsys):
        assert main(["--fps", "0"]) == 1
        assert "FPS must be between 1 and 100" in capsys.readouterr().out

    def test_headless_run(self, tmp_path, capsys):
        path = tmp_path / "main.gif"

        exit_code = main(
            ["-W", "12", "-H", "12", "-g", "20", "--fps", "100", "--headless", "--seed", "3", "-o", str(path), "-v"]
        )

        assert exit_code == 0
        assert path.exists()
        output = capsys.readouterr().out
        assert "Starting Conway's Game of Life..." in output
        assert "Generation 20/20" in output
        assert "Simulation completed after 20 generations" in output
        assert "Random seed: 3" in output

    def test_startup_error(self, tmp_path, capsys):
        bad_path = tmp_path / "missing" / "run.gif"

        assert main(["--headless", "-o", str(bad_path)]) == 1
        assert "Cannot create output file" in capsys.readouterr().out

    def test_display_startup_error_closes_exporter(self, tmp_path, capsys):
        """A window that cannot open aborts before any generation runs."""
        path = tmp_path / "never.gif"

        with patch("lifereel.frontends.cli.open_display", side_effect=StartupError("Cannot open display window")):
            assert main(["-o", str(path)]) == 1

        assert "Cannot open display window" in capsys.readouterr().out
        assert not path.exists()

    def test_keyboard_interrupt(self, capsys):
        with patch("lifereel.frontends.cli.run", side_effect=KeyboardInterrupt):
            assert main(["--headless", "--no-gif"]) == 1
        assert "interrupted" in capsys.readouterr().out
