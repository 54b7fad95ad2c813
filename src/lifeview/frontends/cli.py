"""Command-line interface for Conway's Game of Life."""

import argparse
import sys
import time
from typing import Optional, Sequence, TextIO, Tuple

from ..core.board import Board, BoardReadError, BoardTransportError, UnknownCharacterError
from ..core.game import GameOfLife
from ..core.view import BoardView

DEFAULT_SEPARATOR = "=" * 25


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self, output: Optional[TextIO] = None):
        """Initialize CLI interface.

        Args:
            output: Stream boards are written to (defaults to stdout)
        """
        self._output = output

    @property
    def output(self) -> TextIO:
        """Stream boards are written to."""
        return self._output if self._output is not None else sys.stdout

    def load_board(self, path: str) -> Board:
        """Read a board from a text file.

        Args:
            path: Path to a file of 'X' and '_' lines

        Returns:
            Parsed board

        Raises:
            UnknownCharacterError: If the file contains other characters
            BoardTransportError: If the file cannot be opened, read or decoded
        """
        try:
            with open(path, encoding="utf-8") as f:
                return Board.from_text(f)
        except (OSError, UnicodeDecodeError) as e:
            raise BoardTransportError(e) from e

    def write_board(self, view: BoardView, separator: str = DEFAULT_SEPARATOR) -> None:
        """Write a board or window followed by a separator line.

        Args:
            view: Board or window to render
            separator: Line written after the board (skipped if empty)
        """
        self.output.write(str(view) + "\n")
        if separator:
            self.output.write(separator + "\n")
        self.output.flush()

    def run_simulation(
        self,
        board: Board,
        generations: int,
        delay: float = 0.0,
        separator: str = DEFAULT_SEPARATOR,
        window: Optional[Sequence[int]] = None,
        until_stable: bool = False,
        verbose: bool = False,
    ) -> Tuple[int, str, dict]:
        """Display a board and its successors.

        Args:
            board: Starting board
            generations: Number of boards to display
            delay: Seconds to wait between boards
            separator: Line written after each board
            window: Optional (min_x, min_y, max_x, max_y) to display instead of the whole board
            until_stable: Stop early once the board dies out or repeats
            verbose: Print progress updates

        Returns:
            Tuple of (final_generation, finish_reason, statistics)
        """
        game = GameOfLife(board)
        initial_population = game.population

        if verbose:
            print(f"Loaded {board.dim_x}x{board.dim_y} board with {initial_population} living cells")
            if window:
                print("Displaying window ({}, {}) to ({}, {})".format(*window))

        start_time = time.time()
        reason = "max_generations"

        for index, current in enumerate(game.run(generations)):
            view = current.window(*window) if window else current
            self.write_board(view, separator)

            if until_stable:
                if game.population == 0:
                    reason = "extinction"
                    break
                if game.cycle_detected:
                    reason = "cycle"
                    break

            if delay > 0 and index + 1 < generations:
                time.sleep(delay)

        duration = time.time() - start_time

        stats = game.get_statistics()
        stats["duration_seconds"] = duration
        stats["generations_per_second"] = game.generation / duration if duration > 0 else 0
        stats["initial_population"] = initial_population

        return game.generation, reason, stats


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life on a board read from a text file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Board files hold one row per line, 'X' for a living cell and '_' for a dead one:

  _____
  __X__
  __X__
  __X__
  _____

Examples:
  # Show 10 generations of a board, half a second apart
  lifeview-cli blinker.txt --generations 10

  # Run as fast as possible without separators
  lifeview-cli board.txt -n 1000 -d 0 -s ""

  # Only show rows 0-9 and columns 5-24
  lifeview-cli board.txt --window 0 5 9 24

  # Stop once the board dies out or starts repeating
  lifeview-cli board.txt -n 10000 -d 0 --until-stable
        """,
    )

    parser.add_argument("path", help="Path to the board file")

    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=100,
        help="Number of generations to display (default: 100)",
    )

    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=0.5,
        help="Seconds to wait between generations (default: 0.5)",
    )

    parser.add_argument(
        "-s",
        "--separator",
        type=str,
        default=DEFAULT_SEPARATOR,
        help="Line printed after each board; empty to disable",
    )

    parser.add_argument(
        "-w",
        "--window",
        type=int,
        nargs=4,
        metavar=("MIN_X", "MIN_Y", "MAX_X", "MAX_Y"),
        help="Only display this inclusive rectangle of the board",
    )

    parser.add_argument(
        "-u",
        "--until-stable",
        action="store_true",
        help="Stop early when the board dies out or repeats a previous state",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    return parser


def format_finish_reason(reason: str, stats: dict) -> str:
    """Format the simulation finish reason for display.

    Args:
        reason: Finish reason from CLIGameOfLife.run_simulation
        stats: Statistics dictionary

    Returns:
        Formatted reason string
    """
    if reason == "extinction":
        return "Extinction - all cells died"
    elif reason == "cycle":
        cycle_len = stats.get("cycle_length", 0)
        cycle_start = stats.get("cycle_start_generation", 0)
        return f"Cycle detected - length {cycle_len}, started at generation {cycle_start}"
    elif reason == "max_generations":
        return f"Maximum generations reached ({stats.get('generation', 0)})"
    else:
        return f"Unknown reason: {reason}"


def print_results(final_generation: int, reason: str, stats: dict, verbose: bool) -> None:
    """Print simulation results.

    Args:
        final_generation: Final generation number
        reason: Finish reason
        stats: Statistics dictionary
        verbose: Whether to show detailed statistics
    """
    print(f"\nSimulation completed after {final_generation} generations")
    print(f"Finish reason: {format_finish_reason(reason, stats)}")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Board size: {stats['board_size'][0]}x{stats['board_size'][1]}")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population density: {stats['population_density']:.2%}")
        print(f"  Population change rate: {stats['population_change_rate']:.2f}")
        if "duration_seconds" in stats:
            print(f"  Duration: {stats['duration_seconds']:.3f} seconds")

        if stats["bounding_box"]:
            bbox = stats["bounding_box"]
            bbox_size = stats["bounding_box_size"]
            print(
                f"  Bounding box: ({bbox[0]}, {bbox[1]}) to ({bbox[2]}, {bbox[3]}) " f"[{bbox_size[0]}x{bbox_size[1]}]"
            )
    else:
        initial_pop = stats["initial_population"]
        final_pop = stats["population"]
        duration = stats.get("duration_seconds", 0)

        print(f"Population: {initial_pop} → {final_pop}, Duration: {duration:.3f}s")


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if args.window:
        min_x, min_y, max_x, max_y = args.window
        if max_x < min_x or max_y < min_y:
            errors.append("Window maximum must not be below its minimum")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main() -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    if not validate_args(args):
        return 1

    cli = CLIGameOfLife()

    try:
        board = cli.load_board(args.path)
    except UnknownCharacterError as e:
        print(
            f"Error: {args.path}: unknown character {e.character!r} "
            f"at row {e.row}, column {e.column}"
        )
        return 1
    except BoardReadError as e:
        print(f"Error: {e}")
        return 1

    try:
        final_generation, reason, stats = cli.run_simulation(
            board,
            generations=args.generations,
            delay=args.delay,
            separator=args.separator,
            window=args.window,
            until_stable=args.until_stable,
            verbose=args.verbose,
        )

        print_results(final_generation, reason, stats, args.verbose)

        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
