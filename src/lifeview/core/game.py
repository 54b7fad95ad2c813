"""Conway's Game of Life simulation."""

from typing import Deque, Dict, Iterator, Optional, Tuple
from collections import deque
import numpy as np

from .board import Board
from .rules import tick

MAX_TRACKED_BOARDS = 1000


class GameOfLife:
    """Conway's Game of Life simulation engine.

    Keeps the current board and replaces it with the next generation on
    each step. Boards are immutable, so earlier generations stay valid
    for as long as anyone holds them.
    """

    def __init__(self, board: Board) -> None:
        """Initialize the game with a board.

        Args:
            board: Starting generation
        """
        self._board = board
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)
        self._seen_boards: Dict[Board, int] = {}
        self._board_history: Deque[Board] = deque()
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._update_population_history()
        self._check_for_cycles()

    @property
    def board(self) -> Board:
        """Current generation."""
        return self._board

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._board.population

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    @property
    def cycle_detected(self) -> bool:
        """Whether a cycle has been detected."""
        return self._cycle_detected

    @property
    def cycle_length(self) -> int:
        """Length of detected cycle (0 if no cycle)."""
        return self._cycle_length

    @property
    def cycle_start_generation(self) -> int:
        """Generation where cycle started (0 if no cycle)."""
        return self._cycle_start_generation

    def step(self) -> Board:
        """Advance the simulation by one generation.

        Returns:
            The new current board
        """
        self._board = tick(self._board)
        self._generation += 1
        self._update_population_history()
        self._check_for_cycles()
        return self._board

    def run(self, generations: int) -> Iterator[Board]:
        """Yield a number of successive boards, starting with the current one.

        The game steps between boards only, so once the generator is
        exhausted the current board is the last one yielded.

        Args:
            generations: Number of boards to yield

        Yields:
            The current board after each step
        """
        for index in range(generations):
            if index:
                self.step()
            yield self._board

    def _update_population_history(self) -> None:
        self._population_history.append(self.population)

    def _check_for_cycles(self) -> None:
        """Record the current board, detecting a cycle if it was seen before."""
        if self._cycle_detected:
            return

        first_occurrence = self._seen_boards.get(self._board)
        if first_occurrence is not None:
            self._cycle_detected = True
            self._cycle_length = self._generation - first_occurrence
            self._cycle_start_generation = first_occurrence
            return

        self._seen_boards[self._board] = self._generation
        self._board_history.append(self._board)

        # Forget the oldest boards to bound memory on long runs
        if len(self._board_history) > MAX_TRACKED_BOARDS:
            del self._seen_boards[self._board_history.popleft()]

    def reset(self, board: Optional[Board] = None) -> None:
        """Reset the simulation.

        Args:
            board: New starting board; an empty board of the same size if omitted
        """
        if board is None:
            board = Board(self._board.dim_x, self._board.dim_y)

        self._board = board
        self._generation = 0
        self._population_history.clear()
        self._seen_boards.clear()
        self._board_history.clear()
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._update_population_history()
        self._check_for_cycles()

    def run_until_stable(self, max_generations: int = 10000) -> Tuple[int, str]:
        """Run simulation until it becomes stable or cycles.

        Args:
            max_generations: Maximum generations to run

        Returns:
            Tuple of (final_generation, reason) where reason is one of:
            'cycle', 'extinction', 'max_generations'
        """
        for _ in range(max_generations):
            self.step()

            if self.population == 0:
                return self._generation, "extinction"

            if self._cycle_detected:
                return self._generation, "cycle"

        return self._generation, "max_generations"

    def get_population_change_rate(self, window_size: int = 10) -> float:
        """Calculate recent population change rate.

        Args:
            window_size: Number of recent generations to consider

        Returns:
            Average population change per generation
        """
        recent_history = list(self._population_history)[-window_size:]
        if len(recent_history) < 2:
            return 0.0

        changes = np.diff(recent_history)
        return float(np.mean(changes))

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with various statistics
        """
        bbox = self._board.get_bounding_box()
        area = self._board.dim_x * self._board.dim_y

        stats = {
            "generation": self._generation,
            "population": self.population,
            "population_change_rate": self.get_population_change_rate(),
            "population_history": list(self._population_history),
            "cycle_detected": self._cycle_detected,
            "cycle_length": self._cycle_length,
            "cycle_start_generation": self._cycle_start_generation,
            "board_size": (self._board.dim_x, self._board.dim_y),
            "population_density": self.population / area if area else 0.0,
        }

        if bbox:
            stats["bounding_box"] = bbox
            box_rows = bbox[2] - bbox[0] + 1
            box_columns = bbox[3] - bbox[1] + 1
            stats["bounding_box_size"] = (box_rows, box_columns)
        else:
            stats["bounding_box"] = None
            stats["bounding_box_size"] = (0, 0)

        return stats
