"""Shared interface for anything that addresses a rectangle of cells."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator, Tuple

import numpy as np

from .state import State

if TYPE_CHECKING:
    from .window import Window

Cell = Tuple[int, int, State]

NEIGHBOR_OFFSETS = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


class BoardView(ABC):
    """A rectangular, addressable view of cells.

    Implementers provide ``cell_state``, ``as_window`` and ``window``.
    Neighbor counting, relative windows, iteration and rendering are
    derived from those and behave the same for every view.

    Coordinates are ``(x, y)`` with ``x`` the row and ``y`` the column.
    Any coordinate outside the underlying board reads as dead.
    """

    @abstractmethod
    def cell_state(self, x: int, y: int) -> State:
        """Get the state of the cell at (x, y)."""

    @abstractmethod
    def as_window(self) -> "Window":
        """Get a window covering this view's full extent."""

    @abstractmethod
    def window(self, min_x: int, min_y: int, max_x: int, max_y: int) -> "Window":
        """Create a window over the same board.

        Bounds are inclusive on both ends and are not checked against this
        view's own extent.

        Args:
            min_x: First row
            min_y: First column
            max_x: Last row
            max_y: Last column

        Returns:
            Window over the underlying board
        """

    def neighbor_count(self, x: int, y: int) -> int:
        """Count living cells in the Moore neighborhood of (x, y).

        Args:
            x: Row coordinate
            y: Column coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for dx, dy in NEIGHBOR_OFFSETS:
            if self.cell_state(x + dx, y + dy) is State.ALIVE:
                count += 1
        return count

    def window_offsets(self, offset_x: int, offset_y: int, dim_x: int, dim_y: int) -> "Window":
        """Create a window positioned relative to this view's minimum corner.

        The far corner is ``min + offset + dim`` and is inclusive, so the
        window spans ``dim_x + 1`` rows and ``dim_y + 1`` columns.

        Args:
            offset_x: Row offset from this view's first row
            offset_y: Column offset from this view's first column
            dim_x: Distance from the first to the last row
            dim_y: Distance from the first to the last column

        Returns:
            Window over the underlying board
        """
        own = self.as_window()
        min_x = own.min_x + offset_x
        min_y = own.min_y + offset_y
        return self.window(min_x, min_y, min_x + dim_x, min_y + dim_y)

    def iter(self) -> Iterator[Cell]:
        """Iterate over every cell of this view.

        Rows are visited in ascending order and, within a row, columns in
        ascending order.

        Yields:
            Tuples of (x, y, state)
        """
        own = self.as_window()
        for x in range(own.min_x, own.max_x + 1):
            for y in range(own.min_y, own.max_y + 1):
                yield (x, y, self.cell_state(x, y))

    def __iter__(self) -> Iterator[Cell]:
        return self.iter()

    @property
    def shape(self) -> Tuple[int, int]:
        """Get the number of (rows, columns) this view covers."""
        own = self.as_window()
        return (max(0, own.max_x - own.min_x + 1), max(0, own.max_y - own.min_y + 1))

    @property
    def population(self) -> int:
        """Get the number of living cells inside this view."""
        return sum(1 for _, _, state in self.iter() if state.is_alive)

    def to_array(self) -> np.ndarray:
        """Convert this view to a 2D array.

        Returns:
            int8 array of shape ``self.shape`` with 1 for living cells
        """
        cells = np.zeros(self.shape, dtype=np.int8)
        own = self.as_window()
        for x, y, state in self.iter():
            if state.is_alive:
                cells[x - own.min_x, y - own.min_y] = 1
        return cells

    def __str__(self) -> str:
        """Text form: one line per row, 'X' for living and '_' for dead."""
        own = self.as_window()
        rows = []
        for x in range(own.min_x, own.max_x + 1):
            rows.append(
                "".join(self.cell_state(x, y).char for y in range(own.min_y, own.max_y + 1))
            )
        return "\n".join(rows)
