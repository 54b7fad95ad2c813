"""Board data structure for Conway's Game of Life."""

from typing import Iterable, Optional, Tuple, FrozenSet, Union

import numpy as np

from .state import State
from .view import BoardView
from .window import Window

Coordinate = Tuple[int, int]


class BoardReadError(Exception):
    """Raised when a board cannot be read from text."""


class UnknownCharacterError(BoardReadError):
    """Raised when board text contains a character other than 'X' or '_'."""

    def __init__(self, row: int, column: int, character: str) -> None:
        """Initialize the error.

        Args:
            row: Line index of the offending character
            column: Position of the character within its line
            character: The character that was found
        """
        super().__init__(f"Unknown character {character!r} at row {row}, column {column}")
        self.row = row
        self.column = column
        self.character = character


class BoardTransportError(BoardReadError):
    """Raised when the line source fails while a board is being read."""

    def __init__(self, error: Union[OSError, UnicodeDecodeError]) -> None:
        super().__init__(f"Failed to read board: {error}")
        self.error = error


class Board(BoardView):
    """Represents a finite 2D board for Conway's Game of Life.

    Only living cells are stored. The declared rectangle
    ``[0, dim_x) x [0, dim_y)`` is what gets iterated and displayed; every
    coordinate outside it, negative ones included, reads as dead unless
    it was explicitly given as living. Boards are immutable.
    """

    def __init__(self, dim_x: int, dim_y: int, living: Iterable[Coordinate] = ()) -> None:
        """Initialize a new board.

        Args:
            dim_x: Number of rows
            dim_y: Number of columns
            living: (x, y) coordinates of living cells, duplicates allowed
        """
        self._dim_x = dim_x
        self._dim_y = dim_y
        self._living: FrozenSet[Coordinate] = frozenset((x, y) for x, y in living)

    @classmethod
    def from_text(cls, lines: Iterable[str]) -> "Board":
        """Parse a board from lines of text.

        Each line is a row and each character a column: 'X' is a living
        cell and '_' a dead one. A single trailing line ending is ignored,
        so an open file can be passed directly. Rows may have different
        lengths; the board is as wide as the longest one and missing cells
        are dead.

        Args:
            lines: Iterable of text lines

        Returns:
            Parsed board

        Raises:
            UnknownCharacterError: If a line contains any other character
            BoardTransportError: If reading or decoding ``lines`` fails
        """
        living = set()
        dim_x = 0
        dim_y = 0
        rows = iter(lines)
        while True:
            try:
                line = next(rows)
            except StopIteration:
                break
            except (OSError, UnicodeDecodeError) as e:
                raise BoardTransportError(e) from e

            if line.endswith("\r\n"):
                line = line[:-2]
            elif line.endswith("\n"):
                line = line[:-1]
            x = dim_x
            dim_x += 1
            dim_y = max(dim_y, len(line))
            for y, char in enumerate(line):
                try:
                    state = State.from_char(char)
                except ValueError:
                    raise UnknownCharacterError(x, y, char) from None
                if state is State.ALIVE:
                    living.add((x, y))

        return cls(dim_x, dim_y, living)

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """Parse a board from a single newline-separated string."""
        return cls.from_text(text.splitlines())

    @classmethod
    def from_array(cls, data) -> "Board":
        """Create a board from a 2D array.

        Args:
            data: Array-like of shape (rows, columns); nonzero cells are alive

        Returns:
            New board with the array's shape

        Raises:
            ValueError: If data is not two-dimensional
        """
        arr = np.asarray(data)
        if arr.ndim != 2:
            raise ValueError(f"Expected a 2D array, got shape {arr.shape}")

        xs, ys = np.nonzero(arr)
        return cls(arr.shape[0], arr.shape[1], zip(xs.tolist(), ys.tolist()))

    @property
    def dim_x(self) -> int:
        """Number of rows in the declared rectangle."""
        return self._dim_x

    @property
    def dim_y(self) -> int:
        """Number of columns in the declared rectangle."""
        return self._dim_y

    @property
    def living(self) -> FrozenSet[Coordinate]:
        """Coordinates of all living cells."""
        return self._living

    def cell_state(self, x: int, y: int) -> State:
        """Get the state of a cell.

        Args:
            x: Row coordinate
            y: Column coordinate

        Returns:
            State.ALIVE if the cell is living, State.DEAD otherwise
        """
        if (x, y) in self._living:
            return State.ALIVE
        return State.DEAD

    def as_window(self) -> Window:
        return Window(self, 0, 0, self._dim_x - 1, self._dim_y - 1)

    def window(self, min_x: int, min_y: int, max_x: int, max_y: int) -> Window:
        return Window(self, min_x, min_y, max_x, max_y)

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y) or None if no living cells
        """
        if not self._living:
            return None

        xs = [x for x, _ in self._living]
        ys = [y for _, y in self._living]
        return (min(xs), min(ys), max(xs), max(ys))

    def __eq__(self, other: object) -> bool:
        """Check if two boards have the same dimensions and living cells."""
        if not isinstance(other, Board):
            return False
        return (
            self._dim_x == other._dim_x
            and self._dim_y == other._dim_y
            and self._living == other._living
        )

    def __hash__(self) -> int:
        return hash((self._dim_x, self._dim_y, self._living))

    def __repr__(self) -> str:
        return f"Board(dim_x={self._dim_x}, dim_y={self._dim_y}, living={sorted(self._living)!r})"
