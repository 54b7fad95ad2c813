"""Rectangular views into a board."""

from typing import TYPE_CHECKING, Tuple

from .state import State
from .view import BoardView

if TYPE_CHECKING:
    from .board import Board


class Window(BoardView):
    """A view of a closed rectangle of a board.

    A window only references its board; it never copies the living cells.
    The rectangle ``[min_x, max_x] x [min_y, max_y]`` is inclusive on both
    ends and may reach outside the board's declared area. It limits what
    is iterated and displayed, not what can be looked up: ``cell_state``
    answers for any coordinate exactly as the board does.
    """

    def __init__(self, board: "Board", min_x: int, min_y: int, max_x: int, max_y: int) -> None:
        """Initialize a window.

        Args:
            board: Board the window looks into
            min_x: First row
            min_y: First column
            max_x: Last row (inclusive)
            max_y: Last column (inclusive)
        """
        self.board = board
        self.min_x = min_x
        self.min_y = min_y
        self.max_x = max_x
        self.max_y = max_y

    @property
    def bounds(self) -> Tuple[int, int, int, int]:
        """Get the window rectangle as (min_x, min_y, max_x, max_y)."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    def cell_state(self, x: int, y: int) -> State:
        return self.board.cell_state(x, y)

    def as_window(self) -> "Window":
        return self

    def window(self, min_x: int, min_y: int, max_x: int, max_y: int) -> "Window":
        return Window(self.board, min_x, min_y, max_x, max_y)

    def __eq__(self, other: object) -> bool:
        """Windows are equal when they cover the same rectangle of the same board."""
        if not isinstance(other, Window):
            return NotImplemented
        return self.board is other.board and self.bounds == other.bounds

    def __hash__(self) -> int:
        return hash((id(self.board), self.bounds))

    def __repr__(self) -> str:
        return "Window(min_x={}, min_y={}, max_x={}, max_y={})".format(*self.bounds)
