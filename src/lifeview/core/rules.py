"""Conway's Game of Life transition rule and tick."""

from .board import Board
from .state import State


def next_state(current: State, live_neighbors: int) -> State:
    """Apply Conway's rules to a single cell.

    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    Args:
        current: Current state of the cell
        live_neighbors: Number of living neighbors (0-8)

    Returns:
        State of the cell in the next generation

    Raises:
        ValueError: If live_neighbors is outside 0-8
    """
    if not 0 <= live_neighbors <= 8:
        raise ValueError(f"Neighbor count must be between 0 and 8, got {live_neighbors}")

    if current is State.ALIVE:
        return State.ALIVE if live_neighbors in (2, 3) else State.DEAD
    return State.ALIVE if live_neighbors == 3 else State.DEAD


def tick(board: Board) -> Board:
    """Compute the next generation of a board.

    Every cell of the declared rectangle is updated at once from the
    neighbor counts of the current board. The input board is left as is.

    Args:
        board: Current generation

    Returns:
        New board of the same dimensions
    """
    living = [
        (x, y)
        for x, y, state in board.iter()
        if next_state(state, board.neighbor_count(x, y)) is State.ALIVE
    ]
    return Board(board.dim_x, board.dim_y, living)
