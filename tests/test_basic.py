"""Basic tests for the lifeview package."""

from lifeview import Board, GameOfLife, State, Window, tick


def test_board_creation():
    """Test basic board creation and cell lookups."""
    board = Board(10, 10, [(5, 5)])
    assert board.dim_x == 10
    assert board.dim_y == 10
    assert board.cell_state(0, 0) is State.DEAD
    assert board.cell_state(5, 5) is State.ALIVE


def test_window_creation():
    """Test taking a window of a board."""
    board = Board.from_string("X_\n_X")
    window = board.window(1, 1, 1, 1)
    assert isinstance(window, Window)
    assert str(window) == "X"


def test_game_creation():
    """Test basic game creation."""
    game = GameOfLife(Board(5, 5, [(2, 2)]))
    assert game.population == 1


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    board = Board.from_string("_____\n__X__\n__X__\n__X__\n_____")

    horizontal = tick(board)
    assert horizontal.living == frozenset({(2, 1), (2, 2), (2, 3)})

    assert tick(horizontal) == board
