"""Conway's Game of Life on finite boards with windowed views."""

__version__ = "0.1.0"

from .core.state import State
from .core.board import Board, BoardReadError, UnknownCharacterError, BoardTransportError
from .core.window import Window
from .core.rules import next_state, tick
from .core.game import GameOfLife

__all__ = [
    "State",
    "Board",
    "BoardReadError",
    "UnknownCharacterError",
    "BoardTransportError",
    "Window",
    "next_state",
    "tick",
    "GameOfLife",
]
