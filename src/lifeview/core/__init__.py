"""Boards, windows and the rules that advance them."""

from .state import State
from .view import BoardView
from .window import Window
from .board import Board, BoardReadError, UnknownCharacterError, BoardTransportError
from .rules import next_state, tick
from .game import GameOfLife

__all__ = [
    "State",
    "BoardView",
    "Window",
    "Board",
    "BoardReadError",
    "UnknownCharacterError",
    "BoardTransportError",
    "next_state",
    "tick",
    "GameOfLife",
]
