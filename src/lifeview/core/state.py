"""Cell state for Conway's Game of Life."""

from enum import Enum


class State(Enum):
    """State of a single cell.

    The value of each member is the character used for it in the text
    encoding of a board.
    """

    ALIVE = "X"
    DEAD = "_"

    @property
    def char(self) -> str:
        """Character representing this state in text form."""
        return self.value

    @property
    def is_alive(self) -> bool:
        """Whether this is the living state."""
        return self is State.ALIVE

    @classmethod
    def from_char(cls, char: str) -> "State":
        """Look up the state for a text character.

        Args:
            char: Single character, 'X' or '_'

        Returns:
            Matching state

        Raises:
            ValueError: If the character is not part of the encoding
        """
        return cls(char)
