"""
Exceptions shared by the board, the agent and the weight store.
"""

class IllegalMoveError(Exception):
    """Raised by a board when a move is out of range, on an occupied cell, out of turn, or after the game ended."""
    def __init__(self, position, message: str = ""):
        super().__init__(message or f"illegal move at {tuple(position)}")
        self.position = tuple(position)


class WeightsFormatError(ValueError):
    """The weight file exists but does not hold a 125x9 table of finite numbers."""
