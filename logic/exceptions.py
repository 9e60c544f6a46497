"""
Errors raised by the TicTacToe core.
"""

from typing import Optional


class TicTacToeError(Exception):
    """Base class for all game errors."""


class InvalidMove(TicTacToeError):
    """
    A move targeted an out-of-range or occupied cell.

    Always a caller bug - the move is rejected, never retried.
    """

    def __init__(self, index, reason: str):
        self.index = index
        self.reason = reason
        super().__init__(f"Invalid move at {index!r}: {reason}")


class PreconditionViolation(TicTacToeError):
    """The AI was asked to move on a board where no move can be made."""

    def __init__(self, message: str, board: Optional[tuple] = None):
        self.board = board
        super().__init__(message)
