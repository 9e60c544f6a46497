"""
Logic module for TicTacToe.
Handles the board, game rules, and the minimax AI opponent.
"""

from .exceptions import TicTacToeError, InvalidMove, PreconditionViolation
from .game_state import (
    Mark,
    Board,
    GameStatus,
    GameResult,
    GameState,
    Move,
    ScoreTally,
    empty_board,
    apply_move,
    available_moves,
    side_to_move,
    parse_board,
    format_board,
)
from .win_checker import WinChecker, WINNING_LINES, evaluate, is_legal_board
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer, best_move

__version__ = "1.0.0"
