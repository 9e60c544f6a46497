"""
Session controller for TicTacToe.

Ties together:
- Game state (board, turn, result)
- Move validation
- Win/draw detection
- The minimax AI in player-vs-computer mode
- The score tally across games
"""

import copy
from enum import Enum
from typing import Optional, Tuple

from logic.ai_player import AIPlayer
from logic.game_state import Board, GameResult, GameState, Mark, ScoreTally, format_board
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker

from .config import GameConfig


class Phase(Enum):
    """Where the session is in the turn cycle."""
    AWAITING_MOVE = "awaiting_move"
    EVALUATING = "evaluating"
    ENDED = "ended"


class GameSession:
    """
    Runs TicTacToe games one move at a time.

    Game flow:
    1. The player to move picks a cell (play)
    2. The board is evaluated
    3. If the game goes on, the turn passes; in computer mode the AI
       replies straight away
    4. On a win or draw the score is updated and the session waits for
       a restart
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize a session and start the first game.

        Args:
            config: Session settings (default: GameConfig()). The session
                works on its own copy, so one config can seed many sessions.
        """
        self.config = copy.copy(config) if config is not None else GameConfig()

        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(self.config.COMPUTER_PLAYER, verbose=self.config.DEBUG_MODE)

        self.scores = ScoreTally()
        self.game_state = GameState(current_player=self.config.STARTING_PLAYER)
        self.phase = Phase.AWAITING_MOVE

        self._play_computer_turns()

    # ==================== STATE ====================

    @property
    def board(self) -> Board:
        return self.game_state.board

    @property
    def current_player(self) -> Mark:
        return self.game_state.current_player

    @property
    def result(self) -> GameResult:
        return self.game_state.result

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.game_state.result.line

    @property
    def is_computer_turn(self) -> bool:
        return (
            self.config.VS_COMPUTER
            and self.phase == Phase.AWAITING_MOVE
            and self.current_player == self.config.COMPUTER_PLAYER
        )

    @property
    def status_message(self) -> str:
        """Status line for the presentation layer."""
        if self.phase == Phase.ENDED:
            if self.result.winner is not None:
                return f"{self.result.winner.value} wins!"
            return "Draw!"
        return f"{self.current_player.value}'s turn"

    # ==================== ACTIONS ====================

    def play(self, index: int) -> bool:
        """
        Play the current (human) player's mark on a cell.

        In player-vs-computer mode the computer's reply is played before
        this returns.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the move was made, False if it was rejected.
        """
        computer = self.config.COMPUTER_PLAYER if self.config.VS_COMPUTER else None
        validation = self.validator.validate_move(self.game_state, index, computer)

        if not validation.is_valid:
            self._debug(f"Move rejected: {validation.error_message}")
            return False

        self._apply_move(index)
        self._play_computer_turns()
        return True

    def restart(self, full_reset: bool = False):
        """
        Clear the board for a new game.

        Args:
            full_reset: Also clear the score tally.
        """
        self._debug("Full reset" if full_reset else "Restarting game")

        self.game_state = GameState(current_player=self.config.STARTING_PLAYER)
        self.phase = Phase.AWAITING_MOVE
        if full_reset:
            self.scores.clear()

        # The computer may be the one to start
        self._play_computer_turns()

    def set_vs_computer(self, enabled: bool):
        """Switch between Player vs Player and Player vs Computer, then restart."""
        self.config.VS_COMPUTER = bool(enabled)
        self._debug(f"Mode: {self.config.mode_label}")
        self.restart()

    def set_starting_player(self, player: Mark):
        """Choose who moves first, then restart."""
        if not isinstance(player, Mark) or not player.is_player:
            raise ValueError(f"Starting player must be Mark.X or Mark.O, not {player!r}")
        self.config.STARTING_PLAYER = player
        self.restart()

    # ==================== TURN CYCLE ====================

    def _apply_move(self, index: int):
        """Place a mark, evaluate, then either pass the turn or end the game."""
        self.phase = Phase.EVALUATING
        player = self.current_player

        self.game_state.make_move(index)
        self.win_checker.update_game_state(self.game_state)
        self._debug(f"{player.value} plays {index}")

        if self.game_state.is_game_over:
            self.scores.record(self.game_state.result)
            self.phase = Phase.ENDED
            self._show_game_result()
        else:
            self.game_state.switch_player()
            self.phase = Phase.AWAITING_MOVE

    def _play_computer_turns(self):
        """Let the AI move for as long as it is the computer's turn."""
        # Each iteration fills a cell, so this stops within 9 moves
        while self.is_computer_turn:
            index = self._computer().get_best_move(self.board)
            self._apply_move(index)

    def _computer(self) -> AIPlayer:
        """The AI for the current COMPUTER_PLAYER and DEBUG_MODE settings."""
        settings = (self.config.COMPUTER_PLAYER, self.config.DEBUG_MODE)
        if (self.ai.player, self.ai.verbose) != settings:
            self.ai = AIPlayer(self.config.COMPUTER_PLAYER, verbose=self.config.DEBUG_MODE)
        return self.ai

    def _show_game_result(self):
        if not self.config.DEBUG_MODE:
            return
        print(format_board(self.board))
        print(f"GAME OVER: {self.status_message} "
              f"(X {self.scores.wins_for(Mark.X)} - O {self.scores.wins_for(Mark.O)} - "
              f"draws {self.scores.draws})")

    def _debug(self, message: str):
        if self.config.DEBUG_MODE:
            print(message)
