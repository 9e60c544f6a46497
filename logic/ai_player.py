"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

from typing import Dict

from .exceptions import PreconditionViolation
from .game_state import Board, CENTER, Mark, apply_move, available_moves
from .win_checker import evaluate


WIN_SCORE = 10
LOSS_SCORE = -10
DRAW_SCORE = 0


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).

    Scores are not discounted by depth: among moves with equal score the
    lowest cell index is chosen, so the same board always gives the same move.
    """

    def __init__(self, player: Mark = Mark.O, verbose: bool = False):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: O)
            verbose: Print a line per search with the chosen move.
        """
        if not isinstance(player, Mark) or not player.is_player:
            raise ValueError(f"AI must play X or O, not {player!r}")

        self.player = player
        self.verbose = verbose

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, board: Board) -> int:
        """
        Get the best move for the current position.

        Args:
            board: Current board. Not modified.

        Returns:
            Index (0-8) of the best move.

        Raises:
            PreconditionViolation: board is won, drawn or full.
        """
        self.positions_evaluated = 0
        valid_moves = self._check_playable(board)

        # Special case: if only one move, just take it
        if len(valid_moves) == 1:
            return valid_moves[0]

        # Special case: center is always taken when free
        if board[CENTER] == Mark.EMPTY:
            return CENTER

        best_score = None
        best_move = valid_moves[0]

        for index, score in self._score_candidates(board, valid_moves).items():
            if best_score is None or score > best_score:
                best_score = score
                best_move = index

        if self.verbose:
            print(f"AI evaluated {self.positions_evaluated} positions. "
                  f"Best move: {best_move} (score: {best_score})")

        return best_move

    def score_moves(self, board: Board) -> Dict[int, int]:
        """
        Minimax score of every available move, without the shortcuts.

        Returns:
            {index: score} in ascending index order.
        """
        self.positions_evaluated = 0
        valid_moves = self._check_playable(board)
        return self._score_candidates(board, valid_moves)

    def _check_playable(self, board: Board):
        result = evaluate(board)
        if result.is_terminal:
            raise PreconditionViolation(
                f"No move to choose: game is already {result.status.value}",
                board=tuple(board),
            )
        return available_moves(board)

    def _score_candidates(self, board: Board, valid_moves) -> Dict[int, int]:
        scores = {}
        for index in valid_moves:
            new_board = apply_move(board, index, self.player)
            scores[index] = self._minimax(new_board, self.player.opposite())
        return scores

    def _minimax(self, board: Board, to_move: Mark) -> int:
        """
        Plain minimax over the full game tree.

        Args:
            board: Position to evaluate.
            to_move: Whose turn it is on this board.

        Returns:
            The score of the position for self.player.
        """
        self.positions_evaluated += 1

        # Check terminal states
        result = evaluate(board)

        if result.winner == self.player:
            return WIN_SCORE
        elif result.winner is not None:
            return LOSS_SCORE
        elif result.is_terminal:
            return DRAW_SCORE

        next_player = to_move.opposite()
        scores = [
            self._minimax(apply_move(board, index, to_move), next_player)
            for index in available_moves(board)
        ]

        if to_move == self.player:
            return max(scores)
        return min(scores)


def best_move(board: Board, ai_player: Mark) -> int:
    """
    Return the optimal cell index for ai_player on board.

    Raises:
        PreconditionViolation: board is terminal, or ai_player is not X/O.
    """
    if not isinstance(ai_player, Mark) or not ai_player.is_player:
        raise PreconditionViolation(f"AI must play X or O, not {ai_player!r}")
    return AIPlayer(ai_player).get_best_move(tuple(board))


# Quick test
if __name__ == "__main__":
    from .game_state import format_board, parse_board

    print("Testing AIPlayer...")

    ai = AIPlayer(Mark.O, verbose=True)

    # Test 1: AI should block a winning move
    board = parse_board("XX_" "_O_" "___")
    print(format_board(board))
    print("\nAI is O. X is about to win with 2!")
    move = ai.get_best_move(board)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board = parse_board("OO_" "XX_" "X__")
    print(format_board(board))
    move = ai.get_best_move(board)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("AI correctly takes the win!")

    print("\nAIPlayer test done!")
