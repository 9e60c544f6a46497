"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Set, Tuple

from .game_state import Board, GameResult, GameState, GameStatus, Mark


# All possible winning lines, in the order they are checked
WINNING_LINES = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


def _line_owner(board: Board, line: Tuple[int, int, int]) -> Optional[Mark]:
    a, b, c = line
    if board[a] != Mark.EMPTY and board[a] == board[b] == board[c]:
        return board[a]
    return None


def evaluate(board: Board) -> GameResult:
    """
    Evaluate a board.

    Returns WIN for the first complete line in WINNING_LINES order,
    DRAW if no line is complete and the board is full, IN_PROGRESS otherwise.
    """
    for line in WINNING_LINES:
        owner = _line_owner(board, line)
        if owner is not None:
            return GameResult.win(owner, line)

    if Mark.EMPTY not in board:
        return GameResult.draw()

    return GameResult.in_progress()


def winners(board: Board) -> Set[Mark]:
    """Return every mark that owns a complete line (both on illegal boards)."""
    found = set()
    for line in WINNING_LINES:
        owner = _line_owner(board, line)
        if owner is not None:
            found.add(owner)
    return found


def is_legal_board(board: Board) -> bool:
    """
    Check if a board can arise from alternating play with X first.
    """
    if len(board) != 9:
        return False

    x_count = board.count(Mark.X)
    o_count = board.count(Mark.O)
    if not (x_count == o_count or x_count == o_count + 1):
        return False

    found = winners(board)
    if len(found) >= 2:
        return False

    # The winner must have made the last move
    if Mark.X in found and x_count != o_count + 1:
        return False
    if Mark.O in found and x_count != o_count:
        return False

    return True


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, board: Board) -> Optional[Mark]:
        """Return the winning Mark, or None if no winner yet."""
        return evaluate(board).winner

    def check_draw(self, board: Board) -> bool:
        """True if the board is full and nobody has a line."""
        return evaluate(board).status == GameStatus.DRAW

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """Get the winning line if there is one."""
        return evaluate(board).line

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Store the evaluation of the current board on the game state.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        game_state.result = evaluate(game_state.board)
        return game_state


# Quick test
if __name__ == "__main__":
    from .game_state import parse_board

    print("Testing WinChecker...")

    checker = WinChecker()

    cases = [
        ("XXX" "OO_" "___", Mark.X),   # horizontal
        ("OX_" "OX_" "O__", Mark.O),   # vertical
        ("XO_" "_XO" "__X", Mark.X),   # diagonal
        ("XO_" "_O_" "___", None),     # no winner
    ]
    for text, expected in cases:
        winner = checker.check_winner(parse_board(text))
        print(f"{text}: winner = {winner}")
        assert winner == expected

    full = parse_board("XOXXOOOXX")
    print(f"Draw: {checker.check_draw(full)}")
    assert checker.check_draw(full)

    print("\nWinChecker test done!")
