"""
Game state management for TicTacToe.
Defines the board, marks, move application and the running score tally.

Board representation: tuple of 9 Marks, row-major

     0 | 1 | 2
    ---+---+---
     3 | 4 | 5
    ---+---+---
     6 | 7 | 8
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .exceptions import InvalidMove


BOARD_CELLS = 9
CENTER = 4


class Mark(Enum):
    """What can occupy a cell. X and O are also the two players."""
    EMPTY = " "
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite player."""
        if self == Mark.EMPTY:
            raise ValueError("EMPTY has no opposite")
        return Mark.O if self == Mark.X else Mark.X

    @property
    def is_player(self) -> bool:
        return self != Mark.EMPTY


Board = Tuple[Mark, ...]


class GameStatus(Enum):
    """Outcome of evaluating a board."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameResult:
    """
    Result of evaluating a board.

    winner and line are only set when status is WIN.
    """
    status: GameStatus
    winner: Optional[Mark] = None
    line: Optional[Tuple[int, int, int]] = None

    @classmethod
    def in_progress(cls) -> "GameResult":
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def draw(cls) -> "GameResult":
        return cls(GameStatus.DRAW)

    @classmethod
    def win(cls, player: Mark, line: Tuple[int, int, int]) -> "GameResult":
        return cls(GameStatus.WIN, player, tuple(line))

    @property
    def is_terminal(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Mark            # Who made the move
    index: int              # Cell index (0-8)
    move_number: int        # Which move of the game this is (0-8)


def empty_board() -> Board:
    """Return a board with every cell empty."""
    return (Mark.EMPTY,) * BOARD_CELLS


def apply_move(board: Board, index: int, player: Mark) -> Board:
    """
    Place player's mark on a cell.

    Args:
        board: The current board (left untouched).
        index: Cell index (0-8).
        player: Mark.X or Mark.O.

    Returns:
        A new board with the cell set.

    Raises:
        InvalidMove: index out of range, cell occupied, or player is EMPTY.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidMove(index, "cell index must be an integer")
    if not 0 <= index < BOARD_CELLS:
        raise InvalidMove(index, f"must be 0-{BOARD_CELLS - 1}")
    if not isinstance(player, Mark) or not player.is_player:
        raise InvalidMove(index, f"{player!r} is not a player")
    if board[index] != Mark.EMPTY:
        raise InvalidMove(index, f"cell already occupied by {board[index].value}")

    new_board = list(board)
    new_board[index] = player
    return tuple(new_board)


def available_moves(board: Board) -> List[int]:
    """Return indices of all empty cells, ascending."""
    return [i for i, cell in enumerate(board) if cell == Mark.EMPTY]


def side_to_move(board: Board) -> Mark:
    """Infer side to move from board state (X plays first)."""
    x_count = board.count(Mark.X)
    o_count = board.count(Mark.O)
    return Mark.X if x_count == o_count else Mark.O


_SYMBOLS = {
    "X": Mark.X, "x": Mark.X,
    "O": Mark.O, "o": Mark.O,
    "_": Mark.EMPTY, ".": Mark.EMPTY, " ": Mark.EMPTY, "-": Mark.EMPTY,
}


def parse_board(text: str) -> Board:
    """
    Build a board from a 9 character string, e.g. "XX_OO____".

    Row separators ('/', '|', newlines) are ignored, so "XX_/OO_/___" also
    works. '_', '.', '-' and ' ' are empty cells.
    """
    cells = [c for c in text if c not in "/|\n"]
    if len(cells) != BOARD_CELLS:
        raise ValueError(f"Board needs {BOARD_CELLS} cells, got {len(cells)}: {text!r}")
    try:
        return tuple(_SYMBOLS[c] for c in cells)
    except KeyError as e:
        raise ValueError(f"Unknown board symbol {e.args[0]!r} in {text!r}") from None


def format_board(board: Board) -> str:
    """Render the board as a small text grid (empty cells show their index)."""
    rows = []
    for row in range(3):
        cells = []
        for col in range(3):
            i = row * 3 + col
            cells.append(board[i].value if board[i].is_player else str(i))
        rows.append(f" {cells[0]} | {cells[1]} | {cells[2]} ")
    return "\n---+---+---\n".join(rows)


@dataclass
class ScoreTally:
    """Running wins/draws over the games of a session."""
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    def record(self, result: GameResult):
        """Count a finished game. In-progress results are ignored."""
        if result.status == GameStatus.WIN:
            if result.winner == Mark.X:
                self.x_wins += 1
            else:
                self.o_wins += 1
        elif result.status == GameStatus.DRAW:
            self.draws += 1

    def clear(self):
        self.x_wins = 0
        self.o_wins = 0
        self.draws = 0

    def wins_for(self, player: Mark) -> int:
        return self.x_wins if player == Mark.X else self.o_wins


@dataclass
class GameState:
    """
    The state of a single TicTacToe game.

    Tracks:
    - The board (replaced, never mutated, on every move)
    - Current player
    - Move history
    - Game result (IN_PROGRESS until a win or draw)
    """

    board: Board = field(default_factory=empty_board)

    # Current player's turn
    current_player: Mark = Mark.X

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    result: GameResult = field(default_factory=GameResult.in_progress)

    @property
    def is_game_over(self) -> bool:
        return self.result.is_terminal

    @property
    def winner(self) -> Optional[Mark]:
        return self.result.winner

    def make_move(self, index: int):
        """
        Place the current player's mark.

        Winner/draw detection is done by WinChecker.update_game_state,
        the turn is passed with switch_player.

        Raises:
            InvalidMove: if the cell cannot be played.
        """
        self.board = apply_move(self.board, index, self.current_player)
        self.moves.append(Move(
            player=self.current_player,
            index=index,
            move_number=len(self.moves),
        ))

    def switch_player(self):
        self.current_player = self.current_player.opposite()

    def get_empty_cells(self) -> List[int]:
        return available_moves(self.board)


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()
    for index in (4, 0, 2, 6):
        print(f"\n{game.current_player.value} moves to {index}")
        game.make_move(index)
        game.switch_player()
        print(format_board(game.board))

    try:
        game.make_move(4)
    except InvalidMove as e:
        print(f"\nRejected as expected: {e}")

    print("\nGameState test done!")
