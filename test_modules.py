"""
Tests for the TicTacToe board, win checker and move validator.
"""

import pytest

from logic import (
    GameResult,
    GameState,
    GameStatus,
    InvalidMove,
    Mark,
    MoveValidator,
    ScoreTally,
    WinChecker,
    WINNING_LINES,
    apply_move,
    available_moves,
    empty_board,
    evaluate,
    format_board,
    is_legal_board,
    parse_board,
    side_to_move,
)


X, O, E = Mark.X, Mark.O, Mark.EMPTY


# ==================== BOARD ====================

def test_empty_board():
    board = empty_board()
    assert len(board) == 9
    assert all(cell == E for cell in board)
    assert available_moves(board) == list(range(9))


def test_apply_move_returns_new_board():
    board = empty_board()
    new_board = apply_move(board, 4, X)

    assert new_board[4] == X
    assert board == empty_board()
    assert [i for i, c in enumerate(new_board) if c != E] == [4]


def test_apply_move_on_occupied_cell_raises():
    board = parse_board("X________")

    with pytest.raises(InvalidMove) as excinfo:
        apply_move(board, 0, O)

    assert excinfo.value.index == 0
    assert board == parse_board("X________")


@pytest.mark.parametrize("index", [-1, 9, 100, 2.0, "4", True])
def test_apply_move_out_of_range_raises(index):
    with pytest.raises(InvalidMove):
        apply_move(empty_board(), index, X)


def test_apply_move_requires_a_player():
    with pytest.raises(InvalidMove):
        apply_move(empty_board(), 0, E)


def test_available_moves_ascending():
    board = parse_board("_X_O_X___")
    assert available_moves(board) == [0, 2, 4, 6, 7, 8]
    assert available_moves(parse_board("XOXXOOOXX")) == []


def test_parse_board_accepts_row_separators():
    assert parse_board("XX_/OO_/___") == parse_board("XX_OO____")
    assert parse_board("x.o......") == (X, E, O, E, E, E, E, E, E)


@pytest.mark.parametrize("text", ["XX_", "XX_OO____X", "XX_OO___Z"])
def test_parse_board_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_board(text)


def test_format_board_shows_marks_and_free_indices():
    text = format_board(parse_board("X___O___X"))
    lines = text.splitlines()
    assert lines[0] == " X | 1 | 2 "
    assert lines[2] == " 3 | O | 5 "
    assert lines[4] == " 6 | 7 | X "


def test_side_to_move():
    assert side_to_move(empty_board()) == X
    assert side_to_move(parse_board("____X____")) == O
    assert side_to_move(parse_board("O___X____")) == X


def test_mark_opposite():
    assert X.opposite() == O
    assert O.opposite() == X
    with pytest.raises(ValueError):
        E.opposite()


# ==================== WIN CHECKER ====================

def test_winning_lines_order():
    assert WINNING_LINES == (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    )


def test_evaluate_top_row_win():
    result = evaluate(parse_board("XXX______"))
    assert result == GameResult(GameStatus.WIN, X, (0, 1, 2))
    assert result.is_terminal


@pytest.mark.parametrize("line", WINNING_LINES)
def test_evaluate_every_line(line):
    board = list(empty_board())
    for i in line:
        board[i] = O
    result = evaluate(tuple(board))
    assert result.status == GameStatus.WIN
    assert result.winner == O
    assert result.line == line


def test_evaluate_first_line_wins_on_degenerate_board():
    # Row 0 is X, row 2 is O: the row checked first is reported
    result = evaluate(parse_board("XXX___OOO"))
    assert result.winner == X
    assert result.line == (0, 1, 2)

    # Column 0 and the main diagonal both complete: the column comes first
    result = evaluate(parse_board("XOOXXOXOX"))
    assert result.line == (0, 3, 6)


def test_evaluate_draw():
    result = evaluate(parse_board("XOXXOOOXX"))
    assert result == GameResult.draw()
    assert result.winner is None
    assert result.is_terminal


def test_evaluate_in_progress():
    board = parse_board("XOXXOO__X")
    result = evaluate(board)
    assert result.status == GameStatus.IN_PROGRESS
    assert not result.is_terminal
    # Idempotent
    assert evaluate(board) == result


def test_evaluate_reports_only_uniform_lines():
    board = empty_board()
    for index, player in [(0, X), (3, O), (1, X), (4, O), (8, X), (5, O)]:
        board = apply_move(board, index, player)
        result = evaluate(board)
        if result.status == GameStatus.WIN:
            assert all(board[i] == result.winner for i in result.line)

    assert result == GameResult.win(O, (3, 4, 5))


def test_win_with_full_board_is_win_not_draw():
    result = evaluate(parse_board("XOXOXOOXX"))
    assert result.status == GameStatus.WIN
    assert result.line == (0, 4, 8)


def test_is_legal_board():
    assert is_legal_board(empty_board())
    assert is_legal_board(parse_board("XX_OO____"))
    assert not is_legal_board(parse_board("XXX______"))    # too many X
    assert not is_legal_board(parse_board("OO_______"))    # O moved first
    assert not is_legal_board(parse_board("XXXOOO___"))    # both win
    assert not is_legal_board(parse_board("XXXOO_O__"))    # X won but O moved after


def test_win_checker_class():
    checker = WinChecker()
    board = parse_board("O_X_O_X_O")

    assert checker.check_winner(board) == O
    assert checker.get_winning_line(board) == (0, 4, 8)
    assert not checker.check_draw(board)
    assert checker.check_draw(parse_board("XOXXOOOXX"))


def test_update_game_state():
    state = GameState(board=parse_board("XXX_OO___"))
    WinChecker().update_game_state(state)

    assert state.is_game_over
    assert state.winner == X


# ==================== GAME STATE ====================

def test_game_state_records_moves():
    state = GameState()
    state.make_move(4)
    state.switch_player()
    state.make_move(0)

    assert state.board == parse_board("O___X____")
    assert [(m.player, m.index, m.move_number) for m in state.moves] == [
        (X, 4, 0), (O, 0, 1),
    ]


def test_score_tally():
    tally = ScoreTally()
    tally.record(GameResult.win(X, (0, 1, 2)))
    tally.record(GameResult.win(O, (2, 4, 6)))
    tally.record(GameResult.win(O, (0, 3, 6)))
    tally.record(GameResult.draw())
    tally.record(GameResult.in_progress())

    assert (tally.x_wins, tally.o_wins, tally.draws) == (1, 2, 1)
    assert tally.wins_for(O) == 2

    tally.clear()
    assert tally == ScoreTally()


# ==================== MOVE VALIDATOR ====================

def test_validator_accepts_empty_cell():
    result = MoveValidator().validate_move(GameState(), 4)
    assert result.is_valid
    assert result.error_message is None


def test_validator_rejects_occupied_cell():
    state = GameState(board=parse_board("____X____"), current_player=O)
    result = MoveValidator().validate_move(state, 4)
    assert not result.is_valid
    assert "occupied" in result.error_message


@pytest.mark.parametrize("index", [-1, 9, None, "3"])
def test_validator_rejects_bad_index(index):
    result = MoveValidator().validate_move(GameState(), index)
    assert not result.is_valid
    assert "Invalid position" in result.error_message


def test_validator_rejects_move_after_game_over():
    state = GameState(board=parse_board("XXXOO____"))
    WinChecker().update_game_state(state)

    validator = MoveValidator()
    assert not validator.validate_move(state, 8).is_valid
    assert validator.get_valid_moves(state) == []


def test_validator_blocks_human_on_computer_turn():
    state = GameState(board=parse_board("____X____"), current_player=O)
    validator = MoveValidator()

    assert not validator.validate_move(state, 0, computer_player=O).is_valid
    assert validator.validate_move(state, 0, computer_player=X).is_valid
    assert validator.get_valid_moves(state) == [0, 1, 2, 3, 5, 6, 7, 8]
