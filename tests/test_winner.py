import pytest

from tictactoe_engine.board import WIN_PATTERNS, Cell, deserialize_board, empty_grid
from tictactoe_engine.winner import GamePhase, evaluate, game_phase, game_status, winning_cells


def test_empty_grid_has_no_winner():
    assert evaluate(empty_grid()) is None
    assert winning_cells(empty_grid()) == frozenset()
    assert game_phase(empty_grid()) is GamePhase.IN_PROGRESS


@pytest.mark.parametrize("line", WIN_PATTERNS)
@pytest.mark.parametrize("mark", [Cell.X, Cell.O])
def test_every_line_is_detected(line, mark):
    cells = [Cell.EMPTY] * 9
    for i in line:
        cells[i] = mark
    res = evaluate(tuple(cells))
    assert res is not None
    assert res.winner is mark
    assert res.line == line


def test_first_line_in_enumeration_order_wins():
    # row 0 and column 0 both complete for X
    g = deserialize_board("111100100")
    res = evaluate(g)
    assert res.line == (0, 1, 2)
    assert winning_cells(g) == frozenset({0, 1, 2})


def test_status_strings():
    assert game_status(empty_grid(), Cell.X) == "Next player: X"
    assert game_status(deserialize_board("100000000"), Cell.O) == "Next player: O"
    assert game_status(deserialize_board("111220000"), Cell.O) == "Winner: X"
    draw = deserialize_board("121112212")
    assert evaluate(draw) is None
    assert game_status(draw, Cell.O) == "Draw"
    assert game_phase(draw) is GamePhase.DRAWN


def test_win_on_full_board_is_decided_not_drawn():
    g = deserialize_board("121212112")
    assert evaluate(g) is not None
    assert game_phase(g) is GamePhase.DECIDED
    assert game_status(g, Cell.O).startswith("Winner:")
