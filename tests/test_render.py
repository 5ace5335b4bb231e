from tictactoe_engine.board import deserialize_board, empty_grid
from tictactoe_engine.history import GameHistory
from tictactoe_engine.render import render_board, render_game, render_moves


def test_render_empty_board():
    assert render_board(empty_grid()) == "\n".join([" .  .  . "] * 3)


def test_render_board_highlights_cells():
    g = deserialize_board("111220000")
    rows = render_board(g, frozenset({0, 1, 2})).splitlines()
    assert rows[0] == "[X][X][X]"
    assert rows[1] == " O  O  . "


def test_render_moves_descending():
    game, _ = GameHistory.from_moves([0, 4])
    assert render_moves(game, ascending=False) == [
        "2. You are at move #2 (1, 1)",
        "1. Go to move #1 (0, 0)",
        "0. Go to game start",
    ]


def test_render_game_win_highlight():
    game, _ = GameHistory.from_moves([0, 4, 1, 5, 2])
    out = render_game(game).splitlines()
    assert out[0] == "Winner: X"
    assert out[1] == "[X][X][X]"
    assert out[4] == "Moves (ascending):"
    assert out[5] == "0. Go to game start"
    assert out[-1] == "5. You are at move #5 (0, 2)"
