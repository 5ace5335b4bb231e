"""Plain-text presentation of a game: board, status line and move list."""
from __future__ import annotations

from typing import AbstractSet, List

from .board import BOARD_SIZE, Grid
from .history import GameHistory, move_description
from .winner import winning_cells


def render_board(grid: Grid, highlight: AbstractSet[int] = frozenset()) -> str:
    rows: List[str] = []
    for r in range(BOARD_SIZE):
        cells = []
        for c in range(BOARD_SIZE):
            i = r * BOARD_SIZE + c
            sym = grid[i].symbol
            cells.append(f"[{sym}]" if i in highlight else f" {sym} ")
        rows.append("".join(cells))
    return "\n".join(rows)


def render_moves(game: GameHistory, ascending: bool = True) -> List[str]:
    return [f"{i}. {move_description(game, i)}" for i, _ in game.moves_view(ascending)]


def render_game(game: GameHistory, ascending: bool = True) -> str:
    grid = game.current_grid()
    parts = [
        game.status,
        render_board(grid, winning_cells(grid)),
        f"Moves ({'ascending' if ascending else 'descending'}):",
        *render_moves(game, ascending),
    ]
    return "\n".join(parts)
