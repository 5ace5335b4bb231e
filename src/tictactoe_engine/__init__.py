"""tictactoe_engine package.

Rules, win detection and a replayable move history for tic-tac-toe,
plus a small text presenter and CLI.

Convenience imports are exposed for presentation layers.
"""

from .board import Cell, Grid, empty_grid
from .history import (
    GameHistory,
    HistoryEntry,
    apply_move,
    current_grid,
    jump_to,
    move_description,
    move_label,
    moves_view,
    new_game,
)
from .winner import GamePhase, WinResult, evaluate, game_status, winning_cells

__all__ = [
    "Cell",
    "Grid",
    "empty_grid",
    "GameHistory",
    "HistoryEntry",
    "new_game",
    "apply_move",
    "jump_to",
    "current_grid",
    "moves_view",
    "move_label",
    "move_description",
    "GamePhase",
    "WinResult",
    "evaluate",
    "game_status",
    "winning_cells",
]
