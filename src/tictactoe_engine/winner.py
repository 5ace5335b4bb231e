"""
Win detection and derived game status.
Notes:
- Lines are scanned in ``WIN_PATTERNS`` order and the first complete one wins.
- Nothing is cached: status is recomputed from the grid every time it is asked for.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional, Tuple

from .board import WIN_PATTERNS, Cell, Grid, is_full


@dataclass(frozen=True)
class WinResult:
    winner: Cell
    line: Tuple[int, int, int]


class GamePhase(Enum):
    IN_PROGRESS = "in_progress"
    DECIDED = "decided"
    DRAWN = "drawn"


def evaluate(grid: Grid) -> Optional[WinResult]:
    for pattern in WIN_PATTERNS:
        a, b, c = pattern
        v = grid[a]
        if v is not Cell.EMPTY and v == grid[b] and v == grid[c]:
            return WinResult(winner=v, line=pattern)
    return None


def winning_cells(grid: Grid) -> FrozenSet[int]:
    result = evaluate(grid)
    return frozenset(result.line) if result else frozenset()


def game_phase(grid: Grid) -> GamePhase:
    if evaluate(grid) is not None:
        return GamePhase.DECIDED
    if is_full(grid):
        return GamePhase.DRAWN
    return GamePhase.IN_PROGRESS


def game_status(grid: Grid, next_player: Cell) -> str:
    """Human-readable status line.

    ``next_player`` only matters while the game is in progress; history callers
    pass the parity mark of the current entry.
    """
    result = evaluate(grid)
    if result is not None:
        return f"Winner: {result.winner.name}"
    if is_full(grid):
        return "Draw"
    return f"Next player: {next_player.name}"
