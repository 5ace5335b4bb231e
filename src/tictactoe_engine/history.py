"""
Move history for a single game: grid snapshots plus a cursor.

Entry 0 is always the empty grid. Each accepted move truncates everything past
the cursor, appends one snapshot and moves the cursor onto it. Jumping only
moves the cursor.

Invalid moves and jumps are not errors: they return False and leave the
history untouched, so a presentation layer can treat them as no-ops.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .board import Cell, Grid, cell_location, empty_grid, is_cell_index, place, player_for_index
from .winner import GamePhase, WinResult, evaluate, game_phase, game_status


@dataclass(frozen=True)
class HistoryEntry:
    grid: Grid
    move: Optional[int] = None

    @property
    def location(self) -> Optional[Tuple[int, int]]:
        return None if self.move is None else cell_location(self.move)

    @property
    def row(self) -> Optional[int]:
        loc = self.location
        return None if loc is None else loc[0]

    @property
    def col(self) -> Optional[int]:
        loc = self.location
        return None if loc is None else loc[1]


class GameHistory:
    def __init__(self) -> None:
        self._entries: List[HistoryEntry] = [HistoryEntry(grid=empty_grid(), move=None)]
        self._current = 0

    @classmethod
    def from_moves(cls, moves: Iterable[int]) -> Tuple["GameHistory", int]:
        """Replay ``moves`` onto a fresh game.

        Stops at the first rejected move. Returns the game and the number of
        moves that were accepted.
        """
        game = cls()
        accepted = 0
        for mv in moves:
            if not game.apply_move(mv):
                break
            accepted += 1
        return game, accepted

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"GameHistory(entries={len(self._entries)}, current_index={self._current})"

    @property
    def entries(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    @property
    def current_index(self) -> int:
        return self._current

    @property
    def next_player(self) -> Cell:
        return player_for_index(self._current)

    @property
    def winner(self) -> Optional[WinResult]:
        return evaluate(self.current_grid())

    @property
    def phase(self) -> GamePhase:
        return game_phase(self.current_grid())

    @property
    def status(self) -> str:
        return game_status(self.current_grid(), self.next_player)

    def current_grid(self) -> Grid:
        return self._entries[self._current].grid

    def apply_move(self, index: int) -> bool:
        if not is_cell_index(index):
            logging.debug("Rejected move %r: not a cell index", index)
            return False
        grid = self.current_grid()
        if grid[index] is not Cell.EMPTY:
            logging.debug("Rejected move %d: cell occupied by %s", index, grid[index].name)
            return False
        if evaluate(grid) is not None:
            logging.debug("Rejected move %d: game already decided", index)
            return False

        mark = player_for_index(self._current)
        dropped = len(self._entries) - self._current - 1
        del self._entries[self._current + 1:]
        self._entries.append(HistoryEntry(grid=place(grid, index, mark), move=index))
        self._current = len(self._entries) - 1
        logging.debug("Move #%d: %s at %d (discarded %d future entries)",
                      self._current, mark.name, index, dropped)
        return True

    def jump_to(self, target: int) -> bool:
        if isinstance(target, bool) or not isinstance(target, int) or not 0 <= target < len(self._entries):
            logging.debug("Rejected jump to %r: history has %d entries", target, len(self._entries))
            return False
        self._current = target
        return True

    def moves_view(self, ascending: bool = True) -> List[Tuple[int, HistoryEntry]]:
        view = list(enumerate(self._entries))
        if not ascending:
            view.reverse()
        return view


def move_label(index: int, entry: HistoryEntry) -> str:
    if index == 0:
        return "game start"
    return f"move #{index} ({entry.row}, {entry.col})"


def move_description(game: GameHistory, index: int) -> str:
    """Move list text: a jump prompt, or a marker for the entry being viewed.

    ``index`` must come from ``moves_view``; anything else raises IndexError.
    """
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(game):
        raise IndexError(f"No history entry {index!r}; history has {len(game)} entries")
    label = move_label(index, game.entries[index])
    if index == game.current_index:
        return f"You are at {label}"
    return f"Go to {label}"


# Functional surface for presentation layers that prefer plain calls.

def new_game() -> GameHistory:
    return GameHistory()


def apply_move(game: GameHistory, index: int) -> bool:
    return game.apply_move(index)


def jump_to(game: GameHistory, index: int) -> bool:
    return game.jump_to(index)


def current_grid(game: GameHistory) -> Grid:
    return game.current_grid()


def moves_view(game: GameHistory, ascending: bool = True) -> List[Tuple[int, HistoryEntry]]:
    return game.moves_view(ascending)
