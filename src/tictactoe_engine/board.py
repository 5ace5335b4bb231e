"""
Board basics: cell marks, grid representation, serialization, counts, validity.
Notes:
- A grid is an immutable tuple of 9 cells in row-major order (row = i // 3, col = i % 3).
- Board strings use 0=empty, 1=X, 2=O. X always starts.
- Valid grids have counts either equal (X to move) or X one ahead (O to move).
"""
from __future__ import annotations

from enum import IntEnum
from typing import List, Sequence, Tuple

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# rows, columns, diagonals; order decides which line is reported first
WIN_PATTERNS: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Cell(IntEnum):
    EMPTY = 0
    X = 1
    O = 2

    @property
    def symbol(self) -> str:
        return "." if self is Cell.EMPTY else self.name


Grid = Tuple[Cell, ...]


def empty_grid() -> Grid:
    return (Cell.EMPTY,) * CELL_COUNT


def is_cell_index(index: object) -> bool:
    # bool is an int subclass but never a cell
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < CELL_COUNT


def place(grid: Grid, index: int, mark: Cell) -> Grid:
    """Return a copy of ``grid`` with ``mark`` at ``index``."""
    cells = list(grid)
    cells[index] = mark
    return tuple(cells)


def cell_location(index: int) -> Tuple[int, int]:
    return divmod(index, BOARD_SIZE)


def player_for_index(move_index: int) -> Cell:
    """Mark to play from history entry ``move_index``: X on even, O on odd."""
    return Cell.X if move_index % 2 == 0 else Cell.O


def empty_cells(grid: Grid) -> List[int]:
    return [i for i, v in enumerate(grid) if v is Cell.EMPTY]


def is_full(grid: Grid) -> bool:
    return Cell.EMPTY not in grid


def get_piece_counts(grid: Grid) -> Tuple[int, int]:
    return grid.count(Cell.X), grid.count(Cell.O)


def current_player(grid: Grid) -> Cell:
    """Side to move inferred from the piece counts alone."""
    x, o = get_piece_counts(grid)
    return Cell.X if x == o else Cell.O


def serialize_board(grid: Sequence[int]) -> str:
    return ''.join(str(int(cell)) for cell in grid)


def deserialize_board(board_str: str) -> Grid:
    raw = board_str.strip()
    if len(raw) != CELL_COUNT or any(c not in "012" for c in raw):
        raise ValueError(f"Invalid board string {board_str!r}. Must be {CELL_COUNT} chars of 0/1/2.")
    return tuple(Cell(int(c)) for c in raw)


def is_valid_state(grid: Grid) -> bool:
    """True when ``grid`` can be reached by alternating play from the empty grid."""
    x_count, o_count = get_piece_counts(grid)
    if not (x_count == o_count or x_count == o_count + 1):
        return False

    def count_wins(p: Cell) -> int:
        return sum(1 for pat in WIN_PATTERNS if all(grid[i] is p for i in pat))

    x_wins, o_wins = count_wins(Cell.X), count_wins(Cell.O)
    # no double winners
    if x_wins and o_wins:
        return False
    if x_wins and x_count != o_count + 1:
        return False
    if o_wins and x_count != o_count:
        return False
    return True
