"""
The scoring grid implements all rules that affect the marks on the board.

Rows are the Cricket numbers (20 down to 15, then Bull), columns are the players.
All functions here are pure: a new Grid / history is returned, the input is never touched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from src.core.exceptions import InvalidArgumentError
from src.core.shared_types import MAX_PLAYERS, MAX_TAPS, MIN_PLAYERS, ROW_COUNT

CELL_SYMBOLS: dict[int, str] = {0: "", 1: "/", 2: "X", 3: "Ⓧ"}


@dataclass(frozen=True)
class Cell:
    taps: int = 0

    def tapped(self) -> Cell:
        """A cell never goes past 3 marks."""
        return Cell(min(self.taps + 1, MAX_TAPS))

    @property
    def is_closed(self) -> bool:
        return self.taps == MAX_TAPS


@dataclass(frozen=True)
class Move:
    """A single tap, with enough info to revert it."""

    row_index: int
    col_index: int
    previous_taps: int


History = list[Move]


@dataclass(frozen=True)
class Grid:
    rows: tuple[tuple[Cell, ...], ...]

    @classmethod
    def from_taps(cls, taps: list[list[int]]) -> Grid:
        """Build a grid from plain tap counts (row by row), validating the shape."""
        if len(taps) != ROW_COUNT:
            raise InvalidArgumentError(
                f"Grid must have {ROW_COUNT} rows, got {len(taps)}."
            )
        player_count = len(taps[0])
        _check_player_count(player_count)
        for row in taps:
            if len(row) != player_count:
                raise InvalidArgumentError(
                    f"Every row must have {player_count} cells, got {len(row)}."
                )
            if any(not 0 <= count <= MAX_TAPS for count in row):
                raise InvalidArgumentError(
                    f"Tap counts must be within [0, {MAX_TAPS}]: {row}"
                )
        return cls(tuple(tuple(Cell(count) for count in row) for row in taps))

    def to_taps(self) -> list[list[int]]:
        return [[cell.taps for cell in row] for row in self.rows]

    @property
    def player_count(self) -> int:
        return len(self.rows[0])

    def cell(self, row_index: int, col_index: int) -> Cell:
        return self.rows[row_index][col_index]

    def column(self, col_index: int) -> list[Cell]:
        return [row[col_index] for row in self.rows]

    def is_column_closed(self, col_index: int) -> bool:
        """A player has closed every number."""
        return all(cell.is_closed for cell in self.column(col_index))

    def with_cell(self, row_index: int, col_index: int, cell: Cell) -> Grid:
        """Copy of the grid with a single cell replaced."""
        new_row = (
            self.rows[row_index][:col_index]
            + (cell,)
            + self.rows[row_index][col_index + 1 :]
        )
        return Grid(self.rows[:row_index] + (new_row,) + self.rows[row_index + 1 :])

    def is_within_bounds(self, row_index: int, col_index: int) -> bool:
        return (0 <= row_index < ROW_COUNT) and (0 <= col_index < self.player_count)


def _check_player_count(player_count: int) -> None:
    if not MIN_PLAYERS <= player_count <= MAX_PLAYERS:
        raise InvalidArgumentError(
            f"Cricket is played with {MIN_PLAYERS} to {MAX_PLAYERS} players, got {player_count}."
        )


def init_grid(player_count: int) -> Grid:
    """Empty grid: 7 rows x player_count columns, no marks."""
    _check_player_count(player_count)
    return Grid(tuple(tuple(Cell() for _ in range(player_count)) for _ in range(ROW_COUNT)))


def apply_tap(
    grid: Grid, history: History, row_index: int, col_index: int
) -> tuple[Grid, History, Optional[int]]:
    """
    Add a mark to a cell and record the move.

    ---
    NOTE: A tap on a cell that already has 3 marks leaves the grid as is, but still gets recorded in the history
    (previous_taps == new taps). Undoing it is then a no-op as well.

    Returns the new grid, the new history and the index of the winning column (or None).
    Only the tapped column is checked for a win.
    """
    if not grid.is_within_bounds(row_index, col_index):
        raise InvalidArgumentError(
            f"Tap outside of the grid: row {row_index}, column {col_index}."
        )

    cell = grid.cell(row_index, col_index)
    new_grid = grid.with_cell(row_index, col_index, cell.tapped())
    new_history = [*history, Move(row_index, col_index, previous_taps=cell.taps)]

    winner = col_index if new_grid.is_column_closed(col_index) else None
    return new_grid, new_history, winner


def undo(grid: Grid, history: History) -> tuple[Grid, History]:
    """Revert the last move. Nothing to revert: the input is returned as is."""
    if not history:
        return grid, history

    last_move = history[-1]
    restored = grid.with_cell(
        last_move.row_index, last_move.col_index, Cell(last_move.previous_taps)
    )
    return restored, history[:-1]


def reset_grid(player_count: int) -> tuple[Grid, History]:
    """Always a full reset: fresh grid and no history."""
    return init_grid(player_count), []


def column_position(player_count: int) -> int:
    """
    Display index of the column holding the row labels (20 ... Bull).

    Presentation only, nothing in the game rules depends on it.
    """
    if player_count == 2:
        return 1
    if player_count in (3, 4):
        return 2
    return player_count


def cell_symbol(taps: int) -> str:
    """Mark shown in a cell: '/', 'X', and a circled X once the number is closed."""
    return CELL_SYMBOLS[taps]
