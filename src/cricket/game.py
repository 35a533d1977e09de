"""
The session state is the entrypoint into the domain layer for the service layer.

A SessionState is an immutable value. Each transition function takes the current state and returns the next one,
so the service layer owns exactly one state at a time and there is no hidden state in here.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Self

from src.core.exceptions import GameStateError, InvalidArgumentError
from src.core.models import GameRecord, MoveData
from src.core.shared_types import MAX_TAPS, Status
from src.cricket.grid import (
    Grid,
    History,
    Move,
    apply_tap,
    init_grid,
    reset_grid,
    undo,
)


@dataclass(frozen=True)
class SessionState:
    game_name: str
    players: tuple[str, ...]
    grid: Grid
    history: History = field(default_factory=list)
    status: Status = Status.ACTIVE
    winner_index: Optional[int] = None
    # Something changed since the last successful save
    changes_pending: bool = False

    @classmethod
    def new(
        cls,
        game_name: str,
        players: list[str],
        grid: Optional[Grid] = None,
        history: Optional[History] = None,
    ) -> Self:
        """Start (or resume) a session. Without a grid / history the board starts empty."""
        start_grid = grid if grid is not None else init_grid(len(players))
        if start_grid.player_count != len(players):
            raise InvalidArgumentError(
                f"Grid has {start_grid.player_count} columns, but there are {len(players)} players."
            )
        start_history = list(history) if history is not None else []
        for move in start_history:
            if not start_grid.is_within_bounds(move.row_index, move.col_index):
                raise InvalidArgumentError(f"Move outside of the grid: {move}")
            if not 0 <= move.previous_taps <= MAX_TAPS:
                raise InvalidArgumentError(f"Invalid tap count in move: {move}")
        return cls(
            game_name=game_name,
            players=tuple(players),
            grid=start_grid,
            history=start_history,
        )

    @classmethod
    def from_record(cls, record: GameRecord) -> Self:
        """Define how to construct a session from the information the Service layer actually has"""
        grid = Grid.from_taps(record.grid)
        history = [Move(*move) for move in record.history or []]
        return cls.new(record.game_name, list(record.players), grid, history)

    def to_record(self, date: str) -> GameRecord:
        """Encode back into a format the Service layer uses (an in-progress record)"""
        return GameRecord(
            game_name=self.game_name,
            players=list(self.players),
            grid=self.grid.to_taps(),
            history=[history_entry(move) for move in self.history],
            date=date,
        )

    @property
    def is_over(self) -> bool:
        return self.status == Status.WON

    @property
    def winner(self) -> Optional[str]:
        if self.winner_index is None:
            return None
        return self.players[self.winner_index]

    @property
    def can_undo(self) -> bool:
        return not self.is_over and len(self.history) > 0


def history_entry(move: Move) -> MoveData:
    return (move.row_index, move.col_index, move.previous_taps)


def _assert_active(state: SessionState, action: str) -> None:
    if state.is_over:
        raise GameStateError(
            f"Cannot {action}: game {state.game_name!r} was already won by {state.winner!r}."
        )


def tap_state(state: SessionState, row_index: int, col_index: int) -> SessionState:
    """Mark a cell. Closing all numbers in the tapped column ends the game."""
    _assert_active(state, "tap")

    grid, history, winner_index = apply_tap(
        state.grid, state.history, row_index, col_index
    )
    return replace(
        state,
        grid=grid,
        history=history,
        status=Status.WON if winner_index is not None else Status.ACTIVE,
        winner_index=winner_index,
        changes_pending=True,
    )


def undo_state(state: SessionState) -> SessionState:
    """Revert the last tap. Without history the state is returned as is."""
    _assert_active(state, "undo")

    if not state.history:
        return state
    grid, history = undo(state.grid, state.history)
    return replace(state, grid=grid, history=history, changes_pending=True)


def reset_state(state: SessionState) -> SessionState:
    """Clear the entire board (players and name are kept)."""
    _assert_active(state, "reset")

    grid, history = reset_grid(len(state.players))
    return replace(state, grid=grid, history=history, changes_pending=True)


def load_state(state: SessionState, record: GameRecord) -> SessionState:
    """Replace grid and history with a (durable) copy of the same game."""
    stored = SessionState.from_record(record)
    if stored.players != state.players:
        # NOTE: same name, other players: the stored game still wins, so take its players along
        return replace(stored, changes_pending=False)
    return replace(state, grid=stored.grid, history=stored.history, changes_pending=False)


def mark_saved(state: SessionState) -> SessionState:
    return replace(state, changes_pending=False)
