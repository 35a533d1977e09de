"""Orchestration of a single game session: taps / undo / reset go to the domain layer, the results to persistence."""

import logging
from typing import Callable, Optional

from pydantic import ValidationError

from src.api.models import SessionRequest, WinnerAnnouncement
from src.config import ScoreboardSettings, get_settings
from src.core.clock import Clock, format_date, local_now
from src.core.exceptions import GameError, GameStateError
from src.core.shared_types import DEFAULT_PLAYERS, Collection
from src.cricket.game import (
    SessionState,
    load_state,
    mark_saved,
    reset_state,
    tap_state,
    undo_state,
)
from src.cricket.grid import Grid, Move, init_grid
from src.cricket.setup import GameSetup
from src.db.codec import (
    decode_grid,
    decode_history,
    decode_players,
    encode_grid,
    encode_history,
    encode_players,
)
from src.db.record_store import RecordStore

logger = logging.getLogger(__name__)

# Collaborators provided by the screens
Confirm = Callable[[], bool]
Announce = Callable[[WinnerAnnouncement], None]
CallLater = Callable[[float, Callable[[], None]], None]


def call_immediately(delay: float, callback: Callable[[], None]) -> None:
    """Default scheduler: no event loop to defer to, so just run the callback."""
    callback()


def parse_session_request(request: SessionRequest) -> SessionState:
    """
    Build the starting state of a session from the (serialized) screen parameters.

    ----
    Never fails: if anything cannot be parsed, or does not fit together, start a fresh game with the default players
    (keeping the game name).
    """
    try:
        players = (
            decode_players(request.players)
            if request.players
            else list(DEFAULT_PLAYERS)
        )
        grid = Grid.from_taps(decode_grid(request.grid)) if request.grid else None
        history = (
            [Move(*move) for move in decode_history(request.history)]
            if request.history
            else None
        )
        return SessionState.new(request.game_name, players, grid, history)
    except (ValidationError, GameError) as exc:
        logger.warning(
            "Invalid parameters for game %r, starting a default game instead: %s",
            request.game_name,
            exc,
        )
        return SessionState.new(request.game_name, list(DEFAULT_PLAYERS))


def start_game(setup: GameSetup) -> SessionRequest:
    """Turn a finished setup into the parameters of a new session."""
    setup.validate()
    fresh_grid = init_grid(len(setup.players))
    return SessionRequest(
        game_name=setup.game_name,
        players=encode_players(setup.players),
        grid=encode_grid(fresh_grid.to_taps()),
        history=encode_history([]),
    )


class SessionController:
    """
    Owns the state of the active game and keeps the durable copy in sync.

    ----
    Every tap, undo and reset saves the whole record (upsert by game name). Saving more often than needed is fine:
    the upsert is idempotent. The winning tap moves the record to the completed games instead.
    Once won, the session does not accept any more input.
    """

    def __init__(
        self,
        request: SessionRequest,
        record_store: RecordStore,
        confirm: Confirm,
        announce: Announce,
        call_later: CallLater = call_immediately,
        clock: Clock = local_now,
        settings: Optional[ScoreboardSettings] = None,
    ) -> None:
        self.repo = record_store
        self.confirm = confirm
        self.announce = announce
        self.call_later = call_later
        self.clock = clock
        self.settings = settings or get_settings()
        self.state = parse_session_request(request)
        self.closed = False

    @property
    def game_name(self) -> str:
        return self.state.game_name

    @property
    def accepts_input(self) -> bool:
        return not (self.state.is_over or self.closed)

    # -- Player actions --
    def tap(self, row_index: int, col_index: int) -> SessionState:
        """Mark a cell. Ignored once the game is won."""
        if not self.accepts_input:
            logger.debug("Ignoring tap on finished game %r", self.game_name)
            return self.state

        self.state = tap_state(self.state, row_index, col_index)
        if self.state.is_over:
            self._complete_game()
        else:
            self._save()
        return self.state

    def undo(self) -> SessionState:
        if not self.accepts_input or not self.state.can_undo:
            return self.state

        self.state = undo_state(self.state)
        self._save()
        return self.state

    def request_reset(self) -> bool:
        """
        Clear the board after the user confirmed.

        The reset is saved right away. Returns False (and nothing changes) when it is cancelled or not allowed.
        """
        if not self.accepts_input:
            return False
        if not self.confirm():
            logger.debug("Reset of %r cancelled", self.game_name)
            return False

        self.state = reset_state(self.state)
        logger.info("Board of game %r reset", self.game_name)
        self._save()
        return True

    # -- Lifecycle hooks (called by the screen) --
    def on_session_resume(self) -> SessionState:
        """
        Screen regained focus: the durable copy of this game wins over what is in memory.

        ---
        NOTE: this can drop unsaved changes if the same game is open somewhere else.
        """
        if not self.accepts_input:
            return self.state

        stored = self.repo.find(Collection.IN_PROGRESS, self.game_name)
        if stored is None:
            return self.state
        try:
            self.state = load_state(self.state, stored)
        except GameError:
            logger.warning(
                "Stored copy of game %r is invalid, keeping the current board",
                self.game_name,
            )
        return self.state

    def on_session_suspend(self) -> None:
        """Screen is left without a winner: save whatever is still pending."""
        if not self.accepts_input or not self.state.changes_pending:
            return
        self._save()

    # -- Internal helpers --
    def _today(self) -> str:
        return format_date(self.clock())

    def _save(self) -> bool:
        """Upsert the current game into the in-progress games. On failure, changes stay pending."""
        record = self.state.to_record(self._today())
        if not self.repo.upsert(Collection.IN_PROGRESS, record):
            logger.warning("Game %r not saved, will retry on the next save", self.game_name)
            return False
        self.state = mark_saved(self.state)
        return True

    def _complete_game(self) -> None:
        winner = self.state.winner
        if winner is None:
            raise GameStateError(f"Game {self.game_name!r} ended without a winner.")

        self.repo.migrate_to_completed(self.state.to_record(self._today()), winner)
        self.state = mark_saved(self.state)

        announcement = WinnerAnnouncement(player_name=winner, date=self._today())
        self.call_later(
            self.settings.winner_announcement_delay,
            lambda: self._announce_winner(announcement),
        )

    def _announce_winner(self, announcement: WinnerAnnouncement) -> None:
        self.announce(announcement)
        self.closed = True
        logger.info("Session for game %r closed", self.game_name)
