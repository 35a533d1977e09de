"""Unit tests for src/services/history_service.py"""

import json
from dataclasses import replace
from unittest.mock import Mock

import pytest

from src.api.models import HistoryEntry
from src.core.exceptions import GameStateError
from src.core.models import GameRecord
from src.core.shared_types import Collection
from src.db.record_store import RecordStore
from src.services.history_service import GameHistoryService
from src.services.session_service import parse_session_request

IN_PROGRESS = GameRecord(
    game_name="Tuesday",
    players=["Ann", "Ben", "Cas"],
    grid=[[1, 0, 2]] + [[0, 0, 0]] * 6,
    history=[(0, 0, 0), (0, 2, 0), (0, 2, 1)],
    date="7/1/2025",
)

COMPLETED = GameRecord(
    game_name="Monday",
    players=["Ann", "Ben"],
    grid=[[3, 1]] * 7,
    history=None,
    date="6/30/2025",
    time="10:15:00 PM",
    winner="Ann",
)


@pytest.fixture
def service(record_store: RecordStore) -> GameHistoryService:
    record_store.upsert(Collection.IN_PROGRESS, IN_PROGRESS)
    record_store.upsert(Collection.COMPLETED, COMPLETED)
    return GameHistoryService(record_store)


def test_list_games(service: GameHistoryService) -> None:
    response = service.list_games()
    assert response.in_progress == [
        HistoryEntry(game_name="Tuesday", players=["Ann", "Ben", "Cas"], date="7/1/2025")
    ]
    assert response.completed == [
        HistoryEntry(
            game_name="Monday",
            players=["Ann", "Ben"],
            date="6/30/2025",
            time="10:15:00 PM",
            winner="Ann",
        )
    ]


def test_list_games_empty(record_store: RecordStore) -> None:
    response = GameHistoryService(record_store).list_games()
    assert response.in_progress == []
    assert response.completed == []


def test_resume_request(service: GameHistoryService) -> None:
    """The session started from a resume request continues where the record left off."""
    request = service.resume_request(IN_PROGRESS)
    assert request.game_name == "Tuesday"
    assert json.loads(request.players or "") == ["Ann", "Ben", "Cas"]

    state = parse_session_request(request)
    assert state.to_record(IN_PROGRESS.date) == IN_PROGRESS


def test_cannot_resume_completed_game(service: GameHistoryService) -> None:
    with pytest.raises(GameStateError):
        service.resume_request(COMPLETED)


def test_delete_game(service: GameHistoryService, record_store: RecordStore) -> None:
    confirm = Mock(return_value=True)
    assert service.delete_game(COMPLETED, Collection.COMPLETED, confirm)
    confirm.assert_called_once()
    assert record_store.list_records(Collection.COMPLETED) == []
    # other collection untouched
    assert record_store.list_records(Collection.IN_PROGRESS) == [IN_PROGRESS]


def test_delete_cancelled(service: GameHistoryService, record_store: RecordStore) -> None:
    assert not service.delete_game(IN_PROGRESS, Collection.IN_PROGRESS, Mock(return_value=False))
    assert record_store.list_records(Collection.IN_PROGRESS) == [IN_PROGRESS]


def test_delete_game_not_stored(service: GameHistoryService, record_store: RecordStore) -> None:
    """Nothing identical is stored: nothing is deleted and that is reported."""
    changed = replace(IN_PROGRESS, date="7/2/2025")
    assert not service.delete_game(changed, Collection.IN_PROGRESS, Mock(return_value=True))
    assert record_store.list_records(Collection.IN_PROGRESS) == [IN_PROGRESS]
