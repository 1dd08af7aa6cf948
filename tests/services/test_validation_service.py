"""Unit tests for ohmychess/services/validation_service.py"""

import logging
from typing import Any, Callable

import pytest

from ohmychess.api.models import DocumentEnvelope, MoveRequest
from ohmychess.chess.board import Board
from ohmychess.chess.game_state import GameState
from ohmychess.core.exceptions import NoDocumentFoundError
from ohmychess.core.shared_types import PieceType, Player
from ohmychess.services.validation_service import MoveValidationService

# --- MOCK DEPENDENCIES ----
SESSION_ID = "65a1f0c2e4b0a1b2c3d4e5f6"


class MockSource:
    """Mock the GameStateSource using a dictionary of game states."""

    def __init__(self) -> None:
        self._games: dict[str, GameState] = {}
        self.requested: list[str] = []

    def add(self, session_id: str, game_state: GameState) -> None:
        self._games[session_id] = game_state

    def get_game_state(self, session_id: str) -> GameState | None:
        self.requested.append(session_id)
        return self._games.get(session_id)


@pytest.fixture
def mock_source() -> MockSource:
    return MockSource()


@pytest.fixture
def service(mock_source: MockSource) -> MoveValidationService:
    return MoveValidationService(mock_source)


def request(from_coords: tuple[int, int], to_coords: tuple[int, int], player: str) -> MoveRequest:
    return MoveRequest.model_validate({"from": from_coords, "to": to_coords, "player": player})


# --- CHECK MOVE (stored session) ---
def test_legal_move(
    service: MoveValidationService,
    mock_source: MockSource,
    board_with: Callable[..., Board],
    make_game_state: Callable[[Board], GameState],
) -> None:
    mock_source.add(SESSION_ID, make_game_state(board_with((PieceType.ROOK, Player.WHITE, "a1"))))
    verdict = service.check_move(SESSION_ID, request((0, 0), (0, 7), "White"))

    assert verdict.legal
    assert verdict.move == "a1a8"
    assert verdict.player == Player.WHITE
    assert mock_source.requested == [SESSION_ID]


def test_illegal_move_is_a_verdict_not_an_error(
    service: MoveValidationService,
    mock_source: MockSource,
    board_with: Callable[..., Board],
    make_game_state: Callable[[Board], GameState],
) -> None:
    mock_source.add(
        SESSION_ID,
        make_game_state(
            board_with((PieceType.ROOK, Player.WHITE, "a1"), (PieceType.PAWN, Player.WHITE, "a4"))
        ),
    )
    assert not service.check_move(SESSION_ID, request((0, 0), (0, 5), "White")).legal
    # wrong owner
    assert not service.check_move(SESSION_ID, request((0, 0), (0, 2), "Black")).legal
    # off the board
    verdict = service.check_move(SESSION_ID, request((8, 0), (0, 0), "White"))
    assert not verdict.legal
    assert verdict.move == "(8,0)->(0,0)"


def test_missing_session(
    service: MoveValidationService, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING):
        with pytest.raises(NoDocumentFoundError):
            service.check_move("does-not-exist", request((0, 0), (0, 1), "White"))
    assert "does-not-exist" in caplog.text


def test_verdict_is_logged(
    service: MoveValidationService,
    mock_source: MockSource,
    board_with: Callable[..., Board],
    make_game_state: Callable[[Board], GameState],
    caplog: pytest.LogCaptureFixture,
) -> None:
    mock_source.add(SESSION_ID, make_game_state(board_with((PieceType.KING, Player.BLACK, "e8"))))
    with caplog.at_level(logging.INFO, logger="ohmychess"):
        service.check_move(SESSION_ID, request((4, 7), (4, 6), "Black"))
    assert "e8e7" in caplog.text
    assert "legal" in caplog.text


# --- CHECK DOCUMENT (already decoded) ---
def test_check_document(
    service: MoveValidationService, game_state_document: Callable[..., dict[str, Any]]
) -> None:
    envelope = DocumentEnvelope.model_validate(
        {"document": game_state_document(pieces={(1, 1): ("Pawn", "White"), (2, 2): ("Queen", "Black")})}
    )
    assert service.check_document(envelope, request((1, 1), (2, 2), "White")).legal
    assert not service.check_document(envelope, request((1, 1), (0, 2), "White")).legal


def test_check_empty_document(service: MoveValidationService) -> None:
    with pytest.raises(NoDocumentFoundError):
        service.check_document(DocumentEnvelope(document=None), request((1, 1), (1, 2), "White"))
