"""Orchestration between whatever provides game snapshots and the move validator."""

import logging
from typing import Protocol

from ohmychess.api.models import DocumentEnvelope, MoveRequest, MoveVerdict
from ohmychess.chess.game_state import GameState
from ohmychess.core.exceptions import NoDocumentFoundError

logger = logging.getLogger(__name__)


class GameStateSource(Protocol):
    """Anything that can hand over a game snapshot (document database client, cache, test fixture...)"""

    def get_game_state(self, session_id: str) -> GameState | None:
        """Snapshot of the session, if it exists."""
        ...


class MoveValidationService:
    """Fetch a snapshot, validate a move on it, report the verdict."""

    def __init__(self, source: GameStateSource) -> None:
        self.source = source

    def check_move(self, session_id: str, request: MoveRequest) -> MoveVerdict:
        """Validate a move against the stored session with the given ID."""
        game_state = self._fetch_game_state(session_id)
        return self._verdict(game_state, request)

    def check_document(
        self, envelope: DocumentEnvelope, request: MoveRequest
    ) -> MoveVerdict:
        """Validate a move against an already decoded find-one response."""
        return self._verdict(envelope.game_state(), request)

    # -- Internal helpers --
    def _verdict(self, game_state: GameState, request: MoveRequest) -> MoveVerdict:
        move = request.to_move()
        legal = game_state.is_legal(move, request.player)
        logger.info(
            "Move %s by %s is %s", move, request.player, "legal" if legal else "illegal"
        )
        return MoveVerdict(move=str(move), player=request.player, legal=legal)

    def _fetch_game_state(self, session_id: str) -> GameState:
        """Attempt to find the session and raise error if it fails."""
        game_state = self.source.get_game_state(session_id)
        if game_state is None:
            logger.warning("Game session %s not found", session_id)
            raise NoDocumentFoundError(f"Game session with {session_id=} not found.")
        return game_state
