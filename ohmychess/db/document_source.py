"""Implementation of GameStateSource on top of a document database's find-one endpoint"""

import json
import logging
from typing import Any, Callable

from pydantic import ValidationError

from ohmychess.api.models import DocumentEnvelope
from ohmychess.chess.game_state import GameState
from ohmychess.core.config import (
    DOCUMENT_COLLECTION,
    DOCUMENT_DATA_SOURCE,
    DOCUMENT_DATABASE,
)
from ohmychess.core.exceptions import InvalidDocumentError, SnapshotFetchError

logger = logging.getLogger(__name__)

# (session ID, request body) -> raw response body. The HTTP client itself lives outside of this package.
FetchFn = Callable[[str, bytes], bytes]

# Only the fields the validator needs to rebuild a GameState
GAME_STATE_PROJECTION: dict[str, int] = {
    "_id": 0,
    "turn": 1,
    "status": 1,
    "players": 1,
    "board": 1,
}


def find_one_body(
    collection: str = DOCUMENT_COLLECTION,
    database: str = DOCUMENT_DATABASE,
    data_source: str = DOCUMENT_DATA_SOURCE,
) -> bytes:
    """Request body of the find-one call"""
    body: dict[str, Any] = {
        "collection": collection,
        "database": database,
        "dataSource": data_source,
        "projection": GAME_STATE_PROJECTION,
    }
    return json.dumps(body).encode()


class DocumentGameStateSource:
    """Game sessions stored as JSON documents. Decoding is done here, fetching by the injected `fetch` callable."""

    def __init__(self, fetch: FetchFn) -> None:
        self.fetch = fetch

    def get_game_state(self, session_id: str) -> GameState | None:
        """Get session by ID, if a document exists."""
        envelope = self._decode(self.fetch(session_id, find_one_body()))
        if envelope.document is None:
            return None
        return envelope.game_state()

    def _decode(self, raw: bytes) -> DocumentEnvelope:
        try:
            return DocumentEnvelope.model_validate_json(raw)
        except (ValidationError, InvalidDocumentError) as error:
            logger.error("Unreadable game session document: %s", error)
            raise SnapshotFetchError(f"Cannot decode game session document: {error}") from error
