"""
Errors raised by the boundary layers (parsing, documents, snapshot sources).

NOTE: an illegal move is NOT an error. The validator answers False for those.
"""


class ChessError(Exception):
    """Base class for everything raised by this package."""


class InvalidFENError(ChessError):
    """Piece placement string could not be read."""


class InvalidBoardError(ChessError):
    """Board grid does not have the 8x8 shape."""


class SquareOutOfBoundsError(ChessError, IndexError):
    """Board accessed with a square that lies outside of the board."""


class InvalidDocumentError(ChessError):
    """Malformed game-session document or request."""


class NoDocumentFoundError(ChessError):
    """The find-one lookup succeeded but returned no game session."""


class SnapshotFetchError(ChessError):
    """A snapshot source could not produce a readable game session."""
