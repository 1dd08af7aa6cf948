"""
Type definitions used across layers

Values are the names used by the stored game-session document, so the same enums can be fed to pydantic directly.
"""

from enum import StrEnum


class PieceType(StrEnum):
    PAWN = "Pawn"
    KNIGHT = "Knight"
    BISHOP = "Bishop"
    ROOK = "Rook"
    QUEEN = "Queen"
    KING = "King"


class Player(StrEnum):
    WHITE = "White"
    BLACK = "Black"

    @property
    def opponent(self) -> "Player":
        return Player.BLACK if self == Player.WHITE else Player.WHITE


class GameStatus(StrEnum):
    """Carried along with a game snapshot. The move validator never reads it."""

    ONGOING = "Ongoing"
    CHECKMATE = "Checkmate"
    STALEMATE = "Stalemate"
    DRAW = "Draw"


class Direction(StrEnum):
    """Straight lines a sliding piece can travel along"""

    HORIZONTAL = "Horizontal"  # same rank
    VERTICAL = "Vertical"  # same file
    DIAGONAL = "Diagonal"
