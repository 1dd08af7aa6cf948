"""Contents of a single square: which piece stands there and who owns it"""

from dataclasses import dataclass
from typing import Self

from ohmychess.core.shared_types import PieceType, Player

FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}


@dataclass(frozen=True)
class Cell:
    """
    An occupied square. Exactly one piece owned by exactly one player.

    Empty squares are represented by None on the Board, not by a special Cell.
    """

    piece: PieceType
    player: Player

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        player = Player.WHITE if character.isupper() else Player.BLACK
        piece = FEN_TO_PIECE[character.lower()]
        return cls(piece, player)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.piece].upper()
            if self.player == Player.WHITE
            else PIECE_TO_FEN[self.piece].lower()
        )

    def belongs_to(self, player: Player) -> bool:
        return self.player == player
