"""
Document and request/response models

The game-session document is stored as JSON:
{"document": {"board": [[cell | null] * 8] * 8, "turn": ..., "players": {"white": [32 bytes], "black": [...]}, "status": ...}}
with board[file][rank] and cell = {"piece": "Pawn", "player": "White"}.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ohmychess.chess.board import Board
from ohmychess.chess.game_state import ADDRESS_LENGTH, GameState, PlayersAddresses
from ohmychess.chess.moves import Move
from ohmychess.chess.pieces import Cell
from ohmychess.chess.square import Square
from ohmychess.core.config import BOARD_DIMENSIONS
from ohmychess.core.exceptions import InvalidDocumentError, NoDocumentFoundError
from ohmychess.core.shared_types import GameStatus, PieceType, Player

Coordinates = tuple[int, int]


# --- DOCUMENT MODELS ---
class CellModel(BaseModel):
    piece: PieceType
    player: Player

    def to_domain(self) -> Cell:
        return Cell(self.piece, self.player)


class PlayersAddressesModel(BaseModel):
    white: list[int]
    black: list[int]

    @field_validator(*["white", "black"])
    @classmethod
    def validate_address(cls, value: list[int]) -> list[int]:
        if len(value) != ADDRESS_LENGTH:
            raise InvalidDocumentError(
                f"Player address must be {ADDRESS_LENGTH} bytes long, got {len(value)}."
            )
        if any(not 0 <= byte <= 255 for byte in value):
            raise InvalidDocumentError(f"Player address contains non-byte values: {value}")
        return value

    def to_domain(self) -> PlayersAddresses:
        return PlayersAddresses(white=bytes(self.white), black=bytes(self.black))


class GameStateDocument(BaseModel):
    board: list[list[Optional[CellModel]]]
    turn: Player
    players: PlayersAddressesModel
    status: GameStatus

    @field_validator("board")
    @classmethod
    def validate_board_shape(
        cls, value: list[list[Optional[CellModel]]]
    ) -> list[list[Optional[CellModel]]]:
        files, ranks = BOARD_DIMENSIONS
        if len(value) != files or any(len(column) != ranks for column in value):
            raise InvalidDocumentError(
                f"Board must be a {files}x{ranks} grid, got {len(value)} columns with lengths {[len(c) for c in value]}."
            )
        return value

    def to_domain(self) -> GameState:
        board = Board.from_grid(
            [
                [cell.to_domain() if cell is not None else None for cell in column]
                for column in self.board
            ]
        )
        return GameState(
            board=board,
            turn=self.turn,
            players=self.players.to_domain(),
            status=self.status,
        )


class DocumentEnvelope(BaseModel):
    """Response of a find-one lookup: `document` is null when no session matched."""

    document: Optional[GameStateDocument] = None

    def game_state(self) -> GameState:
        if self.document is None:
            raise NoDocumentFoundError("No game session found in the document.")
        return self.document.to_domain()


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    """
    Coordinates are plain integers on purpose: anything outside of the board is rejected by the validator
    (as an illegal move), not by the request model.
    """

    model_config = ConfigDict(populate_by_name=True)

    from_square: Coordinates = Field(alias="from")
    to_square: Coordinates = Field(alias="to")
    player: Player

    def to_move(self) -> Move:
        return Move(Square(*self.from_square), Square(*self.to_square))


# --- RESPONSE MODELS ---
class MoveVerdict(BaseModel):
    move: str
    player: Player
    legal: bool
