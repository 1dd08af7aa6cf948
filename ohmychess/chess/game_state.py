"""
Snapshot of a game session, as handed to the core by whoever fetched it.

The validator only ever looks at the board. Turn, players and status are carried along untouched.
"""

from dataclasses import dataclass

from ohmychess.chess.board import Board
from ohmychess.chess.moves import Move
from ohmychess.chess.rules import validate
from ohmychess.core.shared_types import GameStatus, Player

# Account identifiers are 32 raw bytes
ADDRESS_LENGTH = 32


@dataclass(frozen=True)
class PlayersAddresses:
    white: bytes
    black: bytes


@dataclass(frozen=True)
class GameState:
    board: Board
    turn: Player
    players: PlayersAddresses
    status: GameStatus

    def is_legal(self, move: Move, mover: Player) -> bool:
        """
        Validate a move against this snapshot's board.

        NOTE: `mover` is taken as given. Whether it matches `turn` is the caller's business.
        """
        return validate(self.board, move, mover)
