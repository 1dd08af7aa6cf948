"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Any, Callable

import pytest

from ohmychess.chess.board import Board
from ohmychess.chess.game_state import ADDRESS_LENGTH, GameState, PlayersAddresses
from ohmychess.chess.pieces import Cell
from ohmychess.chess.square import Square
from ohmychess.core.shared_types import GameStatus, PieceType, Player

WHITE_ADDRESS = [1] * ADDRESS_LENGTH
BLACK_ADDRESS = [2] * ADDRESS_LENGTH


@pytest.fixture
def board_with() -> Callable[..., Board]:
    """Call the inner function with (piece type, player, algebraic square) triplets to create a board holding only those pieces"""

    def _create_board(*pieces: tuple[PieceType, Player, str]) -> Board:
        return Board.from_cells(
            {
                Square.from_algebraic(square_name): Cell(piece_type, player)
                for piece_type, player, square_name in pieces
            }
        )

    return _create_board


@pytest.fixture
def game_state_document() -> Callable[..., dict[str, Any]]:
    """Raw JSON-like game session document, as the document database would return it. Pieces given as {(file, rank): (piece, player)}"""

    def _create_document(
        pieces: dict[tuple[int, int], tuple[str, str]] | None = None,
        turn: str = "White",
        status: str = "Ongoing",
    ) -> dict[str, Any]:
        board: list[list[dict[str, str] | None]] = [[None] * 8 for _ in range(8)]
        for (file, rank), (piece, player) in (pieces or {}).items():
            board[file][rank] = {"piece": piece, "player": player}
        return {
            "board": board,
            "turn": turn,
            "players": {"white": list(WHITE_ADDRESS), "black": list(BLACK_ADDRESS)},
            "status": status,
        }

    return _create_document


@pytest.fixture
def make_game_state() -> Callable[[Board], GameState]:
    def _create_state(board: Board) -> GameState:
        return GameState(
            board=board,
            turn=Player.WHITE,
            players=PlayersAddresses(
                white=bytes(WHITE_ADDRESS), black=bytes(BLACK_ADDRESS)
            ),
            status=GameStatus.ONGOING,
        )

    return _create_state
