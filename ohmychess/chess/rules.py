"""
Move validation: per-piece movement rules

Key idea: strategy pattern. Each piece type maps to a rule function, `validate()` does the checks common to every
piece and then dispatches.

Not covered: check, castling, en passant, promotion, pawn double steps.
"""

import logging
from typing import Callable

from ohmychess.chess.board import Board
from ohmychess.chess.moves import Move, is_path_clear
from ohmychess.core.shared_types import Direction, PieceType, Player

logger = logging.getLogger(__name__)


def _forward(player: Player) -> int:
    # White moves UP the board, Black moves DOWN
    return 1 if player == Player.WHITE else -1


def _can_land_on(board: Board, move: Move, mover: Player) -> bool:
    """Empty, or holding an opponent's piece that can be captured"""
    target = board.cell(move.to_square)
    return target is None or target.player != mover


# --- MOVEMENT RULES ---
def pawn_rule(board: Board, move: Move, mover: Player) -> bool:
    """
    A pawn:
    - moves a single square forward onto an empty square
    - takes diagonally (one file to either side, one square forward), only when an opponent's piece stands there
    """
    df, dr = move.delta
    if dr != _forward(mover):
        return False

    target = board.cell(move.to_square)
    if df == 0:
        return target is None
    if abs(df) == 1:
        return target is not None and target.player != mover
    return False


def knight_rule(board: Board, move: Move, mover: Player) -> bool:
    """Knights jump in an L: |delta_file|, |delta_rank| is (1, 2) or (2, 1)"""
    df, dr = move.delta
    if {abs(df), abs(dr)} != {1, 2}:
        return False
    return _can_land_on(board, move, mover)


def bishop_rule(board: Board, move: Move, mover: Player) -> bool:
    """Bishops move diagonally: |delta_rank| = |delta_file|"""
    df, dr = move.delta
    if abs(df) != abs(dr):
        return False
    return is_path_clear(board, move, Direction.DIAGONAL)


def rook_rule(board: Board, move: Move, mover: Player) -> bool:
    """Rooks move either horizontally (along the rank) or vertically (along the file)"""
    df, dr = move.delta
    if dr == 0:
        return is_path_clear(board, move, Direction.HORIZONTAL)
    if df == 0:
        return is_path_clear(board, move, Direction.VERTICAL)
    return False


def queen_rule(board: Board, move: Move, mover: Player) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    df, dr = move.delta
    if dr == 0:
        return is_path_clear(board, move, Direction.HORIZONTAL)
    if df == 0:
        return is_path_clear(board, move, Direction.VERTICAL)
    if abs(df) == abs(dr):
        return is_path_clear(board, move, Direction.DIAGONAL)
    return False


def king_rule(board: Board, move: Move, mover: Player) -> bool:
    """The king can move by a single square at the time, in any direction."""
    df, dr = move.delta
    return abs(df) <= 1 and abs(dr) <= 1


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MoveRuleFn = Callable[[Board, Move, Player], bool]
MOVEMENT_RULES: dict[PieceType, MoveRuleFn] = {
    PieceType.PAWN: pawn_rule,
    PieceType.KNIGHT: knight_rule,
    PieceType.BISHOP: bishop_rule,
    PieceType.ROOK: rook_rule,
    PieceType.QUEEN: queen_rule,
    PieceType.KING: king_rule,
}


def validate(board: Board, move: Move, mover: Player) -> bool:
    """
    Is the move legal for the given player?
    ----

    1. Both squares must lie on the board (checked before the board is ever read)
    2. There must be a piece on the starting square
    3. ... and it must belong to the mover
    4. The rule for that piece type decides the rest

    ---
    Any violation gives False. The reason is only logged, never returned or raised.
    """
    if not move.is_within_bounds():
        logger.debug("Rejected %s: square outside of the board", move)
        return False

    moving = board.cell(move.from_square)
    if moving is None:
        logger.debug("Rejected %s: no piece on the starting square", move)
        return False

    if moving.player != mover:
        logger.debug(
            "Rejected %s: %s piece cannot be moved by %s", move, moving.player, mover
        )
        return False

    movement_rule = MOVEMENT_RULES[moving.piece]
    is_legal = movement_rule(board, move, mover)
    if not is_legal:
        logger.debug("Rejected %s: not a legal %s move", move, moving.piece.lower())
    return is_legal
