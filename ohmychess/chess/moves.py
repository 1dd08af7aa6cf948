"""
Moves and straight-line geometry

A Move is only a proposed relocation (from -> to). Whether it is legal is decided by the rules in `ohmychess.chess.rules`;
this module holds what the sliding-piece rules share: classifying the line a move travels along and checking that
nothing stands in the way.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Self

from ohmychess.chess.pieces import Cell
from ohmychess.chess.square import Square
from ohmychess.core.shared_types import Direction

logger = logging.getLogger(__name__)

Vector = tuple[int, int]
Coordinates = tuple[int, int]


class Board(Protocol):
    """Just the part of the board the path check needs"""

    def cell(self, square: Square) -> Optional[Cell]: ...


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    @classmethod
    def from_uci(cls, uci: str) -> Self:
        """
        Universal Chess Interface: <from_square><to_square>

        examples:
        * "e2e3": move the piece on e2 to e3
        * "a1a8": move the piece on a1 all the way up the a-file
        """
        return cls(Square.from_algebraic(uci[:2]), Square.from_algebraic(uci[2:4]))

    def to_uci(self) -> str:
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}"

    @classmethod
    def from_coordinates(cls, from_coords: Coordinates, to_coords: Coordinates) -> Self:
        """The stored move shape: two (file, rank) pairs"""
        return cls(Square(*from_coords), Square(*to_coords))

    @property
    def delta(self) -> Vector:
        """(delta_file, delta_rank), signed"""
        return (
            self.to_square.file - self.from_square.file,
            self.to_square.rank - self.from_square.rank,
        )

    def is_within_bounds(self) -> bool:
        return self.from_square.is_within_bounds() and self.to_square.is_within_bounds()

    def __str__(self) -> str:
        if self.is_within_bounds():
            return self.to_uci()
        return f"({self.from_square.file},{self.from_square.rank})->({self.to_square.file},{self.to_square.rank})"


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def follows_direction(move: Move, direction: Direction) -> bool:
    """Does the geometry of the move agree with the declared direction?"""
    df, dr = move.delta
    match direction:
        case Direction.HORIZONTAL:
            return dr == 0
        case Direction.VERTICAL:
            return df == 0
        case Direction.DIAGONAL:
            return abs(df) == abs(dr)
    return False


def classify_direction(move: Move) -> Optional[Direction]:
    """
    Which straight line does the move travel along (None for anything else, ex. a knight jump).

    NOTE: a zero-length move satisfies every direction; it is reported as horizontal.
    """
    for direction in (Direction.HORIZONTAL, Direction.VERTICAL, Direction.DIAGONAL):
        if follows_direction(move, direction):
            return direction
    return None


def squares_between(move: Move, direction: Direction) -> list[Square]:
    """
    Walk from the starting square towards the target square in unit steps.
    Both endpoints are excluded.
    """
    if not follows_direction(move, direction):
        raise ValueError(
            f"squares_between requires the move to be {direction.value.lower()}. \n move: {move}"
        )

    df, dr = move.delta
    step: Vector = (_sign(df), _sign(dr))
    squares_found: list[Square] = []
    square = move.from_square
    while square != move.to_square:
        square = square.offset(*step)
        if square == move.to_square:
            break
        squares_found.append(square)
    return squares_found


def is_path_clear(board: Board, move: Move, direction: Direction) -> bool:
    """
    Path-clearance check
    -----

    True if no piece stands strictly between the two squares of the move along the declared direction.

    ---
    * The destination square is NOT looked at. Capturing vs. landing on your own piece is up to the piece rules.
    * A direction that does not match the geometry of the move gives False.
    """
    if not move.is_within_bounds():
        logger.debug("Path check on %s: square outside of the board", move)
        return False

    if not follows_direction(move, direction):
        logger.debug("Path check on %s: move is not %s", move, direction.value.lower())
        return False

    for square in squares_between(move, direction):
        if board.cell(square) is not None:
            logger.debug("Path check on %s: blocked at %s", move, square.to_algebraic())
            return False
    return True
