"""
The board: an immutable 8x8 grid of optional cells.

All reads go through `Board.cell()`, which is the one place where squares are range-checked before indexing.
"""

from dataclasses import dataclass
from typing import Iterator, Mapping, Optional, Sequence, Self

from ohmychess.chess.pieces import FEN_TO_PIECE, Cell
from ohmychess.chess.square import Square
from ohmychess.core.config import BOARD_DIMENSIONS
from ohmychess.core.exceptions import (
    InvalidBoardError,
    InvalidFENError,
    SquareOutOfBoundsError,
)

# grid[file][rank]
Grid = tuple[tuple[Optional[Cell], ...], ...]


def _empty_grid() -> list[list[Optional[Cell]]]:
    return [[None] * BOARD_DIMENSIONS[1] for _ in range(BOARD_DIMENSIONS[0])]


def _freeze(grid: list[list[Optional[Cell]]]) -> Grid:
    return tuple(tuple(column) for column in grid)


@dataclass(frozen=True)
class Board:
    grid: Grid

    @classmethod
    def empty(cls) -> Self:
        return cls(_freeze(_empty_grid()))

    @classmethod
    def from_cells(cls, cells: Mapping[Square, Cell]) -> Self:
        """Convenience constructor: only list the occupied squares"""
        grid = _empty_grid()
        for square, cell in cells.items():
            if not square.is_within_bounds():
                raise SquareOutOfBoundsError(
                    f"Cannot place {cell} on {square}: outside of the board."
                )
            grid[square.file][square.rank] = cell
        return cls(_freeze(grid))

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[Optional[Cell]]]) -> Self:
        """Build from a nested sequence indexed as grid[file][rank] (the layout of the stored document)."""
        if len(grid) != BOARD_DIMENSIONS[0] or any(
            len(column) != BOARD_DIMENSIONS[1] for column in grid
        ):
            raise InvalidBoardError(
                f"Board must be {BOARD_DIMENSIONS[0]}x{BOARD_DIMENSIONS[1]}, got {len(grid)} columns with lengths {[len(c) for c in grid]}"
            )
        return cls(tuple(tuple(column) for column in grid))

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank (rank index 7), read from the a-file to the h-file
        * ranks 6 through 3 have 8 consecutive empty squares
        * the white pieces (capital letters) are on the 2nd and 1st rank
        """
        fen_by_ranks = fen_str.split("/")
        if len(fen_by_ranks) != BOARD_DIMENSIONS[1]:
            raise InvalidFENError(f"Cannot interpret supplied string as FEN: {fen_str}")

        grid = _empty_grid()
        for rank_idx, fen_one_rank in enumerate(fen_by_ranks):
            # FEN string is read from top rank (8th) to bottom rank (1st)
            rank = BOARD_DIMENSIONS[1] - 1 - rank_idx
            file = 0
            for character in fen_one_rank:
                if character.isdigit():
                    # A number denotes the amount of empty squares after each other
                    file += int(character)
                    continue
                if character.lower() not in FEN_TO_PIECE or file >= BOARD_DIMENSIONS[0]:
                    raise InvalidFENError(
                        f"Cannot interpret supplied string as FEN: {fen_str}"
                    )
                grid[file][rank] = Cell.from_fen(character)
                file += 1

            if file != BOARD_DIMENSIONS[0]:
                raise InvalidFENError(
                    f"Rank {rank + 1} does not cover exactly {BOARD_DIMENSIONS[0]} files: {fen_one_rank!r}"
                )
        return cls(_freeze(grid))

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(
            self._rank_to_fen(rank) for rank in range(BOARD_DIMENSIONS[1] - 1, -1, -1)
        )

    def _rank_to_fen(self, rank: int) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for file in range(BOARD_DIMENSIONS[0]):
            cell = self.grid[file][rank]
            if cell is None:
                empty_count += 1
                continue
            if empty_count > 0:
                fen_characters.append(str(empty_count))
                empty_count = 0
            fen_characters.append(cell.to_fen())

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def cell(self, square: Square) -> Optional[Cell]:
        if not square.is_within_bounds():
            raise SquareOutOfBoundsError(f"{square} is outside of the board.")
        return self.grid[square.file][square.rank]

    def is_occupied(self, square: Square) -> bool:
        return self.cell(square) is not None

    def is_empty(self, square: Square) -> bool:
        return self.cell(square) is None

    def occupied_squares(self) -> Iterator[tuple[Square, Cell]]:
        for file, column in enumerate(self.grid):
            for rank, cell in enumerate(column):
                if cell is not None:
                    yield Square(file, rank), cell

    def place(self, square: Square, cell: Optional[Cell]) -> Self:
        """Return a copy of the board with the square (re)assigned. The board itself never changes."""
        if not square.is_within_bounds():
            raise SquareOutOfBoundsError(f"{square} is outside of the board.")
        grid = [list(column) for column in self.grid]
        grid[square.file][square.rank] = cell
        return type(self)(_freeze(grid))

    def remove(self, square: Square) -> Self:
        return self.place(square, None)
