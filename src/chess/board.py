"""The board owns all squares (and thereby all pieces) and decides whether a move is legal"""

import logging
from typing import Optional, Protocol, Self

from src.chess.coordinates import (
    BOARD_DIMENSIONS,
    DIGITS,
    Coordinate,
    SquareRef,
    to_coordinate,
)
from src.chess.pieces import Piece
from src.chess.results import MoveResult
from src.chess.square import Square
from src.core.exceptions import InvalidFENError
from src.core.shared_types import Color

logger = logging.getLogger(__name__)


class Narrator(Protocol):
    """Diagnostic channel: receives one human readable line per move decision"""

    def __call__(self, message: str) -> None: ...


class Board:
    """
    8x8 grid of squares.

    Internally the grid is a list of files, each a list of squares, indexed from zero:
    `self._grid[file - 1][rank - 1]`. Letters (a-h) are translated at the boundary only.
    """

    def __init__(self, verbose: bool = False, narrator: Optional[Narrator] = None) -> None:
        self.verbose = verbose
        self._narrator: Narrator = narrator if narrator is not None else logger.info
        self._grid: list[list[Square]] = [
            [Square(Coordinate(file, rank)) for rank in range(1, BOARD_DIMENSIONS[1] + 1)]
            for file in range(1, BOARD_DIMENSIONS[0] + 1)
        ]

    @classmethod
    def new(cls, verbose: bool = False, narrator: Optional[Narrator] = None) -> Self:
        """Empty board: all 64 squares, no pieces"""
        return cls(verbose=verbose, narrator=narrator)

    @classmethod
    def from_fen(
        cls, fen_str: str, verbose: bool = False, narrator: Optional[Narrator] = None
    ) -> Self:
        """Set up a board from the piece placement part of a FEN string.

        ex. the reference position used throughout the tests:
        8/8/4rp2/8/1P2P3/2B5/8/8
        means:
        * ranks are listed from the 8th down to the 1st, separated by slashes
        * within a rank, the first character is the a-file
        * a letter is a piece (capital letters for white), a digit that many empty squares
        """
        board = cls(verbose=verbose, narrator=narrator)
        fen_by_ranks = fen_str.split("/")
        if len(fen_by_ranks) != BOARD_DIMENSIONS[1]:
            raise InvalidFENError(
                f"Expected {BOARD_DIMENSIONS[1]} ranks in {fen_str!r}, got {len(fen_by_ranks)}."
            )
        for rank_idx, fen_one_rank in enumerate(fen_by_ranks):
            rank = BOARD_DIMENSIONS[1] - rank_idx
            file = 1
            for character in fen_one_rank:
                if character in DIGITS:
                    file += int(character)
                    continue
                if file > BOARD_DIMENSIONS[0]:
                    raise InvalidFENError(f"Rank {rank} in {fen_str!r} runs off the board.")
                board._square(Coordinate(file, rank)).set_piece(Piece.from_fen(character))
                file += 1
            if file != BOARD_DIMENSIONS[0] + 1:
                raise InvalidFENError(f"Rank {rank} in {fen_str!r} does not describe 8 squares.")
        return board

    # -- SQUARES AND PIECES ---
    def _square(self, coordinate: Coordinate) -> Square:
        """No validation: only to be called with coordinates known to be on the board"""
        return self._grid[coordinate.file - 1][coordinate.rank - 1]

    def get_square(self, ref: SquareRef) -> Square:
        """Accepts Coordinate(3, 3), ('c', 3) or 'c3'. Raises if the square is not on the board."""
        return self._square(to_coordinate(ref))

    def squares(self) -> list[Square]:
        return [square for file in self._grid for square in file]

    def piece_at(self, ref: SquareRef) -> Optional[Piece]:
        return self.get_square(ref).piece

    def place_piece(self, piece: Piece, file: str, rank: int) -> None:
        """Setup, not a move: whatever stood on the square is simply replaced."""
        self.get_square((file, rank)).set_piece(piece)

    def remove_piece(self, ref: SquareRef) -> Optional[Piece]:
        return self.get_square(ref).clear()

    def occupied_squares(self, color: Optional[Color] = None) -> list[Square]:
        return [
            square
            for square in self.squares()
            if square.piece is not None and (color is None or square.piece.color == color)
        ]

    def path_between(self, start: SquareRef, end: SquareRef) -> Optional[list[Coordinate]]:
        """Squares the piece on `start` would cross on its way to `end` (None: no piece, or it cannot go there)"""
        start_coordinate, end_coordinate = to_coordinate(start), to_coordinate(end)
        piece = self._square(start_coordinate).piece
        if piece is None:
            return None
        return piece.path_to(start_coordinate, end_coordinate)

    # -- MOVE ENGINE ---
    def try_move(self, start: SquareRef, end: SquareRef) -> MoveResult:
        """
        Decide whether the piece on `start` may move to `end`. Read-only: the board is not changed.

        Order of the checks:
        1. is there a piece to move at all?
        2. is the destination taken by a piece of the same color? (before looking at the geometry)
        3. can this kind of piece reach the destination?
        4. is any square along the way occupied? (friend or foe: nobody jumps, the first one found is reported)
        5. legal: a capture if an (enemy) piece stands on the destination, a simple move otherwise
        """
        start_coordinate, end_coordinate = to_coordinate(start), to_coordinate(end)
        result = self._evaluate(start_coordinate, end_coordinate)
        self._report(start_coordinate, end_coordinate, result)
        return result

    def make_move(self, start: SquareRef, end: SquareRef) -> MoveResult:
        """Evaluate the move and, only when legal, carry it out (a captured piece leaves the board)."""
        result = self.try_move(start, end)
        if result.is_legal:
            start_square, end_square = self.get_square(start), self.get_square(end)
            end_square.set_piece(start_square.clear())
        return result

    def _evaluate(self, start: Coordinate, end: Coordinate) -> MoveResult:
        moving_piece = self._square(start).piece
        if moving_piece is None:
            return MoveResult.no_piece_at_start()

        target_piece = self._square(end).piece
        if target_piece is not None and target_piece.color == moving_piece.color:
            return MoveResult.friendly_occupant()

        path = moving_piece.path_to(start, end)
        if path is None:
            return MoveResult.invalid_destination()

        for coordinate in path:
            blocker = self._square(coordinate).piece
            if blocker is not None:
                return MoveResult.blocked(blocker.type, coordinate)

        if target_piece is not None:
            return MoveResult.capture(target_piece.type)
        return MoveResult.simple()

    def _report(self, start: Coordinate, end: Coordinate, result: MoveResult) -> None:
        """Diagnostics never influence the verdict"""
        logger.debug("%s -> %s: %s", start, end, result.outcome)
        if self.verbose:
            self._narrator(result.describe())
