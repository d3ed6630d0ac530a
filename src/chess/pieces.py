"""Defines the chess pieces. Where a piece stands is tracked by the Board (a piece does not know its own location)."""

from dataclasses import dataclass
from typing import Optional, Self

from src.chess.coordinates import Coordinate
from src.chess.paths import PATH_RULES
from src.core.exceptions import InvalidFENError
from src.core.shared_types import Color, PieceType

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
class Piece:
    type: PieceType
    color: Color

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        if character.lower() not in FEN_TO_PIECE:
            raise InvalidFENError(f"{character!r} does not denote a chess piece.")
        color = Color.WHITE if character.isupper() else Color.BLACK
        piece_type = FEN_TO_PIECE[character.lower()]
        return cls(piece_type, color)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.type].upper()
            if self.color == Color.WHITE
            else PIECE_TO_FEN[self.type].lower()
        )

    def path_to(self, start: Coordinate, end: Coordinate) -> Optional[list[Coordinate]]:
        """Squares this piece has to cross to get from start to end, or None if it cannot get there at all."""
        return PATH_RULES[self.type](start, end)

    def __str__(self) -> str:
        return f"{self.color} {self.type}"


# Convenience constructors, so setting up a board reads like the chess diagram it describes
def pawn(color: Color) -> Piece:
    return Piece(PieceType.PAWN, color)


def bishop(color: Color) -> Piece:
    return Piece(PieceType.BISHOP, color)


def rook(color: Color) -> Piece:
    return Piece(PieceType.ROOK, color)
