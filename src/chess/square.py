"""
A single square (cell) on the board

(placed in its own module as multiple other modules need to import it)
"""

from dataclasses import dataclass
from typing import Optional

from src.chess.coordinates import Coordinate
from src.chess.pieces import Piece
from src.core.shared_types import SquareShade


def shade_of(coordinate: Coordinate) -> SquareShade:
    """a1 is dark, and shades alternate along both files and ranks"""
    return (
        SquareShade.DARK
        if (coordinate.file + coordinate.rank) % 2 == 0
        else SquareShade.LIGHT
    )


@dataclass
class Square:
    """Position and shade are fixed for the lifetime of the board, only the occupant changes"""

    _coordinate: Coordinate
    piece: Optional[Piece] = None

    @property
    def coordinate(self) -> Coordinate:
        return self._coordinate

    @property
    def shade(self) -> SquareShade:
        return shade_of(self._coordinate)

    @property
    def file(self) -> int:
        return self.coordinate.file

    @property
    def rank(self) -> int:
        return self.coordinate.rank

    def is_occupied(self) -> bool:
        return self.piece is not None

    def set_piece(self, piece: Optional[Piece]) -> None:
        self.piece = piece

    def clear(self) -> Optional[Piece]:
        """Empty the square and hand back whatever stood on it"""
        piece, self.piece = self.piece, None
        return piece
