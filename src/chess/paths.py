"""
Geometry of the movement rules

Key idea: Use strategy pattern to define, per piece type, which squares a piece has to cross to reach a destination.
A path rule knows nothing about the board: whether the path is free (or the destination is taken) is checked later by the Board.

Contract of every path rule:
* returns None if the destination cannot be reached under the piece's movement rule (standing still included)
* otherwise returns the squares strictly in between, in the order the piece travels over them.
  Start and end are never part of the path, so an adjacent destination gives an empty list.
"""

from typing import Callable, Optional

from src.chess.coordinates import Coordinate
from src.core.shared_types import PieceType

Vector = tuple[int, int]
Path = list[Coordinate]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def walk(start: Coordinate, end: Coordinate, direction: Vector) -> Path:
    """
    Step from start towards end along the given direction, collecting every square before end is reached.

    NOTE: Caller must make sure end actually lies on the ray, otherwise this never terminates.
    """
    df, dr = direction
    squares_found: Path = []
    file, rank = start.file + df, start.rank + dr
    while (file, rank) != (end.file, end.rank):
        squares_found.append(Coordinate(file, rank))
        file += df
        rank += dr
    return squares_found


def bishop_path(start: Coordinate, end: Coordinate) -> Optional[Path]:
    """Bishops move diagonally: |delta_file| = |delta_rank| (and at least one square)"""
    delta_file = end.file - start.file
    delta_rank = end.rank - start.rank
    if delta_file == 0 or abs(delta_file) != abs(delta_rank):
        return None

    # one of: up-right (1, 1), up-left (-1, 1), down-right (1, -1), down-left (-1, -1)
    direction: Vector = (_sign(delta_file), _sign(delta_rank))
    return walk(start, end, direction)


def rook_path(start: Coordinate, end: Coordinate) -> Optional[Path]:
    """Rooks move either horizontally or vertically: exactly one of file and rank changes"""
    delta_file = end.file - start.file
    delta_rank = end.rank - start.rank
    stays_on_rank = delta_rank == 0 and delta_file != 0
    stays_on_file = delta_file == 0 and delta_rank != 0
    if not (stays_on_rank or stays_on_file):
        return None

    direction: Vector = (_sign(delta_file), _sign(delta_rank))
    return walk(start, end, direction)


def unimplemented_path(start: Coordinate, end: Coordinate) -> Optional[Path]:
    """
    Movement rules for pawns, knights, queens and kings are not modelled (yet).
    A piece that cannot move can never reach any destination.

    To add one: write a function following the contract at the top of this module and register it in PATH_RULES.
    """
    return None


# -- STRATEGY PATTERN: PATH RULES ---
PathFn = Callable[[Coordinate, Coordinate], Optional[Path]]
PATH_RULES: dict[PieceType, PathFn] = {
    PieceType.PAWN: unimplemented_path,
    PieceType.KNIGHT: unimplemented_path,
    PieceType.BISHOP: bishop_path,
    PieceType.ROOK: rook_path,
    PieceType.QUEEN: unimplemented_path,
    PieceType.KING: unimplemented_path,
}
