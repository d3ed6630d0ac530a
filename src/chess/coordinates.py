"""
Coordinate system of the board

Files are the columns (letters a-h), ranks the rows (numbers 1-8). Internally everything is numeric:
'a1' - 'h8' get converted to (1,1) - (8,8). Letters only appear at the boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase

from src.core.exceptions import InvalidCoordinateError, OutOfRangeError

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)

FILE_LETTERS: str = ascii_lowercase[: BOARD_DIMENSIONS[0]]

# ASCII digits only: int() refuses other unicode digits such as "²"
DIGITS = "0123456789"


def file_to_column(letter: str) -> int:
    """'a' -> 1, ..., 'h' -> 8"""
    if (
        not isinstance(letter, str)
        or len(letter) != 1
        or letter.lower() not in ascii_lowercase
    ):
        raise InvalidCoordinateError(f"File must be a single letter, got {letter!r}.")
    column = ascii_lowercase.index(letter.lower()) + 1
    if column > BOARD_DIMENSIONS[0]:
        raise OutOfRangeError(
            f"File {letter!r} is off the board, pick one of {', '.join(FILE_LETTERS)}."
        )
    return column


def column_to_file(column: int) -> str:
    """1 -> 'a', ..., 8 -> 'h'"""
    if not 1 <= column <= BOARD_DIMENSIONS[0]:
        raise OutOfRangeError(f"Column {column} is off the board.")
    return FILE_LETTERS[column - 1]


@dataclass(frozen=True)
class Coordinate:
    file: int
    rank: int

    @classmethod
    def from_file_and_rank(cls, letter: str, rank: int) -> Coordinate:
        """The (letter, number) pair, as in ('c', 3)"""
        file = file_to_column(letter)
        if isinstance(rank, bool) or not isinstance(rank, int):
            raise InvalidCoordinateError(f"Rank must be an integer, got {rank!r}.")
        coordinate = cls(file, rank)
        coordinate.validate()
        return coordinate

    @classmethod
    def from_algebraic(cls, sq: str) -> Coordinate:
        """Algebraic notation: 'c3' is the same as ('c', 3)"""
        if len(sq) != 2 or sq[1] not in DIGITS:
            raise InvalidCoordinateError(f"Cannot interpret {sq!r} as a square name.")
        return cls.from_file_and_rank(sq[0], int(sq[1]))

    def to_algebraic(self) -> str:
        return f"{column_to_file(self.file)}{self.rank}"

    def is_within_bounds(self) -> bool:
        return (1 <= self.file <= BOARD_DIMENSIONS[0]) and (
            1 <= self.rank <= BOARD_DIMENSIONS[1]
        )

    def validate(self) -> None:
        if not self.is_within_bounds():
            raise OutOfRangeError(
                f"({self.file}, {self.rank}) lies outside the {BOARD_DIMENSIONS[0]}x{BOARD_DIMENSIONS[1]} board."
            )

    def __str__(self) -> str:
        return self.to_algebraic() if self.is_within_bounds() else repr(self)


# Anything a caller may use to point at a square
SquareRef = Coordinate | tuple[str, int] | str


def to_coordinate(ref: SquareRef) -> Coordinate:
    """Normalise the different ways of naming a square into a validated Coordinate."""
    if isinstance(ref, Coordinate):
        ref.validate()
        return ref
    if isinstance(ref, str):
        return Coordinate.from_algebraic(ref)
    if isinstance(ref, tuple) and len(ref) == 2:
        letter, rank = ref
        return Coordinate.from_file_and_rank(letter, rank)
    raise InvalidCoordinateError(f"Cannot interpret {ref!r} as a square.")
