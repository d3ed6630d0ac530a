"""
The verdict of a move evaluation.

An illegal move is a perfectly normal answer to "may this piece go there?", so it is modelled as a value and never raised.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional, Self

from src.chess.coordinates import Coordinate
from src.core.shared_types import PieceType


class Outcome(StrEnum):
    # legal
    SIMPLE = "simple"
    CAPTURE = "capture"
    # illegal
    NO_PIECE_AT_START = "no piece at start"
    FRIENDLY_OCCUPANT = "friendly occupant"
    INVALID_DESTINATION = "invalid destination"
    BLOCKED = "blocked"


LEGAL_OUTCOMES: frozenset[Outcome] = frozenset({Outcome.SIMPLE, Outcome.CAPTURE})


@dataclass(frozen=True)
class MoveResult:
    """
    Tagged result:
    * Legal(Simple), Legal(Capture(piece_type))
    * Illegal(NoPieceAtStart), Illegal(FriendlyOccupant), Illegal(InvalidDestination), Illegal(Blocked(piece_type))

    `piece_type` is filled in for captures (the piece taken) and blocks (the piece in the way).
    For blocks, `square` holds the square of the first piece in the way.
    """

    outcome: Outcome
    piece_type: Optional[PieceType] = None
    square: Optional[Coordinate] = None

    @classmethod
    def simple(cls) -> Self:
        return cls(Outcome.SIMPLE)

    @classmethod
    def capture(cls, captured: PieceType) -> Self:
        return cls(Outcome.CAPTURE, captured)

    @classmethod
    def no_piece_at_start(cls) -> Self:
        return cls(Outcome.NO_PIECE_AT_START)

    @classmethod
    def friendly_occupant(cls) -> Self:
        return cls(Outcome.FRIENDLY_OCCUPANT)

    @classmethod
    def invalid_destination(cls) -> Self:
        return cls(Outcome.INVALID_DESTINATION)

    @classmethod
    def blocked(cls, blocker: PieceType, square: Coordinate) -> Self:
        return cls(Outcome.BLOCKED, blocker, square)

    @property
    def is_legal(self) -> bool:
        return self.outcome in LEGAL_OUTCOMES

    def __bool__(self) -> bool:
        """`if board.try_move(...)` reads as "if the move is legal\" """
        return self.is_legal

    def describe(self) -> str:
        """Human readable line, used by the Board's diagnostic channel"""
        match self.outcome:
            case Outcome.SIMPLE:
                return "Legal move."
            case Outcome.CAPTURE:
                return f"Take the {self.piece_type}!"
            case Outcome.NO_PIECE_AT_START:
                return "No piece on starting square."
            case Outcome.FRIENDLY_OCCUPANT:
                return "One of your pieces is in the destination square."
            case Outcome.INVALID_DESTINATION:
                return "Destination square is not allowed."
            case _:  # BLOCKED
                return f"A {self.piece_type} is in the way (on {self.square})!"
