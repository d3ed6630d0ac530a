"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.chess.coordinates import Coordinate
from src.core.exceptions import CoordinateError, InvalidRequestError
from src.core.shared_types import Color, PieceType

SquareName = str


def _validate_square_name(value: str) -> str:
    """Square names must be in algebraic notation and lie on the board ('a1' - 'h8')"""
    try:
        return Coordinate.from_algebraic(value.strip().lower()).to_algebraic()
    except CoordinateError as exc:
        raise InvalidRequestError(
            f"Cannot interpret {value!r} as a valid square name."
        ) from exc


# --- REQUEST MODELS ---
class PlacePieceRequest(BaseModel):
    piece_type: PieceType
    color: Color
    square: SquareName

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square_name(value)


class MoveRequest(BaseModel):
    from_square: SquareName
    to_square: SquareName

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square_name(value)


# --- RESPONSE MODELS ---
class MoveResponse(BaseModel):
    from_square: SquareName
    to_square: SquareName
    legal: bool
    outcome: str
    piece_type: Optional[PieceType] = None
    blocking_square: Optional[SquareName] = None
    message: str
