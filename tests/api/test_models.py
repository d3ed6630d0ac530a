"""Unit tests for /src/api/models.py"""

import pytest

from src.api.models import MoveRequest, PlacePieceRequest
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PieceType


# -- Validation - MoveRequest --
def test_valid_square_names() -> None:
    """Test that MoveRequest accepts correctly written squares in algebraic notation."""
    request = MoveRequest(from_square="c3", to_square="h8")
    assert request.from_square == "c3"
    assert request.to_square == "h8"


def test_square_names_are_normalised() -> None:
    request = MoveRequest(from_square=" C3", to_square="H8 ")
    assert (request.from_square, request.to_square) == ("c3", "h8")


@pytest.mark.parametrize(
    "invalid_square",
    [
        "e",  # too short
        "e22",  # too long
        "22",  # file must be a letter
        "ee",  # rank must be a number
        "i1",  # no i-file
        "a9",  # no 9th rank
        "a0",  # no 0th rank
        "a\u00b2",  # unicode digit, not an ascii one
    ],
)
def test_invalid_square_names(invalid_square: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(from_square=invalid_square, to_square="e4")

    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(from_square="e4", to_square=invalid_square)


# -- Validation - PlacePieceRequest --
def test_valid_place_piece_request() -> None:
    request = PlacePieceRequest(piece_type="bishop", color="white", square="c3")
    assert request.piece_type == PieceType.BISHOP
    assert request.color == Color.WHITE
    assert request.square == "c3"


def test_place_piece_request_rejects_square_off_the_board() -> None:
    with pytest.raises(InvalidRequestError):
        _ = PlacePieceRequest(piece_type=PieceType.ROOK, color=Color.BLACK, square="j6")
