"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.chess.board import Board

# White Pawn b4, White Pawn e4, White Bishop c3, Black Pawn f6, Black Rook e6
REFERENCE_FEN = "8/8/4rp2/8/1P2P3/2B5/8/8"
EMPTY_FEN = "/".join(["8"] * 8)


class RecordingNarrator:
    """Collects the diagnostic lines of a Board, so tests can assert on them without capturing stdout."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def narrator() -> RecordingNarrator:
    return RecordingNarrator()


@pytest.fixture
def reference_board(narrator: RecordingNarrator) -> Board:
    """The board of the reference scenario, narrating into `narrator`."""
    return Board.from_fen(REFERENCE_FEN, verbose=True, narrator=narrator)


@pytest.fixture
def board_from_fen() -> Callable[[str], Board]:
    """Call the inner function with the piece placement part of a FEN string"""

    def _create_board(fen: str) -> Board:
        return Board.from_fen(fen)

    return _create_board
