"""
Reference scenario: sets up a handful of pieces and tries out moves for the white bishop (c3) and the black rook (e6).

Run with `chess-moves-demo` (or `python -m src.demo`). Set CHESS_VERBOSE=1 to also see the board's own narration.
"""

import logging

from src.chess.board import Board
from src.chess.pieces import bishop, pawn, rook
from src.core.logging_config import setup_logging
from src.core.settings import get_settings
from src.core.shared_types import Color

logger = logging.getLogger(__name__)

# (start, end, what should happen)
BISHOP_MOVES: list[tuple[str, str, str]] = [
    ("c3", "e1", "legal move"),
    ("c3", "f6", "takes the black pawn"),
    ("c3", "h5", "bishops only move diagonally"),
    ("c3", "b4", "white pawn on the destination"),
    ("c3", "h8", "black pawn on f6 is in the way"),
]

ROOK_MOVES: list[tuple[str, str, str]] = [
    ("e6", "a6", "legal move"),
    ("e6", "e4", "takes the white pawn"),
    ("e6", "c5", "rooks only move along a rank or a file"),
    ("e6", "f6", "black pawn on the destination"),
    ("e6", "e1", "white pawn on e4 is in the way"),
]


def reference_board(verbose: bool = False) -> Board:
    board = Board.new(verbose=verbose)
    board.place_piece(pawn(Color.WHITE), "b", 4)
    board.place_piece(pawn(Color.WHITE), "e", 4)
    board.place_piece(bishop(Color.WHITE), "c", 3)
    board.place_piece(pawn(Color.BLACK), "f", 6)
    board.place_piece(rook(Color.BLACK), "e", 6)
    return board


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    board = reference_board(verbose=settings.verbose)

    for title, moves in (("Bishop", BISHOP_MOVES), ("Rook", ROOK_MOVES)):
        logger.info("---- Start %s moves ----", title)
        for start, end, expectation in moves:
            result = board.try_move(start, end)
            verdict = "legal" if result else "illegal"
            logger.info("%s%s: %s (%s) - %s", start, end, verdict, result.describe(), expectation)
        logger.info("---- End %s moves ----", title)


if __name__ == "__main__":
    main()
