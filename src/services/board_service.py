"""Orchestration between the request/response models and the Board (domain layer)."""

import logging

from src.api.models import MoveRequest, MoveResponse, PlacePieceRequest
from src.chess.board import Board
from src.chess.pieces import Piece
from src.chess.results import MoveResult

logger = logging.getLogger(__name__)


class BoardService:
    """Wraps a single Board that lives for as long as the service does."""

    def __init__(self, board: Board) -> None:
        self.board = board

    def place_piece(self, request: PlacePieceRequest) -> None:
        """Set up a piece. The request model has already validated the square name."""
        piece = Piece(request.piece_type, request.color)
        self.board.place_piece(piece, request.square[0], int(request.square[1]))
        logger.debug("Placed %s on %s", piece, request.square)

    def evaluate_move(self, request: MoveRequest) -> MoveResponse:
        """Ask whether the move is legal, without changing the board."""
        result = self.board.try_move(request.from_square, request.to_square)
        return self._create_move_response(request, result)

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """Ask whether the move is legal and, if so, play it."""
        result = self.board.make_move(request.from_square, request.to_square)
        return self._create_move_response(request, result)

    # -- Internal helpers --
    def _create_move_response(self, request: MoveRequest, result: MoveResult) -> MoveResponse:
        return MoveResponse(
            from_square=request.from_square,
            to_square=request.to_square,
            legal=result.is_legal,
            outcome=result.outcome.value,
            piece_type=result.piece_type,
            blocking_square=result.square.to_algebraic() if result.square else None,
            message=result.describe(),
        )
