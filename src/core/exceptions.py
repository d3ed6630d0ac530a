"""
Exceptions shared across layers.

NOTE: An illegal move is NOT an error. The Board returns it as a MoveResult value.
These exceptions are reserved for input that cannot even be asked about (squares that are not on the board, etc.)
"""


class ChessError(Exception):
    """Base class for everything raised by this package"""


class CoordinateError(ChessError):
    """Something is wrong with a square reference"""


class InvalidCoordinateError(CoordinateError):
    """Malformed input: a file letter outside a-h, or a square name that cannot be parsed"""


class OutOfRangeError(CoordinateError):
    """Well-formed, but one of the components lies outside the board"""


class InvalidRequestError(ChessError):
    """Input at the request boundary failed validation (propagates out of pydantic validators as is)"""


class InvalidFENError(ChessError):
    """Piece placement string (first field of a FEN) does not describe a board"""
