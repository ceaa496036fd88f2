# app/utils/fen_errors.py
from typing import Optional


class FenError(ValueError):
    """Base class for every FEN rejection. `kind` is stable across releases."""

    kind = "invalid_fen"


class MalformedFenError(FenError):
    kind = "malformed_fen"


class InvalidSquareTokenError(FenError):
    kind = "invalid_square_token"

    def __init__(self, token: str, message: Optional[str] = None):
        self.token = token
        super().__init__(message or f"Invalid character in board: {token}")


class InvalidRankWidthError(FenError):
    kind = "invalid_rank_width"

    def __init__(self, rank: int, width: int):
        self.rank = rank
        self.width = width
        super().__init__(
            f"Each row must have exactly 8 squares (rank {rank} has {width})"
        )


class InvalidMoveCounterError(FenError):
    kind = "invalid_move_counter"

    def __init__(self, field: str, token: str, message: Optional[str] = None):
        self.field = field
        self.token = token
        super().__init__(
            message or f"{field} must be a non-negative integer, got '{token}'"
        )


# strict mode only


class InvalidColorTokenError(FenError):
    kind = "invalid_color_token"

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Active color must be 'w' or 'b', got '{token}'")


class InvalidCastlingTokenError(FenError):
    kind = "invalid_castling_token"

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid castling availability: '{token}'")


class InvalidEnPassantTokenError(FenError):
    kind = "invalid_en_passant_token"

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid en passant target square: '{token}'")
