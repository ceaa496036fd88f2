from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple

import chess

Square = Optional[chess.Piece]
Rank = Tuple[Square, ...]


class Side(str, Enum):
    WHITE = "white"
    BLACK = "black"


@dataclass(frozen=True)
class CastlingRights:
    white_kingside: bool = False
    white_queenside: bool = False
    black_kingside: bool = False
    black_queenside: bool = False


@dataclass(frozen=True)
class Position:
    """
    One decoded FEN record.

    `board[0]` is rank 8 and `board[7]` is rank 1, each rank running a -> h,
    so the layout matches FEN reading order. Empty squares are None.
    """

    board: Tuple[Rank, ...]
    side_to_move: Side
    castling_rights: CastlingRights
    en_passant_square: str
    halfmove_clock: int
    fullmove_number: int

    def piece_at(self, square_name: str) -> Square:
        # raises ValueError for anything that isn't a1..h8
        square = chess.parse_square(square_name)
        row = 7 - chess.square_rank(square)
        return self.board[row][chess.square_file(square)]

    def pieces(self) -> Iterator[Tuple[str, chess.Piece]]:
        for row, rank in enumerate(self.board):
            for col, piece in enumerate(rank):
                if piece is not None:
                    yield chess.square_name(chess.square(col, 7 - row)), piece
