from typing import List, Optional

from pydantic import BaseModel, Field

from app.models import Position


class FenRequest(BaseModel):
    fen: str
    strict: Optional[bool] = None  # None -> STRICT_FEN setting


class VisualizeFenResponse(BaseModel):
    fen: str
    visualization: str


class CastlingRightsResponse(BaseModel):
    white_kingside: bool
    white_queenside: bool
    black_kingside: bool
    black_queenside: bool


class PositionResponse(BaseModel):
    # rank 8 first; piece symbols like "K" / "p", None for empty squares
    board: List[List[Optional[str]]] = Field(min_length=8, max_length=8)
    side_to_move: str  # 'white' | 'black'
    castling_rights: CastlingRightsResponse
    en_passant_square: str
    halfmove_clock: int
    fullmove_number: int

    @classmethod
    def from_position(cls, position: Position) -> "PositionResponse":
        rights = position.castling_rights
        return cls(
            board=[
                [piece.symbol() if piece is not None else None for piece in rank]
                for rank in position.board
            ],
            side_to_move=position.side_to_move.value,
            castling_rights=CastlingRightsResponse(
                white_kingside=rights.white_kingside,
                white_queenside=rights.white_queenside,
                black_kingside=rights.black_kingside,
                black_queenside=rights.black_queenside,
            ),
            en_passant_square=position.en_passant_square,
            halfmove_clock=position.halfmove_clock,
            fullmove_number=position.fullmove_number,
        )
