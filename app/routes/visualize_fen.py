from fastapi import APIRouter, HTTPException

from app.schemas import FenRequest, PositionResponse, VisualizeFenResponse
from app.services import describe_fen, error_message, render_fen
from app.utils.fen_errors import FenError

router = APIRouter()


def _bad_fen(e: FenError) -> HTTPException:
    return HTTPException(
        status_code=400, detail={"error": e.kind, "message": error_message(e)}
    )


@router.post("/visualize-fen",
             response_model=VisualizeFenResponse,
             summary="Visualize FEN Position",
             description="Returns a text board diagram and the metadata of a FEN string.")
def visualize_fen_endpoint(req: FenRequest):
    try:
        visualization = render_fen(req.fen, strict=req.strict)
    except FenError as e:
        raise _bad_fen(e)

    return {"fen": req.fen, "visualization": visualization}


@router.post("/parse-fen",
             response_model=PositionResponse,
             summary="Parse FEN Position",
             description="Returns the decoded board, side to move, castling rights, "
                         "en passant target and move counters of a FEN string.")
def parse_fen_endpoint(req: FenRequest):
    try:
        position = describe_fen(req.fen, strict=req.strict)
    except FenError as e:
        raise _bad_fen(e)

    return PositionResponse.from_position(position)
