# === app/services.py ===
import logging
from typing import Optional

from app import config
from app.models import Position
from app.utils.board_renderer import render_position
from app.utils.fen_errors import FenError
from app.utils.fen_parser import parse_fen

logger = logging.getLogger("chess_fen.services")


def _resolve_strict(strict: Optional[bool]) -> bool:
    return config.STRICT_FEN if strict is None else strict


def describe_fen(fen: str, strict: Optional[bool] = None) -> Position:
    """Parse only. `strict=None` falls back to the STRICT_FEN setting."""
    mode = _resolve_strict(strict)
    logger.debug("Parsing FEN %r (strict=%s)", fen, mode)
    try:
        return parse_fen(fen, strict=mode)
    except FenError as e:
        logger.info("Rejected FEN %r: [%s] %s", fen, e.kind, e)
        raise


def render_fen(fen: str, strict: Optional[bool] = None) -> str:
    """
    Parse a FEN string and render it as a board diagram with metadata.

    Raises the parser's FenError subclass unchanged; boundaries add the
    "Invalid FEN: " prefix when they wrap it.
    """
    return render_position(describe_fen(fen, strict=strict))


def error_message(error: FenError) -> str:
    return f"Invalid FEN: {error}"
