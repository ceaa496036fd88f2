"""
MCP server exposing the FEN visualizer as a single tool over stdio.

Run with ``python -m app.mcp_server`` or the ``chess-fen-mcp`` script.
"""

import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from app import config  # noqa: F401  (configures logging)
from app.services import error_message, render_fen
from app.utils.fen_errors import FenError

logger = logging.getLogger("chess_fen.mcp")

server = FastMCP(
    "chess-fen-mcp",
    "Converts FEN notation into a text chess board diagram with position metadata.",
)


@server.tool()
def visualize_fen(fen_string: Optional[str] = None) -> str:
    """Convert FEN notation to ASCII chess board visualization.

    Parameters:
    - fen_string: FEN (Forsyth-Edwards Notation) string representing chess position,
      e.g. "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1".

    Returns the board (rank 8 on top, files a-h left to right) followed by
    side to move, castling rights, en passant square and move counters.
    """
    if not fen_string:
        raise ToolError("FEN string is required")

    try:
        return render_fen(fen_string)
    except FenError as e:
        raise ToolError(f"Error visualizing FEN: {error_message(e)}") from e


def main() -> None:
    """Entry point: run MCP server over stdio."""

    logger.info("Chess FEN MCP server running on stdio")
    server.run()


if __name__ == "__main__":
    main()
