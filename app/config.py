# === app/config.py ===

import logging
import os

from dotenv import load_dotenv

# Load environment variables from .env (local dev) or the process environment
load_dotenv()


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes")


DEBUG = _env_flag("DEBUG")

# Default FEN validation mode; callers may still override per request
STRICT_FEN = _env_flag("STRICT_FEN")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173"
    ).split(",")
    if origin.strip()
]

# ─── Configure logging ──────────────────────────────────────────────────────
# basicConfig writes to stderr, which keeps stdout free for the MCP transport
logging.basicConfig(
    level=logging.DEBUG if DEBUG else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
