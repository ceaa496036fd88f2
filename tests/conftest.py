import pytest


@pytest.fixture
def start_fen():
    return "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


@pytest.fixture
def after_e4_fen():
    return "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"


@pytest.fixture
def endgame_fen():
    return "8/5k2/8/3K4/8/8/6P1/8 w - - 12 57"


@pytest.fixture
def lenient(monkeypatch):
    from app import config

    monkeypatch.setattr(config, "STRICT_FEN", False)


@pytest.fixture
def strict_default(monkeypatch):
    from app import config

    monkeypatch.setattr(config, "STRICT_FEN", True)
