import pytest

from connect4_engine.debug import DebugLevel, debug
from connect4_engine.game.rules import GameEngine


# Fills a 7x6 board with no four-in-a-row for either player.
# Final grid: cell (r, c) holds player 1 + ((c // 2 + r) % 2).
TIE_SEQUENCE = [2, 0, 0, 2] * 3 + [3, 1, 1, 3] * 3 + [6, 4, 4, 5, 5, 6] * 3


@pytest.fixture(autouse=True)
def quiet_debug():
    """Put the shared debug manager back to its defaults after every test."""
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])


@pytest.fixture
def engine():
    return GameEngine()


@pytest.fixture
def play():
    def _play(engine, columns):
        results = []
        for col in columns:
            results.append(engine.drop_piece(col))
        return results
    return _play


@pytest.fixture
def tie_sequence():
    return list(TIE_SEQUENCE)
