"""
Bowling - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from typing import Callable

import pytest

from bowling.config.settings import get_settings
from bowling.engine.game import Game


# =============================================================================
# GAME HELPERS
# =============================================================================

@pytest.fixture
def bowl() -> Callable[[list[tuple[int, ...]]], Game]:
    """
    Play a game from per-frame pin counts.

    Each tuple holds the pins of attempts 1, 2 (and 3) of one frame, starting
    at frame 1.
    """
    def _bowl(frames: list[tuple[int, ...]]) -> Game:
        game = Game.start()
        for frame_number, attempts in enumerate(frames, start=1):
            for attempt, pins in enumerate(attempts, start=1):
                game.play(frame_number, attempt, pins)
        return game

    return _bowl


# =============================================================================
# COMPLETE GAME TEST DATA
# =============================================================================

@pytest.fixture
def complete_games() -> dict[str, tuple[list[tuple[int, ...]], int]]:
    """
    Complete games with expected totals.

    Returns:
        Dict mapping name to (frames, expected_score)
    """
    return {
        "all_open_fours": ([(4, 4)] * 10, 80),
        "all_ones": ([(1, 1)] * 10, 20),
        "all_misses": ([(0, 0)] * 10, 0),
        "all_spares_four_six": ([(4, 6)] * 9 + [(4, 6, 4)], 140),
        "all_spares_fives": ([(5, 5)] * 9 + [(5, 5, 5)], 150),
        "perfect_game": ([(10,)] * 9 + [(10, 10, 10)], 300),
        "strike_on_sixth": ([(2, 2)] * 5 + [(10,)] + [(2, 2)] * 4, 50),
        "spare_then_open_then_misses": (
            [(0, 0)] * 3 + [(5, 5), (5, 0)] + [(0, 0)] * 5,
            20,
        ),
        "mixed": (
            [(10,), (7, 3), (9, 0), (10,), (0, 8), (8, 2), (0, 6), (10,), (10,), (10, 8, 1)],
            167,
        ),
    }


# =============================================================================
# SETTINGS
# =============================================================================

@pytest.fixture
def clean_settings(monkeypatch):
    """Clear BOWLING_* variables and the cached settings around a test."""
    monkeypatch.delenv("BOWLING_DEBUG", raising=False)
    monkeypatch.delenv("BOWLING_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
