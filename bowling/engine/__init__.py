"""
Bowling Scoring Engine.

Pure Python scoring logic with no I/O. A Game owns up to ten Frames and
resolves strike and spare bonuses across them.
"""

from bowling.engine.base import (
    ATTEMPT_FIRST,
    ATTEMPT_SECOND,
    ATTEMPT_THIRD,
    FRAMES_PER_GAME,
    LAST_FRAME,
    PINS_PER_FRAME,
    FrameScore,
    FrameState,
)
from bowling.engine.frame import Frame
from bowling.engine.game import Game

__all__ = [
    # Constants
    "ATTEMPT_FIRST",
    "ATTEMPT_SECOND",
    "ATTEMPT_THIRD",
    "FRAMES_PER_GAME",
    "LAST_FRAME",
    "PINS_PER_FRAME",
    # Data Classes
    "FrameScore",
    # Enums
    "FrameState",
    # Scoring
    "Frame",
    "Game",
]
