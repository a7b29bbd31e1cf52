"""
Bowling - Engine Base Definitions

Shared constants, the frame state enum and the immutable per-frame score
record used by the Frame and Game classes.
"""

from dataclasses import dataclass
from enum import Enum


FRAMES_PER_GAME = 10
PINS_PER_FRAME = 10
LAST_FRAME = 10

ATTEMPT_FIRST = 1
ATTEMPT_SECOND = 2
ATTEMPT_THIRD = 3

MAX_ATTEMPTS = 2
MAX_ATTEMPTS_LAST_FRAME = 3


class FrameState(Enum):
    """Where a frame stands after the attempts played so far."""
    FRESH = "fresh"          # nothing bowled yet
    ONE_BALL = "one_ball"    # first ball bowled, pins still standing
    STRIKE = "strike"
    SPARE = "spare"
    OPEN = "open"            # two balls, pins still standing


@dataclass(frozen=True)
class FrameScore:
    """
    Scored view of a single frame.

    Attributes:
        number: Frame number
        pins: Pins knocked down within the frame itself
        bonus: Pins credited from later frames (strike or spare bonus)
        total: pins + bonus
        running_total: Game total through this frame
        state: Frame state at the time of scoring
    """
    number: int
    pins: int
    bonus: int
    total: int
    running_total: int
    state: FrameState

    def __str__(self) -> str:
        if self.bonus:
            return f"Frame {self.number}: {self.pins} + {self.bonus} bonus = {self.running_total}"
        return f"Frame {self.number}: {self.pins} = {self.running_total}"
