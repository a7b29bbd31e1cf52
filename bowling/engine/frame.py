"""
Bowling - Frame

A single frame of a game. Tracks the attempts bowled into it, the pins still
standing and its own raw score. A frame knows nothing about its neighbours;
cross-frame bonuses are resolved by the Game.
"""

import logging

from bowling.engine.base import (
    ATTEMPT_FIRST,
    ATTEMPT_SECOND,
    LAST_FRAME,
    MAX_ATTEMPTS,
    MAX_ATTEMPTS_LAST_FRAME,
    PINS_PER_FRAME,
    FrameState,
)

logger = logging.getLogger(__name__)


class Frame:
    """
    One of the ten frames of a game.

    Attempts beyond what the frame allows are ignored rather than rejected.
    Strike and spare are latched the moment the qualifying attempt clears
    the rack, so later calls never change how the frame is classified.
    """

    def __init__(self, number: int) -> None:
        self._number = number
        self.max_attempts = MAX_ATTEMPTS
        self._pins_remaining = PINS_PER_FRAME
        self._current_attempt: int | None = None
        self._attempts_played: set[int] = set()
        self._first_attempt_score = 0
        self._second_attempt_score = 0
        self._extra_score = 0
        self._strike = False
        self._spare = False

    @classmethod
    def create(cls, number: int) -> "Frame":
        """Create a fresh frame with a full rack."""
        return cls(number)

    @property
    def number(self) -> int:
        return self._number

    @property
    def state(self) -> FrameState:
        """Current state of the frame."""
        if self._strike:
            return FrameState.STRIKE
        if self._spare:
            return FrameState.SPARE
        if not self._attempts_played:
            return FrameState.FRESH
        if ATTEMPT_SECOND in self._attempts_played:
            return FrameState.OPEN
        return FrameState.ONE_BALL

    def knock_down(self, pins: int) -> None:
        """Remove pins from the rack. Not range-checked."""
        self._pins_remaining -= pins

    def play(self, attempt: int, pins: int) -> None:
        """
        Record one attempt.

        Args:
            attempt: Attempt number within the frame (1-based)
            pins: Pins knocked down by the attempt

        Calls for an attempt the frame no longer allows, or for any attempt
        after a strike outside the last frame, are ignored.
        """
        self._current_attempt = attempt
        if attempt > self.max_attempts or (self._strike and not self.is_last_frame()):
            logger.debug(
                "Ignoring attempt %s (%s pins) on frame %s", attempt, pins, self._number
            )
            return

        self._add_score(attempt, pins)
        self.knock_down(pins)
        self._attempts_played.add(attempt)

        if self._pins_remaining == 0:
            self._rack_cleared(attempt)

    def _add_score(self, attempt: int, pins: int) -> None:
        if attempt == ATTEMPT_FIRST:
            self._first_attempt_score += pins
        elif attempt == ATTEMPT_SECOND:
            self._second_attempt_score += pins
        else:
            self._extra_score += pins

    def _rack_cleared(self, attempt: int) -> None:
        if attempt == ATTEMPT_FIRST:
            self._strike = True
        elif attempt == ATTEMPT_SECOND and not self._strike:
            self._spare = True

        if not self.is_last_frame():
            return

        if (self._strike or self._spare) and self.max_attempts < MAX_ATTEMPTS_LAST_FRAME:
            self.max_attempts = MAX_ATTEMPTS_LAST_FRAME
            logger.debug("Frame %s earned a bonus attempt", self._number)

        # Bonus balls in the last frame are bowled at a fresh rack
        if attempt < self.max_attempts:
            self._pins_remaining = PINS_PER_FRAME

    def is_strike(self) -> bool:
        return self._strike

    def is_spare(self) -> bool:
        return self._spare

    def is_open(self) -> bool:
        """Two balls bowled with pins still standing."""
        return self.state == FrameState.OPEN

    def is_last_frame(self) -> bool:
        return self._number == LAST_FRAME

    def is_complete(self) -> bool:
        """
        Check whether the frame accepts no further attempts.

        Returns:
            True after a strike outside the last frame, or once every
            permitted attempt has been played
        """
        if self._strike and not self.is_last_frame():
            return True
        return max(self._attempts_played, default=0) >= self.max_attempts

    def get_left_over_pins(self) -> int:
        return self._pins_remaining

    def get_attempt(self) -> int | None:
        """Most recent attempt number passed to play(), if any."""
        return self._current_attempt

    def calculate_score(self) -> int:
        """Pins knocked down within this frame, without any bonus."""
        return self._first_attempt_score + self._second_attempt_score + self._extra_score

    def get_first_attempt_score(self) -> int:
        return self._first_attempt_score

    def get_second_attempt_score(self) -> int:
        return self._second_attempt_score

    def __repr__(self) -> str:
        return (
            f"Frame(number={self._number}, state={self.state.name}, "
            f"score={self.calculate_score()})"
        )
