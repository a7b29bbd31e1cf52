"""
Bowling - Game

Owns the frames of a single player's game and resolves the cross-frame
strike and spare bonuses. The score is never stored; every call to score()
recomputes it from the frames played so far, so it can be asked for at any
point of the game and always agrees with the current state.
"""

import logging

from bowling.engine.base import FRAMES_PER_GAME, FrameScore
from bowling.engine.frame import Frame

logger = logging.getLogger(__name__)


class Game:
    """
    A single player's game of ten frames.

    Frames are created the first time their number is played and kept in a
    dict keyed by frame number. Neighbouring frames are found by number,
    so scoring does not depend on the order frames were played in.
    """

    frames = FRAMES_PER_GAME

    def __init__(self) -> None:
        self.played_frames: dict[int, Frame] = {}

    @classmethod
    def start(cls) -> "Game":
        """Start a new game with no frames played."""
        return cls()

    def play(self, frame: int, attempt: int, pins: int) -> None:
        """
        Record an attempt.

        Args:
            frame: Frame number (1-10)
            attempt: Attempt number within the frame (1-based)
            pins: Pins knocked down
        """
        self._get_frame(frame).play(attempt, pins)

    def score(self) -> int:
        """Total score of the frames played so far, bonuses included."""
        total = sum(
            played_frame.calculate_score() + self._bonus(played_frame)
            for played_frame in self._ordered_frames()
        )
        logger.debug("Scored %s frame(s): %s", len(self.played_frames), total)
        return total

    def frame_scores(self) -> tuple[FrameScore, ...]:
        """
        Frame-by-frame breakdown of the score.

        Returns:
            One FrameScore per played frame, in frame-number order. The last
            running total equals score().
        """
        running_total = 0
        scores = []
        for played_frame in self._ordered_frames():
            pins = played_frame.calculate_score()
            bonus = self._bonus(played_frame)
            running_total += pins + bonus
            scores.append(
                FrameScore(
                    number=played_frame.number,
                    pins=pins,
                    bonus=bonus,
                    total=pins + bonus,
                    running_total=running_total,
                    state=played_frame.state,
                )
            )
        return tuple(scores)

    def is_complete(self) -> bool:
        """True once every frame of the game has been fully bowled."""
        return all(
            number in self.played_frames and self.played_frames[number].is_complete()
            for number in range(1, self.frames + 1)
        )

    def _get_frame(self, number: int) -> Frame:
        current_frame = self.played_frames.get(number)
        if current_frame is None:
            current_frame = Frame.create(number)
            self.played_frames[number] = current_frame
            logger.debug("Created frame %s", number)
        return current_frame

    def _ordered_frames(self) -> list[Frame]:
        return [self.played_frames[number] for number in sorted(self.played_frames)]

    def _bonus(self, played_frame: Frame) -> int:
        # The last frame's bonus balls are part of its own score
        if played_frame.is_last_frame():
            return 0
        if played_frame.is_strike():
            return self._strike_bonus(played_frame)
        if played_frame.is_spare():
            return self._spare_bonus(played_frame)
        return 0

    def _spare_bonus(self, played_frame: Frame) -> int:
        next_frame = self.played_frames.get(played_frame.number + 1)
        if next_frame is None:
            return 0
        return next_frame.get_first_attempt_score()

    def _strike_bonus(self, played_frame: Frame) -> int:
        """Pins from the next two balls bowled after the strike."""
        next_frame = self.played_frames.get(played_frame.number + 1)
        if next_frame is None:
            return 0

        bonus = next_frame.get_first_attempt_score()
        if next_frame.is_strike() and not next_frame.is_last_frame():
            frame_after_next = self.played_frames.get(played_frame.number + 2)
            if frame_after_next is not None:
                bonus += frame_after_next.get_first_attempt_score()
        else:
            bonus += next_frame.get_second_attempt_score()
        return bonus
