"""
Pinch state machine.

A pinch is an interval, not a frame: it opens when the index and thumb tips
come closer than the pinch threshold and closes on the first frame where they
are not. The interval remembers where the smoothed cursor was when it opened.
"""
from dataclasses import dataclass
from typing import Optional, Tuple, Union
import math


@dataclass(frozen=True)
class Idle:
    """No pinch in progress."""


@dataclass(frozen=True)
class Pinching:
    """Pinch in progress, started at the smoothed cursor position."""
    start_x: float
    start_y: float


PinchState = Union[Idle, Pinching]

IDLE = Idle()


@dataclass(frozen=True)
class PinchRelease:
    """A completed pinch interval, handed to the action classifier."""
    start_x: float
    start_y: float
    end_x: float
    end_y: float
    move_distance: float


def transition(
    state: PinchState, is_pinch_shape: bool, x: float, y: float
) -> Tuple[PinchState, Optional[PinchRelease]]:
    """
    Advance the pinch state by one frame.

    Args:
        state: Current state
        is_pinch_shape: Whether this frame shows a pinch (False when no hand)
        x, y: Smoothed cursor position for this frame

    Returns:
        (next_state, release) where release is set only when a pinch ends.
    """
    if isinstance(state, Pinching):
        if is_pinch_shape:
            return state, None
        move_distance = math.hypot(x - state.start_x, y - state.start_y)
        return IDLE, PinchRelease(state.start_x, state.start_y, x, y, move_distance)

    if is_pinch_shape:
        return Pinching(x, y), None
    return state, None


class PinchStateMachine:
    """Holds the current pinch state and applies threshold detection."""

    def __init__(self, pinch_threshold: float = 0.08):
        self.pinch_threshold = pinch_threshold
        self._state: PinchState = IDLE

    @property
    def state(self) -> PinchState:
        return self._state

    @property
    def is_pinching(self) -> bool:
        return isinstance(self._state, Pinching)

    def is_pinch_shape(self, distance: float) -> bool:
        """Strictly below the threshold counts as a pinch."""
        return distance < self.pinch_threshold

    def update(self, is_pinch_shape: bool, x: float, y: float) -> Optional[PinchRelease]:
        self._state, release = transition(self._state, is_pinch_shape, x, y)
        return release

    def reset(self) -> None:
        self._state = IDLE
