"""
Gesture recognition from hand landmarks.
Smooths the index fingertip into a cursor and turns pinches into clicks and scrolls.
"""
from typing import Callable, Optional, Tuple
import time

from .classifier import ActionClassifier
from .config import GestureConfig
from .landmarks import (
    ActionEvent,
    CursorSample,
    HandLandmarks,
    check_landmark_count,
    distance_2d,
)
from .pinch import PinchStateMachine
from .smoothing import PositionSmoother


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


class GestureRecognizer:
    """
    Recognizes cursor movement and pointer actions from hand landmarks.

    Each call to on_frame runs, in order: smoothing of the index tip,
    the pinch state machine, and on pinch release the click/scroll
    classifier. Not thread-safe; calls must be serialized by the owner.
    """

    def __init__(
        self,
        config: Optional[GestureConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize gesture recognizer.

        Args:
            config: Gesture thresholds and smoothing
            clock: Monotonic time source in seconds, used when on_frame
                is not given an explicit timestamp
        """
        self._config = config or GestureConfig()
        self._clock = clock

        self._smoother = PositionSmoother(self._config.smoothing_factor)
        self._pinch = PinchStateMachine(self._config.pinch_threshold)
        self._classifier = ActionClassifier(
            scroll_threshold=self._config.scroll_threshold,
            debounce_window=self._config.debounce_window,
        )

        self._last_pinch_distance: Optional[float] = None

    @property
    def position(self) -> Optional[Tuple[float, float]]:
        """Smoothed cursor position, None until a hand has been seen."""
        return self._smoother.position

    @property
    def is_pinching(self) -> bool:
        return self._pinch.is_pinching

    @property
    def pinch_state(self):
        return self._pinch.state

    @property
    def pinch_distance(self) -> Optional[float]:
        """Index/thumb distance from the most recent observed hand."""
        return self._last_pinch_distance

    def on_frame(
        self,
        observation: Optional[HandLandmarks],
        now: Optional[float] = None,
    ) -> Tuple[CursorSample, Optional[ActionEvent]]:
        """
        Process one detection result.

        Args:
            observation: Landmarks of the first detected hand, or None if
                no hand is visible in this frame
            now: Monotonic timestamp in seconds; read from the clock if omitted

        Returns:
            (cursor sample, action or None)

        Raises:
            LandmarkCountError: If the observation does not hold 21 landmarks.
        """
        if observation is None:
            # Lost hand: freeze the cursor, a pinch cannot survive it
            x, y = self._smoother.position or (0.0, 0.0)
            release = self._pinch.update(False, x, y)
            action = self._classify(release, now)
            return CursorSample(x, y, pinching=False), action

        check_landmark_count(observation.landmarks)
        index_tip = observation.landmarks[HandLandmarks.INDEX_TIP]
        thumb_tip = observation.landmarks[HandLandmarks.THUMB_TIP]

        x, y = self._smoother.update(_clamp(index_tip[0]), _clamp(index_tip[1]))

        distance = distance_2d(index_tip, thumb_tip)
        self._last_pinch_distance = distance

        release = self._pinch.update(self._pinch.is_pinch_shape(distance), x, y)
        action = self._classify(release, now)

        return CursorSample(x, y, pinching=self._pinch.is_pinching), action

    def _classify(self, release, now: Optional[float]) -> Optional[ActionEvent]:
        if release is None:
            return None
        if now is None:
            now = self._clock()
        return self._classifier.classify(release, now)

    def reset(self) -> None:
        """Reset to the state of a freshly created recognizer."""
        self._smoother.reset()
        self._pinch.reset()
        self._classifier.reset()
        self._last_pinch_distance = None
