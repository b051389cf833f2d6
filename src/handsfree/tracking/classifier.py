"""
Turns completed pinches into click or scroll actions.
"""
import logging
from typing import Optional

from .landmarks import ActionEvent, Click, Scroll
from .pinch import PinchRelease

logger = logging.getLogger(__name__)


class ActionClassifier:
    """
    Classifies pinch releases by travel distance, with a refractory window.

    Pinch detection flickers near the threshold, so a single intended click
    can produce several releases in quick succession. Only the first one
    inside the debounce window is turned into an action.
    """

    def __init__(self, scroll_threshold: float = 0.05, debounce_window: float = 0.3):
        """
        Args:
            scroll_threshold: Travel (normalized) above which a release is a scroll
            debounce_window: Seconds that must pass between two emitted actions
        """
        self.scroll_threshold = scroll_threshold
        self.debounce_window = debounce_window
        self._last_action_time: Optional[float] = None

    @property
    def last_action_time(self) -> Optional[float]:
        return self._last_action_time

    def classify(self, release: PinchRelease, now: float) -> Optional[ActionEvent]:
        """
        Decide what a pinch release means.

        Args:
            release: The completed pinch interval
            now: Monotonic time in seconds

        Returns:
            Click, Scroll, or None if suppressed by the debounce window.
        """
        # A clock that went backwards lands inside the window too
        if (self._last_action_time is not None
                and now - self._last_action_time <= self.debounce_window):
            logger.debug(
                "Pinch release suppressed (%.0f ms since last action)",
                (now - self._last_action_time) * 1000,
            )
            return None

        self._last_action_time = now

        if release.move_distance > self.scroll_threshold:
            logger.debug("Scroll detected, dist: %.4f", release.move_distance)
            return Scroll(release.start_x, release.start_y, release.end_x, release.end_y)

        logger.debug("Click detected, dist: %.4f", release.move_distance)
        return Click(release.start_x, release.start_y)

    def reset(self) -> None:
        self._last_action_time = None
