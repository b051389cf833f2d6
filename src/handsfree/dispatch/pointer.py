"""
Pointer dispatch - turns recognized actions into synthetic mouse input.
"""
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple
import time

from ..tracking.config import PointerConfig
from ..tracking.landmarks import ActionEvent, Click, Scroll

logger = logging.getLogger(__name__)


@dataclass
class ScreenMapper:
    """Maps normalized (0-1) coordinates to screen pixels."""
    width: int
    height: int
    offset_x: int = 0
    offset_y: int = 0

    def to_pixels(self, x: float, y: float) -> Tuple[int, int]:
        return (
            self.offset_x + int(round(x * self.width)),
            self.offset_y + int(round(y * self.height)),
        )


def interpolate(
    start: Tuple[int, int], end: Tuple[int, int], steps: int
) -> List[Tuple[int, int]]:
    """Points from start (exclusive) to end (inclusive) along a straight line."""
    steps = max(1, steps)
    sx, sy = start
    ex, ey = end
    return [
        (int(round(sx + (ex - sx) * i / steps)), int(round(sy + (ey - sy) * i / steps)))
        for i in range(1, steps + 1)
    ]


def _default_mouse():
    # pynput needs a display at import time, so load it on first use
    from pynput.mouse import Button, Controller
    return Controller(), Button.left


class PointerDispatcher:
    """
    Issues clicks and wheel scrolls with a pynput mouse controller.

    A scroll is played back as wheel notches at the pinch start, sized by
    the pinch travel and spread over scroll_duration_ms. With natural
    scrolling the content follows the hand, as it would under a touch swipe.
    """

    def __init__(
        self,
        screen: ScreenMapper,
        config: Optional[PointerConfig] = None,
        mouse=None,
        button=None,
        on_step_aside: Optional[Callable[[bool], None]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            screen: Mapping from normalized to pixel coordinates
            config: Stroke timings
            mouse: Object with pynput's Controller interface; created lazily
            button: Button passed to press/release; defaults to Button.left
            on_step_aside: Called with True before a stroke and False after,
                so an overlay can get out of the way of the synthetic input
            sleep: Sleep function, replaceable in tests
        """
        self._screen = screen
        self._config = config or PointerConfig()
        self._mouse = mouse
        self._button = button
        self._on_step_aside = on_step_aside
        self._sleep = sleep
        self._executor: Optional[ThreadPoolExecutor] = None

    def _ensure_mouse(self):
        if self._mouse is None:
            mouse, button = _default_mouse()
            self._mouse = mouse
            if self._button is None:
                self._button = button
        return self._mouse

    def dispatch(self, action: ActionEvent) -> bool:
        """
        Perform an action synchronously.

        Returns:
            True if the input was issued, False if disabled or the backend failed.
        """
        if not self._config.enabled:
            logger.debug("Pointer dispatch disabled, ignoring %s", action)
            return False

        if self._on_step_aside:
            self._on_step_aside(True)
        try:
            self._sleep(self._config.dispatch_delay_ms / 1000.0)
            if isinstance(action, Click):
                self._click(action)
            elif isinstance(action, Scroll):
                self._scroll(action)
            else:
                raise TypeError(f"Unknown action: {action!r}")
            return True
        except (OSError, RuntimeError) as e:
            logger.error("Pointer dispatch failed for %s: %s", action, e)
            return False
        finally:
            if self._on_step_aside:
                self._on_step_aside(False)

    def dispatch_async(self, action: ActionEvent) -> Future:
        """Queue an action on a single background thread, in order."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="pointer")
        return self._executor.submit(self.dispatch, action)

    def shutdown(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def _click(self, action: Click) -> None:
        mouse = self._ensure_mouse()
        target = self._screen.to_pixels(action.x, action.y)
        logger.info("Click at %s", target)
        mouse.position = target
        mouse.press(self._button)
        self._sleep(self._config.click_duration_ms / 1000.0)
        mouse.release(self._button)

    def scroll_notches(self, action: Scroll) -> Tuple[int, int]:
        """Total (dx, dy) wheel notches for a scroll, in pynput's sign convention."""
        scale = self._config.scroll_notches
        dx = int(round((action.end_x - action.start_x) * scale))
        dy = int(round((action.end_y - action.start_y) * scale))
        # pynput: positive dy scrolls up, positive dx scrolls right
        if self._config.natural_scroll:
            return -dx, dy
        return dx, -dy

    def _scroll(self, action: Scroll) -> None:
        mouse = self._ensure_mouse()
        start = self._screen.to_pixels(action.start_x, action.start_y)
        total = self.scroll_notches(action)
        logger.info("Scroll at %s by %s notches", start, total)

        cumulative = interpolate((0, 0), total, self._config.scroll_steps)
        step_delay = self._config.scroll_duration_ms / 1000.0 / len(cumulative)

        mouse.position = start
        prev_x, prev_y = 0, 0
        for x, y in cumulative:
            self._sleep(step_delay)
            if (x, y) != (prev_x, prev_y):
                mouse.scroll(x - prev_x, y - prev_y)
            prev_x, prev_y = x, y
