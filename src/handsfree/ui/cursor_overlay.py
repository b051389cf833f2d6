"""
Cursor overlay - frameless, transparent, click-through, always-on-top.
"""
from typing import Optional, Tuple
from PyQt5.QtWidgets import QApplication, QWidget
from PyQt5.QtCore import Qt, QPoint, pyqtSignal
from PyQt5.QtGui import QPainter, QPen, QColor

from ..tracking.landmarks import HAND_CONNECTIONS, CursorSample, HandLandmarks


class CursorOverlay(QWidget):
    """
    Full-screen overlay that draws the hand skeleton and the cursor dot.

    The dot is red while idle and green while pinching. Input passes
    through the window; step_aside() hides it entirely while synthetic
    pointer input is being dispatched.
    """

    # Thread-safe entry point for the pointer dispatcher
    step_aside_requested = pyqtSignal(bool)

    def __init__(self, cursor_size: int = 60, show_skeleton: bool = True, parent=None):
        super().__init__(parent)

        self._cursor_size = cursor_size
        self._show_skeleton = show_skeleton
        self._cursor: Optional[CursorSample] = None
        self._landmarks: Optional[HandLandmarks] = None
        self._stepped_aside = False

        self._setup_window()
        self._position_window()
        self.step_aside_requested.connect(self.step_aside, Qt.QueuedConnection)

    def _setup_window(self):
        """Configure window flags and attributes."""
        self.setWindowFlags(
            Qt.FramelessWindowHint |
            Qt.WindowStaysOnTopHint |
            Qt.WindowTransparentForInput |
            Qt.Tool  # Don't show in taskbar
        )
        self.setAttribute(Qt.WA_TranslucentBackground)
        self.setAttribute(Qt.WA_TransparentForMouseEvents)
        self.setObjectName("CursorOverlay")

    def _position_window(self):
        """Cover the whole primary screen."""
        screen = QApplication.primaryScreen()
        if screen is None:
            return
        self.setGeometry(screen.geometry())

    def screen_size(self) -> Tuple[int, int, int, int]:
        """(x, y, width, height) of the covered screen in global pixels."""
        geo = self.geometry()
        return geo.x(), geo.y(), geo.width(), geo.height()

    def update_cursor(self, sample: CursorSample):
        """Apply a cursor sample; the latest one wins."""
        self._cursor = sample
        self.update()

    def update_landmarks(self, landmarks: Optional[HandLandmarks]):
        """Replace the skeleton; None (hand lost) clears it."""
        self._landmarks = landmarks
        self.update()

    def step_aside(self, aside: bool):
        """Hide the overlay while input is dispatched, restore afterwards."""
        if aside == self._stepped_aside:
            return
        self._stepped_aside = aside
        if aside:
            self.hide()
        else:
            self.show()

    def paintEvent(self, event):
        """Draw the skeleton and cursor."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        w, h = self.width(), self.height()

        if self._show_skeleton and self._landmarks is not None:
            pen = QPen(QColor(0, 255, 255, 150))
            pen.setWidth(8)
            painter.setPen(pen)
            for start_idx, end_idx in HAND_CONNECTIONS:
                start = self._landmarks.get(start_idx)
                end = self._landmarks.get(end_idx)
                painter.drawLine(
                    QPoint(int(start[0] * w), int(start[1] * h)),
                    QPoint(int(end[0] * w), int(end[1] * h)),
                )

            pen = QPen(QColor(255, 255, 0, 150))
            pen.setWidth(12)
            painter.setPen(pen)
            for x, y, _ in self._landmarks.landmarks:
                painter.drawPoint(QPoint(int(x * w), int(y * h)))

        if self._cursor is not None:
            color = QColor(0, 255, 0, 200) if self._cursor.pinching else QColor(255, 0, 0, 200)
            painter.setBrush(color)
            painter.setPen(Qt.NoPen)
            radius = self._cursor_size // 2
            center = QPoint(int(round(self._cursor.x * w)), int(round(self._cursor.y * h)))
            painter.drawEllipse(center, radius, radius)

        painter.end()
