"""
Background worker for MediaPipe hand tracking and gesture recognition.
Runs in a separate QThread to avoid blocking the UI.
"""
import logging
import time
import threading
from typing import Optional
from PyQt5.QtCore import QObject, pyqtSignal

from .config import Config
from .hand_tracker import HandTracker
from .gesture_recognizer import GestureRecognizer

logger = logging.getLogger(__name__)

# Marks the detection slot as already consumed
_EMPTY = object()


class TrackingWorker(QObject):
    """
    Worker class that feeds detections into the gesture recognizer.

    A capture thread runs one detection at a time and writes each result
    into a single slot. Results the processing loop has not picked up yet
    are overwritten, so a slow consumer never builds a backlog.
    """
    # Signals
    cursor_updated = pyqtSignal(object)     # Emits CursorSample
    action_detected = pyqtSignal(object)    # Emits Click or Scroll
    landmarks_updated = pyqtSignal(object)  # Emits HandLandmarks or None
    error = pyqtSignal(str)

    # Pause after a failed camera read so a dead camera does not spin the loop
    NO_FRAME_BACKOFF = 0.05

    def __init__(self, config: Config, tracker_factory=HandTracker, sleep=time.sleep, parent=None):
        super().__init__(parent)
        self._config = config
        self._tracker_factory = tracker_factory
        self._sleep = sleep
        self._tracker: Optional[HandTracker] = None
        self._recognizer: Optional[GestureRecognizer] = None
        self._is_running = False

        self._latest = _EMPTY
        self._latest_lock = threading.Lock()
        self._latest_ready = threading.Event()
        self._capture_thread: Optional[threading.Thread] = None
        self._dropped = 0

    @property
    def dropped_results(self) -> int:
        """Detections overwritten before the processing loop consumed them."""
        return self._dropped

    def _publish(self, landmarks) -> None:
        with self._latest_lock:
            if self._latest is not _EMPTY:
                self._dropped += 1
            self._latest = landmarks
        self._latest_ready.set()

    def _take(self):
        with self._latest_lock:
            landmarks = self._latest
            self._latest = _EMPTY
            self._latest_ready.clear()
        return landmarks

    def _capture_loop(self):
        """Background thread that runs detection as fast as the model allows."""
        while self._is_running:
            try:
                landmarks = self._tracker.get_landmarks()
            except Exception as e:
                # Model failures degrade to "no hand" for the recognizer
                logger.error("Capture thread error: %s", e)
                landmarks = None
                self._sleep(0.1)
            else:
                if landmarks is None and not self._tracker.frame_ok:
                    self._sleep(self.NO_FRAME_BACKOFF)
            self._publish(landmarks)

    def start_process(self):
        """Main processing loop. Runs in worker thread."""
        self._tracker = self._tracker_factory(self._config)
        self._recognizer = GestureRecognizer(self._config.gestures)

        if not self._tracker.start():
            self.error.emit("Could not start hand tracker")
            return

        self._is_running = True
        self._capture_thread = threading.Thread(target=self._capture_loop, daemon=True)
        self._capture_thread.start()

        try:
            while self._is_running:
                if not self._latest_ready.wait(timeout=0.1):
                    continue

                landmarks = self._take()
                if landmarks is _EMPTY:
                    continue

                sample, action = self._recognizer.on_frame(landmarks)

                self.landmarks_updated.emit(landmarks)
                self.cursor_updated.emit(sample)
                if action is not None:
                    self.action_detected.emit(action)

        except Exception as e:
            logger.exception("Worker exception")
            self.error.emit(f"Worker Exception: {str(e)}")
        finally:
            self._is_running = False
            if self._capture_thread:
                self._capture_thread.join(timeout=1.0)
            if self._tracker:
                self._tracker.stop()
            logger.info("Tracking stopped (%d detections dropped)", self._dropped)

    def stop_process(self):
        """Signal the loops to stop and release resources in worker thread."""
        self._is_running = False
