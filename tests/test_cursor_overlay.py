import os
import pytest

pytest.importorskip("PyQt5")
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt5.QtWidgets import QApplication

from conftest import make_hand
from handsfree.tracking.landmarks import CursorSample
from handsfree.ui.cursor_overlay import CursorOverlay


@pytest.fixture(scope="module")
def app():
    return QApplication.instance() or QApplication([])


@pytest.fixture
def overlay(app):
    widget = CursorOverlay()
    yield widget
    widget.close()


def test_lost_hand_clears_skeleton(overlay):
    overlay.update_landmarks(make_hand(0.4, 0.4))
    assert overlay._landmarks is not None

    overlay.update_landmarks(None)
    assert overlay._landmarks is None


def test_latest_cursor_sample_wins(overlay):
    overlay.update_cursor(CursorSample(0.1, 0.1, False))
    overlay.update_cursor(CursorSample(0.6, 0.3, True))
    assert overlay._cursor == CursorSample(0.6, 0.3, True)


def test_step_aside_hides_and_restores(overlay):
    overlay.show()
    overlay.step_aside(True)
    assert not overlay.isVisible()
    overlay.step_aside(False)
    assert overlay.isVisible()
