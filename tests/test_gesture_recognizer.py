import pytest
from conftest import make_hand
from handsfree.tracking.config import GestureConfig
from handsfree.tracking.gesture_recognizer import GestureRecognizer
from handsfree.tracking.landmarks import Click, CursorSample, HandLandmarks, LandmarkCountError, Scroll
from handsfree.tracking.pinch import Pinching


class FakeClock:
    def __init__(self, t=100.0):
        self.t = t

    def __call__(self):
        return self.t


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def recognizer(clock):
    return GestureRecognizer(GestureConfig(), clock=clock)


def test_no_hand_before_first_observation(recognizer):
    sample, action = recognizer.on_frame(None)
    assert sample == CursorSample(0.0, 0.0, False)
    assert action is None
    assert recognizer.position is None


def test_first_observation_snaps_cursor(recognizer):
    sample, action = recognizer.on_frame(make_hand(0.3, 0.6))
    assert sample == CursorSample(0.3, 0.6, False)
    assert action is None


def test_cursor_converges_to_held_position(recognizer):
    recognizer.on_frame(make_hand(0.2, 0.2))
    for _ in range(40):
        sample, _ = recognizer.on_frame(make_hand(0.6, 0.4))
    assert sample.x == pytest.approx(0.6, abs=1e-6)
    assert sample.y == pytest.approx(0.4, abs=1e-6)


def test_absent_hand_freezes_cursor(recognizer):
    recognizer.on_frame(make_hand(0.2, 0.2))
    recognizer.on_frame(make_hand(0.4, 0.4))
    frozen = recognizer.position

    for _ in range(5):
        sample, action = recognizer.on_frame(None)
        assert (sample.x, sample.y) == frozen
        assert sample.pinching is False
        assert action is None


def test_pinch_onset_uses_smoothed_position(recognizer):
    recognizer.on_frame(make_hand(0.2, 0.2, pinch_distance=0.1))
    sample, _ = recognizer.on_frame(make_hand(0.4, 0.4, pinch_distance=0.03))

    assert sample.pinching is True
    state = recognizer.pinch_state
    assert isinstance(state, Pinching)
    assert state.start_x == pytest.approx(0.3)
    assert state.start_y == pytest.approx(0.3)


def test_distance_at_threshold_is_not_a_pinch(recognizer):
    points = [(0.5, 0.5)] * 21
    points[HandLandmarks.INDEX_TIP] = (0.0, 0.0)
    points[HandLandmarks.THUMB_TIP] = (0.08, 0.0)
    sample, _ = recognizer.on_frame(HandLandmarks.from_points(points))
    assert sample.pinching is False
    assert recognizer.pinch_distance == 0.08


def test_click_scenario(recognizer):
    recognizer.on_frame(make_hand(0.5, 0.5, pinch_distance=0.1))

    sample, action = recognizer.on_frame(make_hand(0.5, 0.5, pinch_distance=0.03))
    assert sample == CursorSample(0.5, 0.5, True)
    assert action is None

    for _ in range(3):
        sample, action = recognizer.on_frame(make_hand(0.5, 0.5, pinch_distance=0.03))
        assert sample.pinching is True
        assert action is None

    sample, action = recognizer.on_frame(make_hand(0.5, 0.5, pinch_distance=0.1))
    assert sample == CursorSample(0.5, 0.5, False)
    assert action == Click(0.5, 0.5)


def test_scroll_scenario(recognizer):
    recognizer.on_frame(make_hand(0.5, 0.5, pinch_distance=0.1))
    recognizer.on_frame(make_hand(0.5, 0.5, pinch_distance=0.03))

    for _ in range(4):
        _, action = recognizer.on_frame(make_hand(0.5, 0.7, pinch_distance=0.03))
        assert action is None

    sample, action = recognizer.on_frame(make_hand(0.5, 0.7, pinch_distance=0.1))

    assert isinstance(action, Scroll)
    assert (action.start_x, action.start_y) == (0.5, 0.5)
    assert action.end_x == pytest.approx(0.5)
    assert action.end_y == pytest.approx(0.69375)
    assert (action.end_x, action.end_y) == (sample.x, sample.y)


def test_lost_hand_forces_release(recognizer):
    recognizer.on_frame(make_hand(0.5, 0.5, pinch_distance=0.1))
    recognizer.on_frame(make_hand(0.5, 0.5, pinch_distance=0.03))
    recognizer.on_frame(make_hand(0.5, 0.8, pinch_distance=0.03))

    sample, action = recognizer.on_frame(None)

    assert sample.pinching is False
    assert recognizer.is_pinching is False
    assert isinstance(action, Scroll)
    assert (action.start_x, action.start_y) == (0.5, 0.5)
    assert action.end_y == pytest.approx(0.65)


def _pinch_and_release(recognizer, now):
    recognizer.on_frame(make_hand(0.5, 0.5, pinch_distance=0.03), now=now)
    return recognizer.on_frame(make_hand(0.5, 0.5, pinch_distance=0.1), now=now)[1]


def test_debounce_drops_second_release(recognizer):
    recognizer.on_frame(make_hand(0.5, 0.5, pinch_distance=0.1), now=0.0)
    assert _pinch_and_release(recognizer, 0.0) == Click(0.5, 0.5)
    assert _pinch_and_release(recognizer, 0.25) is None


def test_debounce_allows_release_after_window(recognizer):
    recognizer.on_frame(make_hand(0.5, 0.5, pinch_distance=0.1), now=0.0)
    assert _pinch_and_release(recognizer, 0.0) is not None
    assert _pinch_and_release(recognizer, 0.301) is not None


def test_clock_used_when_no_timestamp_given(recognizer, clock):
    recognizer.on_frame(make_hand(0.5, 0.5, pinch_distance=0.1))
    assert _pinch_and_release(recognizer, None) is not None

    clock.t += 0.1
    assert _pinch_and_release(recognizer, None) is None

    clock.t += 0.5
    assert _pinch_and_release(recognizer, None) is not None


def test_out_of_frame_landmarks_are_clamped(recognizer):
    sample, _ = recognizer.on_frame(make_hand(1.2, -0.1))
    assert (sample.x, sample.y) == (1.0, 0.0)


def test_wrong_landmark_count_raises(recognizer):
    class ShortHand:
        landmarks = [(0.5, 0.5, 0.0)] * 20

    with pytest.raises(LandmarkCountError):
        recognizer.on_frame(ShortHand())
    assert recognizer.position is None


def test_hand_landmarks_rejects_wrong_count():
    with pytest.raises(LandmarkCountError):
        HandLandmarks.from_points([(0.5, 0.5)] * 22)


def test_reset_returns_to_fresh_state(recognizer):
    recognizer.on_frame(make_hand(0.5, 0.5, pinch_distance=0.1))
    recognizer.on_frame(make_hand(0.5, 0.5, pinch_distance=0.03))
    recognizer.reset()

    assert recognizer.position is None
    assert recognizer.is_pinching is False
    assert recognizer.pinch_distance is None
    sample, action = recognizer.on_frame(None)
    assert action is None
