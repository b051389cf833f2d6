import pytest
from handsfree.tracking.classifier import ActionClassifier
from handsfree.tracking.landmarks import Click, Scroll
from handsfree.tracking.pinch import PinchRelease


def release(distance=0.0, start=(0.5, 0.5), end=None):
    end = end or start
    return PinchRelease(start[0], start[1], end[0], end[1], distance)


@pytest.fixture
def classifier():
    return ActionClassifier(scroll_threshold=0.05, debounce_window=0.3)


def test_short_travel_clicks_at_start(classifier):
    action = classifier.classify(release(0.01, start=(0.4, 0.6), end=(0.41, 0.6)), now=1.0)
    assert action == Click(0.4, 0.6)


def test_long_travel_scrolls_to_end(classifier):
    action = classifier.classify(release(0.2, start=(0.5, 0.5), end=(0.5, 0.7)), now=1.0)
    assert action == Scroll(0.5, 0.5, 0.5, 0.7)


def test_travel_equal_to_threshold_is_a_click(classifier):
    assert isinstance(classifier.classify(release(0.05), now=1.0), Click)


def test_release_inside_window_is_suppressed(classifier):
    assert classifier.classify(release(), now=0.0) is not None
    assert classifier.classify(release(), now=0.25) is None
    assert classifier.last_action_time == 0.0


def test_release_after_window_emits(classifier):
    assert classifier.classify(release(), now=0.0) is not None
    assert classifier.classify(release(), now=0.301) is not None
    assert classifier.last_action_time == 0.301


def test_release_exactly_at_window_edge_is_suppressed(classifier):
    classifier.classify(release(), now=10.0)
    assert classifier.classify(release(), now=10.0 + 0.25) is None
    assert classifier.classify(release(), now=10.0 + 0.3) is None


def test_suppressed_release_does_not_extend_window(classifier):
    classifier.classify(release(), now=0.0)
    assert classifier.classify(release(), now=0.2) is None
    # Window still counts from t=0, not from the suppressed release
    assert classifier.classify(release(), now=0.35) is not None


def test_clock_going_backwards_is_suppressed(classifier):
    classifier.classify(release(), now=5.0)
    assert classifier.classify(release(), now=4.0) is None
    assert classifier.last_action_time == 5.0


def test_first_release_is_never_debounced(classifier):
    assert classifier.classify(release(), now=0.0) == Click(0.5, 0.5)


def test_reset_clears_last_action(classifier):
    classifier.classify(release(), now=1.0)
    classifier.reset()
    assert classifier.last_action_time is None
    assert classifier.classify(release(), now=1.1) is not None
