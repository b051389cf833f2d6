"""
HandsFree Tracking Module

Cursor smoothing and pinch gesture recognition from hand landmarks.
The MediaPipe tracker and Qt worker live in hand_tracker and worker and
are imported directly so the recognizer can be used without them.
"""
from .config import Config, GestureConfig, ConfigError, load_config
from .landmarks import (
    HandLandmarks,
    LandmarkCountError,
    CursorSample,
    Click,
    Scroll,
    ActionEvent,
)
from .smoothing import PositionSmoother
from .pinch import PinchStateMachine, PinchRelease, Idle, Pinching
from .classifier import ActionClassifier
from .gesture_recognizer import GestureRecognizer

__all__ = [
    'Config',
    'GestureConfig',
    'ConfigError',
    'load_config',
    'HandLandmarks',
    'LandmarkCountError',
    'CursorSample',
    'Click',
    'Scroll',
    'ActionEvent',
    'PositionSmoother',
    'PinchStateMachine',
    'PinchRelease',
    'Idle',
    'Pinching',
    'ActionClassifier',
    'GestureRecognizer',
]
