"""
Data model shared by the tracker, the recognizer and its consumers.
"""
from dataclasses import dataclass
from typing import List, Tuple, Union
import math


Landmark = Tuple[float, float, float]

# Hand connections for drawing (same as MediaPipe's HAND_CONNECTIONS)
HAND_CONNECTIONS = [
    (0, 1), (1, 2), (2, 3), (3, 4),      # Thumb
    (0, 5), (5, 6), (6, 7), (7, 8),      # Index
    (0, 9), (9, 10), (10, 11), (11, 12), # Middle
    (0, 13), (13, 14), (14, 15), (15, 16), # Ring
    (0, 17), (17, 18), (18, 19), (19, 20), # Pinky
    (5, 9), (9, 13), (13, 17),           # Palm
]


class LandmarkCountError(ValueError):
    """A hand observation did not carry exactly 21 landmarks."""


@dataclass(frozen=True)
class HandLandmarks:
    """
    Normalized hand landmarks for the first detected hand.

    Attributes:
        landmarks: 21 (x, y, z) tuples, x and y normalized 0-1
        handedness: 'Left' or 'Right'
        confidence: Detection confidence 0-1
    """
    landmarks: Tuple[Landmark, ...]
    handedness: str = "Unknown"
    confidence: float = 1.0

    NUM_LANDMARKS = 21

    # MediaPipe landmark indices read by the recognizer
    WRIST = 0
    THUMB_TIP = 4
    INDEX_TIP = 8

    def __post_init__(self):
        object.__setattr__(self, 'landmarks', tuple(tuple(p) for p in self.landmarks))
        check_landmark_count(self.landmarks)

    def get(self, index: int) -> Landmark:
        """Get landmark by index."""
        return self.landmarks[index]

    @property
    def thumb_tip(self) -> Landmark:
        return self.landmarks[self.THUMB_TIP]

    @property
    def index_tip(self) -> Landmark:
        return self.landmarks[self.INDEX_TIP]

    @classmethod
    def from_points(cls, points: List[Tuple[float, ...]], **kwargs) -> "HandLandmarks":
        """Build from (x, y) or (x, y, z) points, padding z with 0."""
        return cls(
            landmarks=tuple((p[0], p[1], p[2] if len(p) > 2 else 0.0) for p in points),
            **kwargs,
        )


def check_landmark_count(landmarks) -> None:
    count = len(landmarks)
    if count != HandLandmarks.NUM_LANDMARKS:
        raise LandmarkCountError(
            f"Expected {HandLandmarks.NUM_LANDMARKS} landmarks, got {count}"
        )


def distance_2d(p1: Tuple[float, ...], p2: Tuple[float, ...]) -> float:
    """Euclidean distance in the normalized x/y plane (z ignored)."""
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])


@dataclass(frozen=True)
class CursorSample:
    """Smoothed cursor state emitted once per frame."""
    x: float
    y: float
    pinching: bool = False


@dataclass(frozen=True)
class Click:
    """Pinch released without travelling; targets the pinch-onset position."""
    x: float
    y: float


@dataclass(frozen=True)
class Scroll:
    """Pinch released after travelling from start to end."""
    start_x: float
    start_y: float
    end_x: float
    end_y: float


ActionEvent = Union[Click, Scroll]
