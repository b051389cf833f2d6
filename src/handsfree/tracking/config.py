"""
Config loader for HandsFree.
Loads YAML configuration with dataclass validation.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import yaml


class ConfigError(ValueError):
    """Raised when a configuration value is out of range."""


@dataclass
class CameraConfig:
    device_id: int = 0
    width: int = 640
    height: int = 480
    fps: int = 30
    mirror: bool = True


@dataclass
class MediaPipeConfig:
    max_num_hands: int = 1
    min_detection_confidence: float = 0.5
    min_tracking_confidence: float = 0.5
    min_presence_confidence: float = 0.5
    model_path: Optional[str] = None


@dataclass
class GestureConfig:
    smoothing_factor: float = 0.5     # EMA weight of the new sample
    pinch_threshold: float = 0.08     # Index/thumb tip distance (normalized)
    scroll_threshold: float = 0.05    # Pinch travel that turns a click into a scroll
    debounce_window_ms: float = 300.0 # Min time between two emitted actions

    def __post_init__(self):
        if not 0.0 < self.smoothing_factor <= 1.0:
            raise ConfigError(
                f"smoothing_factor must be in (0, 1], got {self.smoothing_factor}"
            )
        if self.pinch_threshold <= 0.0:
            raise ConfigError(f"pinch_threshold must be positive, got {self.pinch_threshold}")
        if self.scroll_threshold <= 0.0:
            raise ConfigError(f"scroll_threshold must be positive, got {self.scroll_threshold}")
        if self.debounce_window_ms < 0.0:
            raise ConfigError(
                f"debounce_window_ms must not be negative, got {self.debounce_window_ms}"
            )

    @property
    def debounce_window(self) -> float:
        """Debounce window in seconds."""
        return self.debounce_window_ms / 1000.0


@dataclass
class PointerConfig:
    enabled: bool = True
    click_duration_ms: int = 50
    scroll_duration_ms: int = 300
    scroll_steps: int = 15
    scroll_notches: float = 30.0  # Wheel notches for a full-screen pinch travel
    natural_scroll: bool = True   # Content follows the hand, like a touch swipe
    dispatch_delay_ms: int = 20


@dataclass
class UIConfig:
    show_skeleton: bool = True
    cursor_size: int = 60


@dataclass
class Config:
    camera: CameraConfig = field(default_factory=CameraConfig)
    mediapipe: MediaPipeConfig = field(default_factory=MediaPipeConfig)
    gestures: GestureConfig = field(default_factory=GestureConfig)
    pointer: PointerConfig = field(default_factory=PointerConfig)
    ui: UIConfig = field(default_factory=UIConfig)


def _dict_to_dataclass(cls, data: dict):
    """Convert a dict to a dataclass, ignoring unknown keys."""
    if data is None:
        return cls()
    field_names = {f.name for f in cls.__dataclass_fields__.values()}
    filtered = {k: v for k, v in data.items() if k in field_names}
    return cls(**filtered)


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses default config.yaml
                    in project root.

    Returns:
        Config dataclass with all settings.

    Raises:
        ConfigError: If a gesture tunable is out of range.
    """
    if config_path is None:
        config_path = Path(__file__).parent.parent.parent.parent / "config.yaml"

    config_path = Path(config_path)

    if not config_path.exists():
        return Config()

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f) or {}

    return Config(
        camera=_dict_to_dataclass(CameraConfig, data.get('camera')),
        mediapipe=_dict_to_dataclass(MediaPipeConfig, data.get('mediapipe')),
        gestures=_dict_to_dataclass(GestureConfig, data.get('gestures')),
        pointer=_dict_to_dataclass(PointerConfig, data.get('pointer')),
        ui=_dict_to_dataclass(UIConfig, data.get('ui')),
    )
