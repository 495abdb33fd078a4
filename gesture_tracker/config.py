"""
Configuration management for hand gesture tracking.
"""
import logging
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class CameraConfig:
    """Camera configuration settings."""
    index: int = 0
    width: int = 640
    height: int = 480
    fps: int = 30


@dataclass
class MediaPipeConfig:
    """MediaPipe HandLandmarker configuration settings."""
    model_asset_path: str = "models/hand_landmarker.task"
    num_hands: int = 1
    min_detection_confidence: float = 0.5
    min_presence_confidence: float = 0.5
    min_tracking_confidence: float = 0.5
    delegate: str = "CPU"


@dataclass
class ClassifierConfig:
    """Gesture classifier thresholds."""
    open_spread_ratio: float = 1.5  # x hand size
    pinch_threshold: float = 0.05  # absolute, normalized coords
    fist_curl_ratio: float = 0.8  # x hand size


@dataclass
class DisplayConfig:
    """Display configuration settings."""
    show_preview: bool = True
    show_landmarks: bool = True
    mirror: bool = True
    window_name: str = "Hand Gesture Tracker"


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "INFO"


@dataclass
class Cfg:
    """Main configuration class."""
    camera: CameraConfig = field(default_factory=CameraConfig)
    mediapipe: MediaPipeConfig = field(default_factory=MediaPipeConfig)
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses config.default.yaml

    Returns:
        Configuration object with all settings
    """
    if path is None:
        # Use default config file in project root
        project_root = Path(__file__).parent.parent
        path = project_root / "config.default.yaml"

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f) or {}

    cfg = _dict_to_config(data)

    # Model path is relative to the config file, not the working directory
    model_path = Path(cfg.mediapipe.model_asset_path)
    if not model_path.is_absolute():
        cfg.mediapipe.model_asset_path = str(config_path.parent / model_path)

    logger.debug("Loaded config from %s", config_path)
    return cfg


def _dict_to_config(data: Dict[str, Any]) -> Cfg:
    """Convert dictionary to configuration object."""
    camera = CameraConfig(**(data.get('camera') or {}))
    mediapipe = MediaPipeConfig(**(data.get('mediapipe') or {}))
    classifier = ClassifierConfig(**(data.get('classifier') or {}))
    display = DisplayConfig(**(data.get('display') or {}))
    logging_cfg = LoggingConfig(**(data.get('logging') or {}))

    _validate_classifier(classifier)
    _validate_logging(logging_cfg)

    return Cfg(
        camera=camera,
        mediapipe=mediapipe,
        classifier=classifier,
        display=display,
        logging=logging_cfg
    )


def _validate_classifier(classifier: ClassifierConfig) -> None:
    for name in ('open_spread_ratio', 'pinch_threshold', 'fist_curl_ratio'):
        value = getattr(classifier, name)
        if not isinstance(value, (int, float)) or isinstance(value, bool) or value <= 0:
            raise ValueError(f"classifier.{name} must be a positive number, got {value!r}")


def _validate_logging(logging_cfg: LoggingConfig) -> None:
    level = str(logging_cfg.level).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown logging level: {logging_cfg.level!r}")
    logging_cfg.level = level
