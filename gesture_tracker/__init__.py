"""
Hand Gesture Tracker

Reads hand landmarks from a camera-driven pose model and classifies them into
open / pinch / point / fist grips plus a continuous position and depth signal,
one independent snapshot per frame.
"""

__version__ = "0.1.0"

from .types import Landmark, LandmarkSet, Grip, HandFeatures, GestureState, GestureSinkProto
from .config import load_config, Cfg, ClassifierConfig
from .landmarks import extract_features, distance_2d, midpoint
from .gestures import GestureClassifier, GestureProcessor, classify
from .renderer_mock import MockRenderer

__all__ = [
    "Landmark",
    "LandmarkSet",
    "Grip",
    "HandFeatures",
    "GestureState",
    "GestureSinkProto",
    "load_config",
    "Cfg",
    "ClassifierConfig",
    "extract_features",
    "distance_2d",
    "midpoint",
    "GestureClassifier",
    "GestureProcessor",
    "classify",
    "MockRenderer",
]
