"""
Hand landmark geometry and feature extraction.
"""
import math
from typing import Dict, Tuple

from .types import HandFeatures, Landmark, LandmarkSet

# MediaPipe hand landmark indices
WRIST = 0
THUMB_TIP = 4
INDEX_PIP = 6
INDEX_TIP = 8
MIDDLE_MCP = 9
MIDDLE_PIP = 10
MIDDLE_TIP = 12
RING_TIP = 16
PINKY_TIP = 20

NUM_LANDMARKS = 21

FINGER_TIPS: Dict[str, int] = {
    "index": INDEX_TIP,
    "middle": MIDDLE_TIP,
    "ring": RING_TIP,
    "pinky": PINKY_TIP,
}


def distance_2d(a, b) -> float:
    """Euclidean distance between two landmarks in the image plane."""
    return math.hypot(a.x - b.x, a.y - b.y)


def midpoint(a, b) -> Tuple[float, float]:
    """(x, y) midpoint between two landmarks."""
    return ((a.x + b.x) / 2, (a.y + b.y) / 2)


def extract_features(landmarks: LandmarkSet) -> HandFeatures:
    """
    Reduce a 21-point hand pose into the features the classifier reads.

    Args:
        landmarks: 21 landmarks exposing .x, .y and .z (normalized coords)

    Returns:
        HandFeatures for this frame
    """
    wrist = landmarks[WRIST]
    middle_mcp = landmarks[MIDDLE_MCP]
    thumb_tip = landmarks[THUMB_TIP]
    index_tip = landmarks[INDEX_TIP]

    curl_distances = {
        name: distance_2d(landmarks[idx], middle_mcp)
        for name, idx in FINGER_TIPS.items()
    }

    return HandFeatures(
        hand_size=distance_2d(wrist, middle_mcp),
        spread=distance_2d(thumb_tip, landmarks[PINKY_TIP]),
        pinch_dist=distance_2d(thumb_tip, index_tip),
        position=midpoint(wrist, middle_mcp),
        depth=abs(wrist.z),
        curl_distances=curl_distances,
        # y grows downward in image space
        index_extended=index_tip.y < landmarks[INDEX_PIP].y,
        middle_curled=landmarks[MIDDLE_TIP].y > landmarks[MIDDLE_PIP].y,
        index_tip=Landmark(index_tip.x, index_tip.y, index_tip.z),
    )
