"""
Gesture classification that converts hand landmarks into per-frame gesture state.
"""
import logging
from typing import Optional

from .types import GestureState, Grip, HandFeatures, LandmarkSet
from .config import ClassifierConfig
from .landmarks import extract_features

logger = logging.getLogger(__name__)


class GestureClassifier:
    """
    Maps hand features to one primary grip plus the four gesture flags.

    Predicates are evaluated in precedence order and each one gates the
    later ones:

    1. Open   - thumb/pinky spread wider than open_spread_ratio x hand size
    2. Pinch  - thumb/index tips closer than pinch_threshold (absolute)
    3. Point  - index extended and middle curled, only when not pinching
    4. Fist   - every fingertip within fist_curl_ratio x hand size of the
                middle MCP, only when not open, pointing or pinching

    Open is reported independently, so it may be set together with Pinch or
    Point; Pinch, Point and Fist never overlap. The primary grip is the first
    predicate that holds, Grip.NONE when none does.
    """

    def __init__(self, cfg: Optional[ClassifierConfig] = None):
        """Initialize classifier with thresholds (defaults when None)."""
        self.cfg = cfg or ClassifierConfig()

    def classify(self, features: HandFeatures) -> GestureState:
        """
        Classify one frame's features.

        Args:
            features: Features of the detected hand

        Returns:
            GestureState with detected=True
        """
        hand_size = features.hand_size

        is_open = features.spread > hand_size * self.cfg.open_spread_ratio
        is_pinching = features.pinch_dist < self.cfg.pinch_threshold
        is_pointing = (not is_pinching
                       and features.index_extended
                       and features.middle_curled)

        # Fingers curled in toward the palm center
        fist_limit = hand_size * self.cfg.fist_curl_ratio
        is_fist = (not is_open and not is_pointing and not is_pinching
                   and all(d < fist_limit for d in features.curl_distances.values()))

        if is_open:
            grip = Grip.OPEN
        elif is_pinching:
            grip = Grip.PINCH
        elif is_pointing:
            grip = Grip.POINT
        elif is_fist:
            grip = Grip.FIST
        else:
            grip = Grip.NONE

        return GestureState(
            position=features.position,
            depth=features.depth,
            is_open=is_open,
            is_pointing=is_pointing,
            is_pinching=is_pinching,
            is_fist=is_fist,
            index_tip=features.index_tip,
            detected=True,
            grip=grip,
        )

    def primary(self, features: HandFeatures) -> Grip:
        """Return only the primary grip for the given features."""
        return self.classify(features).grip


def classify(features: HandFeatures, cfg: Optional[ClassifierConfig] = None) -> GestureState:
    """Classify features with a one-off classifier."""
    return GestureClassifier(cfg).classify(features)


class GestureProcessor:
    """
    Per-frame driver: landmarks in, one GestureState out.

    Holds no state between frames; each call is independent.
    """

    def __init__(self, cfg: Optional[ClassifierConfig] = None):
        """Initialize gesture processor with classifier configuration."""
        self.classifier = GestureClassifier(cfg)

    def process_frame(self, landmarks: Optional[LandmarkSet]) -> GestureState:
        """
        Process a frame and return its gesture state.

        Args:
            landmarks: 21 hand landmarks (None or empty if no hand detected)

        Returns:
            GestureState for this frame, the neutral fallback if no hand
        """
        if not landmarks:
            logger.debug("No hand detected, emitting fallback state")
            return GestureState.not_detected()

        features = extract_features(landmarks)
        state = self.classifier.classify(features)
        logger.debug("Classified frame: grip=%s hand_size=%.4f spread=%.4f pinch=%.4f",
                     state.grip.value, features.hand_size, features.spread, features.pinch_dist)
        return state
