"""
Hand landmark detection using MediaPipe HandLandmarker.
"""
import logging
import time
from pathlib import Path
from typing import List, Optional

import cv2
import mediapipe as mp
import numpy as np
from mediapipe.tasks import python as mp_tasks
from mediapipe.tasks.python import vision

from .config import MediaPipeConfig
from .types import Landmark

logger = logging.getLogger(__name__)


class HandsTracker:
    """Hand landmark tracker using the MediaPipe Tasks HandLandmarker."""

    def __init__(self, cfg: Optional[MediaPipeConfig] = None):
        """
        Initialize the hands tracker.

        Args:
            cfg: MediaPipe settings (model path, confidences, delegate)
        """
        cfg = cfg or MediaPipeConfig()
        model_path = Path(cfg.model_asset_path)
        if not model_path.exists():
            raise FileNotFoundError(f"Hand landmarker model not found: {model_path}")

        delegate = (mp_tasks.BaseOptions.Delegate.GPU
                    if cfg.delegate.upper() == "GPU"
                    else mp_tasks.BaseOptions.Delegate.CPU)

        options = vision.HandLandmarkerOptions(
            base_options=mp_tasks.BaseOptions(
                model_asset_path=str(model_path),
                delegate=delegate
            ),
            running_mode=vision.RunningMode.VIDEO,
            num_hands=cfg.num_hands,
            min_hand_detection_confidence=cfg.min_detection_confidence,
            min_hand_presence_confidence=cfg.min_presence_confidence,
            min_tracking_confidence=cfg.min_tracking_confidence
        )
        self.landmarker = vision.HandLandmarker.create_from_options(options)
        self._last_timestamp_ms = -1
        logger.info("Hand landmarker loaded from %s (%s)", model_path, delegate.name)

    def _next_timestamp_ms(self) -> int:
        # VIDEO mode requires strictly increasing timestamps
        ts = int(time.monotonic() * 1000)
        if ts <= self._last_timestamp_ms:
            ts = self._last_timestamp_ms + 1
        self._last_timestamp_ms = ts
        return ts

    def process(self, frame_bgr: np.ndarray) -> Optional[List[Landmark]]:
        """
        Process a frame and return hand landmarks.

        Args:
            frame_bgr: Input frame in BGR format

        Returns:
            List of 21 Landmarks in [0..1] range, or None if no hand detected
        """
        # Convert BGR to RGB for MediaPipe
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        image = mp.Image(image_format=mp.ImageFormat.SRGB, data=frame_rgb)

        result = self.landmarker.detect_for_video(image, self._next_timestamp_ms())

        if result.hand_landmarks:
            # Only the first hand drives the gesture state
            return [Landmark(lm.x, lm.y, lm.z) for lm in result.hand_landmarks[0]]

        return None

    def draw_landmarks(self, frame: np.ndarray, landmarks: List[Landmark]) -> np.ndarray:
        """
        Draw hand landmarks on the frame.

        Args:
            frame: Input frame
            landmarks: List of Landmarks in [0..1] range

        Returns:
            Frame with landmarks drawn
        """
        height, width = frame.shape[:2]

        for i, lm in enumerate(landmarks):
            px = int(lm.x * width)
            py = int(lm.y * height)
            cv2.circle(frame, (px, py), 3, (0, 255, 0), -1)
            cv2.putText(frame, str(i), (px + 5, py - 5), cv2.FONT_HERSHEY_SIMPLEX, 0.3, (255, 255, 255), 1)

        return frame

    def close(self) -> None:
        """Release the landmarker."""
        self.landmarker.close()
