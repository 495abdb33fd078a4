"""
Main application for hand gesture tracking.
"""
import asyncio
import logging
import sys
from typing import Optional

import cv2

from .config import load_config
from .gestures import GestureProcessor
from .renderer_mock import MockRenderer
from .tracker import HandsTracker
from .types import GestureSinkProto, GestureState

logger = logging.getLogger(__name__)

GRIP_COLORS = {
    "open": (0, 255, 0),
    "pinch": (0, 200, 255),
    "point": (255, 200, 0),
    "fist": (0, 0, 255),
    "none": (160, 160, 160),
}


class GestureRecognitionApp:
    """Main application class for hand gesture tracking."""

    def __init__(self, config_path: Optional[str] = None, sink: Optional[GestureSinkProto] = None):
        """Initialize the application with configuration."""
        self.config = load_config(config_path)
        logging.getLogger().setLevel(self.config.logging.level)

        self.tracker = HandsTracker(self.config.mediapipe)
        self.sink = sink or MockRenderer()
        self.gesture_processor = GestureProcessor(self.config.classifier)

        # Initialize camera
        self.cap = cv2.VideoCapture(self.config.camera.index)
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.config.camera.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.config.camera.height)
        self.cap.set(cv2.CAP_PROP_FPS, self.config.camera.fps)

        if not self.cap.isOpened():
            self.tracker.close()
            raise RuntimeError(f"Failed to open camera {self.config.camera.index}")

    async def run(self):
        """Run the main application loop."""
        display = self.config.display
        logger.info("🎯 Starting %s (press 'q' to quit)", display.window_name)

        try:
            while True:
                ret, frame = self.cap.read()
                if not ret:
                    logger.warning("Failed to read frame from camera")
                    break

                landmarks = self.tracker.process(frame)
                state = self.gesture_processor.process_frame(landmarks)
                await self.sink.update(state)

                if not display.show_preview:
                    continue

                if landmarks and display.show_landmarks:
                    frame = self.tracker.draw_landmarks(frame, landmarks)

                frame = self._draw_status(frame, state)
                cv2.imshow(display.window_name, frame)

                # Check for quit key
                if cv2.waitKey(1) & 0xFF == ord('q'):
                    break
        finally:
            self.close()

    def _draw_status(self, frame, state: GestureState):
        """Overlay position marker and gesture status."""
        height, width = frame.shape[:2]

        if state.detected:
            px = int(state.position[0] * width)
            py = int(state.position[1] * height)
            cv2.circle(frame, (px, py), 8, (0, 0, 255), -1)

        if self.config.display.mirror:
            frame = cv2.flip(frame, 1)

        if state.detected:
            status_text = f"Grip: {state.grip.value.upper()}"
            depth_text = f"Pos: ({state.position[0]:.2f}, {state.position[1]:.2f})  Depth: {state.depth:.3f}"
        else:
            status_text = "No hand detected"
            depth_text = ""

        color = GRIP_COLORS.get(state.grip.value, (255, 255, 255))
        cv2.putText(frame, status_text, (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.7, color, 2)
        cv2.putText(frame, depth_text, (10, 60), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)
        cv2.putText(frame, "Press 'q' to quit", (10, height - 20), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)
        return frame

    def close(self):
        """Release camera, model and windows."""
        if self.cap.isOpened():
            self.cap.release()
        self.tracker.close()
        if self.config.display.show_preview:
            cv2.destroyAllWindows()


async def main():
    """Entry point for the application."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Optional config path as first argument
    config_path = sys.argv[1] if len(sys.argv) > 1 else None

    try:
        app = GestureRecognitionApp(config_path=config_path)
        await app.run()
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
    except Exception:
        logger.exception("Gesture tracker stopped with an error")


def run():
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
