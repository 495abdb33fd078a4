"""
Test cases for the mock renderer sink.
"""
import asyncio
import unittest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from gesture_tracker.gestures import GestureProcessor
from gesture_tracker.renderer_mock import MockRenderer
from gesture_tracker.types import GestureSinkProto, GestureState, Grip

from hand_poses import FIST, OPEN, make_hand


class TestMockRenderer(unittest.TestCase):
    """Test that the mock renderer consumes per-frame state."""

    def setUp(self):
        self.renderer = MockRenderer()
        self.processor = GestureProcessor()

    def feed(self, *frames):
        async def run():
            for landmarks in frames:
                await self.renderer.update(self.processor.process_frame(landmarks))
        asyncio.run(run())

    def test_implements_sink_protocol(self):
        self.assertIsInstance(self.renderer, GestureSinkProto)

    def test_counts_frames_by_grip(self):
        self.feed(make_hand(OPEN), make_hand(OPEN), None, make_hand(FIST))

        self.assertEqual(self.renderer.frame_count, 4)
        self.assertEqual(self.renderer.count(Grip.OPEN), 2)
        self.assertEqual(self.renderer.count(Grip.FIST), 1)
        self.assertEqual(self.renderer.count(Grip.NONE), 1)
        self.assertEqual(self.renderer.last_state.grip, Grip.FIST)

    def test_logs_grip_changes_only(self):
        with self.assertLogs("gesture_tracker.renderer_mock", level="INFO") as logs:
            self.feed(make_hand(OPEN), make_hand(OPEN), None, None)

        self.assertEqual(len(logs.records), 2)

    def test_reset_counters(self):
        self.feed(None)
        self.renderer.reset_counters()

        self.assertEqual(self.renderer.frame_count, 0)
        self.assertEqual(self.renderer.count(Grip.NONE), 0)
        self.assertIsNone(self.renderer.last_state)

    def test_state_snapshot_serializes(self):
        self.feed(None)
        self.assertEqual(self.renderer.last_state.to_dict(), {
            "x": 0.5, "y": 0.5, "z": 0.5,
            "isOpen": False, "isPointing": False, "isPinching": False, "isFist": False,
            "indexTip": None, "detected": False, "grip": "none",
        })
        self.assertEqual(self.renderer.last_state, GestureState.not_detected())


if __name__ == '__main__':
    unittest.main()
