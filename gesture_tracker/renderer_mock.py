"""
Mock renderer implementation for consuming gesture state.
"""
import logging
from collections import Counter
from typing import Optional

from .types import GestureState, Grip

logger = logging.getLogger(__name__)


class MockRenderer:
    """Mock renderer that logs gesture state instead of drawing a scene."""

    def __init__(self):
        """Initialize the mock renderer."""
        self.frame_count = 0
        self.grip_counts: Counter = Counter()
        self.last_state: Optional[GestureState] = None

    async def update(self, state: GestureState) -> None:
        """Record the state and log grip changes."""
        self.frame_count += 1
        self.grip_counts[state.grip] += 1

        previous = self.last_state
        if previous is None or previous.grip != state.grip or previous.detected != state.detected:
            logger.info("[MockRenderer] grip=%s detected=%s at (%.2f, %.2f) depth=%.3f (frame #%d)",
                        state.grip.value, state.detected, state.position[0], state.position[1],
                        state.depth, self.frame_count)
        self.last_state = state

    def count(self, grip: Grip) -> int:
        """Number of frames received with the given primary grip."""
        return self.grip_counts[grip]

    def reset_counters(self) -> None:
        """Reset counters for testing."""
        self.frame_count = 0
        self.grip_counts.clear()
        self.last_state = None
