"""
Type definitions for hand gesture tracking.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Protocol, Sequence, Tuple, runtime_checkable


@dataclass(frozen=True)
class Landmark:
    """A single normalized hand landmark (x, y in [0..1], z relative depth)."""
    x: float
    y: float
    z: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}


# 21 landmarks of one hand, indexed by MediaPipe convention
LandmarkSet = Sequence[Landmark]


class Grip(str, Enum):
    """Primary grip gesture, in precedence order."""
    OPEN = "open"
    PINCH = "pinch"
    POINT = "point"
    FIST = "fist"
    NONE = "none"


@dataclass(frozen=True)
class HandFeatures:
    """Scale reference and geometric features extracted from one hand."""
    hand_size: float  # wrist -> middle MCP
    spread: float  # thumb tip -> pinky tip
    pinch_dist: float  # thumb tip -> index tip
    position: Tuple[float, float]  # wrist / middle MCP midpoint
    depth: float  # abs(wrist.z)
    curl_distances: Dict[str, float]  # finger tip -> middle MCP
    index_extended: bool  # index tip above index PIP
    middle_curled: bool  # middle tip below middle PIP
    index_tip: Landmark


NOT_DETECTED_POSITION = (0.5, 0.5)
NOT_DETECTED_DEPTH = 0.5


@dataclass(frozen=True)
class GestureState:
    """Per-frame snapshot handed to the renderer."""
    position: Tuple[float, float]
    depth: float
    is_open: bool
    is_pointing: bool
    is_pinching: bool
    is_fist: bool
    index_tip: Optional[Landmark]
    detected: bool
    grip: Grip = field(default=Grip.NONE)

    @classmethod
    def not_detected(cls) -> "GestureState":
        """Neutral, centered state used when no hand is in the frame."""
        return cls(
            position=NOT_DETECTED_POSITION,
            depth=NOT_DETECTED_DEPTH,
            is_open=False,
            is_pointing=False,
            is_pinching=False,
            is_fist=False,
            index_tip=None,
            detected=False,
            grip=Grip.NONE,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON-friendly shape renderers consume."""
        return {
            "x": self.position[0],
            "y": self.position[1],
            "z": self.depth,
            "isOpen": self.is_open,
            "isPointing": self.is_pointing,
            "isPinching": self.is_pinching,
            "isFist": self.is_fist,
            "indexTip": self.index_tip.to_dict() if self.index_tip is not None else None,
            "detected": self.detected,
            "grip": self.grip.value,
        }


@runtime_checkable
class GestureSinkProto(Protocol):
    """Abstract protocol for consumers of per-frame gesture state."""

    async def update(self, state: GestureState) -> None:
        """Receive the gesture state for the current frame."""
        ...
