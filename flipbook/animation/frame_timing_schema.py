"""Frame Timing Schema - Defines the structure of a computed frame animation."""
from __future__ import annotations

import json
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, Tuple, Union


INFINITE = "infinite"

Iterations = Union[int, str]


class InvalidArgument(ValueError):
    """Raised when a generation input is malformed."""

    def __init__(self, parameter: str, value: Any, reason: str):
        super().__init__(f"Invalid {parameter}={value!r}: {reason}")
        self.parameter = parameter
        self.value = value


class PlaybackDirection(str, Enum):
    """Values accepted by ``animation-direction``."""
    NORMAL = "normal"
    ALTERNATE = "alternate"


@dataclass(frozen=True)
class FrameWindow:
    """Percentage-of-duration interval during which one frame is visible."""
    frame_index: int  # 1-based
    start_percent: float
    end_percent: float

    @property
    def span(self) -> float:
        return self.end_percent - self.start_percent


@dataclass(frozen=True)
class AnimationSpec:
    """
    Complete timing description for a frame-by-frame animation.

    Produced by ``generate`` and consumed by the CSS emitter. Instances are
    immutable and compare structurally.
    """
    frame_count: int
    frame_rate: float
    alternate: bool
    iterations: Iterations
    total_duration: float
    effective_iterations: Iterations
    direction: PlaybackDirection
    frame_windows: Tuple[FrameWindow, ...] = field(default_factory=tuple)
    timing_function: str = "steps(1)"

    @property
    def is_infinite(self) -> bool:
        return self.effective_iterations == INFINITE

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        def convert(obj):
            if isinstance(obj, Enum):
                return obj.value
            if isinstance(obj, (list, tuple)):
                return [convert(i) for i in obj]
            if isinstance(obj, dict):
                return {k: convert(v) for k, v in obj.items()}
            return obj
        return convert(asdict(self))

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=2)
