"""Compute per-frame visibility windows and playback parameters."""
from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Tuple

from flipbook.animation.frame_timing_schema import (
    INFINITE,
    AnimationSpec,
    FrameWindow,
    InvalidArgument,
    Iterations,
    PlaybackDirection,
)

logger = logging.getLogger(__name__)

DEFAULT_FRAME_RATE = 0.25


def _is_int(value) -> bool:
    # bool is an int subclass but never a valid count
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_frame_count(frame_count) -> None:
    if not _is_int(frame_count):
        raise InvalidArgument("frame_count", frame_count, "must be an integer")
    if frame_count < 1:
        raise InvalidArgument("frame_count", frame_count, "must be at least 1")


def _coerce_frame_rate(frame_rate) -> float:
    if isinstance(frame_rate, bool) or not isinstance(frame_rate, Real):
        raise InvalidArgument("frame_rate", frame_rate, "must be a number of seconds")
    try:
        rate = float(frame_rate)
    except OverflowError:
        raise InvalidArgument("frame_rate", frame_rate, "must be a positive, finite number") from None
    if not math.isfinite(rate) or rate <= 0:
        raise InvalidArgument("frame_rate", frame_rate, "must be a positive, finite number")
    return rate


def _validate_iterations(iterations) -> None:
    if iterations == INFINITE:
        return
    if not _is_int(iterations):
        raise InvalidArgument("iterations", iterations, f"must be a positive integer or '{INFINITE}'")
    if iterations < 1:
        raise InvalidArgument("iterations", iterations, "must be at least 1")


def parse_iterations(text: str) -> Iterations:
    """Convert textual input (CLI, environment) into an iterations value.

    Accepts ``infinite`` in any case or a decimal integer >= 1.
    """
    token = str(text).strip()
    if token.lower() == INFINITE:
        return INFINITE
    try:
        value = int(token)
    except ValueError:
        raise InvalidArgument("iterations", text, f"must be a positive integer or '{INFINITE}'") from None
    _validate_iterations(value)
    return value


def effective_iterations(iterations: Iterations, alternate: bool) -> Iterations:
    """Iteration count as understood by the playback engine.

    The engine counts each direction of an alternating pass separately, so a
    finite count is doubled to keep a round trip as one logical iteration.
    """
    if iterations == INFINITE:
        return iterations
    if alternate:
        return iterations * 2
    return iterations


def frame_windows(frame_count: int) -> Tuple[FrameWindow, ...]:
    """Contiguous visibility windows covering 0-100% in frame order."""
    _validate_frame_count(frame_count)
    # start of frame i+1 and end of frame i are the same expression
    return tuple(
        FrameWindow(
            frame_index=index,
            start_percent=100 * (index - 1) / frame_count,
            end_percent=100 * index / frame_count,
        )
        for index in range(1, frame_count + 1)
    )


def generate(
    frame_count: int,
    frame_rate: float = DEFAULT_FRAME_RATE,
    alternate: bool = True,
    iterations: Iterations = INFINITE,
) -> AnimationSpec:
    """Build the timing spec for ``frame_count`` frames shown one at a time.

    Args:
        frame_count: Number of frame elements (>= 1)
        frame_rate: Seconds each frame stays visible (> 0)
        alternate: Reverse playback direction after each pass
        iterations: Positive integer or ``"infinite"``

    Raises:
        InvalidArgument: if any input is malformed. Nothing is computed
            before all inputs are validated.
    """
    _validate_frame_count(frame_count)
    frame_rate = _coerce_frame_rate(frame_rate)
    if not isinstance(alternate, bool):
        raise InvalidArgument("alternate", alternate, "must be a boolean")
    _validate_iterations(iterations)
    try:
        total_duration = frame_count * frame_rate
    except OverflowError:
        total_duration = math.inf
    if not math.isfinite(total_duration):
        raise InvalidArgument("frame_rate", frame_rate, "total duration overflows")

    spec = AnimationSpec(
        frame_count=frame_count,
        frame_rate=frame_rate,
        alternate=alternate,
        iterations=iterations,
        total_duration=total_duration,
        effective_iterations=effective_iterations(iterations, alternate),
        direction=PlaybackDirection.ALTERNATE if alternate else PlaybackDirection.NORMAL,
        frame_windows=frame_windows(frame_count),
    )
    logger.debug(
        "Generated %d frame windows (duration=%ss, direction=%s, iterations=%s)",
        frame_count,
        spec.total_duration,
        spec.direction.value,
        spec.effective_iterations,
    )
    return spec
