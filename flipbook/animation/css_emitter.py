"""Render an AnimationSpec as CSS keyframes and per-frame binding rules."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

from flipbook.animation.frame_timing_schema import AnimationSpec, FrameWindow, InvalidArgument

logger = logging.getLogger(__name__)

# Valid CSS identifier: starts with letter or underscore, followed by letters, digits, hyphens, underscores
VALID_CSS_IDENT_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_-]*$")


@dataclass(frozen=True)
class FrameRule:
    """Binding of one frame element to its keyframes definition."""
    selector: str
    keyframes_name: str
    window: FrameWindow


def base_name_from_selector(selector: str) -> str:
    """Strip the leading ``.``/``#`` from a simple selector (``.walk`` -> ``walk``)."""
    token = (selector or "").strip()
    if len(token) < 2:
        raise InvalidArgument("selector", selector, "must be a prefixed selector such as '.walk'")
    name = token[1:]
    if not VALID_CSS_IDENT_RE.match(name):
        raise InvalidArgument("selector", selector, "must be a simple class or id selector such as '.walk'")
    return name


def _validate_name(name: str) -> None:
    if not isinstance(name, str) or not VALID_CSS_IDENT_RE.match(name):
        raise InvalidArgument("name", name, "must be a CSS identifier")


def _format_number(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def build_frame_rules(
    spec: AnimationSpec,
    name: str,
    container_selector: Optional[str] = None,
    frame_selectors: Optional[Sequence[str]] = None,
) -> List[FrameRule]:
    """Pair each frame window with the selector of the element it drives.

    Without ``frame_selectors`` the nth child of the container plays frame n.
    An explicit sequence binds frame n to ``frame_selectors[n - 1]`` and must
    have exactly one entry per frame.
    """
    _validate_name(name)
    if frame_selectors is not None:
        selectors = [str(sel).strip() for sel in frame_selectors]
        if len(selectors) != spec.frame_count:
            raise InvalidArgument(
                "frame_selectors",
                list(frame_selectors),
                f"expected {spec.frame_count} selectors, got {len(selectors)}",
            )
        if not all(selectors):
            raise InvalidArgument("frame_selectors", list(frame_selectors), "selectors must not be empty")
    else:
        container = container_selector or f".{name}"
        selectors = [f"{container} > :nth-child({w.frame_index})" for w in spec.frame_windows]

    return [
        FrameRule(selector=sel, keyframes_name=f"{name}-{window.frame_index}", window=window)
        for sel, window in zip(selectors, spec.frame_windows)
    ]


def build_frame_css(
    spec: AnimationSpec,
    name: str,
    container_selector: Optional[str] = None,
    frame_selectors: Optional[Sequence[str]] = None,
    precision: int = 4,
) -> str:
    """Generate the style block for a frame animation.

    Output has three parts:
    - one playback rule shared by every frame (duration, direction,
      iteration count, step timing)
    - one ``@keyframes {name}-{n}`` per frame with an opacity on/off pair
    - one rule per frame assigning its keyframes by name
    """
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise InvalidArgument("precision", precision, "must be a non-negative integer")
    rules = build_frame_rules(spec, name, container_selector, frame_selectors)
    duration = _format_number(spec.total_duration, precision)
    if float(duration) == 0:
        raise InvalidArgument("precision", precision, f"duration {spec.total_duration}s rounds to zero")
    offsets = [
        (_format_number(rule.window.start_percent, precision), _format_number(rule.window.end_percent, precision))
        for rule in rules
    ]
    # every frame needs a non-empty window after rounding
    if any(start == end for start, end in offsets):
        raise InvalidArgument(
            "precision", precision, f"too coarse for {spec.frame_count} frames, windows collapse to zero width"
        )

    if frame_selectors is not None:
        playback_selector = ", ".join(rule.selector for rule in rules)
    else:
        playback_selector = f"{container_selector or '.' + name} > *"

    lines: List[str] = [
        f"/* {name}: {spec.frame_count} frames, {_format_number(spec.frame_rate, precision)}s each */",
        f"{playback_selector} {{",
        "  opacity: 0;",
        f"  animation-duration: {duration}s;",
        f"  animation-direction: {spec.direction.value};",
        f"  animation-iteration-count: {spec.effective_iterations};",
        f"  animation-timing-function: {spec.timing_function};",
        "  animation-fill-mode: both;",
        "}",
    ]

    for rule, (start, end) in zip(rules, offsets):
        lines.extend(
            [
                f"@keyframes {rule.keyframes_name} {{",
                f"  {start}% {{ opacity: 1; }}",
                f"  {end}% {{ opacity: 0; }}",
                "}",
            ]
        )

    for rule in rules:
        lines.append(f"{rule.selector} {{ animation-name: {rule.keyframes_name}; }}")

    logger.debug("Built CSS for '%s' with %d frame rules", name, len(rules))
    return "\n".join(lines)
