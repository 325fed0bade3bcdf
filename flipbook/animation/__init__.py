"""Frame Animation Module.

This module turns a frame count into CSS visibility timings.

Components:
- frame_timing_schema: AnimationSpec data structures and errors
- frame_timing_generator: pure timing computation
- css_emitter: renders keyframes and binding rules
- css_injector: embeds the rules into an SVG <style> block
"""

from flipbook.animation.frame_timing_schema import (
    INFINITE,
    AnimationSpec,
    FrameWindow,
    InvalidArgument,
    PlaybackDirection,
)

from flipbook.animation.frame_timing_generator import (
    generate,
    parse_iterations,
    effective_iterations,
    frame_windows,
)

from flipbook.animation.css_emitter import (
    FrameRule,
    base_name_from_selector,
    build_frame_rules,
    build_frame_css,
)

from flipbook.animation.css_injector import inject_frame_css

__all__ = [
    # Schema
    "INFINITE",
    "AnimationSpec",
    "FrameWindow",
    "InvalidArgument",
    "PlaybackDirection",
    # Generator
    "generate",
    "parse_iterations",
    "effective_iterations",
    "frame_windows",
    # Emitter
    "FrameRule",
    "base_name_from_selector",
    "build_frame_rules",
    "build_frame_css",
    # Injector
    "inject_frame_css",
]
