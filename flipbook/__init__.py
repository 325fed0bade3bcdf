"""Flipbook: CSS frame-by-frame animation generator."""

__version__ = "0.1.0"
