"""File utilities."""
from __future__ import annotations

from pathlib import Path


def ensure_dir(path: str) -> Path:
    """Ensure directory exists and return Path."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def read_text_file(path: str) -> str:
    """Read a UTF-8 text file, raising FileNotFoundError with the path if missing."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Missing file: {path}")
    return p.read_text(encoding="utf-8")


def write_text_file(path: str, content: str) -> Path:
    """Write ``content`` to ``path``, creating parent directories."""
    p = Path(path)
    ensure_dir(str(p.parent))
    p.write_text(content, encoding="utf-8")
    return p
