"""Inject frame animation CSS into SVG content without changing geometry."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Set
from xml.etree import ElementTree as ET

from flipbook.animation.css_emitter import build_frame_css
from flipbook.animation.frame_timing_schema import AnimationSpec

logger = logging.getLogger(__name__)


def _strip_ns(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _ensure_style_element(root: ET.Element) -> ET.Element:
    for el in root.iter():
        if _strip_ns(el.tag) == "style":
            return el
    ns = root.tag.split("}")[0] + "}" if root.tag.startswith("{") else ""
    style_el = ET.Element(f"{ns}style")
    root.insert(0, style_el)
    return style_el


def _register_svg_namespace() -> None:
    """Ensure the default SVG namespace is registered for serialization."""
    ET.register_namespace("", "http://www.w3.org/2000/svg")


def _normalize_id(frame_id: str) -> str:
    return frame_id[1:] if frame_id.startswith("#") else frame_id


def _missing_ids(frame_ids: Sequence[str], root: ET.Element) -> List[str]:
    all_ids: Set[str] = {el.get("id") for el in root.iter() if el.get("id")}
    return [fid for fid in frame_ids if fid not in all_ids]


def inject_frame_css(
    svg_text: str,
    spec: AnimationSpec,
    name: str,
    frame_ids: Optional[Sequence[str]] = None,
    container_selector: Optional[str] = None,
    strict: bool = False,
    precision: int = 4,
) -> str:
    """
    Inject frame animation CSS into SVG.

    Args:
        svg_text: The SVG content
        spec: Computed frame timing
        name: Base name for the generated keyframes
        frame_ids: Element ids in frame order; positional binding if omitted
        container_selector: Parent of the frames in positional mode
        strict: If True, raise error when frame ids are not in the document

    Returns:
        SVG with injected animation CSS
    """
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as exc:
        raise ValueError(f"Invalid SVG: {exc}") from exc

    frame_selectors = None
    if frame_ids is not None:
        ids = [_normalize_id(str(fid).strip()) for fid in frame_ids]
        missing = _missing_ids(ids, root)
        if missing:
            for fid in missing:
                logger.warning(f"Frame id not found in SVG: {fid}")
            if strict:
                raise ValueError(f"Frame ids not found in SVG: {missing}")
        frame_selectors = [f"#{fid}" for fid in ids]

    css = build_frame_css(
        spec,
        name,
        container_selector=container_selector,
        frame_selectors=frame_selectors,
        precision=precision,
    )
    style_el = _ensure_style_element(root)
    existing = style_el.text or ""
    style_el.text = f"{existing}\n{css}\n"
    _register_svg_namespace()
    return ET.tostring(root, encoding="unicode")
