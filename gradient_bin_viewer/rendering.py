from __future__ import annotations

import html
import math
from typing import Any, List, Optional

from .document import DEFAULT_COLOR, GradientDocument, sort_time

EMPTY_GRADIENT_MESSAGE = "No colorSequence to display."


def stop_percentage(time: float) -> str:
    scaled = time * 100
    if math.isinf(scaled):
        return "Infinity" if scaled > 0 else "-Infinity"
    # round half up, 0.125 -> 13
    return str(int(math.floor(scaled + 0.5)))


def format_stop(keypoint: Any) -> str:
    color = keypoint.get("color") if isinstance(keypoint, dict) else None
    if color is None or color == "":
        color = DEFAULT_COLOR
    return f"{color} {stop_percentage(sort_time(keypoint))}%"


def build_gradient(sequence: Optional[List[Any]]) -> Optional[str]:
    """Build a left-to-right multi-stop gradient from sorted keypoints.

    Returns None when there is nothing to draw.
    """
    if not sequence:
        return None
    stops = [format_stop(kp) for kp in sequence]
    return f"linear-gradient(to right, {', '.join(stops)})"


def render_gradient(document: Optional[GradientDocument]) -> Optional[str]:
    if document is None or document.is_empty:
        return None
    return build_gradient(document.color_sequence)


def render_gradient_html(document: Optional[GradientDocument], label: str) -> str:
    gradient = render_gradient(document)
    if gradient is None:
        return f"<div class=\"gradient-empty\">{EMPTY_GRADIENT_MESSAGE}</div>"

    return (
        f"<div class=\"gradient-box\" style=\"background: {html.escape(gradient, quote=True)};"
        " height: 120px; border-radius: 8px; position: relative;\">"
        f"<div class=\"gradient-title\" style=\"position: absolute; left: 8px; bottom: 8px;"
        " background: rgba(0, 0, 0, 0.5); color: #fff; padding: 2px 6px; border-radius: 4px;\">"
        f"{html.escape(label)}</div>"
        "</div>"
    )
