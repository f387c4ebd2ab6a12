from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TypedDict

DEFAULT_COLOR = "#FFF"
DEFAULT_PROP_NAME = "??"

CANONICAL_KEYS = ("colorSequence", "propsColors", "firstColor", "lastColor")


class Keypoint(TypedDict):
    time: float
    color: str


class PropColor(TypedDict):
    name: str
    color: str


def is_falsy(value: Any) -> bool:
    """Loose truthiness as used by the payload producers.

    Empty lists and dicts count as present; only null, false, zero and the
    empty string are treated as missing.
    """
    if value is None or value is False:
        return True
    if isinstance(value, float):
        return value == 0 or math.isnan(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return value == 0
    if isinstance(value, str):
        return value == ""
    return False


def sort_time(entry: Any) -> float:
    """Comparison key for a keypoint: its numeric time, or 0."""
    if not isinstance(entry, dict):
        return 0.0
    value = entry.get("time")
    if is_falsy(value):
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, float):
        return value
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            # integers beyond float range coerce to an infinity
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        try:
            number = float(value.strip() or 0)
        except ValueError:
            return 0.0
        return 0.0 if math.isnan(number) else number
    return 0.0


def sort_keypoints(sequence: List[Any]) -> List[Any]:
    # sorted() is stable, equal times keep their source order
    return sorted(sequence, key=sort_time)


@dataclass
class GradientDocument:
    color_sequence: List[Any] = field(default_factory=list)
    props_colors: Any = field(default_factory=list)
    first_color: Optional[Any] = None
    last_color: Optional[Any] = None
    # Other top-level keys of a JSON payload, carried through untouched.
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "colorSequence": self.color_sequence,
            "propsColors": self.props_colors,
            "firstColor": self.first_color,
            "lastColor": self.last_color,
        }
        for key, value in self.extra.items():
            data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GradientDocument":
        return build_document(
            color_sequence=data.get("colorSequence"),
            props_colors=data.get("propsColors"),
            first_color=data.get("firstColor"),
            last_color=data.get("lastColor"),
            extra={k: v for k, v in data.items() if k not in CANONICAL_KEYS},
        )

    @property
    def is_empty(self) -> bool:
        return not self.color_sequence


def build_document(
    color_sequence: Any = None,
    props_colors: Any = None,
    first_color: Any = None,
    last_color: Any = None,
    extra: Optional[Dict[str, Any]] = None,
) -> GradientDocument:
    """Apply defaulting and ordering, producing a fresh document.

    Missing or falsy fields fall back to empty sequences / None. The color
    sequence is stably sorted by time; entries are not rewritten, so a
    keypoint without a `time` keeps lacking one.
    """
    if is_falsy(color_sequence):
        color_sequence = []
    if not isinstance(color_sequence, list):
        raise TypeError(f"colorSequence must be a list, got {type(color_sequence).__name__}")
    if is_falsy(props_colors):
        props_colors = []

    return GradientDocument(
        color_sequence=sort_keypoints(color_sequence),
        props_colors=props_colors,
        first_color=None if is_falsy(first_color) else first_color,
        last_color=None if is_falsy(last_color) else last_color,
        extra=dict(extra or {}),
    )
