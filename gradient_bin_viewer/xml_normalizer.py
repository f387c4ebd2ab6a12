from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from typing import Iterator, List, Optional

from .document import (
    DEFAULT_COLOR,
    DEFAULT_PROP_NAME,
    GradientDocument,
    Keypoint,
    PropColor,
    build_document,
)

logger = logging.getLogger(__name__)

# Leading numeric prefix, the way a lenient float parser reads "0.5s" as 0.5.
_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|\d+(?:\.\d*)?(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?)")


def parse_time_attribute(raw: Optional[str]) -> float:
    if raw is None:
        return 0.0
    match = _FLOAT_PREFIX.match(raw.lstrip())
    if not match:
        return 0.0
    value = float(match.group(0))
    # -0.0 counts as missing too
    return value or 0.0


def element_text(element: ET.Element) -> str:
    return "".join(element.itertext()).strip()


def iter_children(root: ET.Element, parent_tag: str, child_tag: str) -> Iterator[ET.Element]:
    """Yield `child_tag` elements that sit directly under any `parent_tag`."""
    for parent in root.iter(parent_tag):
        for child in parent:
            if child.tag == child_tag:
                yield child


def first_text(root: ET.Element, tag: str) -> Optional[str]:
    element = next(root.iter(tag), None)
    if element is None:
        return None
    return element_text(element) or None


def read_keypoint(element: ET.Element) -> Keypoint:
    return {
        "time": parse_time_attribute(element.get("time")),
        "color": element.get("color") or DEFAULT_COLOR,
    }


def read_prop(element: ET.Element) -> PropColor:
    return {
        "name": element.get("name") or DEFAULT_PROP_NAME,
        "color": element_text(element) or DEFAULT_COLOR,
    }


def parse_xml_document(xml_string: str) -> Optional[GradientDocument]:
    """Parse a `<root>` gradient document.

    Returns None when the markup is malformed. Missing sections produce
    empty sequences or None colors, never a failure.
    """
    try:
        root = ET.fromstring(xml_string)
    except ET.ParseError as exc:
        logger.warning("XML parse error: %s", exc)
        return None

    keypoints: List[Keypoint] = [read_keypoint(kp) for kp in iter_children(root, "colorSequence", "keypoint")]
    props: List[PropColor] = [read_prop(p) for p in iter_children(root, "propsColors", "prop")]

    return build_document(
        color_sequence=keypoints,
        props_colors=props,
        first_color=first_text(root, "firstColor"),
        last_color=first_text(root, "lastColor"),
    )
