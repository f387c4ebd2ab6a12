from __future__ import annotations

import json
import logging
from typing import Optional

from .document import GradientDocument

logger = logging.getLogger(__name__)


def reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def parse_json_document(json_string: str) -> Optional[GradientDocument]:
    """Parse a JSON gradient document, filling in missing fields.

    Entries inside `colorSequence` and `propsColors` are passed through as
    they are. Returns None for invalid JSON (including NaN/Infinity
    literals), a non-object top level, or a `colorSequence` that is not an
    array.
    """
    try:
        obj = json.loads(json_string, parse_constant=reject_constant)
    except (TypeError, ValueError) as exc:
        logger.warning("JSON parse error: %s", exc)
        return None

    if not isinstance(obj, dict):
        logger.warning("JSON payload is a %s, expected an object", type(obj).__name__)
        return None

    try:
        return GradientDocument.from_dict(obj)
    except TypeError as exc:
        logger.warning("Unusable JSON gradient document: %s", exc)
        return None
