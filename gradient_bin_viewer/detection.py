from __future__ import annotations

from enum import Enum

XML_ROOT_TOKEN = "<root>"


class PayloadFormat(str, Enum):
    XML = "xml"
    JSON = "json"


def detect_format(payload: str) -> PayloadFormat:
    """Classify a raw payload by prefix only.

    Anything that starts with `<root>` once trimmed goes down the XML path,
    well-formed or not. Everything else is handed to the JSON parser.
    """
    if (payload or "").strip().startswith(XML_ROOT_TOKEN):
        return PayloadFormat.XML
    return PayloadFormat.JSON
