from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .detection import PayloadFormat, detect_format
from .document import GradientDocument
from .json_normalizer import parse_json_document
from .xml_normalizer import parse_xml_document


@dataclass(frozen=True)
class NormalizationResult:
    format: PayloadFormat
    document: Optional[GradientDocument]

    @property
    def ok(self) -> bool:
        return self.document is not None


def normalize_payload(payload: str) -> NormalizationResult:
    """Detect the payload format and run the matching normalizer."""
    fmt = detect_format(payload)
    if fmt is PayloadFormat.XML:
        return NormalizationResult(fmt, parse_xml_document(payload))
    return NormalizationResult(fmt, parse_json_document(payload))
