from __future__ import annotations

import json
import math
import os
import tempfile
import time
from typing import Any, Optional

from .document import GradientDocument
from .json_normalizer import parse_json_document


def to_json_safe(value: Any) -> Any:
    """Replace non-finite floats with None, as browsers do when stringifying."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: to_json_safe(v) for k, v in value.items()}
    if isinstance(value, list):
        return [to_json_safe(v) for v in value]
    return value


def document_to_json(document: GradientDocument) -> str:
    """Pretty-printed export text (2-space indent), stable for a given document."""
    return json.dumps(to_json_safe(document.to_dict()), indent=2, ensure_ascii=False, allow_nan=False)


def default_export_name() -> str:
    return f"gradient_{int(time.time() * 1000)}.json"


def export_document(
    document: GradientDocument,
    file_name: Optional[str] = None,
    directory: Optional[str] = None,
) -> str:
    """Write the document as JSON and return the file path."""
    file_name = (file_name or "").strip() or default_export_name()
    if not file_name.lower().endswith('.json'):
        file_name += '.json'

    path = os.path.join(directory or tempfile.gettempdir(), file_name)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(document_to_json(document))
    return path


def read_document_file(file_obj) -> Optional[GradientDocument]:
    """Load an exported document from a path or an open file.

    Returns None when the file does not hold a usable gradient document.
    """
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        content = file_obj.read()
    else:
        path = getattr(file_obj, 'name', file_obj)
        with open(path, 'rb') as f:
            content = f.read()

    if isinstance(content, bytes):
        # exports written by other tools may carry a BOM
        content = content.decode('utf-8-sig')
    return parse_json_document(content)
