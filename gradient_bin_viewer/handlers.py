from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import gradio as gr
import httpx

from .config import Settings
from .detection import PayloadFormat
from .document import GradientDocument
from .io_utils import export_document, read_document_file, to_json_safe
from .jsonbin import (
    BinFetchError,
    BinIdMissingError,
    BinNotFoundError,
    GradientBinError,
    extract_gradient_payload,
    fetch_bin,
)
from .normalize import normalize_payload
from .rendering import render_gradient_html

logger = logging.getLogger(__name__)

FORMAT_MESSAGES = {
    PayloadFormat.XML: "Format detected: XML, converted to structured JSON.",
    PayloadFormat.JSON: "Format detected: JSON, parsed directly.",
}
FORMAT_LABELS = {
    PayloadFormat.XML: "Gradient (XML→JSON)",
    PayloadFormat.JSON: "Gradient (JSON)",
}
IMPORT_LABEL = "Gradient (imported JSON)"


def retrieve_gradient_handler(
    bin_id: Optional[str],
    client: Optional[httpx.Client] = None,
    settings: Optional[Settings] = None,
) -> Tuple[Optional[GradientDocument], str, str, Optional[Dict[str, Any]], Any]:
    """Fetch a bin, normalize its gradient and render it.

    Returns (document, status message, gradient html, preview, download button update).
    The previous document is always replaced, by None when anything fails.
    """
    hidden = gr.update(visible=False)
    try:
        body = fetch_bin(bin_id, client=client, settings=settings)
    except BinIdMissingError as exc:
        return None, str(exc), "", None, hidden
    except BinNotFoundError as exc:
        return None, f"Error: {exc}.", "", None, hidden
    except BinFetchError as exc:
        return None, f"Network/fetch error: {exc}", "", None, hidden

    # From here on the bin exists, so downloading is offered.
    shown = gr.update(visible=True)
    try:
        payload = extract_gradient_payload(body)
    except GradientBinError as exc:
        return None, str(exc), "", None, shown

    result = normalize_payload(payload)
    if not result.ok:
        logger.info("Bin %s: %s payload could not be normalized", bin_id, result.format.value)
        return None, "Could not parse/convert the payload into a structured document.", "", None, shown

    document = result.document
    gradient_html = render_gradient_html(document, FORMAT_LABELS[result.format])
    return document, FORMAT_MESSAGES[result.format], gradient_html, to_json_safe(document.to_dict()), shown


def import_gradient_handler(
    file_obj: Any,
) -> Tuple[Optional[GradientDocument], str, str, Optional[Dict[str, Any]], Any]:
    """Load a previously exported document and render it like a fetched bin."""
    hidden = gr.update(visible=False)
    if file_obj is None:
        return None, "No file uploaded.", "", None, hidden

    try:
        document = read_document_file(file_obj)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read uploaded file: %s", exc)
        return None, f"Error reading file: {str(exc)}", "", None, hidden

    if document is None:
        return None, "Could not parse/convert the file into a structured document.", "", None, hidden

    gradient_html = render_gradient_html(document, IMPORT_LABEL)
    return document, "Imported structured JSON.", gradient_html, to_json_safe(document.to_dict()), gr.update(visible=True)


def download_gradient_handler(
    document: Optional[GradientDocument],
    file_name: Optional[str] = None,
) -> Tuple[Optional[str], str]:
    if document is None:
        return None, "No structured data available."

    try:
        path = export_document(document, file_name)
    except OSError as exc:
        logger.exception("Export failed")
        return None, f"Error during export: {str(exc)}"
    return path, f"Export successful! Saved to {path}"
