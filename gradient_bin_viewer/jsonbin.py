"""Fetching gradient payloads from JSONBin."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from .config import Settings, load_settings

logger = logging.getLogger(__name__)

GRADIENT_FIELD = "gradientData"


class GradientBinError(RuntimeError):
    pass


class BinIdMissingError(GradientBinError):
    pass


class BinNotFoundError(GradientBinError):
    def __init__(self, status_code: int):
        super().__init__(f"bin not found or server unavailable (status {status_code})")
        self.status_code = status_code


class BinFetchError(GradientBinError):
    pass


class RecordMissingError(GradientBinError):
    pass


class GradientDataMissingError(GradientBinError):
    pass


def build_bin_url(bin_id: str, settings: Settings) -> str:
    return f"{settings.base_url}{quote(bin_id, safe='')}"


def build_headers(settings: Settings) -> Dict[str, str]:
    headers = {"Accept": "application/json"}
    if settings.access_key:
        headers["X-Access-Key"] = settings.access_key
    if settings.master_key:
        headers["X-Master-Key"] = settings.master_key
    return headers


def fetch_bin(
    bin_id: Optional[str],
    *,
    client: Optional[httpx.Client] = None,
    settings: Optional[Settings] = None,
) -> Dict[str, Any]:
    """GET a bin and return its decoded body (`{"record": ..., "metadata": ...}`)."""
    bin_id = (bin_id or "").strip()
    if not bin_id:
        raise BinIdMissingError("Please enter a Bin ID.")

    settings = settings or load_settings()
    url = build_bin_url(bin_id, settings)

    close_client = False
    if client is None:
        client = httpx.Client(timeout=settings.timeout)
        close_client = True
    try:
        logger.info("Fetching bin %s", bin_id)
        try:
            resp = client.get(url, headers=build_headers(settings))
        except httpx.HTTPError as exc:
            raise BinFetchError(f"network error: {exc}") from exc

        if not resp.is_success:
            logger.warning("Bin %s request failed with status %s", bin_id, resp.status_code)
            raise BinNotFoundError(resp.status_code)

        try:
            body = resp.json()
        except ValueError as exc:
            raise BinFetchError(f"response is not valid JSON: {exc}") from exc
    finally:
        if close_client:
            client.close()

    if not isinstance(body, dict):
        raise BinFetchError(f"unexpected response body of type {type(body).__name__}")
    return body


def extract_gradient_payload(body: Dict[str, Any]) -> str:
    """Pull `record.gradientData` out of a bin body."""
    record = body.get("record")
    if not record:
        raise RecordMissingError("No 'record' field found.")
    payload = record.get(GRADIENT_FIELD) if isinstance(record, dict) else None
    if not payload:
        raise GradientDataMissingError(f"No '{GRADIENT_FIELD}' in the record.")
    if not isinstance(payload, str):
        raise GradientDataMissingError(f"'{GRADIENT_FIELD}' is not a text payload.")
    return payload
