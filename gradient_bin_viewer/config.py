"""
Configuration settings for the Gradient Bin Viewer.
Defaults target the public JSONBin v3 API; every field can be overridden
through the environment.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class Settings:
    # Bins are fetched from f"{base_url}{bin_id}"
    base_url: str = "https://api.jsonbin.io/v3/b/"
    timeout: float = 10.0

    # Private bins need one of these
    access_key: Optional[str] = None
    master_key: Optional[str] = None

    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    defaults = Settings()

    base_url = env.get("GRADIENT_BIN_BASE_URL") or defaults.base_url
    if not base_url.endswith("/"):
        base_url += "/"

    raw_timeout = env.get("GRADIENT_BIN_TIMEOUT")
    try:
        timeout = float(raw_timeout) if raw_timeout else defaults.timeout
    except ValueError:
        raise ValueError(f"GRADIENT_BIN_TIMEOUT must be a number, got {raw_timeout!r}") from None

    return Settings(
        base_url=base_url,
        timeout=timeout,
        access_key=env.get("JSONBIN_ACCESS_KEY") or None,
        master_key=env.get("JSONBIN_MASTER_KEY") or None,
        log_level=(env.get("GRADIENT_BIN_LOG_LEVEL") or defaults.log_level).upper(),
    )
