"""Cached data loaders for ligation reference datasets.

The bundled ``ligation_data.json`` holds synthetic demonstration values, not
measured frequencies. Production use needs ``LIGATION_DATA_PATH`` pointing at a
measured ligation dataset.
"""

# purpose: expose the per-enzyme ligation frequency dataset as cached read-only payloads
# status: experimental
# depends_on: json, pathlib

from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_BASE_DIR = Path(__file__).resolve().parent

DEFAULT_LIGATION_DATA = _BASE_DIR / "ligation_data.json"


def _load_json(path: Path) -> Any:
    """Return parsed JSON payload from disk."""

    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def ligation_data_path() -> Path:
    """Return the dataset location, honouring the LIGATION_DATA_PATH override."""

    override = os.getenv("LIGATION_DATA_PATH", "").strip()
    if override:
        return Path(override)
    return DEFAULT_LIGATION_DATA


@lru_cache(maxsize=None)
def get_ligation_catalog() -> dict[str, Any]:
    """Return the cached ligation frequency dataset."""

    # purpose: load the empirical ligation tables once per process
    path = ligation_data_path()
    payload = _load_json(path)
    enzymes = payload.get("enzymes") or {}
    logger.info(
        "Loaded ligation dataset %s (version=%s, enzymes=%d)",
        path,
        payload.get("version", "unversioned"),
        len(enzymes),
    )
    return payload
