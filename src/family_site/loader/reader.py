"""
Document reader.

Reads one JSON data document and returns the raw records stored under its
top-level key. Every failure surfaces as ``DatasetLoadError``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from family_site.core.exceptions import DatasetLoadError
from family_site.logging import get_logger

log = get_logger(__name__)


def read_document(path: Union[str, Path], key: str) -> List[Dict[str, Any]]:
    """
    Load ``path`` and return the list stored under ``key``.

    Raises:
        DatasetLoadError: the file is missing or unreadable, is not valid
            JSON, or has no list under ``key``.
    """
    path = Path(path)
    log.debug(f"Reading document: {path} (key={key!r})")

    if not path.is_file():
        raise DatasetLoadError(f"Data document not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError) as exc:
        raise DatasetLoadError(f"Cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DatasetLoadError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise DatasetLoadError(f"{path}: top level must be an object, got {type(data).__name__}")

    records = data.get(key)
    if not isinstance(records, list):
        raise DatasetLoadError(f"{path}: missing '{key}' array")

    log.debug(f"Read {len(records)} raw record(s) from {path}")
    return records
