"""
File Locator

Resolves paths to the dataset documents inside the data directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from family_site.config import get_config
from family_site.logging import get_logger

log = get_logger(__name__)

PEOPLE_DOCUMENT = "family.json"
PLACES_DOCUMENT = "places.json"
STORIES_DOCUMENT = "stories.json"


def resolve_data_dir(data_dir: Optional[Union[str, Path]] = None) -> Path:
    """
    Return the absolute data directory.

    An explicit ``data_dir`` wins over the configured one.
    """
    if data_dir is None:
        path = get_config().data_dir
    else:
        path = Path(data_dir).expanduser()

    path = path.resolve()
    log.debug(f"Resolved data directory: {path}")
    return path


def resolve_document_path(
    filename: str,
    data_dir: Optional[Union[str, Path]] = None,
) -> Path:
    """Absolute path of ``filename`` inside the data directory (not validated)."""
    return resolve_data_dir(data_dir) / filename
