"""
Dataset loader.

Public entry points used by the rest of the project:

    load_people()   -> tuple of Person
    load_places()   -> tuple of Place
    load_stories()  -> tuple of Story

Each collection is read once per process and data directory. A document
that cannot be read degrades to an empty collection; the failure is logged
and never raised to the caller.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Optional, Tuple, Union

from family_site.core.exceptions import DatasetError
from family_site.entities.models import Person, Place, Story
from family_site.logging import get_logger

from .file_locator import (
    PEOPLE_DOCUMENT,
    PLACES_DOCUMENT,
    STORIES_DOCUMENT,
    resolve_document_path,
)
from .reader import read_document
from .records import people_from_records, places_from_records, stories_from_records

log = get_logger(__name__)

# (collection key, absolute document path) -> loaded tuple
_collection_cache: Dict[Tuple[str, Path], Tuple[Any, ...]] = {}


def _load_collection(
    filename: str,
    key: str,
    convert: Callable[[Iterable[Any]], Tuple[Any, ...]],
    data_dir: Optional[Union[str, Path]],
) -> Tuple[Any, ...]:
    path = resolve_document_path(filename, data_dir)
    cache_key = (key, path)
    if cache_key in _collection_cache:
        return _collection_cache[cache_key]

    try:
        records = read_document(path, key)
        collection = convert(records)
    except DatasetError as exc:
        log.error(f"Failed to load {key} from {path}: {exc}")
        collection = ()
    except Exception:
        log.exception(f"Unexpected error while loading {key} from {path}")
        collection = ()
    else:
        log.info(f"Loaded {len(collection)} {key} from {path}")

    _collection_cache[cache_key] = collection
    return collection


def load_people(data_dir: Optional[Union[str, Path]] = None) -> Tuple[Person, ...]:
    return _load_collection(PEOPLE_DOCUMENT, "people", people_from_records, data_dir)


def load_places(data_dir: Optional[Union[str, Path]] = None) -> Tuple[Place, ...]:
    return _load_collection(PLACES_DOCUMENT, "places", places_from_records, data_dir)


def load_stories(data_dir: Optional[Union[str, Path]] = None) -> Tuple[Story, ...]:
    return _load_collection(STORIES_DOCUMENT, "stories", stories_from_records, data_dir)


def clear_cache() -> None:
    """Forget loaded collections so the next call re-reads the documents."""
    _collection_cache.clear()
