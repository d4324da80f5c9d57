# src/family_site/loader/__init__.py

"""
Public interface for the dataset loader stack.

    from family_site.loader import load_people, load_places, load_stories
"""

from __future__ import annotations

from .dataset_loader import clear_cache, load_people, load_places, load_stories
from .file_locator import (
    PEOPLE_DOCUMENT,
    PLACES_DOCUMENT,
    STORIES_DOCUMENT,
    resolve_data_dir,
    resolve_document_path,
)
from .reader import read_document
from .records import (
    people_from_records,
    person_from_record,
    place_from_record,
    places_from_records,
    relationship_from_record,
    stories_from_records,
    story_from_record,
)

__all__ = [
    "PEOPLE_DOCUMENT",
    "PLACES_DOCUMENT",
    "STORIES_DOCUMENT",
    "clear_cache",
    "load_people",
    "load_places",
    "load_stories",
    "people_from_records",
    "person_from_record",
    "place_from_record",
    "places_from_records",
    "read_document",
    "relationship_from_record",
    "resolve_data_dir",
    "resolve_document_path",
    "stories_from_records",
    "story_from_record",
]
