"""
Exporter package.

JSON conversion for entities and query results, and the dataset document
writer used by ``family-site export``.
"""

from __future__ import annotations

from .json_exporter import (
    export_dataset,
    person_to_record,
    place_to_record,
    serialize_json,
    story_to_record,
    to_json_compatible,
)

__all__ = [
    "export_dataset",
    "person_to_record",
    "place_to_record",
    "serialize_json",
    "story_to_record",
    "to_json_compatible",
]
