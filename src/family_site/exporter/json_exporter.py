"""
json_exporter.py
JSON conversion and export for dataset entities and query results.

This exporter:
- Converts dataclasses, enums and containers to plain JSON structures
- Writes dataset documents in the site's camelCase record format
- Produces deterministic output (stable key order, UTF-8, no ASCII escaping)
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from family_site.entities.models import Person, Place, Relationship, Story
from family_site.loader.file_locator import PEOPLE_DOCUMENT, PLACES_DOCUMENT, STORIES_DOCUMENT
from family_site.logging import get_logger

log = get_logger(__name__)


def to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Primitives pass through
    - Enum members -> their value
    - dataclasses -> dict of public fields (recursively)
    - dict -> dict with string keys (enum keys use their value)
    - list / tuple / set -> list (recursively)
    - Anything else -> str(obj)
    """
    if isinstance(obj, Enum):
        return obj.value

    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.name: to_json_compatible(getattr(obj, f.name))
            for f in fields(obj)
            if not f.name.startswith("_")
        }

    if isinstance(obj, dict):
        return {
            str(k.value if isinstance(k, Enum) else k): to_json_compatible(v)
            for k, v in obj.items()
        }

    if isinstance(obj, (list, tuple, set, frozenset)):
        return [to_json_compatible(v) for v in obj]

    return str(obj)


# ---------------------------------------------------------------------------
# Wire records (camelCase, None omitted)
# ---------------------------------------------------------------------------

def _compact(record: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in record.items() if v is not None}


def relationship_to_record(rel: Relationship) -> Dict[str, Any]:
    return _compact({
        "type": rel.type.value,
        "personId": rel.person_id,
        "years": rel.years,
    })


def person_to_record(person: Person) -> Dict[str, Any]:
    return _compact({
        "id": person.id,
        "firstName": person.first_name,
        "middleName": person.middle_name,
        "lastName": person.last_name,
        "maidenName": person.maiden_name,
        "nickname": person.nickname,
        "birthDate": person.birth_date,
        "deathDate": person.death_date,
        "branch": person.branch.value,
        "generation": person.generation,
        "location": person.location,
        "bio": person.bio,
        "photo": person.photo,
        "relationships": [relationship_to_record(r) for r in person.relationships] or None,
    })


def place_to_record(place: Place) -> Dict[str, Any]:
    return _compact({
        "id": place.id,
        "name": place.name,
        "location": place.location,
        "type": place.type.value,
        "significance": place.significance,
        "branch": place.branch.value,
        "image": place.image,
    })


def story_to_record(story: Story) -> Dict[str, Any]:
    return _compact({
        "id": story.id,
        "title": story.title,
        "excerpt": story.excerpt,
        "category": story.category.value,
        "relatedBranches": [b.value for b in story.related_branches],
        "featuredImage": story.featured_image,
        "date": story.date,
    })


# ---------------------------------------------------------------------------
# Document export
# ---------------------------------------------------------------------------

def serialize_json(data: Any, indent: int | None = 2) -> str:
    if indent is None:
        return json.dumps(to_json_compatible(data), separators=(",", ":"), ensure_ascii=False)
    return json.dumps(to_json_compatible(data), indent=indent, ensure_ascii=False)


def _write_document(path: Path, key: str, records: List[Dict[str, Any]], indent: int) -> None:
    path.write_text(serialize_json({key: records}, indent=indent) + "\n", encoding="utf-8")
    log.info("Wrote %d %s to %s (%d bytes)", len(records), key, path, path.stat().st_size)


def export_dataset(dataset: Any, out_dir: Union[str, Path], indent: int = 2) -> List[Path]:
    """
    Write ``family.json``, ``places.json`` and ``stories.json`` under ``out_dir``.

    Returns the written paths. The documents load back with
    ``family_site.loader``.
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    people: Iterable[Person] = getattr(dataset, "people", ()) or ()
    places: Iterable[Place] = getattr(dataset, "places", ()) or ()
    stories: Iterable[Story] = getattr(dataset, "stories", ()) or ()

    targets = [
        (out_dir / PEOPLE_DOCUMENT, "people", [person_to_record(p) for p in people]),
        (out_dir / PLACES_DOCUMENT, "places", [place_to_record(p) for p in places]),
        (out_dir / STORIES_DOCUMENT, "stories", [story_to_record(s) for s in stories]),
    ]

    log.info("Exporting dataset to: %s", out_dir)
    for path, key, records in targets:
        _write_document(path, key, records, indent)

    return [path for path, _, _ in targets]
