"""
Record converters.

Turn raw JSON records (camelCase keys, as written by the site) into the
immutable entities in ``family_site.entities``. Snake_case keys are accepted
as well so documents written by hand or by older exports still load.

The ``*_from_record`` functions are strict and raise ``RecordError``. The
``*_from_records`` functions apply the collection policy: invalid or
duplicate records are skipped with a warning and the rest load.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional, Set, Tuple, TypeVar

from family_site.core.exceptions import RecordError
from family_site.entities.models import (
    PERSON_BRANCHES,
    Branch,
    Person,
    Place,
    PlaceType,
    Relationship,
    RelationshipType,
    Story,
    StoryCategory,
)
from family_site.logging import get_logger

log = get_logger(__name__)

T = TypeVar("T")


# ----------------------------------------------------------------------
# Field helpers
# ----------------------------------------------------------------------

def _snake(key: str) -> str:
    out = []
    for ch in key:
        if ch.isupper():
            out.append("_")
            out.append(ch.lower())
        else:
            out.append(ch)
    return "".join(out)


def _get(record: Dict[str, Any], key: str) -> Any:
    """Value under the camelCase ``key`` or its snake_case twin."""
    if key in record:
        return record[key]
    return record.get(_snake(key))


def _optional_str(record: Dict[str, Any], key: str) -> Optional[str]:
    value = _get(record, key)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _required_str(record: Dict[str, Any], key: str) -> str:
    value = _optional_str(record, key)
    if value is None:
        raise RecordError(f"missing required field '{key}'")
    return value


def _enum(enum_cls, value: Any, field_name: str):
    try:
        return enum_cls(value)
    except ValueError:
        raise RecordError(f"unknown {field_name} {value!r}") from None


def _generation(value: Any) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise RecordError(f"generation must be an integer, got {value!r}")
    if value < 1:
        raise RecordError(f"generation must be positive, got {value}")
    return value


def _record_id(record: Any) -> str:
    if isinstance(record, dict):
        return str(record.get("id") or "<no id>")
    return "<not an object>"


# ----------------------------------------------------------------------
# Single-record converters
# ----------------------------------------------------------------------

def relationship_from_record(record: Dict[str, Any]) -> Relationship:
    if not isinstance(record, dict):
        raise RecordError("relationship must be an object")
    return Relationship(
        type=_enum(RelationshipType, _get(record, "type"), "relationship type"),
        person_id=_required_str(record, "personId"),
        years=_optional_str(record, "years"),
    )


def _relationships(person_id: str, raw: Any) -> Tuple[Relationship, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise RecordError("relationships must be an array")

    edges: List[Relationship] = []
    for item in raw:
        try:
            edges.append(relationship_from_record(item))
        except RecordError as exc:
            log.warning(f"Dropping relationship on '{person_id}': {exc}")
    return tuple(edges)


def person_from_record(record: Dict[str, Any]) -> Person:
    if not isinstance(record, dict):
        raise RecordError("person record must be an object")

    person_id = _required_str(record, "id")
    branch = _enum(Branch, _get(record, "branch"), "branch")
    if branch not in PERSON_BRANCHES:
        raise RecordError(f"branch {branch.value!r} is not valid for a person")

    return Person(
        id=person_id,
        first_name=_required_str(record, "firstName"),
        last_name=_required_str(record, "lastName"),
        branch=branch,
        generation=_generation(_get(record, "generation")),
        middle_name=_optional_str(record, "middleName"),
        maiden_name=_optional_str(record, "maidenName"),
        nickname=_optional_str(record, "nickname"),
        birth_date=_optional_str(record, "birthDate"),
        death_date=_optional_str(record, "deathDate"),
        location=_optional_str(record, "location"),
        bio=_optional_str(record, "bio"),
        photo=_optional_str(record, "photo"),
        relationships=_relationships(person_id, _get(record, "relationships")),
    )


def place_from_record(record: Dict[str, Any]) -> Place:
    if not isinstance(record, dict):
        raise RecordError("place record must be an object")

    return Place(
        id=_required_str(record, "id"),
        name=_required_str(record, "name"),
        location=_optional_str(record, "location") or "",
        type=_enum(PlaceType, _get(record, "type"), "place type"),
        significance=_optional_str(record, "significance") or "",
        branch=_enum(Branch, _get(record, "branch"), "branch"),
        image=_optional_str(record, "image"),
    )


def story_from_record(record: Dict[str, Any]) -> Story:
    if not isinstance(record, dict):
        raise RecordError("story record must be an object")

    raw_branches = _get(record, "relatedBranches") or []
    if not isinstance(raw_branches, list):
        raise RecordError("relatedBranches must be an array")

    return Story(
        id=_required_str(record, "id"),
        title=_required_str(record, "title"),
        excerpt=_optional_str(record, "excerpt") or "",
        category=_enum(StoryCategory, _get(record, "category"), "category"),
        related_branches=tuple(_enum(Branch, b, "branch") for b in raw_branches),
        featured_image=_optional_str(record, "featuredImage"),
        date=_optional_str(record, "date"),
    )


# ----------------------------------------------------------------------
# Collection converters
# ----------------------------------------------------------------------

def _collect(
    records: Iterable[Any],
    convert: Callable[[Dict[str, Any]], T],
    kind: str,
) -> Tuple[T, ...]:
    seen: Set[str] = set()
    out: List[T] = []

    for record in records:
        try:
            entity = convert(record)
        except RecordError as exc:
            log.warning(f"Skipping {kind} '{_record_id(record)}': {exc}")
            continue

        entity_id = entity.id  # type: ignore[attr-defined]
        if entity_id in seen:
            log.warning(f"Skipping duplicate {kind} id '{entity_id}'")
            continue

        seen.add(entity_id)
        out.append(entity)

    return tuple(out)


def people_from_records(records: Iterable[Any]) -> Tuple[Person, ...]:
    return _collect(records, person_from_record, "person")


def places_from_records(records: Iterable[Any]) -> Tuple[Place, ...]:
    return _collect(records, place_from_record, "place")


def stories_from_records(records: Iterable[Any]) -> Tuple[Story, ...]:
    return _collect(records, story_from_record, "story")
