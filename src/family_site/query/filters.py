"""
Search and categorical filters over dataset collections.

Every function here is pure: the input collection is never modified and
each call returns a fresh tuple in the input's order.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Callable, Dict, Iterable, Optional, Sequence, Tuple, TypeVar

from family_site.dates import parse_display_date
from family_site.entities.models import Branch, Person, Place, Story

T = TypeVar("T")

Predicate = Callable[[Any], bool]

# Sentinel value that switches a categorical filter off
ALL = "all"

PERSON_SEARCH_FIELDS: Tuple[str, ...] = ("first_name", "last_name", "maiden_name")
PLACE_SEARCH_FIELDS: Tuple[str, ...] = ("name", "location", "significance")
STORY_SEARCH_FIELDS: Tuple[str, ...] = ("title", "excerpt")


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

def find_by_id(collection: Iterable[T], entity_id: str) -> Optional[T]:
    """Exact match on ``id``; ``None`` when nothing matches."""
    for entity in collection:
        if getattr(entity, "id", None) == entity_id:
            return entity
    return None


# ---------------------------------------------------------------------------
# Predicate builders
# ---------------------------------------------------------------------------

def _is_disabled(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == ALL)


def search_predicate(query: Optional[str], fields: Sequence[str]) -> Predicate:
    """
    Case-insensitive substring match on any of ``fields``.

    A blank query accepts everything. Missing or empty field values never match.
    """
    needle = (query or "").strip().casefold()
    field_names = tuple(fields)

    if not needle:
        return lambda entity: True

    def _matches(entity: Any) -> bool:
        for name in field_names:
            value = getattr(entity, name, None)
            if value and needle in str(value).casefold():
                return True
        return False

    return _matches


def category_predicate(field: str, value: Any) -> Predicate:
    """
    Equality on ``field``, or membership when the field holds a sequence.

    ``ALL`` (or ``None``) accepts everything.
    """
    if _is_disabled(value):
        return lambda entity: True

    def _matches(entity: Any) -> bool:
        actual = getattr(entity, field, None)
        if isinstance(actual, (tuple, list, set, frozenset)):
            return value in actual
        return actual == value

    return _matches


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------

def combine_filters(collection: Iterable[T], *predicates: Predicate) -> Tuple[T, ...]:
    """Keep the entities accepted by every predicate (logical AND)."""
    return tuple(e for e in collection if all(p(e) for p in predicates))


def filter_by_search(
    collection: Iterable[T],
    query: Optional[str],
    fields: Sequence[str],
) -> Tuple[T, ...]:
    return combine_filters(collection, search_predicate(query, fields))


def filter_by_category(collection: Iterable[T], field: str, value: Any) -> Tuple[T, ...]:
    return combine_filters(collection, category_predicate(field, value))


# ---------------------------------------------------------------------------
# Page-level queries
# ---------------------------------------------------------------------------

def search_people(
    people: Iterable[Person],
    query: Optional[str] = "",
    branch: Any = ALL,
    generation: Any = ALL,
) -> Tuple[Person, ...]:
    return combine_filters(
        people,
        search_predicate(query, PERSON_SEARCH_FIELDS),
        category_predicate("branch", branch),
        category_predicate("generation", generation),
    )


def search_places(
    places: Iterable[Place],
    query: Optional[str] = "",
    place_type: Any = ALL,
    branch: Any = ALL,
) -> Tuple[Place, ...]:
    return combine_filters(
        places,
        search_predicate(query, PLACE_SEARCH_FIELDS),
        category_predicate("type", place_type),
        category_predicate("branch", branch),
    )


def search_stories(
    stories: Iterable[Story],
    query: Optional[str] = "",
    category: Any = ALL,
    branch: Any = ALL,
) -> Tuple[Story, ...]:
    return combine_filters(
        stories,
        search_predicate(query, STORY_SEARCH_FIELDS),
        category_predicate("category", category),
        category_predicate("related_branches", branch),
    )


def people_by_branch(people: Iterable[Person], branch: Any) -> Tuple[Person, ...]:
    return filter_by_category(people, "branch", branch)


def people_by_generation(people: Iterable[Person], generation: int) -> Tuple[Person, ...]:
    return filter_by_category(people, "generation", generation)


def extended_family(people: Iterable[Person]) -> Tuple[Person, ...]:
    return people_by_branch(people, Branch.EXTENDED)


# ---------------------------------------------------------------------------
# Aggregates and ordering
# ---------------------------------------------------------------------------

def count_by_branch(collection: Iterable[Any]) -> Dict[Branch, int]:
    """
    Number of entities per branch, in ``Branch`` declaration order.

    Stories count once for each branch they relate to.
    """
    counts: Counter = Counter()
    for entity in collection:
        branches = getattr(entity, "related_branches", None)
        if branches is None:
            branches = (getattr(entity, "branch", None),)
        counts.update(b for b in branches if b is not None)

    return {b: counts[b] for b in Branch if counts[b]}


def sort_by_birth(people: Iterable[Person]) -> Tuple[Person, ...]:
    """Oldest first by birth date; people without a birth year go last."""
    return tuple(sorted(people, key=lambda p: parse_display_date(p.birth_date).sort_key()))
