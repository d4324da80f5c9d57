from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from family_site.entities.models import Person, RelationshipType, ResolvedRelationship

# Groups shown on a profile, in display order
DISPLAY_GROUPS: Tuple[RelationshipType, ...] = (
    RelationshipType.PARENT,
    RelationshipType.SIBLING,
    RelationshipType.SPOUSE,
    RelationshipType.CHILD,
)


def resolve_relationships(
    person: Person,
    all_people: Iterable[Person],
) -> Tuple[ResolvedRelationship, ...]:
    """
    Pair each of ``person``'s edges with the record it points at.

    Edges whose target id is not in ``all_people`` are dropped; source data
    is allowed to be incomplete.
    """
    index: Dict[str, Person] = {}
    for p in all_people:
        index.setdefault(p.id, p)

    resolved: List[ResolvedRelationship] = []
    for edge in person.relationships:
        target = index.get(edge.person_id)
        if target is None:
            continue
        resolved.append(ResolvedRelationship(relationship=edge, person=target))

    return tuple(resolved)


def group_by_type(
    relationships: Iterable[ResolvedRelationship],
) -> Dict[RelationshipType, Tuple[ResolvedRelationship, ...]]:
    """
    Partition resolved relationships into the profile tabs.

    All four display groups are always present (possibly empty); edge types
    outside ``DISPLAY_GROUPS`` are left out.
    """
    buckets: Dict[RelationshipType, List[ResolvedRelationship]] = {t: [] for t in DISPLAY_GROUPS}
    for item in relationships:
        if item.type in buckets:
            buckets[item.type].append(item)

    return {t: tuple(items) for t, items in buckets.items()}
