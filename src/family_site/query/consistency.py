"""
Relationship consistency check.

Edges are stored on one record only (a ``parent`` edge sits on the child).
This module reports edges whose complementary edge is missing from the
target record. Nothing is synthesized; callers decide what to do with the
findings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List

from family_site.entities.models import Person, Relationship, RelationshipType

INVERSE_TYPES: Dict[RelationshipType, RelationshipType] = {
    RelationshipType.SPOUSE: RelationshipType.SPOUSE,
    RelationshipType.PARTNER: RelationshipType.PARTNER,
    RelationshipType.SIBLING: RelationshipType.SIBLING,
    RelationshipType.PARENT: RelationshipType.CHILD,
    RelationshipType.CHILD: RelationshipType.PARENT,
    RelationshipType.RAISED: RelationshipType.RAISED_BY,
    RelationshipType.RAISED_BY: RelationshipType.RAISED,
    RelationshipType.STEP_PARENT: RelationshipType.STEP_CHILD,
    RelationshipType.STEP_CHILD: RelationshipType.STEP_PARENT,
    RelationshipType.ADOPTED: RelationshipType.ADOPTED_BY,
    RelationshipType.ADOPTED_BY: RelationshipType.ADOPTED,
}


@dataclass(frozen=True)
class MissingInverse:
    """``person_id`` holds ``relationship`` but the target lacks ``expected_type`` back."""
    person_id: str
    relationship: Relationship
    expected_type: RelationshipType

    def describe(self) -> str:
        return (
            f"{self.person_id} -[{self.relationship.type.value}]-> "
            f"{self.relationship.person_id}: expected "
            f"{self.relationship.person_id} -[{self.expected_type.value}]-> {self.person_id}"
        )


def inverse_of(rel_type: RelationshipType) -> RelationshipType:
    return INVERSE_TYPES[rel_type]


def find_missing_inverses(people: Iterable[Person]) -> List[MissingInverse]:
    """
    List edges ``(A, type, B)`` where B exists but has no ``inverse(type)``
    edge pointing at A. Edges to unknown ids are not reported.
    """
    people = list(people)
    index: Dict[str, Person] = {}
    for p in people:
        index.setdefault(p.id, p)

    findings: List[MissingInverse] = []
    for person in people:
        for edge in person.relationships:
            target = index.get(edge.person_id)
            if target is None:
                continue

            expected = inverse_of(edge.type)
            has_inverse = any(
                back.type is expected and back.person_id == person.id
                for back in target.relationships
            )
            if not has_inverse:
                findings.append(MissingInverse(person.id, edge, expected))

    return findings
