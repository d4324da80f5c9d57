from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


# -----------------------------
# Closed vocabularies
# -----------------------------

class Branch(str, Enum):
    """
    Lineage or geographic offshoot a record belongs to.

    People use the first six members; places may also be tagged ``mixed``.
    """
    CORE = "core"
    PATERNAL = "paternal"
    MATERNAL = "maternal"
    CALIFORNIA = "california"
    LOUISIANA = "louisiana"
    EXTENDED = "extended"
    MIXED = "mixed"


PERSON_BRANCHES = frozenset(b for b in Branch if b is not Branch.MIXED)


class RelationshipType(str, Enum):
    SPOUSE = "spouse"
    PARTNER = "partner"
    CHILD = "child"
    PARENT = "parent"
    SIBLING = "sibling"
    RAISED = "raised"
    RAISED_BY = "raised-by"
    STEP_PARENT = "step-parent"
    STEP_CHILD = "step-child"
    ADOPTED = "adopted"
    ADOPTED_BY = "adopted-by"


class PlaceType(str, Enum):
    RESIDENCE = "residence"
    COMMUNITY = "community"
    GEOGRAPHIC = "geographic"


class StoryCategory(str, Enum):
    MIGRATION = "migration"
    FAMILY_FORMATION = "family-formation"
    BIOGRAPHY = "biography"
    PLACE_HISTORY = "place-history"
    MILITARY = "military"
    ANCESTRY = "ancestry"


# -----------------------------
# Records
# -----------------------------

@dataclass(frozen=True, slots=True)
class Relationship:
    """
    Directed edge stored on the owning person.

    ``Relationship(type=PARENT, person_id="don-kerr")`` on Jeff's record
    reads "don-kerr is Jeff's parent".
    """
    type: RelationshipType
    person_id: str
    years: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Person:
    id: str
    first_name: str
    last_name: str
    branch: Branch
    generation: int

    middle_name: Optional[str] = None
    maiden_name: Optional[str] = None
    nickname: Optional[str] = None

    # Free text, e.g. "December 8, circa 1950"
    birth_date: Optional[str] = None
    death_date: Optional[str] = None

    location: Optional[str] = None
    bio: Optional[str] = None
    photo: Optional[str] = None

    relationships: Tuple[Relationship, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class Place:
    id: str
    name: str
    location: str
    type: PlaceType
    significance: str
    branch: Branch
    image: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Story:
    id: str
    title: str
    excerpt: str
    category: StoryCategory
    related_branches: Tuple[Branch, ...] = field(default_factory=tuple)
    featured_image: Optional[str] = None
    date: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ResolvedRelationship:
    """A relationship edge paired with the full record it points at."""
    relationship: Relationship
    person: Person

    @property
    def type(self) -> RelationshipType:
        return self.relationship.type
