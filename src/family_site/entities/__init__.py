"""
family_site.entities package

Immutable records for the family dataset and the closed vocabularies
(branch, relationship type, place type, story category) they draw from.
"""

from __future__ import annotations

from .models import (
    PERSON_BRANCHES,
    Branch,
    Person,
    Place,
    PlaceType,
    Relationship,
    RelationshipType,
    ResolvedRelationship,
    Story,
    StoryCategory,
)

__all__ = [
    "PERSON_BRANCHES",
    "Branch",
    "Person",
    "Place",
    "PlaceType",
    "Relationship",
    "RelationshipType",
    "ResolvedRelationship",
    "Story",
    "StoryCategory",
]
