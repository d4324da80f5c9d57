"""
Display vocabulary for branches, story categories, place types and
relationship groups.

Every label and colour token the presentation layer shows comes from the
tables below. Unknown values fall back to a capitalised label and the
neutral ``gray`` colour.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union

from family_site.entities.models import Branch, PlaceType, RelationshipType, StoryCategory

FALLBACK_COLOR = "gray"


@dataclass(frozen=True)
class BranchStyle:
    label: str
    color: str


BRANCH_STYLES: Dict[Branch, BranchStyle] = {
    Branch.CORE: BranchStyle("Core", "purple"),
    Branch.PATERNAL: BranchStyle("Paternal", "primary"),
    Branch.MATERNAL: BranchStyle("Maternal", "secondary"),
    Branch.CALIFORNIA: BranchStyle("California", "green"),
    Branch.LOUISIANA: BranchStyle("Louisiana", "yellow"),
    Branch.EXTENDED: BranchStyle("Extended", FALLBACK_COLOR),
    Branch.MIXED: BranchStyle("Mixed", FALLBACK_COLOR),
}

CATEGORY_LABELS: Dict[StoryCategory, str] = {
    StoryCategory.MIGRATION: "Migration Story",
    StoryCategory.FAMILY_FORMATION: "Family Formation",
    StoryCategory.BIOGRAPHY: "Biography",
    StoryCategory.PLACE_HISTORY: "Place History",
    StoryCategory.MILITARY: "Military Service",
    StoryCategory.ANCESTRY: "Ancestry Research",
}

PLACE_TYPE_LABELS: Dict[PlaceType, str] = {
    PlaceType.RESIDENCE: "Residence",
    PlaceType.COMMUNITY: "Community",
    PlaceType.GEOGRAPHIC: "Geographic Feature",
}

# Relationship tabs on a profile, in display order
GROUP_LABELS: Dict[RelationshipType, str] = {
    RelationshipType.PARENT: "Parents",
    RelationshipType.SIBLING: "Siblings",
    RelationshipType.SPOUSE: "Spouses",
    RelationshipType.CHILD: "Children",
}


def _capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]


def _coerce(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value))
    except ValueError:
        return None


def branch_label(branch: Union[Branch, str]) -> str:
    member = _coerce(Branch, branch)
    if member is None:
        return _capitalize(str(branch))
    return BRANCH_STYLES[member].label


def branch_color(branch: Union[Branch, str]) -> str:
    member = _coerce(Branch, branch)
    if member is None:
        return FALLBACK_COLOR
    return BRANCH_STYLES[member].color


def category_label(category: Union[StoryCategory, str]) -> str:
    member = _coerce(StoryCategory, category)
    if member is None:
        return _capitalize(str(category))
    return CATEGORY_LABELS[member]


def place_type_label(place_type: Union[PlaceType, str]) -> str:
    member = _coerce(PlaceType, place_type)
    if member is None:
        return _capitalize(str(place_type))
    return PLACE_TYPE_LABELS[member]
