"""
Query core over the family dataset.

Pure functions only: search and categorical filters, id lookup,
relationship resolution and grouping, and the inverse-edge check.
"""

from __future__ import annotations

from .consistency import INVERSE_TYPES, MissingInverse, find_missing_inverses, inverse_of
from .filters import (
    ALL,
    PERSON_SEARCH_FIELDS,
    PLACE_SEARCH_FIELDS,
    STORY_SEARCH_FIELDS,
    category_predicate,
    combine_filters,
    count_by_branch,
    extended_family,
    filter_by_category,
    filter_by_search,
    find_by_id,
    people_by_branch,
    people_by_generation,
    search_people,
    search_places,
    search_predicate,
    search_stories,
    sort_by_birth,
)
from .relationships import DISPLAY_GROUPS, group_by_type, resolve_relationships

__all__ = [
    "ALL",
    "DISPLAY_GROUPS",
    "INVERSE_TYPES",
    "MissingInverse",
    "PERSON_SEARCH_FIELDS",
    "PLACE_SEARCH_FIELDS",
    "STORY_SEARCH_FIELDS",
    "category_predicate",
    "combine_filters",
    "count_by_branch",
    "extended_family",
    "filter_by_category",
    "filter_by_search",
    "find_by_id",
    "find_missing_inverses",
    "group_by_type",
    "inverse_of",
    "people_by_branch",
    "people_by_generation",
    "resolve_relationships",
    "search_people",
    "search_places",
    "search_predicate",
    "search_stories",
    "sort_by_birth",
]
