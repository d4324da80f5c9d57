"""
Shared in-memory dataset.

One ``FamilyDataset`` is loaded per process and data directory and handed to
every caller. The collections are tuples of frozen records, so borrowers can
read them freely without copying.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from family_site.entities.models import (
    Person,
    Place,
    RelationshipType,
    ResolvedRelationship,
    Story,
)
from family_site.loader import clear_cache as clear_loader_cache
from family_site.loader import load_people, load_places, load_stories, resolve_data_dir
from family_site.logging import get_logger
from family_site.query.consistency import find_missing_inverses
from family_site.query.relationships import group_by_type, resolve_relationships

log = get_logger(__name__)


@dataclass(frozen=True)
class PersonProfile:
    """A person plus their resolved relationships, ready for a profile page."""
    person: Person
    relationships: Tuple[ResolvedRelationship, ...]
    groups: Dict[RelationshipType, Tuple[ResolvedRelationship, ...]]


@dataclass
class FamilyDataset:
    """
    In-memory store for people, places and stories, indexed by id.
    """
    people: Tuple[Person, ...] = ()
    places: Tuple[Place, ...] = ()
    stories: Tuple[Story, ...] = ()

    _people_index: Dict[str, Person] = field(default_factory=dict, init=False, repr=False)
    _places_index: Dict[str, Place] = field(default_factory=dict, init=False, repr=False)
    _stories_index: Dict[str, Story] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self.people = tuple(self.people)
        self.places = tuple(self.places)
        self.stories = tuple(self.stories)

        # first record wins, matching find_by_id
        for p in self.people:
            self._people_index.setdefault(p.id, p)
        for pl in self.places:
            self._places_index.setdefault(pl.id, pl)
        for s in self.stories:
            self._stories_index.setdefault(s.id, s)

    def get_person(self, person_id: str) -> Optional[Person]:
        return self._people_index.get(person_id)

    def get_place(self, place_id: str) -> Optional[Place]:
        return self._places_index.get(place_id)

    def get_story(self, story_id: str) -> Optional[Story]:
        return self._stories_index.get(story_id)

    def profile(self, person_id: str) -> Optional[PersonProfile]:
        person = self.get_person(person_id)
        if person is None:
            return None

        resolved = resolve_relationships(person, self.people)
        return PersonProfile(
            person=person,
            relationships=resolved,
            groups=group_by_type(resolved),
        )


_dataset_cache: Dict[Path, FamilyDataset] = {}


def load_dataset(data_dir: Optional[Union[str, Path]] = None) -> FamilyDataset:
    """
    Build (once) the dataset for ``data_dir`` or the configured directory.

    Relationship edges without a matching inverse edge are logged as
    warnings; they are kept as stored.
    """
    key = resolve_data_dir(data_dir)
    cached = _dataset_cache.get(key)
    if cached is not None:
        return cached

    dataset = FamilyDataset(
        people=load_people(key),
        places=load_places(key),
        stories=load_stories(key),
    )

    for finding in find_missing_inverses(dataset.people):
        log.warning(f"Missing inverse relationship: {finding.describe()}")

    _dataset_cache[key] = dataset
    return dataset


def clear_cache() -> None:
    """Drop the cached dataset and the loader's cached collections."""
    _dataset_cache.clear()
    clear_loader_cache()
