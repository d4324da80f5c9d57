import json
import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from family_site.dataset import clear_cache  # noqa: E402
from family_site.entities.models import (  # noqa: E402
    Branch,
    Person,
    Relationship,
    RelationshipType,
)

SHIPPED_DATA_DIR = PROJECT_ROOT / "data"


@pytest.fixture(autouse=True)
def _fresh_caches():
    clear_cache()
    yield
    clear_cache()


def make_person(person_id, first, last, branch="core", generation=1, relationships=(), **extra):
    return Person(
        id=person_id,
        first_name=first,
        last_name=last,
        branch=Branch(branch),
        generation=generation,
        relationships=tuple(
            Relationship(type=RelationshipType(t), person_id=target) for t, target in relationships
        ),
        **extra,
    )


@pytest.fixture
def kerr_people():
    """Small family with one dangling edge (jeff -> ghost-kerr)."""
    return (
        make_person(
            "jeff-kerr", "Jeff", "Kerr", "core", 3,
            relationships=[
                ("parent", "don-kerr"),
                ("parent", "debby-kerr"),
                ("sibling", "linsey-kerr"),
                ("child", "ghost-kerr"),
            ],
            birth_date="August 6, 1977",
        ),
        make_person(
            "don-kerr", "Don", "Kerr", "paternal", 2,
            relationships=[("child", "jeff-kerr"), ("spouse", "debby-kerr")],
            birth_date="December 8, circa 1950",
        ),
        make_person(
            "debby-kerr", "Debby", "Kerr", "maternal", 2,
            relationships=[("child", "jeff-kerr"), ("spouse", "don-kerr")],
            maiden_name="Mowry",
            birth_date="February 3, circa 1948",
        ),
        make_person("linsey-kerr", "Linsey", "Kerr", "core", 3, birth_date="December 13"),
        make_person("donna-mowry", "Donna", "Mowry", "maternal", 1, death_date="circa 1984"),
    )


@pytest.fixture
def write_documents(tmp_path):
    """Write data documents into tmp_path and return the directory."""

    def _write(people=None, places=None, stories=None):
        if people is not None:
            (tmp_path / "family.json").write_text(json.dumps({"people": people}), encoding="utf-8")
        if places is not None:
            (tmp_path / "places.json").write_text(json.dumps({"places": places}), encoding="utf-8")
        if stories is not None:
            (tmp_path / "stories.json").write_text(json.dumps({"stories": stories}), encoding="utf-8")
        return tmp_path

    return _write
