from family_site.entities.models import RelationshipType
from family_site.query import DISPLAY_GROUPS, group_by_type, resolve_relationships

from conftest import make_person


def test_parent_edges_resolve_to_full_records(kerr_people):
    jeff = kerr_people[0]

    resolved = resolve_relationships(jeff, kerr_people)
    parents = [r for r in resolved if r.relationship.type == "parent"]

    assert len(parents) == 2
    assert [r.person.id for r in parents] == ["don-kerr", "debby-kerr"]
    assert parents[0].person is kerr_people[1]
    assert parents[1].person.maiden_name == "Mowry"


def test_dangling_edges_are_dropped(kerr_people):
    jeff = kerr_people[0]

    resolved = resolve_relationships(jeff, kerr_people)

    known_ids = {p.id for p in kerr_people}
    assert all(r.person.id in known_ids for r in resolved)
    assert "ghost-kerr" not in [r.relationship.person_id for r in resolved]
    assert len(resolved) == 3


def test_person_without_edges_resolves_to_empty(kerr_people):
    assert resolve_relationships(kerr_people[-1], kerr_people) == ()


def test_resolution_keeps_edge_order(kerr_people):
    don = kerr_people[1]
    assert [r.type for r in resolve_relationships(don, kerr_people)] == [
        RelationshipType.CHILD,
        RelationshipType.SPOUSE,
    ]


def test_group_by_type_partitions_display_groups():
    people = (
        make_person(
            "jeff-kerr", "Jeff", "Kerr",
            relationships=[
                ("parent", "don-kerr"),
                ("sibling", "linsey-kerr"),
                ("raised-by", "bud-lowe"),
                ("child", "jude-kerr"),
                ("parent", "debby-kerr"),
            ],
        ),
        make_person("don-kerr", "Don", "Kerr"),
        make_person("debby-kerr", "Debby", "Kerr"),
        make_person("linsey-kerr", "Linsey", "Kerr"),
        make_person("jude-kerr", "Jude", "Kerr"),
        make_person("bud-lowe", "Norman", "Lowe"),
    )
    resolved = resolve_relationships(people[0], people)

    groups = group_by_type(resolved)

    assert list(groups) == list(DISPLAY_GROUPS)
    assert [r.person.id for r in groups[RelationshipType.PARENT]] == ["don-kerr", "debby-kerr"]
    assert groups[RelationshipType.SPOUSE] == ()
    assert RelationshipType.RAISED_BY not in groups

    # Disjoint, and together they cover exactly the recognized types
    flattened = [item for items in groups.values() for item in items]
    assert len(flattened) == len(set(id(i) for i in flattened))
    assert sorted(id(i) for i in flattened) == sorted(
        id(r) for r in resolved if r.type in DISPLAY_GROUPS
    )


def test_group_by_type_of_nothing():
    groups = group_by_type(())
    assert all(items == () for items in groups.values())
    assert len(groups) == 4
