from family_site.entities.models import Branch, PlaceType, StoryCategory
from family_site.loader.records import places_from_records, stories_from_records
from family_site.query import (
    ALL,
    PERSON_SEARCH_FIELDS,
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

from conftest import make_person

PLACES = places_from_records([
    {"id": "jefferson-road", "name": "Jefferson Road Home", "location": "Otsego/Plainwell area, Michigan",
     "type": "residence", "significance": "Passed down from Donna Mowry", "branch": "maternal"},
    {"id": "kerr-creek-road", "name": "Kerr Creek Road", "location": "Three Rivers/Sturgis area, Michigan",
     "type": "geographic", "significance": "Named after the Kerr family", "branch": "paternal"},
    {"id": "grand-rapids", "name": "Grand Rapids", "location": "Michigan",
     "type": "community", "significance": "Current residence of Jeff Kerr", "branch": "core"},
])

STORIES = stories_from_records([
    {"id": "michigan-to-coasts", "title": "From Michigan to the Coasts", "excerpt": "Westward and south.",
     "category": "migration", "relatedBranches": ["paternal", "california", "louisiana"]},
    {"id": "scottish-origins", "title": "Scottish Origins", "excerpt": "Tracing the Kerr name.",
     "category": "ancestry", "relatedBranches": ["paternal"]},
    {"id": "jefferson-road-home", "title": "The Jefferson Road Home", "excerpt": "A maternal anchor.",
     "category": "place-history", "relatedBranches": ["maternal"]},
])


def _ids(entities):
    return [e.id for e in entities]


# ---------------------------------------------------------
# find_by_id
# ---------------------------------------------------------
def test_find_by_id_returns_every_member(kerr_people):
    for person in kerr_people:
        assert find_by_id(kerr_people, person.id) is person


def test_find_by_id_absent_is_none(kerr_people):
    assert find_by_id(kerr_people, "nobody") is None
    assert find_by_id((), "jeff-kerr") is None


# ---------------------------------------------------------
# filter_by_search
# ---------------------------------------------------------
def test_empty_query_is_identity(kerr_people):
    assert filter_by_search(kerr_people, "", PERSON_SEARCH_FIELDS) == kerr_people
    assert filter_by_search(kerr_people, "   ", PERSON_SEARCH_FIELDS) == kerr_people
    assert filter_by_search(kerr_people, None, PERSON_SEARCH_FIELDS) == kerr_people


def test_search_is_case_insensitive_substring():
    people = (
        make_person("jeff-kerr", "Jeff", "Kerr"),
        make_person("donna-mowry", "Donna", "Mowry"),
    )

    assert _ids(filter_by_search(people, "kerr", PERSON_SEARCH_FIELDS)) == ["jeff-kerr"]
    assert _ids(filter_by_search(people, "OWR", PERSON_SEARCH_FIELDS)) == ["donna-mowry"]


def test_search_covers_maiden_name(kerr_people):
    assert _ids(filter_by_search(kerr_people, "mowry", PERSON_SEARCH_FIELDS)) == ["debby-kerr", "donna-mowry"]


def test_search_respects_given_fields(kerr_people):
    assert filter_by_search(kerr_people, "mowry", ("first_name",)) == ()
    assert filter_by_search(kerr_people, "kerr", ("no_such_field",)) == ()


def test_search_does_not_mutate_input(kerr_people):
    people = list(kerr_people)
    filter_by_search(people, "kerr", PERSON_SEARCH_FIELDS)
    assert people == list(kerr_people)


# ---------------------------------------------------------
# filter_by_category
# ---------------------------------------------------------
def test_branch_filter_scenario():
    people = (
        make_person("jeff-kerr", "Jeff", "Kerr", "core", 3),
        make_person("don-kerr", "Don", "Kerr", "paternal", 2),
    )

    assert _ids(filter_by_category(people, "branch", "paternal")) == ["don-kerr"]
    assert _ids(filter_by_category(people, "branch", Branch.PATERNAL)) == ["don-kerr"]


def test_all_sentinel_disables_filter(kerr_people):
    assert filter_by_category(kerr_people, "branch", ALL) == kerr_people
    assert filter_by_category(kerr_people, "generation", None) == kerr_people


def test_category_filter_on_sequence_field_is_membership():
    assert _ids(filter_by_category(STORIES, "related_branches", "paternal")) == [
        "michigan-to-coasts",
        "scottish-origins",
    ]
    assert filter_by_category(STORIES, "related_branches", "core") == ()


# ---------------------------------------------------------
# combine_filters
# ---------------------------------------------------------
def test_combine_filters_is_and(kerr_people):
    result = combine_filters(
        kerr_people,
        search_predicate("kerr", PERSON_SEARCH_FIELDS),
        category_predicate("generation", 2),
    )
    assert _ids(result) == ["don-kerr", "debby-kerr"]


def test_combine_filters_is_commutative(kerr_people):
    a = search_predicate("e", PERSON_SEARCH_FIELDS)
    b = category_predicate("branch", "core")
    c = category_predicate("generation", 3)

    assert combine_filters(kerr_people, a, b, c) == combine_filters(kerr_people, c, b, a)
    assert combine_filters(combine_filters(kerr_people, a), b) == combine_filters(
        combine_filters(kerr_people, b), a
    )


def test_combine_filters_without_predicates_keeps_everything(kerr_people):
    assert combine_filters(kerr_people) == kerr_people


# ---------------------------------------------------------
# Page-level queries
# ---------------------------------------------------------
def test_search_people_with_filters(kerr_people):
    assert _ids(search_people(kerr_people, "kerr", branch="core", generation=3)) == ["jeff-kerr", "linsey-kerr"]
    assert _ids(search_people(kerr_people, "", branch="maternal")) == ["debby-kerr", "donna-mowry"]


def test_search_places():
    assert _ids(search_places(PLACES, "michigan")) == ["jefferson-road", "kerr-creek-road", "grand-rapids"]
    assert _ids(search_places(PLACES, "kerr", place_type=PlaceType.GEOGRAPHIC)) == ["kerr-creek-road"]
    assert _ids(search_places(PLACES, "donna", branch="paternal")) == []


def test_search_stories():
    assert _ids(search_stories(STORIES, "kerr")) == ["scottish-origins"]
    assert _ids(search_stories(STORIES, "", category=StoryCategory.MIGRATION, branch="louisiana")) == [
        "michigan-to-coasts"
    ]


def test_people_by_branch_and_generation(kerr_people):
    assert _ids(people_by_branch(kerr_people, "paternal")) == ["don-kerr"]
    assert _ids(people_by_generation(kerr_people, 1)) == ["donna-mowry"]
    assert extended_family(kerr_people) == ()

    cousin = make_person("cousin-kerr", "Cousin", "Kerr", "extended", 3)
    assert extended_family(kerr_people + (cousin,)) == (cousin,)


# ---------------------------------------------------------
# Aggregates and ordering
# ---------------------------------------------------------
def test_count_by_branch(kerr_people):
    assert count_by_branch(kerr_people) == {
        Branch.CORE: 2,
        Branch.PATERNAL: 1,
        Branch.MATERNAL: 2,
    }
    assert list(count_by_branch(kerr_people)) == [Branch.CORE, Branch.PATERNAL, Branch.MATERNAL]


def test_count_by_branch_counts_story_branches():
    counts = count_by_branch(STORIES)
    assert counts[Branch.PATERNAL] == 2
    assert counts[Branch.LOUISIANA] == 1


def test_sort_by_birth_puts_unknown_years_last(kerr_people):
    assert _ids(sort_by_birth(kerr_people)) == [
        "debby-kerr",
        "don-kerr",
        "jeff-kerr",
        "linsey-kerr",
        "donna-mowry",
    ]
