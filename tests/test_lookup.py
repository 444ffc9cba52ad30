import pytest

from jira_api_client import EntityNotFoundError, JiraTransition, find_by_id_or_name, resolve_by_id_or_name

TRANSITIONS = [
    {"id": "11", "name": "To Do"},
    {"id": "21", "name": "In Progress"},
    {"id": "31", "name": "Done"},
]


def test_matches_by_id():
    assert find_by_id_or_name(TRANSITIONS, "21")["name"] == "In Progress"


def test_matches_by_name():
    assert find_by_id_or_name(TRANSITIONS, "Done")["id"] == "31"


def test_id_match_wins_over_earlier_name_match():
    candidates = [{"id": "1", "name": "2"}, {"id": "2", "name": "Other"}]
    assert find_by_id_or_name(candidates, "2") == {"id": "2", "name": "Other"}


def test_matching_is_case_sensitive():
    assert find_by_id_or_name(TRANSITIONS, "done") is None


def test_works_with_models():
    models = [JiraTransition.model_validate(t) for t in TRANSITIONS]
    assert find_by_id_or_name(models, "In Progress").id == "21"


def test_no_match_returns_none():
    assert find_by_id_or_name([], "x") is None


def test_resolve_raises_with_context():
    with pytest.raises(EntityNotFoundError) as info:
        resolve_by_id_or_name(TRANSITIONS, "Nope", entity="Transition", parent="issue PROJ-1")
    assert str(info.value) == 'Transition "Nope" not found for issue PROJ-1'
    assert info.value.entity == "Transition"
    assert info.value.value == "Nope"


@pytest.mark.parametrize("needle", ["10001", "In Progress"])
def test_id_and_name_select_same_candidate(needle):
    candidates = [{"id": "10000", "name": "To Do"}, {"id": "10001", "name": "In Progress"}]
    assert resolve_by_id_or_name(candidates, needle, entity="Transition", parent="issue PROJ-1") is candidates[1]
