import pytest

import registry
from registry import (
    PayloadValidationError,
    UnregisteredItemType,
    get_schemas,
    register_item_type,
    registered_item_types,
    validate_payloads,
)
from schemas.items import ReadAloudContent, ReadAloudRubric

FIB_CONTENT = {
    "text_template": "Bees {{0}} flowers, which helps plants {{1}}.",
    "blanks": [
        {"index": 0, "options": ["pollinate", "pollute"]},
        {"index": 1, "options": ["reproduce", "retire"]},
    ],
}
FIB_RUBRIC = {
    "answers": [
        {"blank_index": 0, "correct_option": "pollinate"},
        {"blank_index": 1, "correct_option": "reproduce"},
    ]
}


def _locs(exc_info):
    return [tuple(e["loc"]) for e in exc_info.value.errors]


def test_known_item_types():
    assert {"read_aloud", "fib_dropdown"}.issubset(registered_item_types())
    pair = get_schemas("read_aloud")
    assert pair.content is ReadAloudContent and pair.rubric is ReadAloudRubric


def test_unregistered_item_type():
    with pytest.raises(UnregisteredItemType) as exc_info:
        get_schemas("essay_not_yet")
    assert exc_info.value.item_type == "essay_not_yet"
    with pytest.raises(UnregisteredItemType):
        validate_payloads("essay_not_yet", {}, {})


def test_read_aloud_minimal_gets_defaults():
    content, rubric = validate_payloads("read_aloud", {"text": "Hello world"}, {"transcript": "Hello world"})
    assert content == {"text": "Hello world", "time_limit": 40, "prep_time": 25}
    assert rubric["transcript"] == "Hello world"
    assert rubric["keywords"] is None


def test_read_aloud_empty_text_rejected():
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_payloads("read_aloud", {"text": ""}, {"transcript": "x"})
    assert ("content", "text") in _locs(exc_info)


def test_read_aloud_non_positive_time_limit_rejected():
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_payloads("read_aloud", {"text": "Hi", "time_limit": 0}, {"transcript": "Hi"})
    assert ("content", "time_limit") in _locs(exc_info)


def test_no_silent_coercion_or_dropping():
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_payloads(
            "read_aloud",
            {"text": "Hi", "time_limit": "40", "colour": "red"},
            {"transcript": "Hi"},
        )
    locs = _locs(exc_info)
    assert ("content", "time_limit") in locs
    assert ("content", "colour") in locs


def test_errors_from_both_payloads_are_reported():
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_payloads("read_aloud", {}, {})
    locs = _locs(exc_info)
    assert ("content", "text") in locs
    assert ("scoring_rubric", "transcript") in locs
    assert exc_info.value.item_type == "read_aloud"


def test_fib_dropdown_valid():
    content, rubric = validate_payloads("fib_dropdown", FIB_CONTENT, FIB_RUBRIC)
    assert content == FIB_CONTENT
    assert rubric == FIB_RUBRIC


def test_fib_dropdown_requires_blank_marker():
    bad = dict(FIB_CONTENT, text_template="No blanks here.")
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_payloads("fib_dropdown", bad, FIB_RUBRIC)
    assert ("content",) in _locs(exc_info)
    assert "blank marker" in exc_info.value.errors[0]["msg"]


def test_fib_dropdown_needs_two_options_per_blank():
    bad = dict(FIB_CONTENT, blanks=[{"index": 0, "options": ["only"]}])
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_payloads("fib_dropdown", bad, FIB_RUBRIC)
    assert ("content", "blanks", 0, "options") in _locs(exc_info)


def test_fib_dropdown_needs_at_least_one_blank():
    bad = dict(FIB_CONTENT, blanks=[])
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_payloads("fib_dropdown", bad, FIB_RUBRIC)
    assert ("content", "blanks") in _locs(exc_info)


def test_fib_dropdown_blank_without_marker_rejected():
    bad = dict(FIB_CONTENT, blanks=FIB_CONTENT["blanks"] + [{"index": 7, "options": ["a", "b"]}])
    with pytest.raises(PayloadValidationError) as exc_info:
        validate_payloads("fib_dropdown", bad, FIB_RUBRIC)
    assert "[7]" in exc_info.value.errors[0]["msg"]


def test_registry_is_append_only():
    with pytest.raises(ValueError):
        register_item_type("read_aloud", ReadAloudContent, ReadAloudRubric)
    assert get_schemas("read_aloud").content is ReadAloudContent


def test_new_item_type_leaves_existing_entries_alone():
    before = dict(registry.QUESTION_SCHEMAS)
    try:
        register_item_type("repeat_sentence_test", ReadAloudContent, ReadAloudRubric)
        assert "repeat_sentence_test" in registered_item_types()
        for name, pair in before.items():
            assert registry.QUESTION_SCHEMAS[name] is pair
    finally:
        registry._REGISTRY.pop("repeat_sentence_test", None)


def test_registry_view_is_read_only():
    with pytest.raises(TypeError):
        registry.QUESTION_SCHEMAS["hack"] = get_schemas("read_aloud")
