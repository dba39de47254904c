import pytest

from conftest import text
from notion.errors import MalformedInputError
from notion.properties import (
    _SIMPLIFIERS,
    build_properties,
    extract_title,
    load_json_object,
    parse_property,
    resolve_kind,
    simplify_properties,
    simplify_property,
)
from notion.types import PropertyKind


def test_every_kind_has_a_simplifier():
    assert set(_SIMPLIFIERS) == set(PropertyKind)


def test_title_concatenates_fragments_in_order():
    prop = {"type": "title", "title": [text("Hello"), text(" "), text("World")]}
    assert simplify_property(prop) == "Hello World"


def test_rich_text_falls_back_to_plain_text_for_mentions():
    mention = {"type": "mention", "mention": {"type": "user", "user": {"id": "u1"}}, "plain_text": "@Ada"}
    prop = {"type": "rich_text", "rich_text": [text("ping "), mention]}
    assert simplify_property(prop) == "ping @Ada"


@pytest.mark.parametrize("prop", [{"type": "title", "title": []}, {"type": "rich_text"}, {"rich_text": None}])
def test_empty_text_kinds_yield_empty_string(prop):
    assert simplify_property(prop) == ""


def test_select_and_status_yield_option_name():
    assert simplify_property({"type": "select", "select": {"name": "Done"}}) == "Done"
    assert simplify_property({"type": "status", "status": {"name": "In progress"}}) == "In progress"


def test_unset_select_is_none():
    assert simplify_property({"type": "select", "select": None}) is None
    assert simplify_property({"type": "status", "status": None}) is None


def test_multi_select_keeps_order():
    prop = {"type": "multi_select", "multi_select": [{"name": "b"}, {"name": "a"}]}
    assert simplify_property(prop) == ["b", "a"]
    assert simplify_property({"type": "multi_select", "multi_select": []}) == []


def test_date_passes_through():
    date = {"start": "2025-08-12", "end": None, "time_zone": None}
    assert simplify_property({"type": "date", "date": date}) == date


@pytest.mark.parametrize("n", [0, 0.0, 7, -2.5, None])
def test_number_passes_through(n):
    assert simplify_property({"type": "number", "number": n}) == n


def test_zero_is_not_absent():
    assert simplify_property({"type": "number", "number": 0}) is not None


@pytest.mark.parametrize("b", [True, False])
def test_checkbox_passes_through(b):
    assert simplify_property({"type": "checkbox", "checkbox": b}) is b


def test_email_and_url():
    assert simplify_property({"type": "email", "email": "ada@example.com"}) == "ada@example.com"
    assert simplify_property({"type": "url", "url": "https://example.com"}) == "https://example.com"
    assert simplify_property({"type": "url", "url": None}) is None


@pytest.mark.parametrize(
    "prop",
    [
        {"id": "p1", "type": "people", "people": [{"object": "user", "id": "u1"}]},
        {"id": "f1", "type": "formula", "formula": {"type": "number", "number": 3}},
        {"id": "x1", "type": "some_future_kind", "some_future_kind": {"a": 1}},
    ],
)
def test_unknown_kinds_pass_through_unchanged(prop):
    assert simplify_property(prop) == prop


def test_earliest_rule_wins_for_ambiguous_payloads():
    prop = {"select": {"name": "S"}, "title": [text("T")], "number": 1}
    assert resolve_kind(prop) is PropertyKind.TITLE
    assert simplify_property(prop) == "T"


def test_type_tag_used_when_no_kind_key_present():
    assert resolve_kind({"type": "email"}) is PropertyKind.EMAIL
    assert resolve_kind({"type": "people"}) is None
    assert resolve_kind({}) is None


def test_parse_property_keeps_raw_object():
    raw = {"type": "select", "select": {"name": "Done"}}
    prop = parse_property(raw)
    assert prop.kind is PropertyKind.SELECT
    assert prop.payload == {"name": "Done"}
    assert prop.raw == raw


def test_simplify_properties(page_obj):
    assert simplify_properties(page_obj["properties"]) == {
        "Name": "Write docs",
        "Status": "Done",
        "Tags": ["a", "b"],
        "Estimate": 0,
        "Shipped": False,
        "Owner": page_obj["properties"]["Owner"],
    }
    assert simplify_properties(None) == {}


def test_extract_title(page_obj, database_obj):
    assert extract_title(page_obj) == "Write docs"
    assert extract_title(database_obj) == "Tasks"
    assert extract_title({"object": "database", "title": []}) == "Untitled"
    assert extract_title({"object": "page", "properties": {}}) == "Untitled"


def test_build_title_only():
    assert build_properties(title="New Idea") == {
        "Name": {"title": [{"type": "text", "text": {"content": "New Idea"}}]}
    }


def test_build_title_with_extra():
    props = build_properties(title="X", extra='{"Status": {"select": {"name": "Done"}}}')
    assert props == {
        "Name": {"title": [{"type": "text", "text": {"content": "X"}}]},
        "Status": {"select": {"name": "Done"}},
    }


def test_build_extra_overrides_title_on_collision():
    extra = '{"Name": {"title": [{"text": {"content": "From JSON"}}]}}'
    props = build_properties(title="From flag", extra=extra)
    assert props == {"Name": {"title": [{"text": {"content": "From JSON"}}]}}


def test_build_uses_configured_title_property():
    props = build_properties(title="Idea", title_property="Title")
    assert list(props) == ["Title"]


def test_build_without_input_is_empty():
    assert build_properties() == {}
    assert build_properties(title="") == {}


@pytest.mark.parametrize("extra", ["{not json", "[1, 2]", '"text"'])
def test_build_rejects_malformed_extra(extra):
    with pytest.raises(MalformedInputError, match="--properties"):
        build_properties(title="X", extra=extra)


def test_malformed_input_is_a_value_error():
    with pytest.raises(ValueError):
        load_json_object("{", "--filter")


def test_load_json_object():
    assert load_json_object('{"property": "Status"}', "--filter") == {"property": "Status"}
