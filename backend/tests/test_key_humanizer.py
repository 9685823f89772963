from __future__ import annotations

from collections import OrderedDict

import pytest

from diagkit.exceptions import UnsupportedValueError
from diagkit.json_types import UNDEFINED
from diagkit.services.diagnostics.key_humanizer import (
    KEY_RULES,
    humanize_key,
    is_constant_key,
    is_start_case,
    make_flat_start_case_object,
    start_case,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("firstName", "First Name"),
        ("streetNumber", "Street Number"),
        ("person", "Person"),
        ("1key", "1 Key"),
        ("key1", "Key 1"),
        ("snake_case_key", "Snake Case Key"),
        ("kebab-case-key", "Kebab Case Key"),
        ("XMLHttpRequest", "XML Http Request"),
        ("  padded  words ", "Padded Words"),
    ],
)
def test_start_case(text: str, expected: str) -> None:
    assert start_case(text) == expected


def test_constant_key_detection() -> None:
    assert is_constant_key("ETCHER_DISABLE_UPDATES")
    assert is_constant_key("FOO")
    assert is_constant_key("HTTP2_PORT")
    assert not is_constant_key("123_456")
    assert not is_constant_key("Foo_BAR")
    assert not is_constant_key("")


def test_start_case_detection() -> None:
    assert is_start_case("Start Case Key")
    assert is_start_case("Foo")
    assert not is_start_case("start case")
    assert not is_start_case("StartCase")
    assert not is_start_case("")


def test_key_rules_are_ordered() -> None:
    assert [rule.name for rule in KEY_RULES] == ["constant", "start-case", "no-words", "humanize"]


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("ETCHER_DISABLE_UPDATES", "ETCHER_DISABLE_UPDATES"),
        ("Start Case Key", "Start Case Key"),
        ("firstName", "First Name"),
        ("1key", "1 Key"),
        ("---", "---"),
        ("", ""),
    ],
)
def test_humanize_key(key: str, expected: str) -> None:
    assert humanize_key(key) == expected


def test_undefined_is_returned_unchanged() -> None:
    assert make_flat_start_case_object(UNDEFINED) is UNDEFINED
    assert make_flat_start_case_object() is UNDEFINED


def test_nested_object_is_flattened() -> None:
    payload = {
        "person": {
            "firstName": "John",
            "lastName": "Doe",
            "address": {
                "streetNumber": 13,
                "streetName": "Elm",
            },
        }
    }

    assert make_flat_start_case_object(payload) == {
        "Person First Name": "John",
        "Person Last Name": "Doe",
        "Person Address Street Number": 13,
        "Person Address Street Name": "Elm",
    }


@pytest.mark.parametrize("value", [False, None, 0, "text", 1.5])
def test_scalar_is_wrapped_in_value_key(value) -> None:
    assert make_flat_start_case_object(value) == {"Value": value}


def test_environment_variable_keys_are_preserved() -> None:
    assert make_flat_start_case_object({"ETCHER_DISABLE_UPDATES": True}) == {
        "ETCHER_DISABLE_UPDATES": True
    }
    assert make_flat_start_case_object({"foo": {"FOO_BAR_BAZ": 3}}) == {"Foo FOO_BAR_BAZ": 3}


def test_key_starting_with_number_gets_a_space() -> None:
    assert make_flat_start_case_object({"foo": {"1key": 1}}) == {"Foo 1 Key": 1}


def test_start_case_keys_are_not_modified() -> None:
    assert make_flat_start_case_object({"Foo": {"Start Case Key": 42}}) == {
        "Foo Start Case Key": 42
    }


def test_arrays_are_not_flattened() -> None:
    assert make_flat_start_case_object([1, 2, {"nested": 3}]) == [1, 2, {"Nested": 3}]


def test_nested_arrays_are_not_flattened() -> None:
    assert make_flat_start_case_object({"values": [1, 2, {"nested": 3}]}) == {
        "Values": [1, 2, {"Nested": 3}]
    }


def test_nested_arrays_stay_nested() -> None:
    assert make_flat_start_case_object([1, 2, [3, 4]]) == [1, 2, [3, 4]]


def test_objects_inside_arrays_are_flattened_individually() -> None:
    assert make_flat_start_case_object({"drives": [{"info": {"sizeBytes": 8}}, None]}) == {
        "Drives": [{"Info Size Bytes": 8}, None]
    }


def test_tuples_become_lists() -> None:
    assert make_flat_start_case_object(("a", {"b": 1})) == ["a", {"B": 1}]


def test_empty_nested_mapping_contributes_no_keys() -> None:
    assert make_flat_start_case_object({"empty": {}, "kept": 1}) == {"Kept": 1}


def test_colliding_keys_keep_the_last_value() -> None:
    payload = OrderedDict([("foo", {"bar": 1}), ("fooBar", 2)])
    assert make_flat_start_case_object(payload) == {"Foo Bar": 2}


def test_input_is_not_mutated() -> None:
    payload = {"outer": {"innerKey": [1, {"deepKey": 2}]}}
    make_flat_start_case_object(payload)
    assert payload == {"outer": {"innerKey": [1, {"deepKey": 2}]}}


def test_unsupported_values_are_rejected() -> None:
    with pytest.raises(UnsupportedValueError) as excinfo:
        make_flat_start_case_object({"outer": {"callback": print}})
    assert excinfo.value.path == ("outer", "callback")
    assert excinfo.value.value_type == "builtin_function_or_method"

    with pytest.raises(TypeError):
        make_flat_start_case_object({1: "one"})

    with pytest.raises(UnsupportedValueError):
        make_flat_start_case_object({"a", "b"})
