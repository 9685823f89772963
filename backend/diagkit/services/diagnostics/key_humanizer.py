from __future__ import annotations

"""backend/diagkit/services/diagnostics/key_humanizer.py

Flatten nested payloads into single-level mappings with "Start Case" keys.

    {"person": {"firstName": "John", "address": {"streetNumber": 13}}}

becomes

    {"Person First Name": "John", "Person Address Street Number": 13}

Only nested mappings are merged into compound keys. Lists stay lists (their
elements are processed recursively), scalars stay as they are.

Keys are humanized by the first matching rule in KEY_RULES:
- constant keys (ETCHER_DISABLE_UPDATES) are kept verbatim
- keys already in Start Case ("Start Case Key") are kept verbatim
- everything else is split into words and each word is capitalized
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Callable

from diagkit.exceptions import UnsupportedValueError
from diagkit.json_types import UNDEFINED, JSONObject, JSONValue, KeyPath, is_json_scalar

# Key used when the value being flattened is not a mapping or a list.
ROOT_VALUE_KEY = "Value"

_CONSTANT_KEY_PATTERN = re.compile(r"(?=.*[A-Z])[A-Z0-9_]+")

# Acronyms ("XMLHttp" -> "XML", "Http"), capitalized/lower words, digit runs,
# then any other run of letters.
_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+|[^\W\d_]+")


def _words(text: str) -> list[str]:
    return _WORD_PATTERN.findall(text)


def start_case(text: str) -> str:
    """Upper-case the first letter of every word and join words with spaces.

    The rest of each word is left as written, so "fooBAR" becomes "Foo BAR".
    """
    return " ".join(word[:1].upper() + word[1:] for word in _words(text))


def is_constant_key(key: str) -> bool:
    return _CONSTANT_KEY_PATTERN.fullmatch(key) is not None


def is_start_case(key: str) -> bool:
    return bool(key) and key == start_case(key)


def _has_no_words(key: str) -> bool:
    return not _words(key)


def _verbatim(key: str) -> str:
    return key


def _always(key: str) -> bool:
    return True


@dataclass(frozen=True)
class KeyRule:
    name: str
    matches: Callable[[str], bool]
    transform: Callable[[str], str]


KEY_RULES: tuple[KeyRule, ...] = (
    KeyRule("constant", is_constant_key, _verbatim),
    KeyRule("start-case", is_start_case, _verbatim),
    KeyRule("no-words", _has_no_words, _verbatim),
    KeyRule("humanize", _always, start_case),
)


def humanize_key(key: str) -> str:
    for rule in KEY_RULES:
        if rule.matches(key):
            return rule.transform(key)
    return key


def _flatten_mapping(mapping: Mapping, path: KeyPath) -> JSONObject:
    flat: JSONObject = {}
    for key, value in mapping.items():
        if not isinstance(key, str):
            raise UnsupportedValueError(key, path, kind="mapping key")
        label = humanize_key(key)
        value_path = (*path, key)
        if isinstance(value, Mapping):
            for nested_key, nested_value in _flatten_mapping(value, value_path).items():
                # Collisions: last write wins
                flat[f"{label} {nested_key}"] = nested_value
        else:
            flat[label] = _flatten_element(value, value_path)
    return flat


def _flatten_items(items: list | tuple, path: KeyPath) -> list[JSONValue]:
    return [_flatten_element(item, (*path, index)) for index, item in enumerate(items)]


def _flatten_element(value: object, path: KeyPath) -> JSONValue:
    if isinstance(value, Mapping):
        return _flatten_mapping(value, path)
    if isinstance(value, (list, tuple)):
        return _flatten_items(value, path)
    if not is_json_scalar(value):
        raise UnsupportedValueError(value, path)
    return value


def make_flat_start_case_object(value: object = UNDEFINED) -> JSONValue:
    """Flatten `value` into a single-level mapping with Start Case keys.

    - UNDEFINED is returned unchanged
    - a list (or tuple) becomes a new list with every element processed
    - a mapping becomes a flat dict
    - any other scalar, None included, becomes {"Value": value}

    Raises UnsupportedValueError for values that are not JSON-like.
    """
    if value is UNDEFINED:
        return UNDEFINED
    if isinstance(value, (list, tuple)):
        return _flatten_items(value, ())
    if isinstance(value, Mapping):
        return _flatten_mapping(value, ())
    if not is_json_scalar(value):
        raise UnsupportedValueError(value)
    return {ROOT_VALUE_KEY: value}
