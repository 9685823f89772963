from __future__ import annotations

"""JSON-like value types accepted and produced by the payload transformers.

`UNDEFINED` stands for "no value at all", which is distinct from `None`
(JSON null). Both transformers hand it back untouched.
"""

from typing import Final, TypeAlias


class _Undefined:
    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Undefined:
        return self

    def __deepcopy__(self, memo: dict) -> _Undefined:
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()

JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]
JSONObject: TypeAlias = dict[str, JSONValue]
JSONArray: TypeAlias = list[JSONValue]

KeyPath: TypeAlias = tuple[str | int, ...]


def is_json_scalar(value: object) -> bool:
    return value is None or isinstance(value, (str, int, float, bool))
