from __future__ import annotations

from typing import Dict, List, Union

# A parsed JSON document is made of plain Python values. ``bool`` is kept
# apart from ``int`` everywhere a number is expected.
JsonValue = Union[None, bool, int, float, str, List["JsonValue"], Dict[str, "JsonValue"]]
JsonObject = Dict[str, JsonValue]
JsonArray = List[JsonValue]

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


__all__ = [
    "JsonValue",
    "JsonObject",
    "JsonArray",
    "INT64_MIN",
    "INT64_MAX",
    "is_integer",
]
