"""
Typed readers over parsed JSON objects.

The ``opt_*`` readers never raise: a missing, null or unusable value yields the
supplied default. The ``require_*`` readers raise FieldError and are meant to
be caught by the caller, which logs and skips the field.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from ..codec.values import INT64_MAX, INT64_MIN, JsonArray, JsonObject, is_integer
from ..errors import FieldError
from ..models.items import ItemName


def _coerce_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if is_integer(value):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        try:
            parsed = int(value.strip())
        except ValueError:
            return None
        if parsed < INT64_MIN or parsed > INT64_MAX:
            return None
        return parsed
    return None


def _coerce_str(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return None


def opt_str(obj: Mapping[str, Any], key: str, default: Optional[str] = None) -> Optional[str]:
    value = obj.get(key)
    if value is None:
        return default
    coerced = _coerce_str(value)
    return default if coerced is None else coerced


def opt_int(obj: Mapping[str, Any], key: str, default: int = 0) -> int:
    value = obj.get(key)
    if value is None:
        return default
    coerced = _coerce_int(value)
    return default if coerced is None else coerced


def opt_bool(obj: Mapping[str, Any], key: str, default: bool = False) -> bool:
    value = obj.get(key)
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text == "true":
            return True
        if text == "false":
            return False
    return default


def opt_item_name(obj: Mapping[str, Any], key: str) -> Optional[ItemName]:
    return ItemName.from_string(opt_str(obj, key))


def require_int(value: Any, field: str) -> int:
    coerced = _coerce_int(value)
    if coerced is None:
        raise FieldError(field, "expected an integer", value)
    return coerced


def require_str(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise FieldError(field, "expected a string", value)
    return value


def require_array(value: Any, field: str) -> JsonArray:
    if not isinstance(value, list):
        raise FieldError(field, "expected an array", value)
    return value


def require_object(value: Any, field: str) -> JsonObject:
    if not isinstance(value, dict):
        raise FieldError(field, "expected an object", value)
    return value
