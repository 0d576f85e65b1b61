from __future__ import annotations

import math
from typing import List

from .values import JsonValue

_SHORT_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _escape_string(text: str) -> str:
    # Lone surrogates are written as escapes so the text stays encodable as UTF-8
    out: List[str] = ['"']
    for ch in text:
        short = _SHORT_ESCAPES.get(ch)
        if short is not None:
            out.append(short)
        elif ch < " " or "\ud800" <= ch <= "\udfff":
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    out.append('"')
    return "".join(out)


def _format_float(value: float) -> str:
    if not math.isfinite(value):
        raise ValueError(f"Out of range float values are not JSON compliant: {value!r}")
    text = repr(value)
    # repr() of a whole float keeps its ".0"; this only guards odd platforms
    if not any(marker in text for marker in (".", "e", "E")):
        text += ".0"
    return text


def _write(value: JsonValue, out: List[str]) -> None:
    # bool first: it is a subclass of int
    if value is None:
        out.append("null")
    elif value is True:
        out.append("true")
    elif value is False:
        out.append("false")
    elif isinstance(value, int):
        out.append(str(int(value)))
    elif isinstance(value, float):
        out.append(_format_float(value))
    elif isinstance(value, str):
        out.append(_escape_string(value))
    elif isinstance(value, (list, tuple)):
        out.append("[")
        for i, item in enumerate(value):
            if i:
                out.append(",")
            _write(item, out)
        out.append("]")
    elif isinstance(value, dict):
        out.append("{")
        for i, (key, item) in enumerate(value.items()):
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be str, not {type(key).__name__}")
            if i:
                out.append(",")
            out.append(_escape_string(key))
            out.append(":")
            _write(item, out)
        out.append("}")
    else:
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def serialize(value: JsonValue) -> str:
    """Render a value tree as compact JSON text.

    Object keys keep their insertion order; integers and floats keep their
    distinction (``1`` vs ``1.0``).
    """
    out: List[str] = []
    _write(value, out)
    return "".join(out)


__all__ = ["serialize"]
