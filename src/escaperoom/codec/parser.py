from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional

from ..errors import ParseError
from .values import INT64_MAX, INT64_MIN, JsonValue

logger = logging.getLogger(__name__)

_WHITESPACE = " \t\r\n"
_DIGITS = "0123456789"
_HEX_DIGITS = "0123456789abcdefABCDEF"
_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}
REPLACEMENT_CHAR = "\ufffd"
# Containers nested deeper than this are rejected before the interpreter's
# recursion limit is reached.
MAX_DEPTH = 200


class _Parser:
    """Recursive-descent reader over a single JSON text.

    Objects become ``dict`` (insertion ordered, last duplicate wins), arrays
    become ``list``, numbers become ``int`` or ``float`` depending on whether a
    fraction or exponent was written.
    """

    def __init__(self, text: str) -> None:
        self.s = text
        self.pos = 0
        self.depth = 0

    # Entry point

    def parse_document(self) -> JsonValue:
        self.skip_whitespace()
        value = self.parse_value()
        self.skip_whitespace()
        if self.pos != len(self.s):
            raise ParseError(self.pos, "Extra data after JSON end")
        return value

    # Values

    def parse_value(self) -> JsonValue:
        self.skip_whitespace()
        if self.pos >= len(self.s):
            raise ParseError(self.pos, "Unexpected end of input")
        c = self.s[self.pos]
        if c == "{":
            return self.parse_object()
        if c == "[":
            return self.parse_array()
        if c == '"':
            return self.parse_string()
        if c == "t" or c == "f":
            return self.parse_boolean()
        if c == "n":
            return self.parse_null()
        if c == "-" or c in _DIGITS:
            return self.parse_number()
        raise ParseError(self.pos, f"Unexpected char {c!r}")

    def parse_object(self) -> Dict[str, JsonValue]:
        obj: Dict[str, JsonValue] = {}
        self.expect("{")
        self._enter()
        self.skip_whitespace()
        if self.peek() == "}":
            self.pos += 1
            self.depth -= 1
            return obj
        while True:
            self.skip_whitespace()
            key = self.parse_string()
            self.skip_whitespace()
            self.expect(":")
            self.skip_whitespace()
            obj[key] = self.parse_value()
            self.skip_whitespace()
            c = self.peek()
            if c == ",":
                self.pos += 1
                continue
            if c == "}":
                self.pos += 1
                self.depth -= 1
                return obj
            raise ParseError(self.pos, "Expected ',' or '}' in object")

    def parse_array(self) -> List[JsonValue]:
        items: List[JsonValue] = []
        self.expect("[")
        self._enter()
        self.skip_whitespace()
        if self.peek() == "]":
            self.pos += 1
            self.depth -= 1
            return items
        while True:
            self.skip_whitespace()
            items.append(self.parse_value())
            self.skip_whitespace()
            c = self.peek()
            if c == ",":
                self.pos += 1
                continue
            if c == "]":
                self.pos += 1
                self.depth -= 1
                return items
            raise ParseError(self.pos, "Expected ',' or ']' in array")

    def _enter(self) -> None:
        self.depth += 1
        if self.depth > MAX_DEPTH:
            raise ParseError(self.pos - 1, f"Nesting too deep (limit {MAX_DEPTH})")

    def parse_string(self) -> str:
        start = self.pos
        self.expect('"')
        s = self.s
        out: List[str] = []
        while self.pos < len(s):
            c = s[self.pos]
            self.pos += 1
            if c == '"':
                return "".join(out)
            if c != "\\":
                out.append(c)
                continue
            if self.pos >= len(s):
                break
            e = s[self.pos]
            self.pos += 1
            if e in _SIMPLE_ESCAPES:
                out.append(_SIMPLE_ESCAPES[e])
            elif e == "u":
                out.append(self._read_unicode_escape())
            else:
                # Unknown escapes are kept as the raw character
                out.append(e)
        raise ParseError(start, "Unterminated string")

    def _read_unicode_escape(self) -> str:
        code = self._read_hex4()
        if code is None:
            logger.debug("Invalid \\u escape near pos %d; substituting U+FFFD", self.pos)
            return REPLACEMENT_CHAR
        if 0xD800 <= code <= 0xDBFF and self.s.startswith("\\u", self.pos):
            # Join a surrogate pair into one code point when both halves are present
            saved = self.pos
            self.pos += 2
            low = self._read_hex4()
            if low is not None and 0xDC00 <= low <= 0xDFFF:
                return chr(0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00))
            self.pos = saved
        return chr(code)

    def _read_hex4(self) -> Optional[int]:
        hex_digits = self.s[self.pos:self.pos + 4]
        if len(hex_digits) != 4 or any(h not in _HEX_DIGITS for h in hex_digits):
            return None
        self.pos += 4
        return int(hex_digits, 16)

    def parse_number(self) -> JsonValue:
        s = self.s
        start = self.pos
        if self.peek() == "-":
            self.pos += 1
        if not self._skip_digits():
            raise ParseError(start, f"Invalid number {s[start:self.pos + 1]!r}")
        is_fractional = False
        if self.peek() == ".":
            is_fractional = True
            self.pos += 1
            if not self._skip_digits():
                raise ParseError(start, f"Invalid number {s[start:self.pos + 1]!r}")
        if self.peek() in ("e", "E"):
            is_fractional = True
            self.pos += 1
            if self.peek() in ("+", "-"):
                self.pos += 1
            if not self._skip_digits():
                raise ParseError(start, f"Invalid number {s[start:self.pos + 1]!r}")
        literal = s[start:self.pos]
        if is_fractional:
            number = float(literal)
            if math.isinf(number):
                raise ParseError(start, f"Invalid number {literal!r} (out of float range)")
            return number
        value = int(literal)
        if value < INT64_MIN or value > INT64_MAX:
            raise ParseError(start, f"Invalid number {literal!r} (out of 64-bit range)")
        return value

    def _skip_digits(self) -> bool:
        begin = self.pos
        while self.pos < len(self.s) and self.s[self.pos] in _DIGITS:
            self.pos += 1
        return self.pos > begin

    def parse_boolean(self) -> bool:
        if self.s.startswith("true", self.pos):
            self.pos += 4
            return True
        if self.s.startswith("false", self.pos):
            self.pos += 5
            return False
        raise ParseError(self.pos, "Invalid boolean token")

    def parse_null(self) -> None:
        if self.s.startswith("null", self.pos):
            self.pos += 4
            return None
        raise ParseError(self.pos, "Invalid token")

    # Lexing helpers

    def skip_whitespace(self) -> None:
        while self.pos < len(self.s) and self.s[self.pos] in _WHITESPACE:
            self.pos += 1

    def peek(self) -> str:
        if self.pos >= len(self.s):
            return ""
        return self.s[self.pos]

    def expect(self, expected: str) -> None:
        if self.pos >= len(self.s) or self.s[self.pos] != expected:
            found = self.s[self.pos] if self.pos < len(self.s) else "EOF"
            raise ParseError(self.pos, f"Expected {expected!r} but found {found!r}")
        self.pos += 1


def parse(text: str) -> JsonValue:
    """Parse JSON text into native Python values.

    Raises ParseError with the offending position on malformed input. An
    incomplete or non-hex ``\\uXXXX`` escape does not fail; it is replaced
    by U+FFFD and parsing continues.
    """
    if not isinstance(text, str):
        raise TypeError(f"parse() expects str, got {type(text).__name__}")
    return _Parser(text).parse_document()


__all__ = ["parse", "REPLACEMENT_CHAR", "MAX_DEPTH"]
