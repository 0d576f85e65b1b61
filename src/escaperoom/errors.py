from __future__ import annotations

from typing import Optional


class EscapeRoomError(Exception):
    """Base error for escape room domain exceptions."""


class ParseError(EscapeRoomError, ValueError):
    """Raised when JSON text is malformed.

    Carries the character offset where parsing stopped.
    """

    def __init__(self, position: int, message: str):
        self.position = position
        self.message = message
        super().__init__(f"{message} at pos {position}")


class NotFoundError(EscapeRoomError, FileNotFoundError):
    """Raised when a named source (file or packaged resource) does not exist."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"Cannot open {source}")


class SchemaError(EscapeRoomError):
    """Raised when a parsed document has the wrong top-level shape."""


class FieldError(EscapeRoomError):
    """A sub-field of an otherwise valid document is missing or malformed.

    Always recovered locally by the mappers; never escapes a load call.
    """

    def __init__(self, field: str, message: str, value: Optional[object] = None):
        self.field = field
        self.value = value
        super().__init__(f"{field}: {message}")


class DuplicateUserError(EscapeRoomError):
    """Raised when adding a user whose username is already taken."""
