"""Minimal JSON value engine.

Only what the save files and the room catalog need: a strict reader with one
deliberate leniency (bad ``\\u`` escapes become U+FFFD) and a compact writer.
"""

from .parser import parse
from .serializer import serialize
from .values import JsonArray, JsonObject, JsonValue

__all__ = ["parse", "serialize", "JsonValue", "JsonObject", "JsonArray"]
