"""
Mapping between users/progress and the save-file JSON document.

Reading is best-effort per field: a malformed sub-field is logged and
skipped, and the rest of the record (and the batch) still loads. Progress is
rebuilt by replaying the same mutation calls used during play instead of
assigning fields directly.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Callable, Iterable, List, Optional

from ..codec.values import JsonArray, JsonObject, JsonValue
from ..data.fields import require_array, require_int, require_object, require_str
from ..errors import FieldError, SchemaError
from ..models.difficulty import Difficulty
from ..models.items import DEFAULT_ITEM_CATALOG, ItemCatalog, ItemName
from ..models.progress import Progress
from ..models.user import User

logger = logging.getLogger(__name__)

# Upper bound on replayed hint increments per puzzle; larger counts are clamped.
MAX_HINT_REPLAY = 10_000


# Writing

def serialize_progress(progress: Optional[Progress]) -> JsonObject:
    if progress is None:
        progress = Progress()
    quantities = progress.inventory.quantities()
    return {
        "currentLevel": progress.current_level,
        "timeSpent": progress.time_spent,
        "score": progress.score,
        "completedPuzzleIds": sorted(progress.completed_puzzle_ids),
        "completedPuzzles": progress.completed_puzzles,
        "hintsUsed": {str(pid): count for pid, count in sorted(progress.hints_used().items())},
        "lastDifficulty": progress.last_difficulty.name,
        "inventory": {
            name.name: quantities[name]
            for name in sorted(quantities, key=lambda n: n.name)
            if quantities[name] > 0
        },
    }


def serialize_user(user: User) -> JsonObject:
    obj: JsonObject = {
        "username": user.username or "",
        "password": user.password or "",
    }
    if user.id is not None:
        obj["id"] = str(user.id)
    obj["progress"] = serialize_progress(user.progress)
    return obj


def serialize_users(users: Iterable[Optional[User]]) -> JsonArray:
    return [serialize_user(u) for u in users if u is not None]


# Reading

def _best_effort(field: str, apply: Callable[[], None]) -> None:
    try:
        apply()
    except (FieldError, ValueError, TypeError) as e:
        logger.debug("Skipping field %s: %s", field, e)


def _read_uuid(value: Any) -> uuid.UUID:
    return uuid.UUID(require_str(value, "id"))


def deserialize_progress(obj: JsonObject, catalog: ItemCatalog = DEFAULT_ITEM_CATALOG) -> Progress:
    progress = Progress()

    if "currentLevel" in obj:
        def _level() -> None:
            progress.current_level = require_int(obj["currentLevel"], "currentLevel")
        _best_effort("currentLevel", _level)

    if "timeSpent" in obj:
        _best_effort("timeSpent", lambda: progress.add_time(require_int(obj["timeSpent"], "timeSpent")))

    if "score" in obj:
        _best_effort("score", lambda: progress.increase_score(require_int(obj["score"], "score")))

    if "completedPuzzleIds" in obj:
        def _ids() -> None:
            for element in require_array(obj["completedPuzzleIds"], "completedPuzzleIds"):
                _best_effort(
                    "completedPuzzleIds[]",
                    lambda e=element: progress.mark_completed_by_id(require_int(e, "completedPuzzleIds[]")),
                )
        _best_effort("completedPuzzleIds", _ids)

    if "completedPuzzles" in obj:
        def _questions() -> None:
            for element in require_array(obj["completedPuzzles"], "completedPuzzles"):
                if isinstance(element, str):
                    progress.mark_completed_by_question(element)
        _best_effort("completedPuzzles", _questions)

    if "hintsUsed" in obj:
        def _hints() -> None:
            for key, value in require_object(obj["hintsUsed"], "hintsUsed").items():
                _best_effort(f"hintsUsed.{key}", lambda k=key, v=value: _replay_hints(progress, k, v))
        _best_effort("hintsUsed", _hints)

    if "lastDifficulty" in obj:
        def _difficulty() -> None:
            text = require_str(obj["lastDifficulty"], "lastDifficulty")
            progress.set_last_difficulty(Difficulty.from_string(text))
        _best_effort("lastDifficulty", _difficulty)

    if "inventory" in obj:
        def _inventory() -> None:
            for key, value in require_object(obj["inventory"], "inventory").items():
                _best_effort(f"inventory.{key}", lambda k=key, v=value: _add_inventory(progress, catalog, k, v))
        _best_effort("inventory", _inventory)

    return progress


def _replay_hints(progress: Progress, key: str, value: Any) -> None:
    puzzle_id = require_int(key, "hintsUsed key")
    count = require_int(value, "hintsUsed value")
    if count > MAX_HINT_REPLAY:
        logger.warning(
            "Clamping hintsUsed for puzzle %d from %d to %d", puzzle_id, count, MAX_HINT_REPLAY
        )
        count = MAX_HINT_REPLAY
    for _ in range(count):
        progress.increment_hint_usage(puzzle_id)


def _add_inventory(progress: Progress, catalog: ItemCatalog, key: str, value: Any) -> None:
    qty = require_int(value, "inventory quantity")
    if qty <= 0:
        return
    name = ItemName.from_string(key)
    if name is None:
        return
    progress.inventory.add_item_by_name(name, qty, catalog.get(name))


def deserialize_user(obj: JsonObject, catalog: ItemCatalog = DEFAULT_ITEM_CATALOG) -> User:
    username = obj.get("username")
    password = obj.get("password")
    user_id: Optional[uuid.UUID] = None
    if obj.get("id") is not None:
        try:
            user_id = _read_uuid(obj["id"])
        except (FieldError, ValueError) as e:
            logger.debug("Ignoring malformed id for %r: %s", username, e)

    progress_obj = obj.get("progress")
    if isinstance(progress_obj, dict):
        progress = deserialize_progress(progress_obj, catalog)
    else:
        if progress_obj is not None:
            logger.debug("Ignoring non-object progress for %r", username)
        progress = Progress()

    return User(
        username if isinstance(username, str) else "",
        password if isinstance(password, str) else "",
        user_id,
        progress,
    )


def deserialize_users(value: JsonValue, catalog: ItemCatalog = DEFAULT_ITEM_CATALOG) -> List[User]:
    if not isinstance(value, list):
        raise SchemaError("Users document must be a JSON array")
    users: List[User] = []
    for index, element in enumerate(value):
        if not isinstance(element, dict):
            logger.warning("Skipping non-object user record at index %d", index)
            continue
        users.append(deserialize_user(element, catalog))
    return users
