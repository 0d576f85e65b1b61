from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Optional, Union

from ..codec import parse, serialize
from ..errors import ParseError
from ..models.items import DEFAULT_ITEM_CATALOG, ItemCatalog
from ..models.user import User, UserList
from .fs import atomic_write_text
from .users import deserialize_users, serialize_users

logger = logging.getLogger(__name__)


class UserStore:
    """Loads and saves every user account as one JSON document.

    Each save rewrites the whole file. Passwords are written in plain text.
    """

    def __init__(self, path: Union[str, Path], catalog: ItemCatalog = DEFAULT_ITEM_CATALOG) -> None:
        self.path = Path(path)
        self.catalog = catalog
        self.lock = threading.RLock()

    def load(self) -> UserList:
        """Read all users.

        A missing file yields an empty list. Malformed JSON raises ParseError
        and a non-array document raises SchemaError.
        """
        with self.lock:
            if not self.path.exists():
                logger.info("No user file at %s; starting empty", self.path)
                return UserList()
            text = self.path.read_text(encoding="utf-8")
            try:
                root = parse(text)
            except ParseError:
                logger.error("User file %s is not valid JSON", self.path)
                raise
            users = UserList()
            for user in deserialize_users(root, self.catalog):
                if user.username in users:
                    logger.warning("Skipping duplicate user %r in %s", user.username, self.path)
                    continue
                users.add(user)
            logger.info("Loaded %d user(s) from %s", len(users), self.path)
            return users

    def save(self, users: UserList) -> Path:
        with self.lock:
            text = serialize(serialize_users(users))
            atomic_write_text(self.path, text)
            logger.info("Saved %d user(s) to %s", len(users), self.path)
            return self.path

    def add_user(self, user: User, users: Optional[UserList] = None) -> UserList:
        """Add ``user`` to ``users`` (or to the users on disk) and save.

        Raises DuplicateUserError when the username is taken.
        """
        with self.lock:
            target = users if users is not None else self.load()
            target.add(user)
            self.save(target)
            return target

    def clear(self) -> None:
        with self.lock:
            self.save(UserList())
