from __future__ import annotations

import logging
import uuid
from typing import Dict, Iterable, Iterator, Optional

from ..errors import DuplicateUserError
from .progress import Progress

logger = logging.getLogger(__name__)


class User:
    """
    A player account.

    The password is kept and compared verbatim; it is written to the save file
    as plain text.
    """

    def __init__(
        self,
        username: str,
        password: str,
        id: Optional[uuid.UUID] = None,
        progress: Optional[Progress] = None,
    ) -> None:
        self.username = username if username is not None else ""
        self.password = password if password is not None else ""
        self.id = id
        self.progress = progress if progress is not None else Progress()

    def check_password(self, password: Optional[str]) -> bool:
        return password is not None and password == self.password

    def __repr__(self) -> str:
        return f"User(username={self.username!r}, id={self.id})"


class UserList:
    """In-memory repository of users keyed by case-insensitive username."""

    def __init__(self, users: Optional[Iterable[User]] = None) -> None:
        self._users: Dict[str, User] = {}
        for user in users or ():
            self.add(user)

    @staticmethod
    def _key(username: str) -> str:
        return username.strip().lower()

    def add(self, user: Optional[User]) -> None:
        if user is None:
            return
        key = self._key(user.username)
        if key in self._users:
            raise DuplicateUserError(f"Username already taken: {user.username}")
        self._users[key] = user
        logger.debug('Added user %s', user.username)

    def get(self, username: Optional[str]) -> Optional[User]:
        if username is None:
            return None
        return self._users.get(self._key(username))

    def remove(self, username: Optional[str]) -> bool:
        if username is None:
            return False
        return self._users.pop(self._key(username), None) is not None

    def __contains__(self, username: object) -> bool:
        return isinstance(username, str) and self._key(username) in self._users

    def __iter__(self) -> Iterator[User]:
        return iter(list(self._users.values()))

    def __len__(self) -> int:
        return len(self._users)
