"""
In‑memory store for users.

``UserStore`` owns the user collection and the user id counter.  Ids
start at 1, increase monotonically and are never reused, even after a
user is deleted.  Deleting a user does not touch expenses that
reference it.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

from expense_tracker_api.app.core.errors import InvalidInput, NotFound
from expense_tracker_api.app.core.ids import Number
from expense_tracker_api.app.schemas.user import UserRead

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"
NAME_REQUIRED = "Name is required"


class UserStore:
    """Owner of the user collection.

    Records are kept in a dict keyed by id; dict insertion order is the
    listing order.  Callers always receive copies.
    """

    def __init__(self) -> None:
        self._users: Dict[int, UserRead] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    def list(self) -> List[UserRead]:
        """Return all users in creation order."""
        with self._lock:
            return [user.model_copy() for user in self._users.values()]

    def get(self, user_id: Optional[int]) -> UserRead:
        """Return the user with ``user_id`` or raise ``NotFound``."""
        with self._lock:
            return self._require(user_id).model_copy()

    def exists(self, user_id: Optional[Number]) -> bool:
        """Referential check used by the expense store."""
        with self._lock:
            return user_id is not None and user_id in self._users

    def create(self, name: Optional[str]) -> UserRead:
        _require_name(name)
        with self._lock:
            user = UserRead(id=self._next_id, name=name)
            self._next_id += 1
            self._users[user.id] = user
        logger.info("Created user %s", user.id)
        return user.model_copy()

    def update(self, user_id: Optional[int], name: Optional[str]) -> UserRead:
        """Rename a user.

        The name is validated before the lookup, so an empty name on an
        unknown id reports ``InvalidInput`` rather than ``NotFound``.
        """
        _require_name(name)
        with self._lock:
            user = self._require(user_id).model_copy(update={"name": name})
            self._users[user.id] = user
        logger.info("Renamed user %s", user.id)
        return user.model_copy()

    def delete(self, user_id: Optional[int]) -> None:
        with self._lock:
            self._require(user_id)
            del self._users[user_id]
        logger.info("Deleted user %s", user_id)

    def _require(self, user_id: Optional[int]) -> UserRead:
        user = self._users.get(user_id) if user_id is not None else None
        if user is None:
            raise NotFound(USER_NOT_FOUND)
        return user


def _require_name(name: Optional[str]) -> None:
    if not name:
        raise InvalidInput(NAME_REQUIRED)
