"""
In‑memory store for expenses.

``ExpenseStore`` owns the expense collection and the expense id
counter and holds a read‑only reference to a :class:`UserStore` for
referential checks.  The check happens only when an expense is created
or its ``user_id`` changes; deleting the user later leaves the stale
reference in place.

Referential failures are reported differently by the two mutating
operations: ``create`` raises ``InvalidInput`` (HTTP 400) while
``update`` raises ``NotFound`` (HTTP 404).  Clients depend on that
distinction.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Optional

from expense_tracker_api.app.core.errors import InvalidInput, NotFound
from expense_tracker_api.app.core.ids import to_number
from expense_tracker_api.app.schemas.expense import ExpenseCreate, ExpenseRead, ExpenseUpdate
from expense_tracker_api.app.services.expense_filter import ExpenseFilter
from expense_tracker_api.app.services.user_service import USER_NOT_FOUND, UserStore

logger = logging.getLogger(__name__)

EXPENSE_NOT_FOUND = "Expense not found"
MISSING_FIELDS = "Missing required fields"
INVALID_USER_ID = "Invalid userId"

_REQUIRED_ON_CREATE = ("user_id", "spent_at", "title", "amount", "category")

# Attribute name -> wire name used in "cannot be empty" messages.
_NON_EMPTY_ON_UPDATE = {
    "spent_at": "spentAt",
    "title": "title",
    "category": "category",
}


class ExpenseStore:
    """Owner of the expense collection."""

    def __init__(self, users: UserStore) -> None:
        self._users = users
        self._expenses: Dict[int, ExpenseRead] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    def list(self, expense_filter: Optional[ExpenseFilter] = None) -> List[ExpenseRead]:
        """Return expenses matching ``expense_filter`` in creation order.

        Never fails; with no filter (or an empty one) every expense is
        returned.
        """
        expense_filter = expense_filter or ExpenseFilter()
        with self._lock:
            snapshot = list(self._expenses.values())
        selected = snapshot if expense_filter.is_empty else expense_filter.apply(snapshot)
        matched = [e.model_copy() for e in selected]
        logger.debug("Expense listing %s matched %d of %d", expense_filter, len(matched), len(snapshot))
        return matched

    def get(self, expense_id: Optional[int]) -> ExpenseRead:
        with self._lock:
            return self._require(expense_id).model_copy()

    def create(self, data: ExpenseCreate) -> ExpenseRead:
        """Validate ``data`` and append a new expense.

        Checks run in a fixed order: presence of the required fields,
        numeric ``userId``, then existence of that user.  Zero and empty
        strings count as present.  A missing or falsy ``note`` is stored
        as ``None``.
        """
        if any(getattr(data, name) is None for name in _REQUIRED_ON_CREATE):
            raise InvalidInput(MISSING_FIELDS)
        user_id = to_number(data.user_id)
        if user_id is None:
            raise InvalidInput(INVALID_USER_ID)
        with self._lock:
            if not self._users.exists(user_id):
                raise InvalidInput(USER_NOT_FOUND)
            expense = ExpenseRead(
                id=self._next_id,
                user_id=user_id,
                spent_at=data.spent_at,
                title=data.title,
                amount=data.amount,
                category=data.category,
                note=data.note or None,
            )
            self._next_id += 1
            self._expenses[expense.id] = expense
        logger.info("Created expense %s for user %s", expense.id, user_id)
        return expense.model_copy()

    def update(self, expense_id: Optional[int], data: ExpenseUpdate) -> ExpenseRead:
        """Apply a sparse update.

        Fields absent from the payload are left unchanged.  ``null`` is
        ignored for every field except ``note``, where it clears the
        value.  The whole payload is validated before anything is
        written, so a rejected update leaves the record as it was.
        """
        provided = data.provided()
        with self._lock:
            current = self._require(expense_id)
            changes = self._validated_changes(provided)
            expense = current.model_copy(update=changes)
            self._expenses[expense.id] = expense
        logger.info("Updated expense %s fields %s", expense.id, sorted(changes))
        return expense.model_copy()

    def delete(self, expense_id: Optional[int]) -> None:
        with self._lock:
            self._require(expense_id)
            del self._expenses[expense_id]
        logger.info("Deleted expense %s", expense_id)

    def _validated_changes(self, provided: Dict[str, Any]) -> Dict[str, Any]:
        changes: Dict[str, Any] = {}
        if provided.get("user_id") is not None:
            user_id = to_number(provided["user_id"])
            if not self._users.exists(user_id):
                raise NotFound(USER_NOT_FOUND)
            changes["user_id"] = user_id
        for name, wire_name in _NON_EMPTY_ON_UPDATE.items():
            value = provided.get(name)
            if value is None:
                continue
            if value == "":
                raise InvalidInput(f"{wire_name} cannot be empty")
            changes[name] = value
        if provided.get("amount") is not None:
            changes["amount"] = provided["amount"]
        if "note" in provided:
            changes["note"] = provided["note"]
        return changes

    def _require(self, expense_id: Optional[int]) -> ExpenseRead:
        expense = self._expenses.get(expense_id) if expense_id is not None else None
        if expense is None:
            raise NotFound(EXPENSE_NOT_FOUND)
        return expense
