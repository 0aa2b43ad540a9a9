"""
Query filter for expense listings.

An :class:`ExpenseFilter` holds the raw query values sent by the
client.  Each value is optional and an empty string counts as not
supplied.  A listing keeps an expense only when every supplied
predicate matches:

* ``user_id`` – leading integer of the value equals ``Expense.user_id``;
  a value with no leading integer matches nothing.
* ``date_from`` / ``date_to`` – inclusive bounds on ``spent_at``
  compared as instants.  If either side of a comparison cannot be
  parsed the comparison is false.
* ``categories`` – comma separated labels; ``category`` must equal one
  of them exactly (case sensitive).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Iterable, Iterator, List, Optional

from expense_tracker_api.app.core.ids import parse_int_prefix
from expense_tracker_api.app.schemas.expense import ExpenseRead


def parse_spent_at(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO‑8601 date or date‑time into an aware datetime.

    Date‑only values are midnight UTC and naive date‑times are taken as
    UTC.  Returns ``None`` for anything unparsable.
    """
    if not value:
        return None
    text = value.strip()
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        try:
            parsed = datetime.combine(date.fromisoformat(text), time())
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass
class ExpenseFilter:
    user_id: Optional[str] = None
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    categories: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not (self.user_id or self.date_from or self.date_to or self.categories)

    def category_set(self) -> List[str]:
        return self.categories.split(",") if self.categories else []

    def apply(self, expenses: Iterable[ExpenseRead]) -> Iterator[ExpenseRead]:
        """Yield the expenses matching every supplied predicate, order preserved."""
        selected: Iterable[ExpenseRead] = expenses
        if self.user_id:
            wanted = parse_int_prefix(self.user_id)
            selected = (e for e in selected if wanted is not None and e.user_id == wanted)
        if self.date_from:
            lower = parse_spent_at(self.date_from)
            selected = (e for e in selected if _on_or_after(e.spent_at, lower))
        if self.date_to:
            upper = parse_spent_at(self.date_to)
            selected = (e for e in selected if _on_or_before(e.spent_at, upper))
        if self.categories:
            labels = set(self.category_set())
            selected = (e for e in selected if e.category in labels)
        return iter(selected)


def _on_or_after(spent_at: str, bound: Optional[datetime]) -> bool:
    moment = parse_spent_at(spent_at)
    return moment is not None and bound is not None and moment >= bound


def _on_or_before(spent_at: str, bound: Optional[datetime]) -> bool:
    moment = parse_spent_at(spent_at)
    return moment is not None and bound is not None and moment <= bound
