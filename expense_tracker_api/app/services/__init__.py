"""
Service layer.

``UserStore`` and ``ExpenseStore`` own the in‑memory collections and
their id counters.  Instances are created once per application and
handed to the API layer through dependencies; nothing here is module
level state.
"""

from .user_service import UserStore  # noqa: F401
from .expense_service import ExpenseStore  # noqa: F401
