"""
Dependencies giving endpoints access to the application's stores.

``create_app`` attaches one ``UserStore`` and one ``ExpenseStore`` to
``app.state``; endpoints receive them through ``Depends`` so that each
application instance (and each test) works on its own collections.
"""

from typing import Optional

from fastapi import Request

from expense_tracker_api.app.core.ids import parse_int_prefix
from expense_tracker_api.app.services import ExpenseStore, UserStore


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def get_expense_store(request: Request) -> ExpenseStore:
    return request.app.state.expense_store


def path_id(raw_id: str) -> Optional[int]:
    """Lenient parse of a path id; text without a leading integer yields ``None``."""
    return parse_int_prefix(raw_id)
