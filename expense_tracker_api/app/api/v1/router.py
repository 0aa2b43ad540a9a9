"""
Top‑level router for version 1 of the API.

Aggregates the resource routers.  Each resource router declares its
paths relative to the prefix given here.
"""

from fastapi import APIRouter

from .endpoints import expenses, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(expenses.router, prefix="/expenses", tags=["expenses"])
