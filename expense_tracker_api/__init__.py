"""
Top‑level package for the Expense Tracker API.

The package itself exports nothing; the application and its stores
live in submodules under ``app`` and are imported with fully
qualified names such as ``expense_tracker_api.app.main``.
"""

__all__ = []
