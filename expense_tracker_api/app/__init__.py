"""
Application package initializer.

The service is split into a small number of layers: ``core`` holds
settings, logging and the error taxonomy, ``schemas`` the pydantic
payload models, ``services`` the in‑memory stores, and ``api`` the
versioned HTTP routers that adapt requests to store calls.
"""

from .main import app  # noqa: F401
