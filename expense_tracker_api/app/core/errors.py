"""
Error taxonomy raised by the stores.

The API layer maps ``InvalidInput`` to HTTP 400 and ``NotFound`` to
HTTP 404; both are serialised as ``{"error": message}``.
"""


class StoreError(Exception):
    """Base class for failures of a single store operation."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(StoreError):
    """Missing or malformed caller data, or a failed referential check on create."""

    status_code = 400


class NotFound(StoreError):
    """The referenced id does not exist in the relevant collection."""

    status_code = 404
