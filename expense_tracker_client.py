"""Expense Tracker API client.

A thin wrapper around the HTTP surface of the expense tracker service
built on ``requests``.  Every method returns a tuple ``(data, error)``:
on success ``data`` holds the decoded JSON body (``None`` for 204
responses) and ``error`` is ``None``; on failure ``data`` is ``None``
and ``error`` is a dictionary with ``status_code`` and ``message``.

Typical use::

    api = ExpenseTrackerAPI(base_url="http://localhost:8000")
    user, err = api.create_user("Ann")
    expenses, err = api.list_expenses(user_id=user["id"], categories=["food", "travel"])
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]

# Marker for "leave this field out of the PATCH body", as opposed to
# sending an explicit null.
_UNSET: Any = object()


class ExpenseTrackerAPI:
    """Client for the users and expenses collections."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Result:
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def list_users(self) -> Result:
        return self._request("GET", "/users")

    def get_user(self, user_id: int) -> Result:
        return self._request("GET", f"/users/{user_id}")

    def create_user(self, name: str) -> Result:
        return self._request("POST", "/users", json_body={"name": name})

    def update_user(self, user_id: int, name: str) -> Result:
        return self._request("PATCH", f"/users/{user_id}", json_body={"name": name})

    def delete_user(self, user_id: int) -> Result:
        return self._request("DELETE", f"/users/{user_id}")

    # ------------------------------------------------------------------
    # Expenses
    # ------------------------------------------------------------------
    def list_expenses(
        self,
        *,
        user_id: Optional[int] = None,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        categories: Union[str, Iterable[str], None] = None,
    ) -> Result:
        """List expenses, optionally filtered.

        ``categories`` may be a comma separated string or an iterable of
        labels.  Filters left as ``None`` are not sent.
        """
        params: Dict[str, Any] = {}
        if user_id is not None:
            params["userId"] = user_id
        if date_from is not None:
            params["from"] = date_from
        if date_to is not None:
            params["to"] = date_to
        if categories is not None:
            params["categories"] = categories if isinstance(categories, str) else ",".join(categories)
        return self._request("GET", "/expenses", params=params or None)

    def get_expense(self, expense_id: int) -> Result:
        return self._request("GET", f"/expenses/{expense_id}")

    def create_expense(
        self,
        *,
        user_id: int,
        spent_at: str,
        title: str,
        amount: Union[int, float],
        category: str,
        note: Optional[str] = None,
    ) -> Result:
        body: Dict[str, Any] = {
            "userId": user_id,
            "spentAt": spent_at,
            "title": title,
            "amount": amount,
            "category": category,
        }
        if note is not None:
            body["note"] = note
        return self._request("POST", "/expenses", json_body=body)

    def update_expense(
        self,
        expense_id: int,
        *,
        user_id: Any = _UNSET,
        spent_at: Any = _UNSET,
        title: Any = _UNSET,
        amount: Any = _UNSET,
        category: Any = _UNSET,
        note: Any = _UNSET,
    ) -> Result:
        """Send a partial update containing only the arguments given.

        Passing ``note=None`` sends an explicit null, which clears the
        stored note.
        """
        fields: List[Tuple[str, Any]] = [
            ("userId", user_id),
            ("spentAt", spent_at),
            ("title", title),
            ("amount", amount),
            ("category", category),
            ("note", note),
        ]
        body = {key: value for key, value in fields if value is not _UNSET}
        return self._request("PATCH", f"/expenses/{expense_id}", json_body=body)

    def delete_expense(self, expense_id: int) -> Result:
        return self._request("DELETE", f"/expenses/{expense_id}")
