"""
Pydantic models for expense data.

Field names are snake_case in Python and camelCase on the wire
(``userId``, ``spentAt``).  Both spellings are accepted on input.

``ExpenseCreate`` and ``ExpenseUpdate`` declare every field optional:
presence rules differ between create and update and are enforced by
``ExpenseStore``.  For updates the set of fields actually sent is read
from ``model_fields_set``, which is how an omitted ``note`` is told
apart from an explicit ``"note": null``.
"""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

Amount = Union[int, float]

_WIRE_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class ExpenseCreate(BaseModel):
    """Payload for creating an expense."""

    # Kept untyped: the store converts it with numeric semantics and
    # reports "Invalid userId" itself.
    user_id: Any = Field(None, examples=[1])
    spent_at: Optional[str] = Field(None, examples=["2024-01-10"])
    title: Optional[str] = Field(None, examples=["Lunch"])
    amount: Optional[Amount] = Field(None, examples=[12])
    category: Optional[str] = Field(None, examples=["food"])
    note: Optional[str] = Field(None, examples=["with colleagues"])

    model_config = _WIRE_CONFIG


class ExpenseUpdate(ExpenseCreate):
    """Sparse payload for updating an expense.

    Only fields present in the request body are applied.
    """

    def provided(self) -> Dict[str, Any]:
        """Return the fields that were present in the payload, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class ExpenseRead(BaseModel):
    """Schema for reading an expense from the API."""

    id: int
    user_id: int
    spent_at: str
    title: str
    amount: Amount
    category: str
    note: Optional[str] = None

    model_config = {**_WIRE_CONFIG, "from_attributes": True}
