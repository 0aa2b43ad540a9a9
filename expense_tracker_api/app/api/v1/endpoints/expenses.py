"""
Expense endpoints for API v1.

Listing accepts the optional ``userId``, ``from``, ``to`` and
``categories`` query parameters; all supplied filters must match.
Create and update validation lives in ``ExpenseStore``.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from expense_tracker_api.app.api.v1.deps import get_expense_store, path_id
from expense_tracker_api.app.schemas.expense import ExpenseCreate, ExpenseRead, ExpenseUpdate
from expense_tracker_api.app.services import ExpenseStore
from expense_tracker_api.app.services.expense_filter import ExpenseFilter

router = APIRouter()


@router.get("", response_model=List[ExpenseRead])
async def list_expenses(
    user_id: Optional[str] = Query(None, alias="userId"),
    date_from: Optional[str] = Query(None, alias="from"),
    date_to: Optional[str] = Query(None, alias="to"),
    categories: Optional[str] = Query(None, description="Comma separated category labels"),
    expenses: ExpenseStore = Depends(get_expense_store),
) -> List[ExpenseRead]:
    """Return expenses matching every supplied filter.

    - **userId** — owner id; a non‑numeric value matches nothing.
    - **from**, **to** — inclusive date bounds on ``spentAt``.
    - **categories** — e.g. ``food,travel``; exact, case‑sensitive match.
    """
    expense_filter = ExpenseFilter(
        user_id=user_id,
        date_from=date_from,
        date_to=date_to,
        categories=categories,
    )
    return expenses.list(expense_filter)


@router.get("/{expense_id}", response_model=ExpenseRead)
async def get_expense(expense_id: str, expenses: ExpenseStore = Depends(get_expense_store)) -> ExpenseRead:
    return expenses.get(path_id(expense_id))


@router.post("", response_model=ExpenseRead, status_code=status.HTTP_201_CREATED)
async def create_expense(
    payload: Optional[ExpenseCreate] = None,
    expenses: ExpenseStore = Depends(get_expense_store),
) -> ExpenseRead:
    """Create an expense for an existing user.

    An unknown ``userId`` is a 400 here, not a 404.
    """
    return expenses.create(payload or ExpenseCreate())


@router.patch("/{expense_id}", response_model=ExpenseRead)
async def update_expense(
    expense_id: str,
    payload: Optional[ExpenseUpdate] = None,
    expenses: ExpenseStore = Depends(get_expense_store),
) -> ExpenseRead:
    """Partially update an expense.

    Omitted fields stay unchanged; ``"note": null`` clears the note.
    Changing ``userId`` to an unknown user is a 404.
    """
    return expenses.update(path_id(expense_id), payload or ExpenseUpdate())


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_expense(expense_id: str, expenses: ExpenseStore = Depends(get_expense_store)) -> Response:
    expenses.delete(path_id(expense_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
