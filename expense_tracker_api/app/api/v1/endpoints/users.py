"""
User endpoints for API v1.

Thin adapters over ``UserStore``: decode the request, call the store
and let the application's error handlers turn ``InvalidInput`` and
``NotFound`` into 400 and 404 responses.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from expense_tracker_api.app.api.v1.deps import get_user_store, path_id
from expense_tracker_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from expense_tracker_api.app.services import UserStore

router = APIRouter()


@router.get("", response_model=List[UserRead])
async def list_users(users: UserStore = Depends(get_user_store)) -> List[UserRead]:
    """Return every user in creation order."""
    return users.list()


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: str, users: UserStore = Depends(get_user_store)) -> UserRead:
    """Retrieve a single user.  Unknown or non‑numeric ids give 404."""
    return users.get(path_id(user_id))


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(payload: Optional[UserCreate] = None, users: UserStore = Depends(get_user_store)) -> UserRead:
    """Create a user.  A missing or empty ``name`` gives 400."""
    return users.create(_name(payload))


@router.patch("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: str,
    payload: Optional[UserUpdate] = None,
    users: UserStore = Depends(get_user_store),
) -> UserRead:
    """Rename a user."""
    return users.update(path_id(user_id), _name(payload))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, users: UserStore = Depends(get_user_store)) -> Response:
    """Delete a user.  Expenses referencing it are kept as they are."""
    users.delete(path_id(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _name(payload: Optional[UserCreate]) -> Optional[str]:
    return payload.name if payload is not None else None
