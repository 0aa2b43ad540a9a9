"""Shared fixtures: fresh stores and a fresh application per test."""

import pytest
from fastapi.testclient import TestClient

from expense_tracker_api.app.main import create_app
from expense_tracker_api.app.schemas.expense import ExpenseCreate
from expense_tracker_api.app.services import ExpenseStore, UserStore


@pytest.fixture
def users() -> UserStore:
    return UserStore()


@pytest.fixture
def expenses(users: UserStore) -> ExpenseStore:
    return ExpenseStore(users)


@pytest.fixture
def client() -> TestClient:
    with TestClient(create_app()) as test_client:
        yield test_client


def make_expense(**overrides) -> ExpenseCreate:
    data = {
        "userId": 1,
        "spentAt": "2024-01-10",
        "title": "Lunch",
        "amount": 12,
        "category": "food",
    }
    data.update(overrides)
    return ExpenseCreate(**data)
