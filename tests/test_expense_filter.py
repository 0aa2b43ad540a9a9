"""Tests for expense listing filters."""

from datetime import datetime, timezone

import pytest

from expense_tracker_api.app.services.expense_filter import ExpenseFilter, parse_spent_at

from .conftest import make_expense


@pytest.fixture
def populated(users, expenses):
    users.create("Ann")
    users.create("Bob")
    rows = [
        (1, "2024-01-05", "food"),
        (1, "2024-01-20", "travel"),
        (2, "2024-01-20", "food"),
        (1, "2024-02-03", "rent"),
        (2, "2024-02-10T18:30:00Z", "Food"),
    ]
    for user_id, spent_at, category in rows:
        expenses.create(make_expense(userId=user_id, spentAt=spent_at, category=category))
    return expenses


def ids(result):
    return [expense.id for expense in result]


class TestExpenseFilter:

    def test_no_filter_returns_everything(self, populated):
        assert ids(populated.list()) == [1, 2, 3, 4, 5]
        assert ids(populated.list(ExpenseFilter())) == [1, 2, 3, 4, 5]

    def test_empty_strings_are_not_filters(self, populated):
        empty = ExpenseFilter(user_id="", date_from="", date_to="", categories="")
        assert empty.is_empty
        assert ids(populated.list(empty)) == [1, 2, 3, 4, 5]
        assert not ExpenseFilter(categories="food").is_empty

    def test_user_filter(self, populated):
        assert ids(populated.list(ExpenseFilter(user_id="2"))) == [3, 5]

    def test_user_filter_uses_leading_integer(self, populated):
        assert ids(populated.list(ExpenseFilter(user_id="2abc"))) == [3, 5]

    def test_non_numeric_user_filter_matches_nothing(self, populated):
        assert populated.list(ExpenseFilter(user_id="abc")) == []

    def test_date_range_is_inclusive(self, populated):
        result = populated.list(ExpenseFilter(date_from="2024-01-05", date_to="2024-01-20"))
        assert ids(result) == [1, 2, 3]

    def test_date_time_compared_as_instant(self, populated):
        assert ids(populated.list(ExpenseFilter(date_from="2024-02-10T18:00:00Z"))) == [5]
        assert ids(populated.list(ExpenseFilter(date_to="2024-02-10"))) == [1, 2, 3, 4]

    def test_unparsable_bound_matches_nothing(self, populated):
        assert populated.list(ExpenseFilter(date_from="not-a-date")) == []

    def test_categories_exact_and_case_sensitive(self, populated):
        assert ids(populated.list(ExpenseFilter(categories="food,travel"))) == [1, 2, 3]
        assert ids(populated.list(ExpenseFilter(categories="Food"))) == [5]

    def test_predicates_are_conjunctive(self, populated):
        result = populated.list(ExpenseFilter(user_id="1", categories="food,travel"))
        assert ids(result) == [1, 2]
        assert populated.list(ExpenseFilter(user_id="2", categories="rent")) == []

    def test_expense_with_unparsable_date_excluded_only_when_bounded(self, users, expenses):
        users.create("Ann")
        expenses.create(make_expense(spentAt="sometime"))
        assert len(expenses.list()) == 1
        assert expenses.list(ExpenseFilter(date_to="2030-01-01")) == []


class TestParseSpentAt:

    def test_date_only_is_midnight_utc(self):
        assert parse_spent_at("2024-01-10") == datetime(2024, 1, 10, tzinfo=timezone.utc)

    def test_naive_datetime_is_utc(self):
        assert parse_spent_at("2024-01-10T08:15:00") == datetime(2024, 1, 10, 8, 15, tzinfo=timezone.utc)

    def test_offset_respected(self):
        assert parse_spent_at("2024-01-10T02:00:00+02:00") == datetime(2024, 1, 10, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", [None, "", "yesterday", "2024-13-01"])
    def test_unparsable(self, value):
        assert parse_spent_at(value) is None
