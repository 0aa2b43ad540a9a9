"""HTTP tests for the users and expenses endpoints."""

import pytest

LUNCH = {
    "userId": 1,
    "spentAt": "2024-01-10",
    "title": "Lunch",
    "amount": 12,
    "category": "food",
}


@pytest.fixture
def with_lunch(client):
    assert client.post("/users", json={"name": "Ann"}).status_code == 201
    assert client.post("/expenses", json=LUNCH).status_code == 201
    return client


class TestUsersApi:

    def test_list_empty(self, client):
        response = client.get("/users")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_and_get(self, client):
        response = client.post("/users", json={"name": "Ann"})
        assert response.status_code == 201
        assert response.json() == {"id": 1, "name": "Ann"}
        assert client.get("/users/1").json() == {"id": 1, "name": "Ann"}

    @pytest.mark.parametrize("body", [{}, {"name": ""}, {"name": None}])
    def test_create_requires_name(self, client, body):
        response = client.post("/users", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Name is required"}

    def test_create_without_body(self, client):
        assert client.post("/users").status_code == 400

    def test_rename(self, client):
        client.post("/users", json={"name": "Ann"})
        response = client.patch("/users/1", json={"name": "Anna"})
        assert response.status_code == 200
        assert response.json() == {"id": 1, "name": "Anna"}

    def test_rename_errors(self, client):
        assert client.patch("/users/1", json={"name": "Anna"}).status_code == 404
        client.post("/users", json={"name": "Ann"})
        response = client.patch("/users/1", json={})
        assert response.status_code == 400
        assert response.json() == {"error": "Name is required"}

    def test_non_numeric_id_is_404(self, client):
        client.post("/users", json={"name": "Ann"})
        response = client.get("/users/abc")
        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}

    def test_delete_then_get(self, client):
        client.post("/users", json={"name": "Ann"})
        response = client.delete("/users/1")
        assert response.status_code == 204
        assert response.content == b""
        assert client.get("/users/1").status_code == 404
        assert client.delete("/users/1").status_code == 404

    def test_malformed_json_is_400(self, client):
        response = client.post(
            "/users", content="{bad", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert "error" in response.json()

    def test_very_long_id_is_404(self, client):
        client.post("/users", json={"name": "Ann"})
        response = client.get("/users/" + "9" * 5000)
        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}

    def test_name_of_wrong_type_is_400(self, client):
        response = client.post("/users", json={"name": {"first": "Ann"}})
        assert response.status_code == 400
        assert "error" in response.json()


class TestExpensesApi:

    def test_scenario_create_user_and_expense(self, client):
        assert client.post("/users", json={"name": "Ann"}).json() == {"id": 1, "name": "Ann"}
        response = client.post("/expenses", json=LUNCH)
        assert response.status_code == 201
        assert response.json() == {**LUNCH, "id": 1, "note": None}

    def test_scenario_filtered_listing(self, with_lunch):
        response = with_lunch.get(
            "/expenses", params={"from": "2024-01-01", "to": "2024-01-31", "categories": "food"}
        )
        assert response.status_code == 200
        assert [e["id"] for e in response.json()] == [1]

    def test_scenario_unknown_user_on_create(self, client):
        response = client.post("/expenses", json={**LUNCH, "userId": 99, "title": "X", "amount": 1})
        assert response.status_code == 400
        assert response.json() == {"error": "User not found"}

    def test_scenario_delete_user(self, with_lunch):
        assert with_lunch.delete("/users/1").status_code == 204
        assert with_lunch.get("/users/1").status_code == 404
        assert with_lunch.get("/expenses/1").json()["userId"] == 1

    def test_scenario_empty_category_rejected(self, with_lunch):
        before = with_lunch.get("/expenses/1").json()
        response = with_lunch.patch("/expenses/1", json={"category": ""})
        assert response.status_code == 400
        assert response.json() == {"error": "category cannot be empty"}
        assert with_lunch.get("/expenses/1").json() == before

    def test_unknown_user_on_update_is_404(self, with_lunch):
        response = with_lunch.patch("/expenses/1", json={"userId": 99})
        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}

    def test_missing_fields(self, client):
        client.post("/users", json={"name": "Ann"})
        response = client.post("/expenses", json={"userId": 1, "title": "X"})
        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}

    def test_invalid_user_id(self, client):
        response = client.post("/expenses", json={**LUNCH, "userId": "abc"})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid userId"}

    def test_non_numeric_amount_is_400(self, with_lunch):
        response = with_lunch.post("/expenses", json={**LUNCH, "amount": "lots"})
        assert response.status_code == 400

    def test_note_only_patch(self, with_lunch):
        before = with_lunch.get("/expenses/1").json()
        response = with_lunch.patch("/expenses/1", json={"note": "x"})
        assert response.status_code == 200
        assert response.json() == {**before, "note": "x"}
        cleared = with_lunch.patch("/expenses/1", json={"note": None})
        assert cleared.json()["note"] is None

    def test_empty_patch_keeps_record(self, with_lunch):
        before = with_lunch.get("/expenses/1").json()
        response = with_lunch.patch("/expenses/1", json={})
        assert response.status_code == 200
        assert response.json() == before

    def test_patch_missing_expense(self, client):
        response = client.patch("/expenses/5", json={"title": "x"})
        assert response.status_code == 404
        assert response.json() == {"error": "Expense not found"}

    def test_filter_by_user_and_categories(self, with_lunch):
        with_lunch.post("/users", json={"name": "Bob"})
        with_lunch.post("/expenses", json={**LUNCH, "category": "travel"})
        with_lunch.post("/expenses", json={**LUNCH, "userId": 2})
        with_lunch.post("/expenses", json={**LUNCH, "category": "rent"})
        response = with_lunch.get("/expenses", params={"userId": "1", "categories": "food,travel"})
        assert [e["id"] for e in response.json()] == [1, 2]
        assert with_lunch.get("/expenses", params={"userId": "x"}).json() == []

    def test_very_long_user_id_filter_matches_nothing(self, with_lunch):
        response = with_lunch.get("/expenses", params={"userId": "9" * 5000})
        assert response.status_code == 200
        assert response.json() == []

    def test_malformed_json_on_patch_is_400(self, with_lunch):
        response = with_lunch.patch(
            "/expenses/1", content="{\"note\":", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert "error" in response.json()
        assert with_lunch.get("/expenses/1").json()["note"] is None

    def test_delete_expense(self, with_lunch):
        assert with_lunch.delete("/expenses/1").status_code == 204
        assert with_lunch.get("/expenses/1").status_code == 404
        assert with_lunch.get("/expenses").json() == []

    def test_applications_do_not_share_state(self, with_lunch):
        from fastapi.testclient import TestClient

        from expense_tracker_api.app.main import create_app

        with TestClient(create_app()) as other:
            assert other.get("/users").json() == []


def test_cors_headers(client):
    response = client.get("/users", headers={"Origin": "http://example.com"})
    assert response.headers["access-control-allow-origin"] == "*"
