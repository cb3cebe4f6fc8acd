#!/usr/bin/env python3
"""
Pytest tests for the /api/users endpoints
"""


class TestUsersApi:
    """Test the user roster over HTTP"""

    def test_partial_batch_is_saved(self, client):
        """Only the entry with both name and email is inserted"""
        response = client.post("/api/users", json=[{"name": "A", "email": "a@x.com"}, {"name": "B"}])

        assert response.status_code == 201
        body = response.json()
        assert len(body) == 1
        assert body[0]["email"] == "a@x.com"
        assert "joinedOn" in body[0]

    def test_data_envelope(self, client):
        response = client.post(
            "/api/users",
            json={"data": [{"name": "A", "email": "a@x.com"}, {"name": "B", "email": "b@x.com"}]},
        )

        assert response.status_code == 201
        assert len(response.json()) == 2

    def test_nothing_valid(self, client):
        response = client.post("/api/users", json={"name": "NoEmail"})

        assert response.status_code == 400
        assert response.json() == {"message": "Name and email are required"}

    def test_duplicate_email(self, client):
        client.post("/api/users", json={"name": "A", "email": "a@x.com"})

        response = client.post("/api/users", json={"name": "Again", "email": "a@x.com"})

        assert response.status_code == 409
        assert response.json() == {"message": "Email already used"}

    def test_list_and_delete(self, client):
        created = client.post("/api/users", json={"name": "A", "email": "a@x.com"}).json()[0]
        assert [u["id"] for u in client.get("/api/users").json()] == [created["id"]]

        response = client.delete(f"/api/users/{created['id']}")

        assert response.status_code == 200
        assert response.json()["message"] == "User deleted"
        assert response.json()["user"]["email"] == "a@x.com"
        assert client.get("/api/users").json() == []
        assert client.delete(f"/api/users/{created['id']}").status_code == 404

    def test_whitespace_name_rejected(self, client):
        response = client.post("/api/users", json={"name": "   ", "email": "b@x.com"})

        assert response.status_code == 400
        assert response.json() == {"message": "Name and email are required"}
        assert client.get("/api/users").json() == []

    def test_list_orders_by_utc_instant(self, client):
        """joinedOn offsets are normalised before ordering"""
        client.post("/api/users", json={"name": "A", "email": "a@x.com", "joinedOn": "2024-01-01T10:00:00+05:00"})
        client.post("/api/users", json={"name": "B", "email": "b@x.com", "joinedOn": "2024-01-01T06:00:00+00:00"})

        users = client.get("/api/users").json()

        assert [u["name"] for u in users] == ["B", "A"]
        assert users[1]["joinedOn"].startswith("2024-01-01T05:00:00")
