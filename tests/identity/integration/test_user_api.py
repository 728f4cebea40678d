"""Integration tests for the user endpoints."""

from protean import current_domain
from storefront.identity.user import User


class TestCreateUserEndpoint:
    def test_create_user(self, api):
        response = api.post("/api/users", json={"email": "Emily.Davis@example.com", "name": "Emily Davis"})
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["email"] == "emily.davis@example.com"
        assert data["role"] == "customer"

        assert current_domain.repository_for(User).get(data["id"]).name == "Emily Davis"

    def test_create_admin(self, api):
        response = api.post(
            "/api/users", json={"email": "admin@ericcressey.com", "name": "Admin User", "role": "admin"}
        )
        assert response.status_code == 201
        assert response.json()["data"]["role"] == "admin"

    def test_duplicate_email(self, api, add_user):
        add_user(email="john.doe@example.com")
        response = api.post("/api/users", json={"email": "john.doe@example.com", "name": "John"})
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "A user with this email already exists"}

    def test_invalid_email(self, api):
        response = api.post("/api/users", json={"email": "not-an-email", "name": "Nobody"})
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["message"].startswith("email")

    def test_missing_name(self, api):
        response = api.post("/api/users", json={"email": "jane.smith@example.com"})
        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_unknown_role(self, api):
        response = api.post("/api/users", json={"email": "jane.smith@example.com", "name": "Jane", "role": "owner"})
        assert response.status_code == 400


class TestResolveUserEndpoint:
    def test_creates_then_reuses(self, api):
        first = api.post("/api/users/resolve", json={"email": "mike.johnson@example.com", "name": "Mike Johnson"})
        second = api.post("/api/users/resolve", json={"email": "MIKE.JOHNSON@example.com", "name": "Mike"})

        assert first.status_code == 200
        assert first.json()["data"]["id"] == second.json()["data"]["id"]
        assert current_domain.repository_for(User).count() == 1


class TestReadUsersEndpoint:
    def test_list_users(self, api, add_user):
        add_user(email="john.doe@example.com", name="John Doe")
        add_user(email="admin@ericcressey.com", name="Admin User", role="admin")

        body = api.get("/api/users").json()
        assert [u["name"] for u in body["data"]] == ["Admin User", "John Doe"]

    def test_get_user(self, api, add_user):
        user = add_user()
        body = api.get(f"/api/users/{user.id}").json()
        assert body["data"]["email"] == "john.doe@example.com"
        assert "createdAt" in body["data"]

    def test_get_missing_user(self, api):
        response = api.get("/api/users/missing")
        assert response.status_code == 404
        assert response.json()["message"] == "User missing not found"
