"""Tests for library endpoints."""


class TestCreateLibrary:
    """Test POST /api/libraries."""

    def test_create_library(self, client, user_headers):
        response = client.post(
            "/api/libraries", json={"name": "Drums"}, headers=user_headers
        )
        assert response.status_code == 200
        library = response.json()
        assert library["name"] == "Drums"
        assert library["user_id"] == user_headers["X-User-Id"]
        assert library["is_default"] is False

    def test_name_required(self, client, user_headers):
        response = client.post("/api/libraries", json={}, headers=user_headers)
        assert response.status_code == 400
        assert response.json()["detail"] == "Library name is required"

    def test_blank_name(self, client, user_headers):
        response = client.post(
            "/api/libraries", json={"name": "  "}, headers=user_headers
        )
        assert response.status_code == 400

    def test_requires_identity(self, client):
        response = client.post("/api/libraries", json={"name": "Drums"})
        assert response.status_code == 401


class TestListLibraries:
    """Test GET /api/libraries."""

    def test_lists_own_libraries_newest_first(self, client, user_headers, admin_headers):
        client.post("/api/libraries", json={"name": "First"}, headers=user_headers)
        client.post("/api/libraries", json={"name": "Second"}, headers=user_headers)
        client.post("/api/libraries", json={"name": "Theirs"}, headers=admin_headers)

        response = client.get("/api/libraries", headers=user_headers)

        assert response.status_code == 200
        assert [lib["name"] for lib in response.json()] == ["Second", "First"]

    def test_empty(self, client, user_headers):
        response = client.get("/api/libraries", headers=user_headers)
        assert response.json() == []


class TestDefaultLibrary:
    """Test POST /api/library."""

    def test_get_or_create_is_stable(self, client, user_headers):
        first = client.post("/api/library", headers=user_headers).json()
        second = client.post("/api/library", headers=user_headers).json()

        assert first["id"] == second["id"]
        assert first["is_default"] is True
