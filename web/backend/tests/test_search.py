"""Tests for the search API endpoint."""

from sample_scout.core.database import get_db_connection


def names(response) -> list[str]:
    return [sound["name"] for sound in response.json()]


def test_search_requires_identity(client):
    response = client.get("/api/search", params={"q": "bass"})
    assert response.status_code == 401


def test_search_empty_catalogue(client, user_headers):
    response = client.get("/api/search", params={"q": "bass"}, headers=user_headers)
    assert response.status_code == 200
    assert response.json() == []


def test_search_ranks_by_score(client, seeded_sounds, user_headers):
    response = client.get("/api/search", params={"q": "Bass Loop"}, headers=user_headers)

    assert response.status_code == 200
    body = response.json()
    assert [s["name"] for s in body] == ["Deep House Bass Loop", "Drum Break"]
    assert [s["match_score"] for s in body] == [4.0, 2.0]
    assert body[0]["tags"] == ["bass", "loop"]
    assert body[0]["bpm"] == 124
    assert body[0]["key"] == "C minor"
    assert body[0]["id"] == seeded_sounds[0].id


def test_search_stems_plural_query(client, seeded_sounds, user_headers):
    response = client.get("/api/search", params={"q": "drums"}, headers=user_headers)
    assert names(response) == ["Drum Break"]


def test_search_bpm_only(client, seeded_sounds, user_headers):
    response = client.get("/api/search", params={"bpm": "128"}, headers=user_headers)
    assert names(response) == ["Deep House Bass Loop", "Drum Break"]
    assert all(s["match_score"] == 0 for s in response.json())


def test_search_key_case_insensitive(client, seeded_sounds, user_headers):
    response = client.get(
        "/api/search", params={"q": "vocal", "key": "A MINOR"}, headers=user_headers
    )
    assert names(response) == ["Vocal Chop"]


def test_search_non_numeric_bpm_ignored(client, seeded_sounds, user_headers):
    response = client.get("/api/search", params={"bpm": "fast"}, headers=user_headers)
    assert response.status_code == 200
    assert len(response.json()) == 4


def test_search_quota_exhausted(client, seeded_sounds, user_headers):
    for _ in range(3):
        response = client.get("/api/search", params={"q": "loop"}, headers=user_headers)
        assert response.status_code == 200

    response = client.get("/api/search", params={"q": "loop"}, headers=user_headers)

    assert response.status_code == 402
    detail = response.json()["detail"]
    assert detail["upgrade_required"] is True
    assert detail["search_count"] == 3
    assert detail["limit"] == 3


def test_denied_search_not_counted(client, seeded_sounds, user_headers):
    for _ in range(5):
        client.get("/api/search", params={"q": "loop"}, headers=user_headers)

    response = client.get("/api/user/search-count", headers=user_headers)
    assert response.json()["search_count"] == 3


def test_premium_user_unlimited(client, seeded_sounds, admin_headers):
    with get_db_connection() as conn:
        conn.execute(
            "UPDATE users SET is_premium = TRUE WHERE id = ?",
            (admin_headers["X-User-Id"],),
        )
        conn.commit()

    for _ in range(5):
        response = client.get("/api/search", params={"q": "loop"}, headers=admin_headers)
        assert response.status_code == 200
