"""Tests for /api/users/me summaries and stats endpoints."""

from fastapi.testclient import TestClient

TEXT = "word " * 100


def _summarize(client: TestClient, headers: dict, content: str = TEXT) -> None:
    response = client.post("/api/summarize/text", json={"content": content}, headers=headers)
    assert response.status_code == 200


class TestAuthRequired:
    def test_list_requires_token(self, test_client: TestClient):
        response = test_client.get("/api/users/me/summaries")

        assert response.status_code == 401
        assert response.json()["message"] == "Authentication required."

    def test_invalid_token_rejected(self, test_client: TestClient):
        response = test_client.get(
            "/api/users/me/stats", headers={"Authorization": "Bearer not-a-token"}
        )
        assert response.status_code == 401

    def test_save_requires_token(self, test_client: TestClient):
        assert test_client.post("/api/users/me/summaries/1/save").status_code == 401


class TestListSummaries:
    def test_pagination(self, test_client: TestClient, auth_headers):
        for i in range(3):
            _summarize(test_client, auth_headers, f"Article number {i} " + TEXT)

        response = test_client.get(
            "/api/users/me/summaries", params={"page": 1, "size": 2}, headers=auth_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert data["currentPage"] == 1
        assert data["totalPages"] == 2
        assert data["totalCount"] == 3
        assert len(data["summaries"]) == 1
        assert data["summaries"][0]["title"].startswith("Article number 0")

    def test_summary_fields(self, test_client: TestClient, auth_headers):
        _summarize(test_client, auth_headers)

        item = test_client.get("/api/users/me/summaries", headers=auth_headers).json()["summaries"][0]

        assert set(item) == {
            "id",
            "title",
            "summaryContent",
            "keyPoints",
            "originalWordCount",
            "summaryWordCount",
            "compressionRatio",
            "saved",
            "createdAt",
        }
        assert item["originalWordCount"] == 100
        assert item["compressionRatio"] == 95

    def test_sort_by_title(self, test_client: TestClient, auth_headers):
        for title in ["beta", "alpha", "gamma"]:
            _summarize(test_client, auth_headers, f"{title} {TEXT}")

        data = test_client.get(
            "/api/users/me/summaries",
            params={"sortBy": "title", "sortOrder": "ASC"},
            headers=auth_headers,
        ).json()

        assert [s["title"].split()[0] for s in data["summaries"]] == ["alpha", "beta", "gamma"]

    def test_only_own_summaries(self, test_client: TestClient, auth_headers, other_auth_headers):
        _summarize(test_client, auth_headers)

        data = test_client.get("/api/users/me/summaries", headers=other_auth_headers).json()
        assert data["totalCount"] == 0
        assert data["summaries"] == []

    def test_saved_filter(self, test_client: TestClient, auth_headers):
        _summarize(test_client, auth_headers)
        _summarize(test_client, auth_headers)
        first_id = test_client.get("/api/users/me/summaries", headers=auth_headers).json()["summaries"][0]["id"]
        test_client.post(f"/api/users/me/summaries/{first_id}/save", headers=auth_headers)

        data = test_client.get(
            "/api/users/me/summaries", params={"saved": "true"}, headers=auth_headers
        ).json()

        assert data["totalCount"] == 1
        assert data["summaries"][0]["id"] == first_id
        assert data["summaries"][0]["saved"] is True


class TestSingleSummary:
    def _first_id(self, client, headers):
        _summarize(client, headers)
        return client.get("/api/users/me/summaries", headers=headers).json()["summaries"][0]["id"]

    def test_get_summary(self, test_client: TestClient, auth_headers):
        summary_id = self._first_id(test_client, auth_headers)

        response = test_client.get(f"/api/users/me/summaries/{summary_id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["id"] == summary_id

    def test_other_users_summary_is_not_found(self, test_client: TestClient, auth_headers, other_auth_headers):
        summary_id = self._first_id(test_client, auth_headers)

        response = test_client.get(f"/api/users/me/summaries/{summary_id}", headers=other_auth_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "Summary not found."

    def test_save_and_unsave(self, test_client: TestClient, auth_headers):
        summary_id = self._first_id(test_client, auth_headers)

        saved = test_client.post(f"/api/users/me/summaries/{summary_id}/save", headers=auth_headers)
        assert saved.status_code == 200
        assert saved.json() == {}
        assert test_client.get(f"/api/users/me/summaries/{summary_id}", headers=auth_headers).json()["saved"] is True

        unsaved = test_client.delete(f"/api/users/me/summaries/{summary_id}/save", headers=auth_headers)
        assert unsaved.status_code == 200
        assert test_client.get(f"/api/users/me/summaries/{summary_id}", headers=auth_headers).json()["saved"] is False

    def test_save_missing_summary(self, test_client: TestClient, auth_headers):
        response = test_client.post("/api/users/me/summaries/9999/save", headers=auth_headers)
        assert response.status_code == 404

    def test_save_other_users_summary(self, test_client: TestClient, auth_headers, other_auth_headers):
        summary_id = self._first_id(test_client, auth_headers)

        response = test_client.delete(f"/api/users/me/summaries/{summary_id}/save", headers=other_auth_headers)
        assert response.status_code == 404


class TestStats:
    def test_empty_stats(self, test_client: TestClient, auth_headers):
        response = test_client.get("/api/users/me/stats", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"totalSummaries": 0, "wordsSaved": 0, "timeSaved": 0}

    def test_stats_follow_new_summaries(self, test_client: TestClient, auth_headers):
        assert test_client.get("/api/users/me/stats", headers=auth_headers).json()["totalSummaries"] == 0

        for _ in range(3):
            _summarize(test_client, auth_headers, "word " * 400)

        stats = test_client.get("/api/users/me/stats", headers=auth_headers).json()
        assert stats["totalSummaries"] == 3
        assert stats["wordsSaved"] == 3 * (400 - 5)
        assert stats["timeSaved"] == (3 * 395) // 200


def test_huge_page_number_returns_empty_page(test_client: TestClient, auth_headers):
    _summarize(test_client, auth_headers)

    response = test_client.get(
        "/api/users/me/summaries", params={"page": "99999999999999999999"}, headers=auth_headers
    )

    assert response.status_code == 200
    data = response.json()
    assert data["summaries"] == []
    assert data["totalCount"] == 1
