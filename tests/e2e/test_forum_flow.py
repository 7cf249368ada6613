"""End-to-end tests for questions, answers and comments."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from pharmqa.domain.value import UserId
from pharmqa.interface.api.app import create_app
from tests.conftest import make_auth_cookie
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory persistence."""
    app = create_app(container=build_test_container())
    with TestClient(app) as test_client:
        yield test_client


def login(client: TestClient, user_id: UserId) -> None:
    client.cookies.clear()
    client.cookies.set("auth_token", make_auth_cookie(user_id))


class TestHealth:
    """Tests for GET /health."""

    def test_health_reports_healthy(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestQuestions:
    """End-to-end tests for question routes."""

    def test_create_and_fetch_question(self, client):
        """A created question can be fetched with its vote state."""
        author = UserId(uuid4())
        login(client, author)

        created = client.post(
            "/questions",
            json={"title": "Half-life of amiodarone", "description": "Why so long?"},
        )
        question_id = created.json()["id"]
        client.post(f"/questions/{question_id}/vote", json={"value": 1})
        fetched = client.get(f"/questions/{question_id}")

        assert created.status_code == 201
        body = fetched.json()
        assert body["authorId"] == str(author)
        assert body["title"] == "Half-life of amiodarone"
        assert body["totalVotes"] == 1
        assert body["userVote"] == 1

    def test_create_question_requires_authentication(self, client):
        response = client.post(
            "/questions", json={"title": "Anonymous", "description": "Nope"}
        )

        assert response.status_code == 401

    def test_unknown_question_returns_404(self, client):
        assert client.get(f"/questions/{uuid4()}").status_code == 404


class TestAnswers:
    """End-to-end tests for answer routes."""

    def test_answers_are_ranked_and_paginated(self, client):
        """Answers come back best voted first, three per page."""
        login(client, UserId(uuid4()))
        question_id = client.post(
            "/questions",
            json={"title": "First-line for hypertension?", "description": "Adults"},
        ).json()["id"]

        answer_ids = []
        for text in ("ACE inhibitor", "Thiazide", "CCB", "Beta blocker"):
            response = client.post(
                f"/questions/{question_id}/answers", json={"description": text}
            )
            assert response.status_code == 201
            answer_ids.append(response.json()["id"])

        voter = UserId(uuid4())
        login(client, voter)
        client.post(f"/answers/{answer_ids[1]}/vote", json={"value": 1})
        client.post(f"/answers/{answer_ids[3]}/vote", json={"value": -1})

        first = client.get(f"/questions/{question_id}/answers").json()
        second = client.get(f"/questions/{question_id}/answers?page=2").json()

        assert first["answers"][0]["id"] == answer_ids[1]
        assert first["answers"][0]["userVote"] == 1
        assert [a["id"] for a in second["answers"]] == [answer_ids[3]]
        assert second["answers"][0]["totalVotes"] == -1
        assert first["pagination"] == {
            "currentPage": 1,
            "totalPages": 2,
            "totalAnswers": 4,
            "remainingAnswers": 1,
            "hasMore": True,
        }
        assert second["pagination"]["hasMore"] is False

    def test_answering_unknown_question_returns_404(self, client):
        login(client, UserId(uuid4()))

        response = client.post(
            f"/questions/{uuid4()}/answers", json={"description": "Lost"}
        )

        assert response.status_code == 404


class TestComments:
    """End-to-end tests for comment routes."""

    def _answer(self, client: TestClient) -> str:
        login(client, UserId(uuid4()))
        question_id = client.post(
            "/questions",
            json={"title": "Statins at night?", "description": "Does timing matter?"},
        ).json()["id"]
        return client.post(
            f"/questions/{question_id}/answers",
            json={"description": "Only for short half-life statins."},
        ).json()["id"]

    def test_comment_lifecycle_keeps_count(self, client):
        """Creating and deleting comments keeps totalComments in step."""
        answer_id = self._answer(client)
        author = UserId(uuid4())
        login(client, author)

        first = client.post(
            f"/answers/{answer_id}/comments", json={"body": "Simvastatin, yes."}
        )
        second = client.post(
            f"/answers/{answer_id}/comments", json={"body": "Atorvastatin, no."}
        )
        comment_id = first.json()["comment"]["id"]

        assert first.status_code == 201
        assert first.json()["totalComments"] == 1
        assert second.json()["totalComments"] == 2

        deleted = client.delete(f"/comments/{comment_id}")
        listing = client.get(f"/answers/{answer_id}/comments").json()

        assert deleted.status_code == 200
        assert deleted.json()["totalComments"] == 1
        assert listing["totalComments"] == 1
        assert [c["body"] for c in listing["comments"]] == ["Atorvastatin, no."]

    def test_only_author_can_delete(self, client):
        """Other users get 403 and the comment stays."""
        answer_id = self._answer(client)
        login(client, UserId(uuid4()))
        comment_id = client.post(
            f"/answers/{answer_id}/comments", json={"body": "Mine"}
        ).json()["comment"]["id"]

        login(client, UserId(uuid4()))
        response = client.delete(f"/comments/{comment_id}")

        assert response.status_code == 403
        assert client.get(f"/answers/{answer_id}/comments").json()[
            "totalComments"
        ] == 1

    def test_comment_on_unknown_answer_returns_404(self, client):
        login(client, UserId(uuid4()))

        response = client.post(f"/answers/{uuid4()}/comments", json={"body": "Hi"})

        assert response.status_code == 404

    def test_blank_comment_returns_400(self, client):
        """Whitespace-only bodies are rejected."""
        answer_id = self._answer(client)

        response = client.post(f"/answers/{answer_id}/comments", json={"body": "  "})

        assert response.status_code == 400
