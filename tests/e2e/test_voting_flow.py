"""End-to-end tests for voting on questions and answers."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from pharmqa.config import Settings
from pharmqa.domain.service import JWTService
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
    """Act as the given user for subsequent requests."""
    client.cookies.clear()
    client.cookies.set("auth_token", make_auth_cookie(user_id))


def logout(client: TestClient) -> None:
    client.cookies.clear()


def create_question(client: TestClient) -> str:
    login(client, UserId(uuid4()))
    response = client.post(
        "/questions",
        json={
            "title": "Why is metformin held before contrast?",
            "description": "Asking about lactic acidosis risk.",
        },
    )
    assert response.status_code == 201
    return response.json()["id"]


def create_answer(client: TestClient, question_id: str) -> str:
    login(client, UserId(uuid4()))
    response = client.post(
        f"/questions/{question_id}/answers",
        json={"description": "Contrast can cause acute kidney injury."},
    )
    assert response.status_code == 201
    return response.json()["id"]


class TestQuestionVoting:
    """End-to-end tests for POST/GET /questions/{id}/vote."""

    def test_vote_sequence_reports_running_totals(self, client):
        """Up, down, retract and down again move 5 to 6, 4, 5 and 4."""
        question_id = create_question(client)
        for _ in range(5):
            login(client, UserId(uuid4()))
            assert (
                client.post(
                    f"/questions/{question_id}/vote", json={"value": 1}
                ).status_code
                == 200
            )

        login(client, UserId(uuid4()))
        results = [
            client.post(f"/questions/{question_id}/vote", json={"value": v}).json()
            for v in (1, -1, 0, -1)
        ]

        assert results == [
            {"totalVotes": 6, "userVote": 1},
            {"totalVotes": 4, "userVote": -1},
            {"totalVotes": 5, "userVote": None},
            {"totalVotes": 4, "userVote": -1},
        ]

    def test_get_vote_state_for_voter_and_anonymous(self, client):
        """GET reports the caller's vote only when authenticated."""
        question_id = create_question(client)
        voter = UserId(uuid4())
        login(client, voter)
        client.post(f"/questions/{question_id}/vote", json={"value": -1})

        mine = client.get(f"/questions/{question_id}/vote")
        logout(client)
        anonymous = client.get(f"/questions/{question_id}/vote")

        assert mine.status_code == 200
        assert mine.json() == {"totalVotes": -1, "userVote": -1}
        assert anonymous.status_code == 200
        assert anonymous.json() == {"totalVotes": -1, "userVote": None}

    def test_repeated_upvote_is_not_a_toggle(self, client):
        """Sending the held value again keeps the vote."""
        question_id = create_question(client)
        login(client, UserId(uuid4()))

        client.post(f"/questions/{question_id}/vote", json={"value": 1})
        response = client.post(f"/questions/{question_id}/vote", json={"value": 1})

        assert response.json() == {"totalVotes": 1, "userVote": 1}

    def test_vote_requires_authentication(self, client):
        """Anonymous votes are rejected with 401."""
        question_id = create_question(client)
        logout(client)

        response = client.post(f"/questions/{question_id}/vote", json={"value": 1})

        assert response.status_code == 401

    def test_invalid_token_is_unauthenticated(self, client):
        """A forged session token is treated as anonymous."""
        question_id = create_question(client)
        client.cookies.clear()
        client.cookies.set("auth_token", "not-a-jwt")

        response = client.post(f"/questions/{question_id}/vote", json={"value": 1})

        assert response.status_code == 401

    def test_signed_token_with_malformed_user_id_is_anonymous(self, client):
        """A genuine token whose user_id is not a UUID grants no identity."""
        question_id = create_question(client)
        client.cookies.clear()
        client.cookies.set(
            "auth_token",
            JWTService(Settings().auth).create_token("not-a-uuid", "idp|someone"),
        )

        post = client.post(f"/questions/{question_id}/vote", json={"value": 1})
        get = client.get(f"/questions/{question_id}/vote")
        answers = client.get(f"/questions/{question_id}/answers")

        assert post.status_code == 401
        assert get.status_code == 200
        assert get.json() == {"totalVotes": 0, "userVote": None}
        assert answers.status_code == 200

    @pytest.mark.parametrize("value", [2, -2, 10])
    def test_out_of_range_value_returns_400(self, client, value):
        """Values outside {-1, 0, 1} are rejected and change nothing."""
        question_id = create_question(client)
        login(client, UserId(uuid4()))

        response = client.post(
            f"/questions/{question_id}/vote", json={"value": value}
        )

        assert response.status_code == 400
        state = client.get(f"/questions/{question_id}/vote").json()
        assert state == {"totalVotes": 0, "userVote": None}

    def test_unknown_question_returns_404(self, client):
        """Voting on or reading a missing question returns 404."""
        login(client, UserId(uuid4()))
        missing = uuid4()

        post = client.post(f"/questions/{missing}/vote", json={"value": 1})
        get = client.get(f"/questions/{missing}/vote")

        assert post.status_code == 404
        assert get.status_code == 404


class TestAnswerVoting:
    """End-to-end tests for POST/GET /answers/{id}/vote."""

    def test_answer_votes_are_tracked_separately(self, client):
        """Votes on an answer do not affect its question."""
        question_id = create_question(client)
        answer_id = create_answer(client, question_id)
        login(client, UserId(uuid4()))

        response = client.post(f"/answers/{answer_id}/vote", json={"value": -1})

        assert response.status_code == 200
        assert response.json() == {"totalVotes": -1, "userVote": -1}
        assert client.get(f"/questions/{question_id}/vote").json()["totalVotes"] == 0

    def test_answer_total_matches_listing(self, client):
        """The vote endpoint and the answer list agree on totals."""
        question_id = create_question(client)
        answer_id = create_answer(client, question_id)
        for value in (1, 1, -1):
            login(client, UserId(uuid4()))
            client.post(f"/answers/{answer_id}/vote", json={"value": value})

        listing = client.get(f"/questions/{question_id}/answers").json()

        assert listing["answers"][0]["totalVotes"] == 1
        assert client.get(f"/answers/{answer_id}/vote").json()["totalVotes"] == 1

    def test_unknown_answer_returns_404(self, client):
        """Voting on a missing answer returns 404."""
        login(client, UserId(uuid4()))

        response = client.post(f"/answers/{uuid4()}/vote", json={"value": 1})

        assert response.status_code == 404
        assert response.json()["detail"] == "Answer not found"
