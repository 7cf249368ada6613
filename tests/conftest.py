"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire
import pytest

from pharmqa.config import Settings
from pharmqa.domain.model import Answer, Question
from pharmqa.domain.value import AnswerId, QuestionId, UserId
from pharmqa.domain.service import JWTService

# Keep spans and logs local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_question(vote_sum: int = 0, **overrides) -> Question:
    """Build a question with sensible defaults."""
    fields = {
        "id": QuestionId(uuid4()),
        "author_id": UserId(uuid4()),
        "title": "How do beta blockers mask hypoglycaemia?",
        "description": "Asking about the mechanism in diabetic patients.",
        "vote_sum": vote_sum,
    }
    fields.update(overrides)
    return Question(**fields)


def make_answer(
    question_id: QuestionId,
    vote_sum: int = 0,
    comment_count: int = 0,
    age_minutes: int = 0,
    **overrides,
) -> Answer:
    """Build an answer; age_minutes pushes created_at into the past."""
    created_at = datetime.now() - timedelta(minutes=age_minutes)
    fields = {
        "id": AnswerId(uuid4()),
        "question_id": question_id,
        "author_id": UserId(uuid4()),
        "description": "They blunt the adrenergic warning signs such as tremor.",
        "vote_sum": vote_sum,
        "comment_count": comment_count,
        "created_at": created_at,
        "updated_at": created_at,
    }
    fields.update(overrides)
    return Answer(**fields)


def make_auth_cookie(user_id: UserId) -> str:
    """Issue a session token for the user, signed with the configured secret."""
    return JWTService(Settings().auth).create_token(str(user_id), f"idp|{user_id}")


@pytest.fixture
def user_id() -> UserId:
    """A fresh user ID."""
    return UserId(uuid4())
