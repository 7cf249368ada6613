"""Answer entity."""

from datetime import datetime

from pydantic import Field

from pharmqa.domain.model.common import DomainModel
from pharmqa.domain.value import AnswerId, QuestionId, UserId


class Answer(DomainModel):
    """Answer to a question.

    Carries two denormalized counters maintained by CounterService:
    - vote_sum: sum of vote values referencing this answer
    - comment_count: number of comments on this answer
    """

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    description: str = Field(min_length=1, max_length=10000)
    vote_sum: int = 0
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
