"""Comment entity."""

from datetime import datetime

from pydantic import Field

from pharmqa.domain.model.common import DomainModel
from pharmqa.domain.value import AnswerId, CommentId, UserId


class Comment(DomainModel):
    """A flat comment on an answer."""

    id: CommentId
    answer_id: AnswerId
    author_id: UserId
    body: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)
