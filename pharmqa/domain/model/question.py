"""Question aggregate root.

Questions are posted by students and collect answers and votes.
"""

from datetime import datetime

from pydantic import Field

from pharmqa.domain.model.common import DomainModel
from pharmqa.domain.value import QuestionId, UserId


class Question(DomainModel):
    """Question aggregate root.

    vote_sum is a denormalized counter equal to the sum of all vote values
    referencing this question. It is only ever changed through
    CounterService.
    """

    id: QuestionId
    author_id: UserId
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1, max_length=10000)
    vote_sum: int = 0
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
