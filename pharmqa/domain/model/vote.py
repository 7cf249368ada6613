"""Vote entity.

A vote is one user's current stance on one question or answer.
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import Field

from pharmqa.domain.model.common import DomainModel
from pharmqa.domain.value import UserId, VotableType, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per item (enforced by database unique constraint)
    - A stored vote is either an upvote (1) or a downvote (-1); retracting
      deletes the record
    - Polymorphic reference to votable (question or answer)
    """

    id: VoteId
    user_id: UserId
    votable_type: VotableType
    votable_id: UUID  # QuestionId or AnswerId (both are UUIDs)
    value: Literal[-1, 1]
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
