"""Domain value objects for PharmQA."""

from pharmqa.domain.value.identifiers import (
    AnswerId,
    CommentId,
    QuestionId,
    UserId,
    VoteId,
)
from pharmqa.domain.value.types import VotableType, VoteTally, VoteValue

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "CommentId",
    "VoteId",
    # Types
    "VotableType",
    "VoteTally",
    "VoteValue",
]
