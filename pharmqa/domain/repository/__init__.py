"""Repository interfaces for PharmQA domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from pharmqa.domain.repository.answer import AnswerRepository
from pharmqa.domain.repository.comment import CommentRepository
from pharmqa.domain.repository.question import QuestionRepository
from pharmqa.domain.repository.votable import VotableRepository
from pharmqa.domain.repository.vote import VoteRepository

__all__ = [
    "QuestionRepository",
    "AnswerRepository",
    "CommentRepository",
    "VotableRepository",
    "VoteRepository",
]
