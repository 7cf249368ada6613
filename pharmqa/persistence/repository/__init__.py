"""PostgreSQL repository implementations."""

from pharmqa.persistence.repository.answer import PostgresAnswerRepository
from pharmqa.persistence.repository.comment import PostgresCommentRepository
from pharmqa.persistence.repository.question import PostgresQuestionRepository
from pharmqa.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
]
