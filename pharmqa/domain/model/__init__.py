"""Domain model entities for PharmQA."""

from pharmqa.domain.model.answer import Answer
from pharmqa.domain.model.comment import Comment
from pharmqa.domain.model.question import Question
from pharmqa.domain.model.vote import Vote

__all__ = [
    "Question",
    "Answer",
    "Comment",
    "Vote",
]
