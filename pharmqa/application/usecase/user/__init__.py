"""Current user's content use cases."""

from .list_my_answers import (
    ListMyAnswersRequest,
    ListMyAnswersResponse,
    ListMyAnswersUseCase,
)
from .list_my_comments import (
    ListMyCommentsRequest,
    ListMyCommentsResponse,
    ListMyCommentsUseCase,
)
from .list_my_questions import (
    ListMyQuestionsRequest,
    ListMyQuestionsResponse,
    ListMyQuestionsUseCase,
)

__all__ = [
    "ListMyAnswersRequest",
    "ListMyAnswersResponse",
    "ListMyAnswersUseCase",
    "ListMyCommentsRequest",
    "ListMyCommentsResponse",
    "ListMyCommentsUseCase",
    "ListMyQuestionsRequest",
    "ListMyQuestionsResponse",
    "ListMyQuestionsUseCase",
]
