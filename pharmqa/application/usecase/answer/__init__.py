"""Answer use cases."""

from .create_answer import AnswerResponse, CreateAnswerRequest, CreateAnswerUseCase
from .delete_answer import DeleteAnswerRequest, DeleteAnswerResponse, DeleteAnswerUseCase
from .list_answers import (
    ListAnswersRequest,
    ListAnswersResponse,
    ListAnswersUseCase,
    PaginationInfo,
)
from .update_answer import UpdateAnswerRequest, UpdateAnswerUseCase

__all__ = [
    "AnswerResponse",
    "CreateAnswerRequest",
    "CreateAnswerUseCase",
    "DeleteAnswerRequest",
    "DeleteAnswerResponse",
    "DeleteAnswerUseCase",
    "ListAnswersRequest",
    "ListAnswersResponse",
    "ListAnswersUseCase",
    "PaginationInfo",
    "UpdateAnswerRequest",
    "UpdateAnswerUseCase",
]
