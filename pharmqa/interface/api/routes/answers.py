"""Answer editing routes.

Answers are created and listed under their question; see questions.py.
"""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from pharmqa.application.usecase.answer import (
    AnswerResponse,
    DeleteAnswerRequest,
    DeleteAnswerResponse,
    DeleteAnswerUseCase,
    UpdateAnswerRequest,
    UpdateAnswerUseCase,
)
from pharmqa.domain.error import NotAuthorizedError, NotFoundError
from pharmqa.domain.service import JWTService

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class UpdateAnswerAPIRequest(BaseModel):
    """API request for editing an answer."""

    description: str = Field(min_length=1, max_length=10000)


@router.patch("/{answer_id}", response_model=AnswerResponse)
async def update_answer(
    answer_id: UUID,
    request: UpdateAnswerAPIRequest,
    update_answer_use_case: FromDishka[UpdateAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AnswerResponse:
    """Edit an answer.

    Only the answer author can edit. Votes and comments are kept.

    Raises:
        HTTPException: 401, 403, 404 or 400
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to edit answers",
        )

    try:
        use_case_request = UpdateAnswerRequest(
            answer_id=answer_id, user_id=user_id, description=request.description
        )
        return await update_answer_use_case.execute(use_case_request)
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized answer update attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to edit this answer",
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Answer not found",
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete("/{answer_id}", response_model=DeleteAnswerResponse)
async def delete_answer(
    answer_id: UUID,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteAnswerResponse:
    """Delete an answer with its comments and votes.

    Only the answer author can delete.

    Args:
        answer_id: Answer UUID
        delete_answer_use_case: Delete answer use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Deleted answer and question IDs with the number of comments removed

    Raises:
        HTTPException: 401, 403 or 404
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to delete answers",
        )

    try:
        request = DeleteAnswerRequest(answer_id=answer_id, user_id=user_id)
        return await delete_answer_use_case.execute(request)
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized answer deletion attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this answer",
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Answer not found",
        )
