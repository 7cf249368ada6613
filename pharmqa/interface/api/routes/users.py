"""Current user's content routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status

from pharmqa.application.usecase.user import (
    ListMyAnswersRequest,
    ListMyAnswersResponse,
    ListMyAnswersUseCase,
    ListMyCommentsRequest,
    ListMyCommentsResponse,
    ListMyCommentsUseCase,
    ListMyQuestionsRequest,
    ListMyQuestionsResponse,
    ListMyQuestionsUseCase,
)
from pharmqa.domain.service import JWTService

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


def _require_user(jwt_service: JWTService, auth_token: str | None) -> UUID:
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user_id


@router.get("/me/questions", response_model=ListMyQuestionsResponse)
async def list_my_questions(
    list_my_questions_use_case: FromDishka[ListMyQuestionsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    auth_token: str | None = Cookie(default=None),
) -> ListMyQuestionsResponse:
    """List the questions the current user asked, newest first.

    Requires authentication.

    Args:
        list_my_questions_use_case: List my questions use case from DI
        jwt_service: JWT service for token verification (injected)
        page: 1-based page number
        auth_token: JWT token from cookie

    Returns:
        One page of questions with vote totals and answer counts
    """
    user_id = _require_user(jwt_service, auth_token)
    return await list_my_questions_use_case.execute(
        ListMyQuestionsRequest(user_id=user_id, page=page)
    )


@router.get("/me/answers", response_model=ListMyAnswersResponse)
async def list_my_answers(
    list_my_answers_use_case: FromDishka[ListMyAnswersUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    auth_token: str | None = Cookie(default=None),
) -> ListMyAnswersResponse:
    """List the answers the current user wrote, newest first.

    Each answer names the question it answers. Requires authentication.
    """
    user_id = _require_user(jwt_service, auth_token)
    return await list_my_answers_use_case.execute(
        ListMyAnswersRequest(user_id=user_id, page=page)
    )


@router.get("/me/comments", response_model=ListMyCommentsResponse)
async def list_my_comments(
    list_my_comments_use_case: FromDishka[ListMyCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    auth_token: str | None = Cookie(default=None),
) -> ListMyCommentsResponse:
    """List the comments the current user left, newest first.

    Requires authentication.
    """
    user_id = _require_user(jwt_service, auth_token)
    return await list_my_comments_use_case.execute(
        ListMyCommentsRequest(user_id=user_id, page=page)
    )
