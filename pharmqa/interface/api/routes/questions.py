"""Question and answer routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel, Field

from pharmqa.application.usecase.answer import (
    AnswerResponse,
    CreateAnswerRequest,
    CreateAnswerUseCase,
    ListAnswersRequest,
    ListAnswersResponse,
    ListAnswersUseCase,
)
from pharmqa.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    QuestionResponse,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from pharmqa.domain.error import NotAuthorizedError, NotFoundError
from pharmqa.domain.service import JWTService

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1, max_length=10000)


class UpdateQuestionAPIRequest(BaseModel):
    """API request for editing a question; omitted fields are kept."""

    title: str | None = Field(default=None, min_length=1, max_length=300)
    description: str | None = Field(default=None, min_length=1, max_length=10000)


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    description: str = Field(min_length=1, max_length=10000)


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    auth_token: str | None = Cookie(default=None),
) -> ListQuestionsResponse:
    """List all questions, newest first.

    Each question carries its vote total and answer count. If authenticated,
    includes the user's vote on each question.

    Args:
        list_questions_use_case: List questions use case from DI
        jwt_service: JWT service for token verification (injected)
        page: 1-based page number
        auth_token: JWT token from cookie (optional)

    Returns:
        One page of questions with pagination info
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    request = ListQuestionsRequest(page=page, user_id=user_id)
    return await list_questions_use_case.execute(request)


@router.post(
    "",
    response_model=QuestionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> QuestionResponse:
    """Ask a new question.

    Requires authentication.

    Args:
        request: Question title and description
        create_question_use_case: Create question use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created question

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to ask a question",
        )

    try:
        use_case_request = CreateQuestionRequest(
            author_id=user_id,
            title=request.title,
            description=request.description,
        )
        return await create_question_use_case.execute(use_case_request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/{question_id}", response_model=QuestionResponse)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> QuestionResponse:
    """Get a question with its vote total.

    If authenticated, includes the user's own vote.

    Args:
        question_id: Question UUID
        get_question_use_case: Get question use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie (optional)

    Returns:
        Question details

    Raises:
        HTTPException: If question not found
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        request = GetQuestionRequest(question_id=question_id, user_id=user_id)
        return await get_question_use_case.execute(request)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Question not found",
        )


@router.patch("/{question_id}", response_model=QuestionResponse)
async def update_question(
    question_id: UUID,
    request: UpdateQuestionAPIRequest,
    update_question_use_case: FromDishka[UpdateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> QuestionResponse:
    """Edit a question's title or description.

    Only the question author can edit. Votes and answers are kept.

    Args:
        question_id: Question UUID
        request: New title and/or description
        update_question_use_case: Update question use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Updated question

    Raises:
        HTTPException: 401, 403, 404 or 400
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to edit questions",
        )

    try:
        use_case_request = UpdateQuestionRequest(
            question_id=question_id,
            user_id=user_id,
            title=request.title,
            description=request.description,
        )
        return await update_question_use_case.execute(use_case_request)
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized question update attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to edit this question",
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Question not found",
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete("/{question_id}", response_model=DeleteQuestionResponse)
async def delete_question(
    question_id: UUID,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteQuestionResponse:
    """Delete a question with its answers, comments and votes.

    Only the question author can delete.

    Args:
        question_id: Question UUID
        delete_question_use_case: Delete question use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Deleted question ID with the number of answers and comments removed

    Raises:
        HTTPException: 401, 403 or 404
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to delete questions",
        )

    try:
        request = DeleteQuestionRequest(question_id=question_id, user_id=user_id)
        return await delete_question_use_case.execute(request)
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized question deletion attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this question",
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Question not found",
        )


@router.post(
    "/{question_id}/answers",
    response_model=AnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    question_id: UUID,
    request: CreateAnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AnswerResponse:
    """Answer a question.

    Requires authentication.

    Args:
        question_id: Question UUID
        request: Answer content
        create_answer_use_case: Create answer use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created answer

    Raises:
        HTTPException: If not authenticated, question not found, or validation fails
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to answer",
        )

    try:
        use_case_request = CreateAnswerRequest(
            question_id=question_id,
            author_id=user_id,
            description=request.description,
        )
        return await create_answer_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("Answer creation failed - question not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Question not found",
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/{question_id}/answers", response_model=ListAnswersResponse)
async def list_answers(
    question_id: UUID,
    list_answers_use_case: FromDishka[ListAnswersUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    auth_token: str | None = Cookie(default=None),
) -> ListAnswersResponse:
    """List a question's answers, best voted first, newest breaking ties.

    If authenticated, includes the user's vote on each answer.

    Args:
        question_id: Question UUID
        list_answers_use_case: List answers use case from DI
        jwt_service: JWT service for token verification (injected)
        page: 1-based page number
        auth_token: JWT token from cookie (optional)

    Returns:
        One page of answers with pagination info

    Raises:
        HTTPException: If question not found
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        request = ListAnswersRequest(question_id=question_id, page=page, user_id=user_id)
        return await list_answers_use_case.execute(request)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Question not found",
        )
