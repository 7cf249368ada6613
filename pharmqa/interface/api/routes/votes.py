"""Vote routes.

Questions and answers share one handler pair; the per-type routes only fix the
VotableType.
"""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, StrictInt

from pharmqa.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetVoteStateRequest,
    GetVoteStateUseCase,
    VoteStateResponse,
)
from pharmqa.domain.error import (
    ConflictError,
    NotFoundError,
    StorageUnavailableError,
    ValidationError,
)
from pharmqa.domain.service import JWTService
from pharmqa.domain.value import VotableType

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for casting a vote.

    1 upvotes, -1 downvotes, 0 removes the vote. Range is checked downstream
    so out-of-range values answer 400 rather than 422.
    """

    value: StrictInt


async def _cast_vote(
    votable_type: VotableType,
    votable_id: UUID,
    request: CastVoteAPIRequest,
    cast_vote_use_case: CastVoteUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
) -> VoteStateResponse:
    # Verify authentication and get user ID
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to vote",
        )

    try:
        use_case_request = CastVoteRequest(
            votable_type=votable_type,
            votable_id=votable_id,
            user_id=user_id,
            value=request.value,
        )
        return await cast_vote_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("Vote on missing item", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{e.resource} not found",
        )
    except ConflictError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    except StorageUnavailableError as e:
        logfire.error("Vote failed, storage unavailable", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process vote",
        )
    except (ValidationError, ValueError) as e:
        logfire.warn("Invalid vote request", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid vote value",
        )


async def _get_vote_state(
    votable_type: VotableType,
    votable_id: UUID,
    get_vote_state_use_case: GetVoteStateUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
) -> VoteStateResponse:
    # Anonymous readers get the total with no user vote
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        request = GetVoteStateRequest(
            votable_type=votable_type, votable_id=votable_id, user_id=user_id
        )
        return await get_vote_state_use_case.execute(request)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{votable_type.resource_name} not found",
        )


@router.post("/questions/{question_id}/vote", response_model=VoteStateResponse)
async def vote_on_question(
    question_id: UUID,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteStateResponse:
    """Upvote, downvote or retract a vote on a question.

    Requires authentication.

    Args:
        question_id: Question UUID
        request: Requested vote value
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The question's new total and the user's vote

    Raises:
        HTTPException: 401, 400, 404, 409 or 500
    """
    return await _cast_vote(
        VotableType.QUESTION,
        question_id,
        request,
        cast_vote_use_case,
        jwt_service,
        auth_token,
    )


@router.get("/questions/{question_id}/vote", response_model=VoteStateResponse)
async def get_question_votes(
    question_id: UUID,
    get_vote_state_use_case: FromDishka[GetVoteStateUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteStateResponse:
    """Get a question's vote total and, if authenticated, the user's vote."""
    return await _get_vote_state(
        VotableType.QUESTION,
        question_id,
        get_vote_state_use_case,
        jwt_service,
        auth_token,
    )


@router.post("/answers/{answer_id}/vote", response_model=VoteStateResponse)
async def vote_on_answer(
    answer_id: UUID,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteStateResponse:
    """Upvote, downvote or retract a vote on an answer.

    Requires authentication.

    Args:
        answer_id: Answer UUID
        request: Requested vote value
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The answer's new total and the user's vote

    Raises:
        HTTPException: 401, 400, 404, 409 or 500
    """
    return await _cast_vote(
        VotableType.ANSWER,
        answer_id,
        request,
        cast_vote_use_case,
        jwt_service,
        auth_token,
    )


@router.get("/answers/{answer_id}/vote", response_model=VoteStateResponse)
async def get_answer_votes(
    answer_id: UUID,
    get_vote_state_use_case: FromDishka[GetVoteStateUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteStateResponse:
    """Get an answer's vote total and, if authenticated, the user's vote."""
    return await _get_vote_state(
        VotableType.ANSWER,
        answer_id,
        get_vote_state_use_case,
        jwt_service,
        auth_token,
    )
