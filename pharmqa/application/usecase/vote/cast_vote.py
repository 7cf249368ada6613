"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from pharmqa.application.usecase.base import BaseUseCase, CamelModel
from pharmqa.domain.service import VoteService
from pharmqa.domain.value import UserId, VotableType, VoteValue


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    votable_type: VotableType
    votable_id: UUID
    user_id: UUID  # User ID from authenticated user
    value: VoteValue


class VoteStateResponse(CamelModel):
    """Vote state of an item as seen by the requesting user."""

    total_votes: int
    user_vote: int | None = None


class CastVoteUseCase(BaseUseCase):
    """Use case for upvoting, downvoting or retracting a vote."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> VoteStateResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            The item's new total and the user's resulting vote

        Raises:
            NotFoundError: If the item does not exist
            ConflictError: If a concurrent write could not be resolved
            StorageUnavailableError: If the database failed
        """
        tally = await self.vote_service.cast_vote(
            user_id=UserId(request.user_id),
            votable_type=request.votable_type,
            votable_id=request.votable_id,
            value=int(request.value),
        )
        return VoteStateResponse(
            total_votes=tally.total_votes, user_vote=tally.user_vote
        )
