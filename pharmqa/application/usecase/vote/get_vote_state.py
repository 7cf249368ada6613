"""Get vote state use case."""

from uuid import UUID

from pydantic import BaseModel

from pharmqa.application.usecase.base import BaseUseCase
from pharmqa.application.usecase.vote.cast_vote import VoteStateResponse
from pharmqa.domain.service import VoteService
from pharmqa.domain.value import UserId, VotableType


class GetVoteStateRequest(BaseModel):
    """Get vote state request."""

    votable_type: VotableType
    votable_id: UUID
    user_id: UUID | None = None  # Current user ID (if authenticated)


class GetVoteStateUseCase(BaseUseCase):
    """Use case for reading an item's total and the user's own vote."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize get vote state use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: GetVoteStateRequest) -> VoteStateResponse:
        """Execute get vote state flow.

        Raises:
            NotFoundError: If the item does not exist
        """
        user_id = UserId(request.user_id) if request.user_id is not None else None
        tally = await self.vote_service.get_vote_state(
            user_id, request.votable_type, request.votable_id
        )
        return VoteStateResponse(
            total_votes=tally.total_votes, user_vote=tally.user_vote
        )
