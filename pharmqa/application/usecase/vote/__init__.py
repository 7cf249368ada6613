"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteUseCase, VoteStateResponse
from .get_vote_state import GetVoteStateRequest, GetVoteStateUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteUseCase",
    "VoteStateResponse",
    "GetVoteStateRequest",
    "GetVoteStateUseCase",
]
