"""Domain value objects for PharmQA.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum, IntEnum
from typing import Optional

from pharmqa.domain.value.common import ValueObject


class VoteValue(IntEnum):
    """A user's requested stance on a votable item.

    NONE is never stored: "no vote" is the absence of a vote record.
    """

    DOWN = -1
    NONE = 0
    UP = 1


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"

    @property
    def resource_name(self) -> str:
        """Human-readable resource name used in error messages."""
        return self.value.capitalize()


class VoteTally(ValueObject):
    """Aggregate vote state of an item as seen by one (possibly anonymous) user.

    Attributes:
        total_votes: The item's denormalized vote sum
        user_vote: The user's stored vote (-1 or 1), or None
    """

    total_votes: int
    user_vote: Optional[int] = None
