"""Base use case."""

import math
from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class CamelModel(BaseModel):
    """Response body serialized with camelCase keys (totalVotes, userVote)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PageInfo(CamelModel):
    """Position of a page within a page-numbered listing."""

    current_page: int
    total_pages: int
    total_items: int
    has_more: bool

    @classmethod
    def for_page(cls, page: int, page_size: int, total: int) -> "PageInfo":
        """Describe 1-based page `page` of `total` items split `page_size` per page."""
        total_pages = math.ceil(total / page_size)
        return cls(
            current_page=page,
            total_pages=total_pages,
            total_items=total,
            has_more=page < total_pages,
        )
