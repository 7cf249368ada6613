#!/usr/bin/env python3
"""Recompute every question and answer vote_sum from its vote rows.

Repairs drift introduced outside the voting path (manual edits, partial
restores). Each corrected item is logged as a warning by CounterService.
"""

import asyncio
import sys

import logfire

from pharmqa.config import Settings
from pharmqa.domain.service import CounterService
from pharmqa.domain.value import VotableType
from pharmqa.util.di.container import create_container
from pharmqa.util.logging import setup_logging
from pharmqa.util.observability import configure_logfire


async def reconcile() -> int:
    """Reconcile all vote sums in one transaction.

    Returns:
        Number of items whose vote sum was corrected
    """
    container = create_container()
    try:
        # The request scope commits the session on a clean exit
        async with container() as request_container:
            counter_service = await request_container.get(CounterService)
            corrected = 0
            for votable_type in VotableType:
                corrected += await counter_service.reconcile_all_vote_sums(
                    votable_type
                )
        return corrected
    finally:
        await container.close()


def main() -> int:
    """Run reconciliation and log any errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        with logfire.span("reconcile_counters"):
            corrected = asyncio.run(reconcile())
        logfire.info("Counter reconciliation completed", corrected=corrected)
        return 0

    except Exception as e:
        logfire.error(
            "Counter reconciliation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
