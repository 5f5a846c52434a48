#!/usr/bin/env python3
"""Fetch a user's AI insights through the cache and print them as JSON."""

import argparse
import asyncio
import sys

import logfire
from dishka import Scope

from vybe.application.usecase.insights import (
    GetInsightsRequest,
    GetInsightsUseCase,
    RefreshInsightsRequest,
    RefreshInsightsUseCase,
)
from vybe.config import Settings
from vybe.domain.value import Identity
from vybe.util.di.container import create_container
from vybe.util.logging import setup_logging
from vybe.util.observability import configure_logfire


async def fetch(user_id: str, refresh: bool) -> str:
    """Resolve insights for a user and return the response as JSON."""
    container = create_container()
    identity = Identity.authenticated(user_id)
    try:
        async with container(scope=Scope.SESSION) as session:
            async with session() as request:
                if refresh:
                    use_case = await request.get(RefreshInsightsUseCase)
                    response = await use_case.execute(
                        RefreshInsightsRequest(identity=identity, wait=True)
                    )
                else:
                    use_case = await request.get(GetInsightsUseCase)
                    response = await use_case.execute(
                        GetInsightsRequest(identity=identity, wait=True)
                    )
    finally:
        await container.close()
    return response.model_dump_json(indent=2)


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("user_id", help="User to fetch insights for")
    parser.add_argument(
        "--refresh", action="store_true", help="Bypass the cache and refetch"
    )
    args = parser.parse_args()

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    try:
        print(asyncio.run(fetch(args.user_id, args.refresh)))
        return 0
    except Exception as e:
        logfire.error(
            "Insights fetch script failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
