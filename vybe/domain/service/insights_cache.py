"""Insights cache domain service.

Holds one record per user and keeps it in sync with the analytics provider:

    idle -> loading -> fresh | errored
    fresh -> stale (on read, once the staleness window has passed)
    stale -> fresh | errored (one background revalidation)
    refresh: any -> loading

Every fetch is tagged with a generation number drawn from one counter for
the whole cache. Only the result of the newest generation issued for a user
is stored; older fetches still run to completion but their results are
dropped, whatever order they finish in.

Records nobody watches are pruned once they have gone stale.
"""

import asyncio
import itertools
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import logfire

from vybe.domain.error import FetchFailedError
from vybe.domain.model import InsightsPayload, InsightsRecord, InsightsView
from vybe.domain.value import Identity, InsightsState, Notice, NoticeLevel, UserId

from .base import Service
from .notification import Notifier, send_notice
from .subscription import SubscriberRegistry, Unsubscribe

DEFAULT_STALE_TIME = timedelta(minutes=5)
DEFAULT_FAILURE_MESSAGE = "Failed to load AI insights"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InsightsProvider:
    """Analytics provider interface."""

    async def fetch_insights(self, user_id: UserId) -> InsightsPayload:
        """Compute insights for a user.

        Args:
            user_id: User to compute insights for

        Returns:
            Provider-defined payload, None if the provider has nothing yet

        Raises:
            Exception: Any transport or provider failure
        """
        raise NotImplementedError


class InsightsCache(Service):
    """Per-user insights cache with stale-while-revalidate semantics.

    All methods must be called from the event loop thread; reads never block
    and fetch results are delivered to subscribers.
    """

    def __init__(
        self,
        provider: InsightsProvider,
        notifier: Notifier,
        stale_time: timedelta = DEFAULT_STALE_TIME,
        failure_message: str = DEFAULT_FAILURE_MESSAGE,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        """Initialize insights cache.

        Args:
            provider: Analytics provider
            notifier: Receives a notice for every failed fetch
            stale_time: How long a fetched record stays fresh
            failure_message: Generic error shown to callers
            clock: Source of the current time (UTC)
        """
        self.provider = provider
        self.notifier = notifier
        self.stale_time = stale_time
        self.failure_message = failure_message
        self._clock = clock

        self._records: dict[UserId, InsightsRecord] = {}
        self._generations: dict[UserId, int] = {}
        # Shared across users so a pruned key never reuses a generation
        self._generation_counter = itertools.count(1)
        # Newest fetch per user; superseded fetches live only in _tasks
        self._in_flight: dict[UserId, asyncio.Task[None]] = {}
        self._tasks: set[asyncio.Task[None]] = set()
        self._subscribers: SubscriberRegistry[UserId, InsightsView] = (
            SubscriberRegistry("insights")
        )

    def get(self, identity: Identity) -> InsightsView:
        """Read the cached insights for an identity.

        Starts a fetch when nothing is cached, and a background revalidation
        when the cached record has gone stale. Returns immediately.

        Args:
            identity: Current identity

        Returns:
            Current view of the record
        """
        user_id = identity.user_id
        if user_id is None:
            return self._idle_view(identity)

        record = self._records.get(user_id)
        if record is None:
            logfire.info("Insights cache miss", user_id=user_id)
            self.prune()
            return self._start_fetch(user_id, InsightsState.LOADING)

        if record.state == InsightsState.FRESH and self._is_expired(record):
            logfire.info(
                "Insights record stale, revalidating",
                user_id=user_id,
                fetched_at=record.fetched_at,
            )
            # Stays STALE while revalidating; is_fetching marks the fetch
            return self._start_fetch(user_id, InsightsState.STALE)

        return self._view(record)

    def refresh(self, identity: Identity) -> InsightsView:
        """Force a new fetch, superseding any fetch already in flight.

        The cached value stays visible until the new result arrives.

        Args:
            identity: Current identity

        Returns:
            View of the record in loading state
        """
        user_id = identity.user_id
        if user_id is None:
            logfire.info(
                "Insights refresh skipped", identity_status=identity.status.value
            )
            return self._idle_view(identity)

        logfire.info(
            "Insights refresh requested",
            user_id=user_id,
            superseding=user_id in self._in_flight,
        )
        return self._start_fetch(user_id, InsightsState.LOADING)

    async def resolve(self, identity: Identity) -> InsightsView:
        """Read the insights and wait until no fetch is pending for the user.

        Args:
            identity: Current identity

        Returns:
            Settled view of the record
        """
        view = self.get(identity)
        user_id = identity.user_id
        if user_id is None:
            return view

        # A refresh issued while waiting replaces the task to wait for
        while (task := self._in_flight.get(user_id)) is not None:
            await asyncio.wait({task})

        return self._view(self._records[user_id])

    def subscribe(
        self, user_id: UserId, callback: Callable[[InsightsView], None]
    ) -> Unsubscribe:
        """Watch a user's record.

        Args:
            user_id: User to watch
            callback: Called with the new view after every change

        Returns:
            Function that stops the subscription
        """
        return self._subscribers.subscribe(user_id, callback)

    def record(self, user_id: UserId) -> InsightsRecord | None:
        """Raw cached record for a user, if any."""
        return self._records.get(user_id)

    def prune(self) -> int:
        """Drop records nobody needs any more.

        A record is dropped when it has no subscribers, no fetch in flight,
        and either has gone stale or never held a value. Runs on every
        cache miss so records of past identities do not pile up.

        Returns:
            Number of records dropped
        """
        idle = [
            user_id
            for user_id, record in self._records.items()
            if user_id not in self._in_flight
            and self._subscribers.count(user_id) == 0
            and (record.fetched_at is None or self._is_expired(record))
        ]
        for user_id in idle:
            del self._records[user_id]
            self._generations.pop(user_id, None)

        if idle:
            logfire.info("Pruned idle insights records", count=len(idle))
        return len(idle)

    async def aclose(self) -> None:
        """Cancel every fetch still running."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._in_flight.clear()
        logfire.info("Insights cache closed", cancelled=len(tasks))

    def _start_fetch(self, user_id: UserId, state: InsightsState) -> InsightsView:
        generation = next(self._generation_counter)
        self._generations[user_id] = generation

        task = asyncio.create_task(
            self._fetch(user_id, generation),
            name=f"insights-fetch-{user_id}-{generation}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        self._in_flight[user_id] = task

        previous = self._records.get(user_id)
        if previous is None:
            record = InsightsRecord(key=user_id, state=state)
        else:
            record = previous.model_copy(update={"state": state})
        return self._store(record)

    async def _fetch(self, user_id: UserId, generation: int) -> None:
        task = asyncio.current_task()
        try:
            with logfire.span(
                "insights_cache.fetch", user_id=user_id, generation=generation
            ):
                try:
                    payload = await self.provider.fetch_insights(user_id)
                except Exception as e:
                    self._fail(user_id, generation, e)
                else:
                    self._succeed(user_id, generation, payload)
        finally:
            if self._in_flight.get(user_id) is task:
                del self._in_flight[user_id]

    def _succeed(
        self, user_id: UserId, generation: int, payload: InsightsPayload
    ) -> None:
        if not self._is_current(user_id, generation):
            logfire.info(
                "Discarding superseded insights result",
                user_id=user_id,
                generation=generation,
                latest=self._generations.get(user_id),
            )
            return

        self._in_flight.pop(user_id, None)
        self._store(
            InsightsRecord(
                key=user_id,
                value=payload,
                fetched_at=self._clock(),
                state=InsightsState.FRESH,
            )
        )
        logfire.info("Insights fetched", user_id=user_id, generation=generation)

    def _fail(self, user_id: UserId, generation: int, error: Exception) -> None:
        failure = FetchFailedError(user_id, f"{type(error).__name__}: {error}")
        if not self._is_current(user_id, generation):
            logfire.info(
                "Discarding superseded insights failure",
                user_id=user_id,
                generation=generation,
                reason=failure.reason,
            )
            return

        logfire.error(
            str(failure),
            user_id=user_id,
            generation=generation,
            reason=failure.reason,
            error_type=type(error).__name__,
        )
        self._in_flight.pop(user_id, None)

        # Keep whatever value we had; a failed refresh never clears good data
        previous = self._records.get(user_id)
        self._store(
            InsightsRecord(
                key=user_id,
                value=previous.value if previous else None,
                fetched_at=previous.fetched_at if previous else None,
                state=InsightsState.ERRORED,
                last_error=failure.reason,
            )
        )
        send_notice(
            self.notifier,
            Notice(level=NoticeLevel.ERROR, title="Could not load insights"),
        )

    def _is_current(self, user_id: UserId, generation: int) -> bool:
        return self._generations.get(user_id) == generation

    def _is_expired(self, record: InsightsRecord) -> bool:
        if record.fetched_at is None:
            return False
        return self._clock() - record.fetched_at >= self.stale_time

    def _store(self, record: InsightsRecord) -> InsightsView:
        self._records[record.key] = record
        view = self._view(record)
        self._subscribers.publish(record.key, view)
        return view

    def _view(self, record: InsightsRecord) -> InsightsView:
        return InsightsView(
            user_id=record.key,
            value=record.value,
            state=record.state,
            error=(
                self.failure_message
                if record.state == InsightsState.ERRORED
                else None
            ),
            is_fetching=record.key in self._in_flight,
            fetched_at=record.fetched_at,
        )

    @staticmethod
    def _idle_view(identity: Identity) -> InsightsView:
        return InsightsView(state=InsightsState.IDLE, identity_status=identity.status)
