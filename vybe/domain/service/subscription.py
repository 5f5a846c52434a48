"""Per-key subscriber registry.

Subscribers are plain callables invoked synchronously, in subscription
order, after every mutation of the value they watch.
"""

from collections import deque
from collections.abc import Callable, Hashable
from typing import Generic, TypeVar

import logfire

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

Unsubscribe = Callable[[], None]


class SubscriberRegistry(Generic[K, V]):
    """Callbacks grouped by key."""

    def __init__(self, name: str) -> None:
        """Initialize registry.

        Args:
            name: Label used in log events
        """
        self.name = name
        self._subscribers: dict[K, list[Callable[[V], None]]] = {}
        # Values awaiting delivery for keys whose publish is still running
        self._pending: dict[K, deque[V]] = {}

    def subscribe(self, key: K, callback: Callable[[V], None]) -> Unsubscribe:
        """Register a callback for a key.

        Args:
            key: Key to watch
            callback: Called with every new value for the key

        Returns:
            Function that removes the callback again
        """
        callbacks = self._subscribers.setdefault(key, [])
        callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in callbacks:
                callbacks.remove(callback)
            if not callbacks and self._subscribers.get(key) is callbacks:
                del self._subscribers[key]

        return unsubscribe

    def publish(self, key: K, value: V) -> None:
        """Deliver a value to every callback registered for the key.

        A failing callback is logged and does not stop delivery to the rest.
        Values published from inside a callback are queued and delivered
        after the current value has reached every callback.
        """
        queue = self._pending.get(key)
        if queue is not None:
            queue.append(value)
            return

        queue = self._pending[key] = deque([value])
        try:
            while queue:
                current = queue.popleft()
                for callback in list(self._subscribers.get(key, ())):
                    self._deliver(key, callback, current)
        finally:
            del self._pending[key]

    def count(self, key: K) -> int:
        """Number of callbacks registered for a key."""
        return len(self._subscribers.get(key, ()))

    def _deliver(self, key: K, callback: Callable[[V], None], value: V) -> None:
        try:
            callback(value)
        except Exception as e:
            logfire.error(
                "Subscriber callback failed",
                registry=self.name,
                key=str(key),
                error=str(e),
                _exc_info=True,
            )
