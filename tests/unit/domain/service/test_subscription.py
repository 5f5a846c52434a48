"""Unit tests for SubscriberRegistry."""

from vybe.domain.service import SubscriberRegistry


class TestSubscriberRegistry:
    """Tests for SubscriberRegistry."""

    def test_publish_delivers_in_subscription_order(self):
        """Callbacks run in the order they were registered."""
        registry = SubscriberRegistry("test")
        calls = []
        registry.subscribe("k", lambda v: calls.append(("first", v)))
        registry.subscribe("k", lambda v: calls.append(("second", v)))

        registry.publish("k", 1)

        assert calls == [("first", 1), ("second", 1)]

    def test_unsubscribe_is_safe_to_repeat(self):
        """Calling unsubscribe twice should not raise."""
        registry = SubscriberRegistry("test")
        unsubscribe = registry.subscribe("k", lambda v: None)

        unsubscribe()
        unsubscribe()

        assert registry.count("k") == 0

    def test_publish_to_unknown_key_is_noop(self):
        """Publishing with no subscribers does nothing."""
        SubscriberRegistry("test").publish("missing", 1)

    def test_value_published_from_callback_is_delivered_after_current(self):
        """Every callback sees the current value before any newer one."""
        registry = SubscriberRegistry("test")
        first_seen = []
        second_seen = []

        def retry_on_error(value):
            first_seen.append(value)
            if value == "errored":
                registry.publish("k", "loading")

        registry.subscribe("k", retry_on_error)
        registry.subscribe("k", second_seen.append)

        registry.publish("k", "errored")

        assert first_seen == ["errored", "loading"]
        assert second_seen == ["errored", "loading"]

    def test_failing_callback_does_not_stall_later_publishes(self):
        """Delivery state is released even when a callback raises."""
        registry = SubscriberRegistry("test")
        seen = []

        def broken(value):
            raise RuntimeError("render failed")

        registry.subscribe("k", broken)
        registry.subscribe("k", seen.append)

        registry.publish("k", 1)
        registry.publish("k", 2)

        assert seen == [1, 2]
