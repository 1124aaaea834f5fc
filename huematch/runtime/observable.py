# Copyright (c) 2026 HueMatch
# SPDX-License-Identifier: MIT

"""Change subscriptions for sessions and counters."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

Unsubscribe = Callable[[], None]


class Observable(Generic[T]):
    """
    Minimal publish/subscribe base.

    Subscribers are called synchronously, in registration order, on the
    thread that publishes. An exception raised by a subscriber propagates
    to whoever triggered the change.
    """

    def __init__(self) -> None:
        self._subscribers: list[Callable[[T], Any]] = []

    def subscribe(self, callback: Callable[[T], Any]) -> Unsubscribe:
        """
        Register a callback for change notifications.

        Returns:
            A function that removes the subscription. Calling it more than
            once is harmless.
        """
        if not callable(callback):
            raise TypeError(f"callback must be callable, got {callback!r}")
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                pass

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def _publish(self, value: T) -> None:
        # Snapshot so callbacks may unsubscribe while being notified
        for callback in tuple(self._subscribers):
            callback(value)
