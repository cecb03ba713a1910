"""
Subscription recorder for virtual-time test harnesses.

The recorder is the producer side of Subscription records: an observable
under test calls record_subscribe() when an observer attaches and
record_unsubscribe() when it detaches, passing the scheduler's current
virtual time. Records are never mutated; closing a subscription replaces
the open record with a new one.

Example:
    >>> recorder = SubscriptionRecorder()
    >>> index = recorder.record_subscribe(200)
    >>> recorder.subscriptions
    [Subscription(subscribe_at=200, unsubscribe_at=Infinite)]
    >>> recorder.record_unsubscribe(index, 1000)
    >>> recorder.subscriptions
    [Subscription(subscribe_at=200, unsubscribe_at=1000)]
"""

from __future__ import annotations

import logging

from reactivetesting.subscription import Subscription
from reactivetesting.testing.assertions import SubscriptionAssertions
from reactivetesting.types import VirtualTime

logger = logging.getLogger(__name__)


class SubscriptionRecorder:
    """
    Records subscription lifetimes in the order subscriptions occurred.

    Thread Safety:
        The recorder is not thread-safe. Virtual-time schedulers run on a
        single thread; use one recorder per test.
    """

    def __init__(self) -> None:
        self._subscriptions: list[Subscription] = []

    @property
    def subscriptions(self) -> list[Subscription]:
        """Copy of all recorded subscriptions, open and closed."""
        return self._subscriptions.copy()

    @property
    def open_subscriptions(self) -> list[Subscription]:
        """Recorded subscriptions that have not been unsubscribed."""
        return [s for s in self._subscriptions if s.is_open]

    def record_subscribe(self, time: VirtualTime) -> int:
        """
        Record a new open subscription.

        Args:
            time: Current virtual time

        Returns:
            Index of the record, to pass to record_unsubscribe()
        """
        self._subscriptions.append(Subscription(time))
        index = len(self._subscriptions) - 1
        logger.debug("Recorded subscription %d at %d", index, time)
        return index

    def record_unsubscribe(self, index: int, time: VirtualTime) -> None:
        """
        Close the subscription at index.

        Args:
            index: Value returned by record_subscribe()
            time: Current virtual time

        Raises:
            IndexError: If no subscription was recorded at index
            ValueError: If the subscription was already unsubscribed
        """
        if not 0 <= index < len(self._subscriptions):
            raise IndexError(f"No subscription recorded at index {index}")
        current = self._subscriptions[index]
        if not current.is_open:
            raise ValueError(f"Subscription {index} already unsubscribed: {current}")
        self._subscriptions[index] = Subscription(current.subscribe_at, time)
        logger.debug("Recorded unsubscription %d at %d", index, time)

    def assertions(self) -> SubscriptionAssertions:
        """Assertions over a snapshot of the current recordings."""
        return SubscriptionAssertions(self._subscriptions)

    def reset(self) -> None:
        """Discard all recorded subscriptions."""
        self._subscriptions = []

    def __len__(self) -> int:
        return len(self._subscriptions)

    def __repr__(self) -> str:
        return f"SubscriptionRecorder(subscriptions={self._subscriptions!r})"


__all__ = ["SubscriptionRecorder"]
