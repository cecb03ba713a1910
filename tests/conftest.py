"""
Shared pytest fixtures for the reactivetesting library tests.

This module provides:
- Subscription fixtures (open_subscription, closed_subscription)
- Boundary values for signed 64-bit virtual times
- Recorder fixtures (recorder, populated_recorder)
"""

from __future__ import annotations

import pytest

from reactivetesting import INFINITE, INT64_MAX, INT64_MIN, Subscription
from reactivetesting.testing import SubscriptionRecorder

# Virtual times covering zero, negatives, and both 64-bit extremes
BOUNDARY_TIMES = [0, 1, -1, 200, 1000, INT64_MIN, INT64_MAX - 1, INT64_MAX]


@pytest.fixture
def open_subscription() -> Subscription:
    """Subscription that has not been disposed."""
    return Subscription(200)


@pytest.fixture
def closed_subscription() -> Subscription:
    """Subscription disposed at virtual time 1000."""
    return Subscription(200, 1000)


@pytest.fixture(params=BOUNDARY_TIMES)
def boundary_time(request: pytest.FixtureRequest) -> int:
    """Each boundary virtual time in turn."""
    return request.param


@pytest.fixture
def recorder() -> SubscriptionRecorder:
    """Fresh recorder for each test."""
    return SubscriptionRecorder()


@pytest.fixture
def populated_recorder() -> SubscriptionRecorder:
    """
    Recorder holding one closed and one open subscription.

    Recorded: [(200, 400), (500, Infinite)]
    """
    r = SubscriptionRecorder()
    first = r.record_subscribe(200)
    r.record_subscribe(500)
    r.record_unsubscribe(first, 400)
    assert r.subscriptions[1].unsubscribe_at == INFINITE
    return r
