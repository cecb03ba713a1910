"""
Test utilities for reactivetesting.

Components:
    SubscriptionRecorder: Records subscription lifetimes as virtual time advances
    SubscriptionAssertions: Compares expected and actual subscriptions with
        readable failure messages

Example:
    >>> from reactivetesting import Subscription
    >>> from reactivetesting.testing import SubscriptionRecorder
    >>>
    >>> recorder = SubscriptionRecorder()
    >>> index = recorder.record_subscribe(200)
    >>> recorder.record_unsubscribe(index, 1000)
    >>> recorder.assertions().assert_subscriptions([Subscription(200, 1000)])

Note:
    This module is intended for test code only.
"""

from reactivetesting.testing.assertions import SubscriptionAssertions, format_subscriptions
from reactivetesting.testing.harness import SubscriptionRecorder

__all__ = [
    "SubscriptionAssertions",
    "SubscriptionRecorder",
    "format_subscriptions",
]
