"""
Serialization utilities for reactivetesting.

Two explicit, versioned encodings are provided for subscription records.
Both store exactly two signed 64-bit fields in the order
(subscribe_at, unsubscribe_at):

- binary: fixed-width big-endian layout, see reactivetesting.serialization.binary
- json: a versioned object validated with pydantic

Example:
    >>> from reactivetesting import Subscription
    >>> from reactivetesting.serialization import decode_subscription, encode_subscription
    >>>
    >>> decode_subscription(encode_subscription(Subscription(1, 2)))
    Subscription(subscribe_at=1, unsubscribe_at=2)
"""

from reactivetesting.serialization.binary import (
    ENCODED_SIZE,
    FORMAT_VERSION,
    decode_subscription,
    decode_subscriptions,
    encode_subscription,
    encode_subscriptions,
)
from reactivetesting.serialization.json import (
    ReactiveTestingJSONEncoder,
    SubscriptionPayload,
    json_dumps,
    json_loads,
    subscription_from_json,
    subscription_to_json,
)

__all__ = [
    # Binary
    "ENCODED_SIZE",
    "FORMAT_VERSION",
    "encode_subscription",
    "decode_subscription",
    "encode_subscriptions",
    "decode_subscriptions",
    # JSON
    "ReactiveTestingJSONEncoder",
    "SubscriptionPayload",
    "json_dumps",
    "json_loads",
    "subscription_to_json",
    "subscription_from_json",
]
