"""
reactivetesting - Subscription records for virtual-time reactive stream tests.

This library provides:
- Subscription: immutable record of a subscription's virtual lifetime
- INFINITE: sentinel unsubscription time for subscriptions that never ended
- Versioned binary and JSON encodings for persisting subscriptions
- Recorder and assertion helpers for test harness code
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("reactivetesting-py")
except PackageNotFoundError:
    # Package not installed (running from source without install)
    __version__ = "0.0.0.dev0"

from reactivetesting.exceptions import (
    ReactiveTestingError,
    SerializationError,
    UnsupportedFormatVersionError,
)
from reactivetesting.serialization import (
    decode_subscription,
    decode_subscriptions,
    encode_subscription,
    encode_subscriptions,
    subscription_from_json,
    subscription_to_json,
)
from reactivetesting.subscription import Subscription
from reactivetesting.types import INFINITE, INT64_MAX, INT64_MIN, VirtualTime

__all__ = [
    "__version__",
    # Core
    "Subscription",
    "INFINITE",
    "INT64_MAX",
    "INT64_MIN",
    "VirtualTime",
    # Exceptions
    "ReactiveTestingError",
    "SerializationError",
    "UnsupportedFormatVersionError",
    # Serialization
    "encode_subscription",
    "decode_subscription",
    "encode_subscriptions",
    "decode_subscriptions",
    "subscription_to_json",
    "subscription_from_json",
]
