"""
JSON serialization for subscription records.

A subscription is persisted as a versioned object whose field names and
order are fixed:

    {"format_version": 1, "subscribe_at": 200, "unsubscribe_at": 1000}

The INFINITE sentinel is stored as its numeric value
(9223372036854775807), never as the display token "Infinite".

Example:
    >>> from reactivetesting import Subscription
    >>> text = subscription_to_json(Subscription(200, 1000))
    >>> subscription_from_json(text)
    Subscription(subscribe_at=200, unsubscribe_at=1000)
"""

import json
import logging
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from reactivetesting.exceptions import SerializationError, UnsupportedFormatVersionError
from reactivetesting.subscription import Subscription
from reactivetesting.types import INT64_MAX, INT64_MIN

logger = logging.getLogger(__name__)

FORMAT_NAME: Final = "json"
FORMAT_VERSION: Final = 1
SUPPORTED_VERSIONS: Final = (FORMAT_VERSION,)


class SubscriptionPayload(BaseModel):
    """
    Persisted form of a Subscription.

    Attributes:
        format_version: Version of this payload layout
        subscribe_at: Subscription virtual time (signed 64-bit)
        unsubscribe_at: Unsubscription virtual time (signed 64-bit)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    format_version: int = Field(
        default=FORMAT_VERSION,
        strict=True,
        description="Payload layout version",
    )
    subscribe_at: int = Field(
        ...,
        strict=True,
        ge=INT64_MIN,
        le=INT64_MAX,
        description="Virtual time the subscription started",
    )
    unsubscribe_at: int = Field(
        ...,
        strict=True,
        ge=INT64_MIN,
        le=INT64_MAX,
        description="Virtual time the subscription ended, or INFINITE",
    )

    @classmethod
    def from_subscription(cls, subscription: Subscription) -> "SubscriptionPayload":
        """
        Build a payload from a record.

        Raises:
            SerializationError: If a field is outside the signed 64-bit range
        """
        try:
            return cls(
                subscribe_at=subscription.subscribe_at,
                unsubscribe_at=subscription.unsubscribe_at,
            )
        except ValidationError as e:
            raise SerializationError(FORMAT_NAME, str(e)) from e

    def to_subscription(self) -> Subscription:
        return Subscription(self.subscribe_at, self.unsubscribe_at)


class ReactiveTestingJSONEncoder(json.JSONEncoder):
    """
    JSON encoder that understands Subscription records.

    Subscriptions are written as their payload object, so they can be nested
    inside larger diagnostic structures (recorded logs, test reports).

    Example:
        >>> json.dumps({"log": [Subscription(1, 2)]}, cls=ReactiveTestingJSONEncoder)
        '{"log": [{"format_version": 1, "subscribe_at": 1, "unsubscribe_at": 2}]}'
    """

    def default(self, obj: Any) -> Any:
        """
        Convert non-serializable objects to JSON-serializable formats.

        Raises:
            TypeError: If object type is not supported
            SerializationError: If a subscription field does not fit in 64 bits
        """
        if isinstance(obj, Subscription):
            return SubscriptionPayload.from_subscription(obj).model_dump()
        if isinstance(obj, SubscriptionPayload):
            return obj.model_dump()
        return super().default(obj)


def json_dumps(obj: Any) -> str:
    """Serialize object to JSON string with Subscription support."""
    return json.dumps(obj, cls=ReactiveTestingJSONEncoder)


def json_loads(s: str) -> Any:
    """
    Deserialize JSON string to Python object.

    Subscription payloads are NOT converted back to records here; use
    subscription_from_json() or SubscriptionPayload for that.
    """
    return json.loads(s)


def subscription_to_json(subscription: Subscription) -> str:
    """
    Serialize a subscription to its versioned JSON payload.

    Raises:
        SerializationError: If a field is outside the signed 64-bit range
    """
    return SubscriptionPayload.from_subscription(subscription).model_dump_json()


def subscription_from_json(text: str | bytes) -> Subscription:
    """
    Deserialize a subscription from its JSON payload.

    Args:
        text: JSON produced by subscription_to_json()

    Returns:
        The decoded record

    Raises:
        UnsupportedFormatVersionError: If format_version is not supported
        SerializationError: If the text is not valid JSON or fails validation
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug("Rejected malformed subscription JSON: %s", e)
        raise SerializationError(FORMAT_NAME, f"invalid JSON: {e}") from e

    if isinstance(raw, dict):
        version = raw.get("format_version", FORMAT_VERSION)
        if isinstance(version, int) and version not in SUPPORTED_VERSIONS:
            logger.debug("Rejected subscription JSON with version %d", version)
            raise UnsupportedFormatVersionError(FORMAT_NAME, version, SUPPORTED_VERSIONS)

    try:
        payload = SubscriptionPayload.model_validate(raw)
    except ValidationError as e:
        logger.debug("Rejected invalid subscription payload: %s", e)
        raise SerializationError(FORMAT_NAME, str(e)) from e
    return payload.to_subscription()


__all__ = [
    "ReactiveTestingJSONEncoder",
    "SubscriptionPayload",
    "json_dumps",
    "json_loads",
    "subscription_from_json",
    "subscription_to_json",
]
