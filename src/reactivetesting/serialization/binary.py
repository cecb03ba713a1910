"""
Versioned binary encoding for subscription records.

Layout of a single record (format version 1, 17 bytes):

    offset  size  field
    0       1     format version (unsigned)
    1       8     subscribe_at (big-endian, signed 64-bit)
    9       8     unsubscribe_at (big-endian, signed 64-bit)

A list of records is a version byte, a big-endian unsigned 32-bit count,
then ``count`` field pairs with the same width and order. Field order and
width never change within a format version; any change requires a new
version number so that old data can be detected and migrated.

Example:
    >>> from reactivetesting import INFINITE, Subscription
    >>> data = encode_subscription(Subscription(200, INFINITE))
    >>> len(data)
    17
    >>> decode_subscription(data)
    Subscription(subscribe_at=200, unsubscribe_at=Infinite)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Final

from reactivetesting.exceptions import SerializationError, UnsupportedFormatVersionError
from reactivetesting.subscription import Subscription

logger = logging.getLogger(__name__)

FORMAT_NAME: Final = "binary"
FORMAT_VERSION: Final = 1
SUPPORTED_VERSIONS: Final = (FORMAT_VERSION,)

FIELD_SIZE: Final = 8
COUNT_SIZE: Final = 4
ENCODED_SIZE: Final = 1 + 2 * FIELD_SIZE


def _pack_field(name: str, value: int) -> bytes:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SerializationError(FORMAT_NAME, f"{name}={value!r} is not an integer")
    try:
        return value.to_bytes(FIELD_SIZE, "big", signed=True)
    except OverflowError as e:
        raise SerializationError(
            FORMAT_NAME, f"{name}={value} does not fit in a signed 64-bit field"
        ) from e


def _pack_pair(subscription: Subscription) -> bytes:
    return _pack_field("subscribe_at", subscription.subscribe_at) + _pack_field(
        "unsubscribe_at", subscription.unsubscribe_at
    )


def _unpack_pair(data: bytes, offset: int) -> Subscription:
    subscribe_at = int.from_bytes(data[offset : offset + FIELD_SIZE], "big", signed=True)
    offset += FIELD_SIZE
    unsubscribe_at = int.from_bytes(data[offset : offset + FIELD_SIZE], "big", signed=True)
    return Subscription(subscribe_at, unsubscribe_at)


def _as_bytes(data: bytes) -> bytes:
    # memoryview rejects ints, which bytes() would treat as a buffer size
    return memoryview(data).tobytes()


def _check_version(data: bytes) -> None:
    if not data:
        logger.debug("Rejected empty binary subscription payload")
        raise SerializationError(FORMAT_NAME, "no data")
    version = data[0]
    if version not in SUPPORTED_VERSIONS:
        logger.debug("Rejected binary subscription payload with version %d", version)
        raise UnsupportedFormatVersionError(FORMAT_NAME, version, SUPPORTED_VERSIONS)


def encode_subscription(subscription: Subscription) -> bytes:
    """
    Encode a subscription into the current binary format.

    Args:
        subscription: Record to encode

    Returns:
        ENCODED_SIZE bytes

    Raises:
        SerializationError: If either field is not an integer or is outside
            the signed 64-bit range
    """
    return bytes([FORMAT_VERSION]) + _pack_pair(subscription)


def decode_subscription(data: bytes) -> Subscription:
    """
    Decode a subscription previously produced by encode_subscription().

    Args:
        data: Encoded bytes

    Returns:
        The decoded record

    Raises:
        UnsupportedFormatVersionError: If the version byte is unknown
        SerializationError: If the data is empty or has the wrong length
        TypeError: If data is not a bytes-like object
    """
    data = _as_bytes(data)
    _check_version(data)
    if len(data) != ENCODED_SIZE:
        logger.debug("Rejected binary subscription payload of %d bytes", len(data))
        raise SerializationError(
            FORMAT_NAME, f"expected {ENCODED_SIZE} bytes, got {len(data)}"
        )
    return _unpack_pair(data, 1)


def encode_subscriptions(subscriptions: Sequence[Subscription]) -> bytes:
    """
    Encode a list of subscriptions, preserving order.

    Raises:
        SerializationError: If any field is not a signed 64-bit integer, or
            the list is too long for the 32-bit count
    """
    count = len(subscriptions)
    try:
        header = bytes([FORMAT_VERSION]) + count.to_bytes(COUNT_SIZE, "big")
    except OverflowError as e:
        raise SerializationError(
            FORMAT_NAME, f"{count} subscriptions exceed the 32-bit record count"
        ) from e
    return header + b"".join(_pack_pair(s) for s in subscriptions)


def decode_subscriptions(data: bytes) -> list[Subscription]:
    """
    Decode a list produced by encode_subscriptions().

    Raises:
        UnsupportedFormatVersionError: If the version byte is unknown
        SerializationError: If the header is truncated or the length does
            not match the encoded count
        TypeError: If data is not a bytes-like object
    """
    data = _as_bytes(data)
    _check_version(data)
    body_start = 1 + COUNT_SIZE
    if len(data) < body_start:
        raise SerializationError(FORMAT_NAME, "truncated subscription list header")
    count = int.from_bytes(data[1:body_start], "big")
    expected = body_start + count * 2 * FIELD_SIZE
    if len(data) != expected:
        logger.debug(
            "Rejected binary subscription list: %d records need %d bytes, got %d",
            count,
            expected,
            len(data),
        )
        raise SerializationError(FORMAT_NAME, f"expected {expected} bytes, got {len(data)}")
    return [_unpack_pair(data, body_start + i * 2 * FIELD_SIZE) for i in range(count)]


__all__ = [
    "ENCODED_SIZE",
    "FORMAT_VERSION",
    "decode_subscription",
    "decode_subscriptions",
    "encode_subscription",
    "encode_subscriptions",
]
