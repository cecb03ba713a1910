"""
Subscription records for virtual-time tests.

A Subscription captures when an observer attached to an observable sequence
and when it detached, both expressed in virtual time. Records are plain
immutable values: the harness creates one when it sees a subscribe, and
creates a replacement when it sees the matching unsubscribe.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from reactivetesting.types import INFINITE, VirtualTime


@dataclass(frozen=True)
class Subscription:
    """
    Records a subscription to, and unsubscription from, an observable sequence.

    An open subscription (one that has not been disposed yet) has its
    unsubscription time set to INFINITE. No ordering is enforced between the
    two fields; the record stores exactly what the harness observed.

    Attributes:
        subscribe_at: Virtual time at which the subscription occurred.
        unsubscribe_at: Virtual time at which the unsubscription occurred,
            or INFINITE if it never took place.

    Example:
        >>> Subscription(200)
        Subscription(subscribe_at=200, unsubscribe_at=Infinite)
        >>> str(Subscription(200, 1000))
        '(200, 1000)'
        >>> Subscription(200, 1000) == Subscription(200, 1000)
        True
    """

    subscribe_at: VirtualTime
    unsubscribe_at: VirtualTime = INFINITE

    @property
    def is_open(self) -> bool:
        """True if no unsubscription has been recorded."""
        return self.unsubscribe_at == INFINITE

    def equals(self, other: Any) -> bool:
        """
        Check whether another object is a subscription with the same times.

        Args:
            other: Object to compare against. Objects of other types are
                never equal.

        Returns:
            True if both subscribe and unsubscribe times match.
        """
        if not isinstance(other, Subscription):
            return False
        return (
            self.subscribe_at == other.subscribe_at
            and self.unsubscribe_at == other.unsubscribe_at
        )

    def not_equals(self, other: Any) -> bool:
        """Negation of equals()."""
        return not self.equals(other)

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        return self.not_equals(other)

    def __hash__(self) -> int:
        return hash((self.subscribe_at, self.unsubscribe_at))

    def _unsubscribe_text(self) -> str:
        return "Infinite" if self.is_open else str(self.unsubscribe_at)

    def __str__(self) -> str:
        """Render as ``(subscribe, unsubscribe)``, used in assertion messages."""
        return f"({self.subscribe_at}, {self._unsubscribe_text()})"

    def __repr__(self) -> str:
        return (
            f"Subscription(subscribe_at={self.subscribe_at}, "
            f"unsubscribe_at={self._unsubscribe_text()})"
        )


__all__ = ["Subscription"]
