"""Common type definitions for the reactivetesting library."""

from typing import Final

# Virtual time is an abstract integer clock owned by the test scheduler
VirtualTime = int

# Signed 64-bit bounds; persisted fields are always this width
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# Unsubscription time of a subscription that never ended
INFINITE: Final[VirtualTime] = INT64_MAX
