"""
Address Scoring

Ranks candidate IPv4 addresses. Home-router ranges beat corporate ranges,
which beat everything else.
"""

from __future__ import annotations

from .models import AddressCandidate

REJECTED = 0

_LOOPBACK = 0x7F000001  # 127.0.0.1
_UNSPECIFIED = 0x00000000  # 0.0.0.0

# (mask, network, priority), checked in order
_PRIVATE_RANGES: tuple[tuple[int, int, int], ...] = (
    (0xFFFF0000, 0xC0A80000, 100),  # 192.168.0.0/16
    (0xFF000000, 0x0A000000, 50),  # 10.0.0.0/8
    (0xFFF00000, 0xAC100000, 30),  # 172.16.0.0/12
)

OTHER_PRIORITY = 10


def score_address(candidate: AddressCandidate) -> int:
    """
    Map a candidate address to its priority.

    Returns:
        100, 50 or 30 for the private ranges, 10 for any other address,
        0 for 127.0.0.1 and 0.0.0.0
    """
    value = candidate.value
    if value in (_LOOPBACK, _UNSPECIFIED):
        return REJECTED

    for mask, network, priority in _PRIVATE_RANGES:
        if value & mask == network:
            return priority

    return OTHER_PRIORITY
