"""
IP Resolution Protocols

Interfaces for the collaborators the core depends on but does not implement.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import AdapterRecord


@runtime_checkable
class AdapterSource(Protocol):
    """
    Enumerates the host's network adapters.
    """

    def enumerate(self) -> list[AdapterRecord]:
        """
        Snapshot the current adapters.

        Returns:
            Adapters in platform order, IPv4 unicast addresses only.
            An empty list if enumeration fails.
        """
        ...


@runtime_checkable
class LookupFetcher(Protocol):
    """
    Performs one external address lookup.
    """

    def __call__(self) -> str | None:
        """
        Fetch the raw lookup body.

        Returns:
            Response body, or None on any failure (including timeouts)
        """
        ...


@runtime_checkable
class Clock(Protocol):
    """
    Monotonic time source, in seconds.
    """

    def now(self) -> float: ...
