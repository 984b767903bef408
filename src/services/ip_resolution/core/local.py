"""
Local Address Resolution

Picks the best local IPv4 address across the host's adapters.
Priority: 192.168.x.x > 10.x.x.x > 172.16-31.x.x > anything else.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from .models import AdapterRecord, AddressCandidate
from .protocols import AdapterSource
from .scorer import score_address

logger = logging.getLogger(__name__)

CONNECTED_LABEL = "connected"
DISCONNECTED_LABEL = "disconnected"


@dataclass(frozen=True)
class AdapterChoice:
    """An adapter offered for the preferred-adapter setting."""

    friendly_name: str
    stable_name: str
    display_name: str  # e.g. "Wi-Fi (connected)"
    is_up: bool

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "friendly_name": self.friendly_name,
            "stable_name": self.stable_name,
            "display_name": self.display_name,
            "is_up": self.is_up,
        }


class LocalAddressResolver:
    """
    Resolves the single best local address.

    Adapters that are down or loopback-typed are ignored. When a preferred
    adapter is given and yields an address, that address wins outright;
    otherwise the best-scored address across all adapters is returned.
    Ties go to the first address seen in enumeration order.
    """

    def __init__(
        self,
        adapter_source: AdapterSource | None = None,
        scorer: Callable[[AddressCandidate], int] = score_address,
    ):
        """
        Initialize the resolver.

        Args:
            adapter_source: Enumeration collaborator, needed only for
                resolve_current()
            scorer: Priority function for candidates
        """
        self._adapter_source = adapter_source
        self._scorer = scorer

    def resolve(
        self,
        adapters: Sequence[AdapterRecord],
        preferred: str | None = None,
    ) -> str | None:
        """
        Pick the best address from an adapter snapshot.

        Args:
            adapters: Adapters in enumeration order
            preferred: Friendly or stable name of the adapter to favour

        Returns:
            Dotted-quad address, or None if no adapter has a usable address
        """
        usable = [a for a in adapters if a.is_up and not a.is_loopback]

        if preferred:
            for adapter in usable:
                if not adapter.matches(preferred):
                    continue
                picked = self._pick_best(adapter.addresses)
                if picked:
                    return picked
            logger.debug(f"Preferred adapter '{preferred}' has no usable address")

        return self._pick_best(
            candidate for adapter in usable for candidate in adapter.addresses
        )

    def resolve_current(self, preferred: str | None = None) -> str | None:
        """Enumerate adapters through the source and resolve."""
        return self.resolve(self.enumerate(), preferred)

    def enumerate(self) -> list[AdapterRecord]:
        """Current adapters from the source, or none if no source is set."""
        if self._adapter_source is None:
            return []
        return self._adapter_source.enumerate()

    def _pick_best(self, candidates: Iterable[AddressCandidate]) -> str | None:
        best: AddressCandidate | None = None
        best_priority = 0

        for candidate in candidates:
            priority = self._scorer(candidate)
            # Strictly greater: the first address reaching the max keeps it
            if priority > best_priority:
                best = candidate
                best_priority = priority

        return best.text if best is not None else None


def list_adapter_choices(adapters: Sequence[AdapterRecord]) -> list[AdapterChoice]:
    """
    List the adapters a user can pick as preferred.

    Loopback adapters are skipped, as are adapters without any name.

    Args:
        adapters: Adapters in enumeration order

    Returns:
        Choices labelled with their link state
    """
    choices = []
    for adapter in adapters:
        if adapter.is_loopback:
            continue

        label = adapter.friendly_name or adapter.stable_name
        if not label:
            continue

        state = CONNECTED_LABEL if adapter.is_up else DISCONNECTED_LABEL
        choices.append(
            AdapterChoice(
                friendly_name=adapter.friendly_name,
                stable_name=adapter.stable_name,
                display_name=f"{label} ({state})",
                is_up=adapter.is_up,
            )
        )
    return choices
