"""
Network interface enumeration adapter.

Builds AdapterRecord snapshots from psutil.
"""

from __future__ import annotations

import ipaddress
import logging
import socket

import psutil

from ..core.models import AdapterRecord, AddressCandidate

logger = logging.getLogger(__name__)

_LOOPBACK_NETWORK = ipaddress.IPv4Network("127.0.0.0/8")


class SystemAdapterSource:
    """
    Enumerates the host's adapters with their IPv4 unicast addresses.

    psutil exposes one name per interface, so it serves as both the
    friendly and the stable name.
    """

    def enumerate(self) -> list[AdapterRecord]:
        """
        Snapshot the current adapters.

        Returns:
            Adapters in psutil order; empty if enumeration fails
        """
        try:
            addrs = psutil.net_if_addrs()
            stats = psutil.net_if_stats()
        except (psutil.Error, OSError) as e:
            logger.warning(f"Adapter enumeration failed: {e}")
            return []

        records = []
        for name, entries in addrs.items():
            st = stats.get(name)
            is_up = bool(st and st.isup)

            ipv4 = [
                ipaddress.IPv4Address(entry.address)
                for entry in entries
                if entry.family == socket.AF_INET and _is_ipv4_text(entry.address)
            ]
            is_loopback = _is_loopback(st, ipv4)

            records.append(
                AdapterRecord(
                    friendly_name=name,
                    stable_name=name,
                    is_up=is_up,
                    is_loopback=is_loopback,
                    addresses=tuple(
                        AddressCandidate(
                            value=int(address),
                            is_up=is_up,
                            is_loopback_interface=is_loopback,
                        )
                        for address in ipv4
                    ),
                )
            )

        logger.debug(f"Enumerated {len(records)} adapters")
        return records


def _is_ipv4_text(text: str) -> bool:
    try:
        ipaddress.IPv4Address(text)
    except ValueError:
        return False
    return True


def _is_loopback(st: object | None, addresses: list[ipaddress.IPv4Address]) -> bool:
    """Loopback per interface flags, else by having only 127/8 addresses."""
    flags = getattr(st, "flags", "") if st is not None else ""
    if flags:
        return "loopback" in flags.split(",")
    return bool(addresses) and all(a in _LOOPBACK_NETWORK for a in addresses)
